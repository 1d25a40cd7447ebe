"""Tests for VehicleMapper DTO ↔ domain conversions."""

from __future__ import annotations

from decimal import Decimal

import pytest

from vehicle_showcase.domain.vehicle import Page, Paging, SortField, Vehicle, VehicleFilters
from vehicle_showcase.entrypoints.http.dtos.vehicles import (
    VehiclePageResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
)
from vehicle_showcase.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from vehicle_showcase.use_cases.list_vehicles import ListVehiclesRequest


@pytest.fixture()
def sample_vehicle() -> Vehicle:
    return Vehicle(
        id="4",
        manufacturer="Tesla",
        model="Model 3",
        type="Sedan",
        year=2023,
        price=Decimal("40240.50"),
    )


# ==============================================================================
# Request mapping
# ==============================================================================


def test_to_domain_filters_maps_every_filter() -> None:
    dto = VehiclesQueryDTO(
        manufacturer="Tesla",
        type="Sedan",
        year=2023,
        price_min=Decimal("30000"),
        price_max=Decimal("50000"),
    )

    filters = VehicleMapper.to_domain_filters(dto)

    assert filters == VehicleFilters(
        manufacturer="Tesla",
        type="Sedan",
        year=2023,
        price_min=Decimal("30000"),
        price_max=Decimal("50000"),
    )


def test_to_domain_filters_keeps_decimal_prices() -> None:
    filters = VehicleMapper.to_domain_filters(VehiclesQueryDTO(price_min=Decimal("0.10")))

    assert isinstance(filters.price_min, Decimal)
    assert filters.price_max is None


def test_to_domain_paging() -> None:
    assert VehicleMapper.to_domain_paging(VehiclesQueryDTO(page=3, limit=7)) == Paging(page=3, limit=7)


def test_to_domain_request_includes_sort() -> None:
    request = VehicleMapper.to_domain_request(VehiclesQueryDTO(sort=SortField.YEAR))

    assert isinstance(request, ListVehiclesRequest)
    assert request.sort is SortField.YEAR
    assert request.filters == VehicleFilters()
    assert request.paging == Paging(page=1, limit=10)


# ==============================================================================
# Response mapping
# ==============================================================================


def test_to_vehicle_response_converts_price_to_string(sample_vehicle: Vehicle) -> None:
    dto = VehicleMapper.to_vehicle_response(sample_vehicle)

    assert dto == VehicleResponseDTO(
        id="4",
        manufacturer="Tesla",
        model="Model 3",
        type="Sedan",
        year=2023,
        price="40240.50",
    )


def test_to_page_response_copies_metadata(sample_vehicle: Vehicle) -> None:
    page = Page(data=[sample_vehicle], total=5, page=2, limit=2)

    dto = VehicleMapper.to_page_response(page)

    assert isinstance(dto, VehiclePageResponseDTO)
    assert [vehicle.id for vehicle in dto.data] == ["4"]
    assert dto.total == 5
    assert dto.page == 2
    assert dto.limit == 2
    assert dto.total_pages == 3
    assert dto.has_next_page is True
    assert dto.has_previous_page is True


def test_page_response_serializes_with_camel_case_keys(sample_vehicle: Vehicle) -> None:
    dto = VehicleMapper.to_page_response(Page(data=[sample_vehicle], total=1, page=1, limit=10))

    assert dto.model_dump(by_alias=True) == {
        "data": [
            {
                "id": "4",
                "manufacturer": "Tesla",
                "model": "Model 3",
                "type": "Sedan",
                "year": 2023,
                "price": "40240.50",
            }
        ],
        "total": 1,
        "page": 1,
        "limit": 10,
        "totalPages": 1,
        "hasNextPage": False,
        "hasPreviousPage": False,
    }
