from __future__ import annotations

from vehicle_showcase.domain.vehicle import Page, Paging, Vehicle, VehicleFilters
from vehicle_showcase.entrypoints.http.dtos.vehicles import (
    VehiclePageResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
)
from vehicle_showcase.use_cases.list_vehicles import ListVehiclesRequest


class VehicleMapper:
    """Maps between REST DTOs and domain models for vehicles."""

    @staticmethod
    def to_domain_filters(dto: VehiclesQueryDTO) -> VehicleFilters:
        """
        Converts query params to domain filters.

        Args:
            dto: Normalized listing query

        Returns:
            VehicleFilters: Domain filters with Decimal prices
        """
        return VehicleFilters(
            manufacturer=dto.manufacturer,
            type=dto.type,
            year=dto.year,
            price_min=dto.price_min,
            price_max=dto.price_max,
        )

    @staticmethod
    def to_domain_paging(dto: VehiclesQueryDTO) -> Paging:
        return Paging(page=dto.page, limit=dto.limit)

    @staticmethod
    def to_domain_request(dto: VehiclesQueryDTO) -> ListVehiclesRequest:
        """
        Convenience method: builds complete domain request from DTO.

        Args:
            dto: Normalized listing query

        Returns:
            ListVehiclesRequest: Filters, paging and sort field
        """
        return ListVehiclesRequest(
            filters=VehicleMapper.to_domain_filters(dto),
            paging=VehicleMapper.to_domain_paging(dto),
            sort=dto.sort,
        )

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts domain Vehicle entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            manufacturer=vehicle.manufacturer,
            model=vehicle.model,
            type=vehicle.type,
            year=vehicle.year,
            price=str(vehicle.price),  # Decimal → str at boundary
        )

    @staticmethod
    def to_page_response(page: Page[Vehicle]) -> VehiclePageResponseDTO:
        """
        Converts a domain page to the REST response with pagination metadata.

        Args:
            page: Domain page of vehicles

        Returns:
            VehiclePageResponseDTO: Vehicles plus total, page, limit and navigation flags
        """
        return VehiclePageResponseDTO(
            data=[VehicleMapper.to_vehicle_response(vehicle) for vehicle in page.data],
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
        )
