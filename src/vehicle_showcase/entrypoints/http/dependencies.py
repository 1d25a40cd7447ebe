"""
Dependency injection for FastAPI routes.

Key principle: only stateless singletons use lru_cache. The vehicle
repository wraps a read-only collection, so one instance serves every
request; use cases are cheap and built per request.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import Depends, Request

from vehicle_showcase.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from vehicle_showcase.adapters.mock_vehicles import VEHICLES
from vehicle_showcase.entrypoints.http.dtos.vehicles import VehiclesQueryDTO
from vehicle_showcase.entrypoints.http.query_validation import validate_listing_query
from vehicle_showcase.ports.vehicle_repository import VehicleRepository
from vehicle_showcase.use_cases.get_vehicle_by_id import GetVehicleById
from vehicle_showcase.use_cases.list_vehicles import ListVehicles


@lru_cache
def get_vehicle_repository() -> VehicleRepository:
    """
    Provides the process-wide vehicle repository.

    Returns:
        VehicleRepository: In-memory repository over the static collection
    """
    return InMemoryVehicleRepository(VEHICLES)


def get_list_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> ListVehicles:
    """
    Factory function that returns a configured ListVehicles use case.

    Args:
        repository: Vehicle repository (injected by FastAPI)

    Returns:
        ListVehicles: Configured use case instance
    """
    return ListVehicles(vehicle_repository=repository)


def get_get_vehicle_by_id_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=repository)


def get_listing_query(request: Request) -> VehiclesQueryDTO:
    """
    Validates the raw query string of a listing request.

    Repeated keys are passed on as lists so the validator can reject them.

    Raises:
        QueryValidationError: If any parameter is unknown or breaks a rule
    """
    raw: dict[str, Any] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        raw[key] = values[0] if len(values) == 1 else values

    return validate_listing_query(raw)
