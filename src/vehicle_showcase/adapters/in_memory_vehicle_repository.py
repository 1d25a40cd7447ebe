from __future__ import annotations

from typing import Any, Iterable

from vehicle_showcase.domain.vehicle import Paging, SortField, Vehicle, VehicleFilters
from vehicle_showcase.ports.vehicle_repository import SearchResult, VehicleRepository


class InMemoryVehicleRepository(VehicleRepository):
    """
    Read-only vehicle source backed by a static collection.

    - Stores vehicles in insertion order
    - Applies AND-semantics filtering
    - Applies a stable ascending sort when requested
    - Applies paging AFTER filtering and sorting
    - Returns total_count of matching vehicles before paging
    """

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles = tuple(vehicles)

    def search(
        self,
        filters: VehicleFilters,
        paging: Paging,
        sort: SortField | None = None,
    ) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [vehicle for vehicle in self._vehicles if self._matches(vehicle, filters)]
        total_count = len(matches)  # Count BEFORE paging

        if sort is not None:
            matches.sort(key=lambda vehicle: self._sort_key(vehicle, sort))

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(vehicles=matches[start:end], total_count=total_count)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return next((vehicle for vehicle in self._vehicles if vehicle.id == vehicle_id), None)

    def _matches(self, vehicle: Vehicle, filters: VehicleFilters) -> bool:
        if filters.manufacturer and vehicle.manufacturer.lower() != filters.manufacturer.lower():
            return False
        if filters.type and vehicle.type.lower() != filters.type.lower():
            return False
        if filters.year is not None and vehicle.year != filters.year:
            return False
        if filters.price_min is not None and vehicle.price < filters.price_min:
            return False
        if filters.price_max is not None and vehicle.price > filters.price_max:
            return False
        return True

    @staticmethod
    def _sort_key(vehicle: Vehicle, sort: SortField) -> Any:
        value = getattr(vehicle, sort.value)
        # Text fields sort the same way they filter: case-insensitively
        return value.lower() if isinstance(value, str) else value
