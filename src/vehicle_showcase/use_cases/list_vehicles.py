from __future__ import annotations

from dataclasses import dataclass

from vehicle_showcase.domain.vehicle import (
    Page,
    Paging,
    SortField,
    Vehicle,
    VehicleFilters,
)
from vehicle_showcase.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class ListVehiclesRequest:
    filters: VehicleFilters
    paging: Paging
    sort: SortField | None = None


class ListVehicles:
    """
    Paginated, filterable vehicle listing.

    This use case validates paging and filter parameters, delegates the scan
    to the repository adapter and wraps the result in a Page. No filtering
    logic exists in the use case.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: ListVehiclesRequest) -> Page[Vehicle]:
        """
        Execute vehicle listing.

        Args:
            request: Filters, paging and optional sort field

        Returns:
            Page of vehicles with pagination metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        result = self._repository.search(
            filters=request.filters,
            paging=request.paging,
            sort=request.sort,
        )

        return Page(
            data=result.vehicles,
            total=result.total_count,
            page=request.paging.page,
            limit=request.paging.limit,
        )
