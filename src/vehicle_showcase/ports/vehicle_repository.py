from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from vehicle_showcase.domain.vehicle import Paging, SortField, Vehicle, VehicleFilters


@dataclass(frozen=True)
class SearchResult:
    """Result from vehicle search including the pre-paging match count."""

    vehicles: list[Vehicle]
    total_count: int


class VehicleRepository(ABC):
    """
    Port for vehicle data access.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(
        self,
        filters: VehicleFilters,
        paging: Paging,
        sort: SortField | None = None,
    ) -> SearchResult:
        """
        Search vehicles with filters, optional ordering and paging.

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            paging: Pagination parameters - pre-validated
            sort: Field to order by (ascending, stable); None keeps source order

        Returns:
            SearchResult with the requested page and total_count of all matches
        """
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """
        Look up a vehicle by exact id.

        Returns:
            The matching vehicle, or None when no vehicle has that id
        """
        ...
