"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_showcase.domain.vehicle import Vehicle
from vehicle_showcase.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    """Response containing the requested vehicle, or None when absent."""

    vehicle: Vehicle | None


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by ID.

    Absence is reported as ``vehicle=None``, not as an error. Turning a
    missing vehicle into a "not found" failure is the caller's job.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_repository: Repository for vehicle data access
        """
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the get vehicle by ID use case.

        Args:
            request: Request containing vehicle_id

        Returns:
            GetVehicleByIdResponse with the vehicle, or None if no vehicle matches
        """
        vehicle = self._repository.get_by_id(request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
