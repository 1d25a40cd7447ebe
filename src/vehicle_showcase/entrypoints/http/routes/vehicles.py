from fastapi import APIRouter, Depends

from vehicle_showcase.domain.errors import NotFoundError
from vehicle_showcase.entrypoints.http.dependencies import (
    get_get_vehicle_by_id_use_case,
    get_list_vehicles_use_case,
    get_listing_query,
)
from vehicle_showcase.entrypoints.http.dtos.vehicles import (
    VehiclePageResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
)
from vehicle_showcase.entrypoints.http.error_responses import ErrorResponse
from vehicle_showcase.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from vehicle_showcase.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from vehicle_showcase.use_cases.list_vehicles import ListVehicles


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehiclePageResponseDTO,
    summary="List vehicles",
    description="""
    List vehicles with optional filters, sorting and pagination.

    ## Query parameters
    - `page` (default 1) and `limit` (default 10): integers >= 1
    - `manufacturer`, `type`: case-insensitive exact match
    - `year`: exact match
    - `priceMin`, `priceMax`: inclusive price bounds, >= 0
    - `sort`: one of `manufacturer`, `type`, `year`, `price` (ascending)

    Unknown parameters are rejected. Every violated rule is reported.

    ## Example
    ```
    GET /v1/vehicles?type=SUV&priceMax=35000&sort=price&page=1&limit=2
    ```
    """,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "statusCode": 400,
                        "message": [
                            "page must not be less than 1",
                            "page must be an integer number",
                            "limit must not be less than 1",
                        ],
                        "error": "Bad Request",
                    }
                }
            },
        },
    },
)
def get_vehicles(
    query: VehiclesQueryDTO = Depends(get_listing_query),
    use_case: ListVehicles = Depends(get_list_vehicles_use_case),
) -> VehiclePageResponseDTO:
    """List vehicles endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = VehicleMapper.to_domain_request(query)

    # 2. Execute use case
    page = use_case.execute(request)

    # 3. Map to response
    return VehicleMapper.to_page_response(page)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle by ID",
    responses={
        404: {
            "model": ErrorResponse,
            "description": "Vehicle not found",
            "content": {
                "application/json": {
                    "example": {
                        "statusCode": 404,
                        "message": "Vehicle with id '999' not found",
                        "error": "Not Found",
                    }
                }
            },
        },
    },
)
def get_vehicle_by_id(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    """Get vehicle endpoint; a missing vehicle becomes a 404 here, not in the use case."""
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))

    if result.vehicle is None:
        raise NotFoundError(resource="Vehicle", identifier=vehicle_id)

    return VehicleMapper.to_vehicle_response(result.vehicle)
