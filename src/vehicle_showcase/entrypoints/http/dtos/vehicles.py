from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vehicle_showcase.domain.vehicle import SortField


class VehicleResponseDTO(BaseModel):
    id: str
    manufacturer: str
    model: str
    type: str
    year: int
    price: str


class VehiclesQueryDTO(BaseModel):
    """Normalized query parameters for listing vehicles.

    Built by the query validator after every rule has passed; the wire
    names are camelCase (``priceMin``, ``priceMax``).
    """

    page: int = Field(
        default=1,
        description="Page number (1-based)",
        examples=[1],
        ge=1,
    )
    limit: int = Field(
        default=10,
        description="Maximum number of vehicles per page",
        examples=[10],
        ge=1,
    )
    manufacturer: str | None = Field(
        default=None,
        description="Filter by manufacturer (case-insensitive exact match)",
        examples=["Toyota"],
    )
    type: str | None = Field(
        default=None,
        description="Filter by vehicle type (case-insensitive exact match)",
        examples=["SUV"],
    )
    year: int | None = Field(
        default=None,
        description="Filter by model year (exact match)",
        examples=[2022],
    )
    sort: SortField | None = Field(
        default=None,
        description="Field to sort by, ascending",
        examples=["price"],
    )
    price_min: Decimal | None = Field(
        default=None,
        description="Minimum price (inclusive)",
        examples=["20000"],
        ge=0,
    )
    price_max: Decimal | None = Field(
        default=None,
        description="Maximum price (inclusive)",
        examples=["35000"],
        ge=0,
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        json_schema_extra={
            "example": {
                "page": 1,
                "limit": 10,
                "manufacturer": "Toyota",
                "type": "SUV",
                "year": 2022,
                "sort": "price",
                "priceMin": "20000",
                "priceMax": "35000",
            }
        },
    )


class VehiclePageResponseDTO(BaseModel):
    data: list[VehicleResponseDTO]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "data": [
                    {
                        "id": "1",
                        "manufacturer": "Toyota",
                        "model": "Camry",
                        "type": "Sedan",
                        "year": 2022,
                        "price": "26420.00",
                    }
                ],
                "total": 12,
                "page": 1,
                "limit": 1,
                "totalPages": 12,
                "hasNextPage": True,
                "hasPreviousPage": False,
            }
        },
    )
