from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Generic, Sequence, TypeVar

from vehicle_showcase.domain.errors import ValidationError

T = TypeVar("T")


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


@dataclass(frozen=True)
class Vehicle:
    id: str
    manufacturer: str
    model: str
    type: str
    year: int
    price: Decimal


class SortField(str, Enum):
    """Vehicle attributes a listing can be ordered by (ascending)."""

    MANUFACTURER = "manufacturer"
    TYPE = "type"
    YEAR = "year"
    PRICE = "price"


@dataclass(frozen=True, slots=True)
class VehicleFilters:
    manufacturer: str | None = None
    type: str | None = None
    year: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )

        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        """Zero-based index of the first item on this page."""
        return (self.page - 1) * self.limit

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.limit < 1:
            raise PagingValidationError("limit must be >= 1")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """
    A bounded slice of results plus its position within the full filtered set.

    Only data, total, page and limit are stored; the navigation fields are
    derived so they always agree with each other.
    """

    data: Sequence[T]
    total: int  # total matching items before paging
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1
