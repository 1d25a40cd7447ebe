"""Validation and normalization of raw listing query parameters.

Query strings arrive untyped. Numeric fields are coerced to numbers first
(unparseable input becomes NaN), then an ordered table of rules is
evaluated. Every rule runs independently, so a request with several problems
gets every message back, in rule declaration order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Mapping

from vehicle_showcase.config import default_page_limit
from vehicle_showcase.domain.errors import QueryValidationError
from vehicle_showcase.domain.vehicle import SortField
from vehicle_showcase.entrypoints.http.dtos.vehicles import VehiclesQueryDTO

NUMERIC_FIELDS = ("page", "limit", "year", "priceMin", "priceMax")
STRING_FIELDS = ("manufacturer", "type", "sort")
ALLOWED_FIELDS = frozenset(NUMERIC_FIELDS + STRING_FIELDS)

SORT_VALUES = tuple(field.value for field in SortField)


@dataclass(frozen=True, slots=True)
class Rule:
    """A named predicate over one (coerced) field plus its violation message."""

    field: str
    check: Callable[[Any], bool]
    message: str

    def violated_by(self, value: Any) -> bool:
        return not self.check(value)


def _to_number(raw: Any) -> int | float:
    """Integer-looking input stays an exact int; blank input counts as 0."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return raw
    if not isinstance(raw, str):
        return math.nan

    text = raw.strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def _to_decimal(raw: Any) -> Decimal:
    return Decimal(str(raw).strip() or "0")


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _not_less_than(bound: float) -> Callable[[Any], bool]:
    # NaN compares False against everything, so unparseable input fails here too
    return lambda value: _is_numeric(value) and value >= bound


def _is_number(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    return _is_numeric(value)


def _is_integer(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return _is_numeric(value)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_sort_value(value: Any) -> bool:
    return isinstance(value, str) and value in SORT_VALUES


RULES: tuple[Rule, ...] = (
    Rule("page", _not_less_than(1), "page must not be less than 1"),
    Rule("page", _is_integer, "page must be an integer number"),
    Rule("limit", _not_less_than(1), "limit must not be less than 1"),
    Rule("limit", _is_integer, "limit must be an integer number"),
    Rule("manufacturer", _is_string, "manufacturer must be a string"),
    Rule("type", _is_string, "type must be a string"),
    Rule("year", _is_integer, "year must be an integer number"),
    Rule("sort", _is_string, "sort must be a string"),
    Rule(
        "sort",
        _is_sort_value,
        f"sort must be one of the following values: {', '.join(SORT_VALUES)}",
    ),
    Rule("priceMin", _not_less_than(0), "priceMin must not be less than 0"),
    Rule(
        "priceMin",
        _is_number,
        "priceMin must be a number conforming to the specified constraints",
    ),
    Rule("priceMax", _not_less_than(0), "priceMax must not be less than 0"),
    Rule(
        "priceMax",
        _is_number,
        "priceMax must be a number conforming to the specified constraints",
    ),
)


def coerce(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Parse numeric fields to numbers; leave everything else untouched."""
    return {
        name: _to_number(value) if name in NUMERIC_FIELDS else value
        for name, value in raw.items()
    }


def collect_violations(raw: Mapping[str, Any]) -> list[str]:
    """
    Evaluate every rule against the raw parameters.

    Unknown fields are reported first (in input order), then rule violations
    in declaration order. Absent fields are optional and skip their rules.

    Args:
        raw: Query parameters as received (repeated keys as lists)

    Returns:
        Ordered violation messages; empty when the input is valid
    """
    violations = [
        f"property {name} should not exist" for name in raw if name not in ALLOWED_FIELDS
    ]

    values = coerce(raw)
    failed_fields: set[str] = set()

    for rule in RULES:
        if rule.field not in values:
            continue
        if rule.violated_by(values[rule.field]):
            violations.append(rule.message)
            failed_fields.add(rule.field)

    if (
        "priceMin" in values
        and "priceMax" in values
        and not failed_fields & {"priceMin", "priceMax"}
        and _to_decimal(raw["priceMin"]) > _to_decimal(raw["priceMax"])
    ):
        violations.append("priceMin must not be greater than priceMax")

    return violations


def validate_listing_query(raw: Mapping[str, Any]) -> VehiclesQueryDTO:
    """
    Validate raw listing parameters and build the normalized query.

    Args:
        raw: Query parameters as received (repeated keys as lists)

    Returns:
        VehiclesQueryDTO with defaults applied for absent fields

    Raises:
        QueryValidationError: If any rule is violated (carries all messages)
    """
    violations = collect_violations(raw)
    if violations:
        raise QueryValidationError(errors=violations)

    values = coerce(raw)

    return VehiclesQueryDTO(
        page=int(values.get("page", 1)),
        limit=int(values.get("limit", default_page_limit())),
        manufacturer=values.get("manufacturer"),
        type=values.get("type"),
        year=int(values["year"]) if "year" in values else None,
        sort=SortField(values["sort"]) if "sort" in values else None,
        price_min=_to_decimal(raw["priceMin"]) if "priceMin" in raw else None,
        price_max=_to_decimal(raw["priceMax"]) if "priceMax" in raw else None,
    )
