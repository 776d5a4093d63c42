"""
Query parameter and result models for the product query pipeline.

Query-string values arrive as strings; ``ProductQuery.from_query_params``
converts them explicitly and never raises. Anything that cannot be parsed
falls back to the documented default.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic.alias_generators import to_snake

from .enums import SortOrder

T = TypeVar("T")

DEFAULT_SORT_FIELD = "margin"
DEFAULT_LIMIT = 50

# Product attributes that may be used as a sort key, grouped by how they compare.
NUMERIC_SORT_FIELDS = frozenset(
    {"price", "cogs", "margin", "margin_delta", "tariff_impact", "shrink_rate"}
)
TEXT_SORT_FIELDS = frozenset(
    {"id", "sku", "name", "category", "region", "supplier", "status"}
)
TEMPORAL_SORT_FIELDS = frozenset({"last_updated"})
SORT_FIELDS = NUMERIC_SORT_FIELDS | TEXT_SORT_FIELDS | TEMPORAL_SORT_FIELDS


def resolve_sort_field(name: str | None) -> str:
    """Map a camelCase or snake_case field name to a sortable attribute.

    Unknown or missing names resolve to ``margin``.
    """
    if not name:
        return DEFAULT_SORT_FIELD
    candidate = to_snake(name.strip())
    return candidate if candidate in SORT_FIELDS else DEFAULT_SORT_FIELD


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_float(value: str | None) -> float | None:
    value = _clean(value)
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: str | None, default: int) -> int:
    value = _clean(value)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def parse_bool(value: str | None) -> bool:
    """Only the literal ``"true"`` (any case) is true."""
    value = _clean(value)
    return value is not None and value.lower() == "true"


def parse_sort_order(value: str | None) -> SortOrder:
    value = _clean(value)
    if value is not None and value.lower() == SortOrder.ASC.value:
        return SortOrder.ASC
    return SortOrder.DESC


@dataclass(frozen=True)
class ProductQuery:
    """
    Filters, ordering and window for a product listing.

    Absent filters impose no constraint. ``limit`` and ``offset`` are
    clamped to zero and ``sort_by`` is normalised on construction.
    """

    category: str | None = None
    region: str | None = None
    supplier: str | None = None
    status: str | None = None
    margin_threshold: float | None = None
    show_only_negative: bool = False
    sort_by: str = DEFAULT_SORT_FIELD
    sort_order: SortOrder = SortOrder.DESC
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    def __post_init__(self):
        object.__setattr__(self, "sort_by", resolve_sort_field(self.sort_by))
        object.__setattr__(self, "sort_order", SortOrder(self.sort_order))
        object.__setattr__(self, "limit", max(0, self.limit))
        object.__setattr__(self, "offset", max(0, self.offset))

    @classmethod
    def from_query_params(
        cls, params: Mapping[str, str], default_limit: int = DEFAULT_LIMIT
    ) -> "ProductQuery":
        """Build a query from raw query-string values (camelCase keys)."""
        return cls(
            category=_clean(params.get("category")),
            region=_clean(params.get("region")),
            supplier=_clean(params.get("supplier")),
            status=_clean(params.get("status")),
            margin_threshold=parse_float(params.get("marginThreshold")),
            show_only_negative=parse_bool(params.get("showOnlyNegative")),
            sort_by=params.get("sortBy"),
            sort_order=parse_sort_order(params.get("sortOrder")),
            limit=parse_int(params.get("limit"), default_limit),
            offset=parse_int(params.get("offset"), 0),
        )


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """One window of a filtered collection plus the pre-pagination count."""

    page: list[T] = field(default_factory=list)
    total: int = 0
    limit: int = DEFAULT_LIMIT
    offset: int = 0
