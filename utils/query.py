"""
Product query pipeline: filter, then stable sort, then paginate.

Every step builds a new list; the caller's collection is never mutated, so
the same snapshot can be queried concurrently by many handlers.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any, TypeVar

from models.enums import SortOrder
from models.product import Product
from models.query import (
    DEFAULT_LIMIT,
    NUMERIC_SORT_FIELDS,
    TEXT_SORT_FIELDS,
    ProductQuery,
    QueryResult,
    resolve_sort_field,
)

__all__ = ["filter_products", "sort_products", "paginate", "query_products"]

T = TypeVar("T")


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _matches(product: Product, query: ProductQuery) -> bool:
    if query.category is not None and product.category.casefold() != query.category.casefold():
        return False
    if query.region is not None and product.region.casefold() != query.region.casefold():
        return False
    if query.supplier is not None and query.supplier.casefold() not in product.supplier.casefold():
        return False
    if query.status is not None and _text(product.status).casefold() != query.status.casefold():
        return False
    if query.margin_threshold is not None and not product.margin <= query.margin_threshold:
        return False
    if query.show_only_negative and not product.margin < 0:
        return False
    return True


def filter_products(products: Sequence[Product], query: ProductQuery) -> list[Product]:
    """Return the products satisfying every filter supplied in ``query``."""
    return [product for product in products if _matches(product, query)]


def _sort_key(field_name: str):
    if field_name in NUMERIC_SORT_FIELDS:
        return lambda product: float(getattr(product, field_name))
    if field_name in TEXT_SORT_FIELDS:
        return lambda product: _text(getattr(product, field_name))
    # last_updated: datetimes order chronologically
    return lambda product: getattr(product, field_name)


def sort_products(
    products: Sequence[Product],
    sort_by: str,
    sort_order: SortOrder = SortOrder.DESC,
) -> list[Product]:
    """Stable sort by one product attribute.

    Equal keys keep their input order in both directions; ``sorted`` with
    ``reverse=True`` preserves stability.
    """
    field_name = resolve_sort_field(sort_by)
    return sorted(
        products,
        key=_sort_key(field_name),
        reverse=SortOrder(sort_order) is SortOrder.DESC,
    )


def paginate(items: Sequence[T], limit: int = DEFAULT_LIMIT, offset: int = 0) -> QueryResult[T]:
    """Slice ``[offset, offset + limit)``; ``total`` counts ``items``."""
    limit = max(0, limit)
    offset = max(0, offset)
    return QueryResult(
        page=list(items[offset : offset + limit]),
        total=len(items),
        limit=limit,
        offset=offset,
    )


def query_products(products: Sequence[Product], query: ProductQuery) -> QueryResult[Product]:
    """Run the full pipeline over a product snapshot.

    Raises:
        TypeError: if ``products`` is ``None``. An empty page would
            misreport ``total`` to API consumers.
    """
    if products is None:
        raise TypeError("query_products() requires a product collection, got None")
    filtered = filter_products(products, query)
    ordered = sort_products(filtered, query.sort_by, query.sort_order)
    return paginate(ordered, query.limit, query.offset)
