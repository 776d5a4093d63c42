"""
Module: connectors.product_store

In-memory product repository. Replaces module-level mock arrays with an
explicit store that handlers receive by injection. Readers get immutable
snapshots; writers replace whole records under a lock.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from models.product import Product

from .mock_data import PRODUCTS

logger = logging.getLogger(__name__)


class ProductStore:
    """
    In-memory product catalog seeded from mock data.
    """

    def __init__(self, products: Iterable[Product | dict[str, Any]] | None = None):
        seed = PRODUCTS if products is None else products
        self._products: list[Product] = [
            p if isinstance(p, Product) else Product.model_validate(p) for p in seed
        ]
        self._lock = asyncio.Lock()

    async def snapshot(self) -> tuple[Product, ...]:
        """Current catalog as an immutable tuple, safe to hand to the query pipeline."""
        return tuple(self._products)

    async def get(self, product_id: str) -> Product | None:
        """Get a product by ID."""
        return next((p for p in self._products if p.id == product_id), None)

    async def update(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        """
        Replace a product with a copy carrying ``changes`` and a fresh
        ``last_updated``. Returns None when the ID is unknown.

        Raises:
            pydantic.ValidationError: if the merged record is invalid.
        """
        changes = {k: v for k, v in changes.items() if k != "id"}
        async with self._lock:
            for index, current in enumerate(self._products):
                if current.id != product_id:
                    continue
                updated = Product.model_validate(
                    {
                        **current.model_dump(),
                        **changes,
                        "last_updated": datetime.now(timezone.utc),
                    }
                )
                self._products[index] = updated
                logger.info(f"Updated product {product_id}: fields={sorted(changes)}")
                return updated
        return None

    async def categories(self) -> list[str]:
        return list(dict.fromkeys(p.category for p in self._products))

    async def regions(self) -> list[str]:
        return list(dict.fromkeys(p.region for p in self._products))

    async def suppliers(self) -> list[str]:
        return list(dict.fromkeys(p.supplier for p in self._products))
