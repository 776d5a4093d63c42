"""
Module: connectors.kpi_store

In-memory KPI repository with target updates.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from models.kpi import KPIMetric, TrendPoint, kpi_slug

from .mock_data import KPI_TRENDS, KPIS

logger = logging.getLogger(__name__)


class KPIStore:
    def __init__(self, kpis: Iterable[KPIMetric | dict[str, Any]] | None = None):
        seed = KPIS if kpis is None else kpis
        self._kpis: list[KPIMetric] = [
            k if isinstance(k, KPIMetric) else KPIMetric.model_validate(k) for k in seed
        ]
        self._lock = asyncio.Lock()

    async def metrics(self, name_contains: str | None = None) -> list[KPIMetric]:
        """All KPIs, optionally those whose name contains ``name_contains`` (any case)."""
        if not name_contains:
            return list(self._kpis)
        needle = name_contains.casefold()
        return [k for k in self._kpis if needle in k.name.casefold()]

    async def get(self, slug: str) -> KPIMetric | None:
        """Look up a KPI by its slug (e.g. ``average-gross-margin``)."""
        slug = kpi_slug(slug)
        return next((k for k in self._kpis if k.slug == slug), None)

    async def update_target(self, slug: str, target: float) -> KPIMetric | None:
        """Set a new target. Returns None when the slug is unknown."""
        slug = kpi_slug(slug)
        async with self._lock:
            for index, current in enumerate(self._kpis):
                if current.slug != slug:
                    continue
                updated = current.model_copy(
                    update={"target": target, "last_updated": datetime.now(timezone.utc)}
                )
                self._kpis[index] = updated
                logger.info(f"KPI '{current.name}' target {current.target} -> {target}")
                return updated
        return None

    async def trends(self) -> dict[str, list[TrendPoint]]:
        """Historical values per KPI name."""
        return {
            name: [TrendPoint.model_validate(point) for point in points]
            for name, points in KPI_TRENDS.items()
        }

    async def trend_series(self, kpi_name: str) -> list[TrendPoint] | None:
        """History for one KPI, matched by name or slug; None when unknown."""
        slug = kpi_slug(kpi_name)
        for name, points in (await self.trends()).items():
            if kpi_slug(name) == slug:
                return points
        return None
