"""
KPI data models for the margin dashboard.
"""

import re
from datetime import datetime

from pydantic import ConfigDict

from .base import CamelModel
from .enums import KPITrend, MarginStatus


def kpi_slug(name: str) -> str:
    """URL form of a KPI name: lower case, whitespace runs replaced by ``-``."""
    return re.sub(r"\s+", "-", name.strip().lower())


class KPIMetric(CamelModel):
    """A headline metric tracked against a target."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    unit: str
    change: float
    trend: KPITrend
    status: MarginStatus
    target: float | None = None
    last_updated: datetime | None = None

    @property
    def slug(self) -> str:
        return kpi_slug(self.name)


class TrendPoint(CamelModel):
    model_config = ConfigDict(frozen=True)

    date: str
    value: float
