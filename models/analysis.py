"""
Margin analysis data models.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import CamelModel
from .enums import CauseTrend
from .suggestion import Suggestion


class RootCause(CamelModel):
    """A factor contributing to a margin change."""

    model_config = ConfigDict(frozen=True)

    factor: str
    impact: float
    description: str
    trend: CauseTrend


class MarginAnalysis(CamelModel):
    """Explanation of a product's margin movement with suggested actions."""

    product_id: str
    analysis_type: str | None = None
    analysis: str
    suggestions: list[Suggestion] = Field(default_factory=list)
    root_causes: list[RootCause] = Field(default_factory=list)
    timestamp: datetime


class RecentAnalysis(CamelModel):
    """One-line analysis shown on the dashboard feed."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    analysis: str
    timestamp: datetime
