"""
KPI and statistics calculations over products, KPIs and suggestions.

All functions are pure and tolerate empty inputs (averages become 0.0).
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from models.enums import KPITrend, MarginStatus, ProductStatus, SuggestionStatus
from models.kpi import KPIMetric
from models.product import Product
from models.suggestion import Suggestion

# Margin bands shared by the dashboard, alerts and exports.
HEALTHY_MARGIN = 15.0
AT_RISK_MARGIN = 5.0


def margin_status(margin: float) -> MarginStatus:
    """Classify a margin percentage: >15 positive, <0 negative, <5 warning."""
    if margin > HEALTHY_MARGIN:
        return MarginStatus.POSITIVE
    if margin < 0:
        return MarginStatus.NEGATIVE
    if margin < AT_RISK_MARGIN:
        return MarginStatus.WARNING
    return MarginStatus.NEUTRAL


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def top_issues(products: Sequence[Product]) -> list[Product]:
    """Products below the at-risk margin, in input order."""
    return [p for p in products if p.margin < AT_RISK_MARGIN]


def product_stats(products: Sequence[Product]) -> dict[str, Any]:
    margins = [p.margin for p in products]
    return {
        "total": len(products),
        "active": sum(1 for p in products if p.status is ProductStatus.ACTIVE),
        "discontinued": sum(1 for p in products if p.status is ProductStatus.DISCONTINUED),
        "negativeMargin": sum(1 for m in margins if m < 0),
        "lowMargin": sum(1 for m in margins if 0 <= m < AT_RISK_MARGIN),
        "averageMargin": _mean(margins),
        "totalTariffImpact": sum(p.tariff_impact for p in products),
        "averageShrinkRate": _mean([p.shrink_rate for p in products]),
    }


def suggestion_stats(suggestions: Sequence[Suggestion]) -> dict[str, Any]:
    def count(status: SuggestionStatus) -> int:
        return sum(1 for s in suggestions if s.status is status)

    return {
        "total": len(suggestions),
        "pending": count(SuggestionStatus.PENDING),
        "approved": count(SuggestionStatus.APPROVED),
        "rejected": count(SuggestionStatus.REJECTED),
        "totalImpact": sum(s.impact for s in suggestions if s.status is SuggestionStatus.APPROVED),
        "averageConfidence": _mean([s.confidence for s in suggestions]),
    }


def is_on_target(kpi: KPIMetric) -> bool:
    """Rising KPIs must reach their target; all others must stay at or below it."""
    if kpi.target is None:
        return False
    if kpi.trend is KPITrend.UP:
        return kpi.value >= kpi.target
    return kpi.value <= kpi.target


def kpi_summary(kpis: Sequence[KPIMetric]) -> dict[str, Any]:
    return {
        "totalKPIs": len(kpis),
        "positiveTrends": sum(1 for k in kpis if k.trend is KPITrend.UP),
        "negativeTrends": sum(1 for k in kpis if k.trend is KPITrend.DOWN),
        "onTarget": sum(1 for k in kpis if is_on_target(k)),
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }


def calculate_kpis(margins: Sequence[float]) -> dict[str, dict[str, Any]]:
    """
    Derive headline KPIs from a list of product margins.

    Change, trend and status are fixed placeholders; only the values are
    computed.
    """
    return {
        "Average Gross Margin": {
            "value": _mean(margins),
            "unit": "%",
            "change": 0.5,
            "trend": KPITrend.UP.value,
            "status": MarginStatus.POSITIVE.value,
        },
        "At-Risk SKUs": {
            "value": sum(1 for m in margins if m < AT_RISK_MARGIN),
            "unit": "items",
            "change": -5,
            "trend": KPITrend.DOWN.value,
            "status": MarginStatus.POSITIVE.value,
        },
        "Total Products": {
            "value": len(margins),
            "unit": "items",
            "change": 0,
            "trend": KPITrend.STABLE.value,
            "status": MarginStatus.NEUTRAL.value,
        },
    }
