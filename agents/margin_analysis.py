"""
Module: agents.margin_analysis

Root-cause analysis and suggestion generation for product margins.
Results are drawn from a fixed analysis template; no model is consulted.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from connectors.mock_data import ANALYSIS_SUGGESTIONS, ANALYSIS_SUMMARY, MARGIN_TRENDS, ROOT_CAUSES
from connectors.product_store import ProductStore
from models.analysis import MarginAnalysis, RootCause
from models.enums import SuggestionStatus, SuggestionType
from models.suggestion import Suggestion

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS_TYPE = "comprehensive"


def _pick(section: dict[str, Any], name: str | None) -> dict[str, Any]:
    """Entries of ``section`` whose key equals ``name`` (any case); all when name is empty."""
    if not name:
        return dict(section)
    wanted = name.casefold()
    return {key: value for key, value in section.items() if key.casefold() == wanted}


class MarginAnalyst:
    """
    Explains margin movements for catalog products.
    """

    def __init__(self, product_store: ProductStore):
        self.product_store = product_store

    async def analyze(
        self, product_id: str, analysis_type: str | None = None
    ) -> MarginAnalysis | None:
        """Analysis for one product, or None when the product is unknown."""
        product = await self.product_store.get(product_id)
        if product is None:
            logger.warning(f"Analysis requested for unknown product {product_id}")
            return None
        logger.info(f"Generating {analysis_type or DEFAULT_ANALYSIS_TYPE} analysis for {product.name}")
        return MarginAnalysis(
            product_id=product.id,
            analysis_type=analysis_type,
            analysis=ANALYSIS_SUMMARY,
            suggestions=[Suggestion.model_validate(s) for s in ANALYSIS_SUGGESTIONS],
            root_causes=[RootCause.model_validate(c) for c in ROOT_CAUSES],
            timestamp=datetime.now(timezone.utc),
        )

    def trends(
        self,
        category: str | None = None,
        region: str | None = None,
        timeframe: str = "30d",
    ) -> dict[str, Any]:
        """Margin trend overview, narrowed to one category and/or region when given."""
        return {
            "timeframe": timeframe,
            "overall": dict(MARGIN_TRENDS["overall"]),
            "byCategory": _pick(MARGIN_TRENDS["byCategory"], category),
            "byRegion": _pick(MARGIN_TRENDS["byRegion"], region),
        }

    async def generate_suggestions(self, product_id: str) -> list[Suggestion] | None:
        """New pending suggestions for a product, or None when the product is unknown."""
        product = await self.product_store.get(product_id)
        if product is None:
            return None
        return [
            Suggestion(
                id=str(uuid.uuid4()),
                type=SuggestionType.PRICE_ADJUSTMENT,
                title="Optimize pricing strategy",
                description=f"Pricing review for {product.name} based on market analysis",
                impact=0.25,
                confidence=0.82,
                action="price_optimization",
                status=SuggestionStatus.PENDING,
                product_id=product.id,
                created_at=datetime.now(timezone.utc),
            )
        ]
