from __future__ import annotations

"""Prompt builder utilities for the margin assistant.

The functions in this module only format prompt text and select canned
answers, so they can be unit-tested without an LLM client. Model parameters
stay in `agents.margin_assistant`.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from models.product import Product

__all__ = [
    "ASSISTANT_NAME",
    "CannedAnswer",
    "build_margin_prompt",
    "canned_answer",
    "top_margin_loss_lines",
    "wants_top_loss_context",
]

ASSISTANT_NAME = "MarginIQ"


def top_margin_loss_lines(products: Sequence[Product], n: int = 10) -> str:
    """Numbered list of the ``n`` lowest-margin products, worst first."""
    worst = sorted(products, key=lambda p: p.margin)[: max(0, n)]
    return "\n".join(
        f"{i}. {p.name} (Current margin: {p.margin}%, Change: {p.margin_delta}%)"
        for i, p in enumerate(worst, start=1)
    )


def wants_top_loss_context(message: str) -> bool:
    """True when the user asks which top items lost margin."""
    text = message.lower()
    return "top" in text and "margin" in text and ("lost" in text or "loss" in text)


def build_margin_prompt(message: str, data_context: str = "") -> str:
    """Return the single prompt forwarded to the LLM."""
    return (
        f"You are {ASSISTANT_NAME}, a retail margin intelligence assistant. "
        "Use the following data to answer the user's question.\n\n"
        f"User question: {message}\n\n"
        f"Relevant data:\n{data_context}"
    )


@dataclass(frozen=True)
class CannedAnswer:
    """Keyword-selected answer used when no LLM is configured."""

    query_type: str
    content: str
    suggestions: list[dict[str, Any]] = field(default_factory=list)


# (all keywords required, answer). First match wins.
_CANNED_ANSWERS: tuple[tuple[tuple[str, ...], CannedAnswer], ...] = (
    (
        ("top", "lost margin"),
        CannedAnswer(
            "top_margin_loss",
            "Here are the top 10 items that lost margin this month:\n\n"
            "1. Fresh Strawberries (-6.5% margin)\n"
            "2. Organic Milk (-2.1% margin)\n"
            "3. Imported Cheese (-1.8% margin)\n"
            "4. Avocados (-1.5% margin)\n"
            "5. Bell Peppers (-1.2% margin)\n\n"
            "Primary causes: Increased COGS due to supply chain issues and higher shrink "
            "rates in produce. I recommend reviewing pricing strategies and supplier "
            "contracts for these items.",
            [
                {"type": "price_adjustment", "product": "Fresh Strawberries", "impact": 0.15},
                {"type": "supplier_change", "product": "Organic Milk", "impact": 0.08},
            ],
        ),
    ),
    (
        ("tariff", "affected"),
        CannedAnswer(
            "tariff_impact",
            "Categories most affected by tariffs:\n\n"
            "• **Beverages** (2.1% tariff impact) - Coffee beans, tea imports\n"
            "• **Pantry** (1.8% tariff impact) - Olive oil, pasta, canned goods\n"
            "• **Electronics** (1.5% tariff impact) - Small appliances\n\n"
            "Total tariff impact across all categories: $2.3M monthly. Consider sourcing "
            "alternatives or adjusting prices to offset these costs.",
            [
                {"type": "supplier_change", "category": "Beverages", "impact": 0.25},
                {"type": "price_adjustment", "category": "Pantry", "impact": 0.18},
            ],
        ),
    ),
    (
        ("beverage", "florida"),
        CannedAnswer(
            "regional_margin",
            "Beverage margins in Florida are falling due to:\n\n"
            "• **Increased transportation costs** (+15% fuel surcharges)\n"
            "• **Higher shrink rates** (3.2% vs 1.8% national average)\n"
            "• **Competitive pricing pressure** from local competitors\n"
            "• **Supply chain delays** affecting freshness\n\n"
            "Recommendations:\n"
            "- Review pricing strategy for Florida market\n"
            "- Optimize delivery routes to reduce fuel costs\n"
            "- Implement better inventory management to reduce shrink",
            [
                {"type": "price_adjustment", "region": "Florida", "impact": 0.12},
                {"type": "logistics_optimization", "region": "Florida", "impact": 0.08},
            ],
        ),
    ),
    (
        ("negative margin",),
        CannedAnswer(
            "negative_margin",
            "Products currently with negative margins:\n\n"
            "🚨 **Critical Issues:**\n"
            "• Fresh Strawberries (-6.5% margin)\n"
            "• Organic Milk (-2.1% margin)\n"
            "• Imported Cheese (-1.8% margin)\n\n"
            "**Immediate Actions Needed:**\n"
            "1. Review pricing strategy\n"
            "2. Negotiate with suppliers\n"
            "3. Consider product discontinuation\n"
            "4. Implement shrink reduction measures\n\n"
            "Total potential loss: $45K monthly if not addressed.",
            [
                {"type": "urgent_review", "products": ["Fresh Strawberries", "Organic Milk"]},
                {"type": "supplier_negotiation", "products": ["Imported Cheese"]},
            ],
        ),
    ),
    (
        ("supplier", "cost increase"),
        CannedAnswer(
            "supplier_costs",
            "Suppliers with highest cost increases:\n\n"
            "🏭 **Top Increases:**\n"
            "1. Mediterranean Imports (+12% - olive oil)\n"
            "2. Global Coffee Inc (+8% - coffee beans)\n"
            "3. Berry Farms LLC (+6% - fresh produce)\n"
            "4. Local Dairy Co (+5% - dairy products)\n\n"
            "**Root Causes:**\n"
            "• Raw material cost inflation\n"
            "• Transportation cost increases\n"
            "• Labor cost pressures\n"
            "• Currency fluctuations\n\n"
            "**Actions:**\n"
            "• Renegotiate contracts\n"
            "• Explore alternative suppliers\n"
            "• Consider bulk purchasing discounts",
            [
                {"type": "contract_negotiation", "suppliers": ["Mediterranean Imports"]},
                {"type": "alternative_sourcing", "suppliers": ["Global Coffee Inc"]},
            ],
        ),
    ),
)

_DEFAULT_ANSWER = CannedAnswer(
    "margin_analysis",
    "I understand you're asking about margin analysis. I can help you with:\n\n"
    "• Product margin trends and analysis\n"
    "• Identifying at-risk items\n"
    "• Tariff impact assessment\n"
    "• Supplier cost analysis\n"
    "• Pricing recommendations\n"
    "• Shrink rate analysis\n\n"
    "Please try asking a more specific question about margins, products, or categories.",
)


def canned_answer(message: str) -> CannedAnswer:
    """Pick the first canned answer whose keywords all appear in ``message``."""
    text = message.lower()
    for keywords, answer in _CANNED_ANSWERS:
        if all(keyword in text for keyword in keywords):
            return answer
    return _DEFAULT_ANSWER
