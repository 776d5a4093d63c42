import pytest

from agents.margin_analysis import MarginAnalyst
from connectors.product_store import ProductStore
from models.enums import SuggestionStatus, SuggestionType


@pytest.fixture
def analyst() -> MarginAnalyst:
    return MarginAnalyst(ProductStore())


@pytest.mark.asyncio
async def test_analyze_known_product(analyst):
    analysis = await analyst.analyze("1", "tariff")
    assert analysis is not None
    assert analysis.product_id == "1"
    assert analysis.analysis_type == "tariff"
    assert "import duty" in analysis.analysis
    assert [c.factor for c in analysis.root_causes] == ["Import Tariffs", "Shrink Rate", "Supplier Costs"]
    assert len(analysis.suggestions) == 3
    assert analysis.timestamp.tzinfo is not None


@pytest.mark.asyncio
async def test_analyze_unknown_product(analyst, caplog):
    assert await analyst.analyze("404") is None
    assert "unknown product 404" in caplog.text


def test_trends_without_filters(analyst):
    trends = analyst.trends()
    assert trends["timeframe"] == "30d"
    assert trends["overall"]["trend"] == "declining"
    assert set(trends["byCategory"]) == {"Dairy", "Produce", "Beverages", "Pantry"}
    assert len(trends["byRegion"]) == 4


def test_trends_filtered_ignore_case(analyst):
    trends = analyst.trends(category="dairy", region="WEST", timeframe="7d")
    assert trends["timeframe"] == "7d"
    assert trends["byCategory"] == {"Dairy": {"trend": "declining", "change": -2.1}}
    assert trends["byRegion"] == {"West": {"trend": "stable", "change": 0.1}}


def test_trends_unknown_category_is_empty(analyst):
    assert analyst.trends(category="Toys")["byCategory"] == {}


@pytest.mark.asyncio
async def test_generate_suggestions(analyst):
    suggestions = await analyst.generate_suggestions("4")
    assert suggestions is not None
    [suggestion] = suggestions
    assert suggestion.product_id == "4"
    assert suggestion.type is SuggestionType.PRICE_ADJUSTMENT
    assert suggestion.status is SuggestionStatus.PENDING
    assert "Fresh Strawberries" in suggestion.description


@pytest.mark.asyncio
async def test_generate_suggestions_unique_ids(analyst):
    first = await analyst.generate_suggestions("1")
    second = await analyst.generate_suggestions("1")
    assert first[0].id != second[0].id


@pytest.mark.asyncio
async def test_generate_suggestions_unknown_product(analyst):
    assert await analyst.generate_suggestions("404") is None
