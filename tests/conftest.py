import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import api`, `import utils`, etc.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from models.product import Product  # noqa: E402


def make_product(**overrides) -> Product:
    """Product with sensible defaults; pass only the fields a test cares about."""
    fields = {
        "id": "P1",
        "sku": "10001",
        "name": "Test Product",
        "category": "Pantry",
        "region": "Northeast",
        "price": 4.0,
        "cogs": 3.0,
        "margin": 25.0,
        "margin_delta": 0.0,
        "tariff_impact": 0.0,
        "shrink_rate": 0.0,
        "supplier": "Test Supplier",
        "last_updated": datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
        "status": "active",
    }
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def three_products() -> list[Product]:
    """Pantry 13.3 / Dairy 3.3 / Produce -6.5, in that order."""
    return [
        make_product(id="1", name="Olive Oil", category="Pantry", region="Northeast",
                     supplier="Mediterranean Imports", margin=13.3, price=3.98),
        make_product(id="2", name="Organic Milk", category="Dairy", region="Southeast",
                     supplier="Local Dairy Co", margin=3.3, price=4.29),
        make_product(id="3", name="Strawberries", category="Produce", region="Southwest",
                     supplier="Berry Farms LLC", margin=-6.5, price=12.99),
    ]


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def client():
    """API client over fresh seeded stores, with the assistant in offline mode."""
    from fastapi.testclient import TestClient

    from api.app import create_app
    from config.config import AppConfig

    with TestClient(create_app(config=AppConfig())) as c:
        yield c
