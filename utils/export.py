"""
CSV export of product listings for the margin report download.
"""

from collections.abc import Sequence

import pandas as pd

from models.product import Product
from utils.kpi import margin_status

EXPORT_COLUMNS = [
    "SKU",
    "Name",
    "Category",
    "Region",
    "Price",
    "COGS",
    "Margin",
    "Margin Delta",
    "Tariff Impact",
    "Shrink Rate",
    "Supplier",
    "Traffic Impact",
    "Margin Status",
]


def products_to_frame(products: Sequence[Product]) -> pd.DataFrame:
    """One row per product, columns in report order."""
    rows = [
        {
            "SKU": p.sku,
            "Name": p.name,
            "Category": p.category,
            "Region": p.region,
            "Price": p.price,
            "COGS": p.cogs,
            "Margin": p.margin,
            "Margin Delta": p.margin_delta,
            "Tariff Impact": p.tariff_impact,
            "Shrink Rate": p.shrink_rate,
            "Supplier": p.supplier,
            "Traffic Impact": p.traffic_impact,
            "Margin Status": margin_status(p.margin).value,
        }
        for p in products
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def products_to_csv(products: Sequence[Product]) -> str:
    """Render products as CSV text with a header row; quoting handles commas in names."""
    return products_to_frame(products).to_csv(index=False, lineterminator="\n")
