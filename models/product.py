"""
Product data models for the margin dashboard.
Includes the immutable Product record served by the query pipeline and the
partial-update payload accepted by the products API.
"""

from datetime import datetime, timezone

from pydantic import ConfigDict, Field, field_validator

from .base import CamelModel
from .enums import ProductStatus


class Product(CamelModel):
    """
    A catalog product with its margin drivers.

    ``margin`` is reported as supplied; it is never recomputed from
    ``price`` and ``cogs``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    sku: str
    name: str
    category: str
    region: str
    price: float
    cogs: float
    margin: float
    margin_delta: float = 0.0
    tariff_impact: float = 0.0
    shrink_rate: float = 0.0
    supplier: str
    last_updated: datetime
    status: ProductStatus = ProductStatus.ACTIVE
    store: str | None = None
    traffic_impact: float | None = None

    @field_validator("last_updated")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are taken as UTC so all products compare by time."""
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class ProductUpdate(CamelModel):
    """Fields a client may change on an existing product. ``id`` is fixed."""

    model_config = ConfigDict(extra="ignore")

    sku: str | None = None
    name: str | None = None
    category: str | None = None
    region: str | None = None
    price: float | None = Field(default=None, ge=0)
    cogs: float | None = Field(default=None, ge=0)
    margin: float | None = None
    margin_delta: float | None = None
    tariff_impact: float | None = None
    shrink_rate: float | None = None
    supplier: str | None = None
    status: ProductStatus | None = None
    store: str | None = None
    traffic_impact: float | None = None

    def changes(self) -> dict:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)
