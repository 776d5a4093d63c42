"""
Data models specific to API interactions (request bodies and the response envelope).

Required fields are declared optional here and checked by the route handlers,
so a missing field is reported with a specific 400 message rather than a
generic validation error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from .base import CamelModel


class ApiResponse(BaseModel):
    """Uniform envelope returned by every JSON endpoint."""

    success: bool
    data: Any = None
    error: str | None = None


class ChatRequest(CamelModel):
    message: str | None = None


class ApproveSuggestionRequest(CamelModel):
    notes: str | None = None


class RejectSuggestionRequest(CamelModel):
    reason: str | None = None


class GenerateRequest(CamelModel):
    """Body for analysis and suggestion generation."""

    product_id: str | None = None
    analysis_type: str = "comprehensive"


class KPITargetUpdate(CamelModel):
    target: float | None = None


class MarginSample(CamelModel):
    """Any product-like object carrying a margin; other keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    margin: float


class KPICalculationRequest(CamelModel):
    products: list[MarginSample] | None = None
    timeframe: str | None = None
