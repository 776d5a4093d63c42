"""
Suggestion data models: margin-improvement actions awaiting review.
"""

from datetime import datetime

from pydantic import ConfigDict

from .base import CamelModel
from .enums import SuggestionStatus, SuggestionType


class Suggestion(CamelModel):
    """
    A proposed action for one product.

    Only ``pending`` suggestions may be approved or rejected; the review
    fields are filled in by the suggestion store when that happens.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type: SuggestionType
    title: str
    description: str
    impact: float
    confidence: float
    action: str
    status: SuggestionStatus = SuggestionStatus.PENDING
    product_id: str | None = None
    created_at: datetime | None = None
    approved_at: datetime | None = None
    approval_notes: str | None = None
    rejected_at: datetime | None = None
    rejection_reason: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is SuggestionStatus.PENDING
