"""
Module: connectors.suggestion_store

In-memory repository for margin-improvement suggestions and their review
workflow (pending -> approved | rejected).
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from models.enums import SuggestionStatus
from models.suggestion import Suggestion

from .mock_data import SUGGESTIONS

logger = logging.getLogger(__name__)


class SuggestionNotFound(LookupError):
    """No suggestion exists with the requested ID."""


class SuggestionNotPending(ValueError):
    """The suggestion has already been reviewed."""


class SuggestionStore:
    def __init__(self, suggestions: Iterable[Suggestion | dict[str, Any]] | None = None):
        seed = SUGGESTIONS if suggestions is None else suggestions
        self._suggestions: list[Suggestion] = [
            s if isinstance(s, Suggestion) else Suggestion.model_validate(s) for s in seed
        ]
        self._lock = asyncio.Lock()

    async def search(
        self,
        status: str | None = None,
        suggestion_type: str | None = None,
        product_id: str | None = None,
    ) -> list[Suggestion]:
        """Suggestions matching every supplied filter, in insertion order."""
        results = []
        for s in self._suggestions:
            if status and s.status.value != status:
                continue
            if suggestion_type and s.type.value != suggestion_type:
                continue
            if product_id and s.product_id != product_id:
                continue
            results.append(s)
        return results

    async def get(self, suggestion_id: str) -> Suggestion | None:
        return next((s for s in self._suggestions if s.id == suggestion_id), None)

    async def add(self, suggestions: Iterable[Suggestion]) -> list[Suggestion]:
        added = list(suggestions)
        async with self._lock:
            self._suggestions.extend(added)
        logger.info(f"Stored {len(added)} new suggestion(s)")
        return added

    async def approve(self, suggestion_id: str, notes: str | None = None) -> Suggestion:
        update: dict[str, Any] = {
            "status": SuggestionStatus.APPROVED,
            "approved_at": datetime.now(timezone.utc),
        }
        if notes:
            update["approval_notes"] = notes
        return await self._review(suggestion_id, update)

    async def reject(self, suggestion_id: str, reason: str) -> Suggestion:
        return await self._review(
            suggestion_id,
            {
                "status": SuggestionStatus.REJECTED,
                "rejected_at": datetime.now(timezone.utc),
                "rejection_reason": reason,
            },
        )

    async def _review(self, suggestion_id: str, update: dict[str, Any]) -> Suggestion:
        async with self._lock:
            for index, current in enumerate(self._suggestions):
                if current.id != suggestion_id:
                    continue
                if not current.is_pending:
                    raise SuggestionNotPending(suggestion_id)
                reviewed = current.model_copy(update=update)
                self._suggestions[index] = reviewed
                logger.info(f"Suggestion {suggestion_id} marked {reviewed.status.value}")
                return reviewed
        raise SuggestionNotFound(suggestion_id)
