"""
Chat message models for the margin assistant.
"""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from .base import CamelModel
from .enums import MessageRole


class ChatMetadata(CamelModel):
    query_type: str | None = None
    suggestions: list[dict[str, Any]] = Field(default_factory=list)


class ChatMessage(CamelModel):
    """A single turn in the assistant conversation."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: MessageRole
    content: str
    timestamp: datetime
    metadata: ChatMetadata | None = None
