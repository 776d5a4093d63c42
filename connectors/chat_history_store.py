"""
Module: connectors.chat_history_store

Bounded in-memory log of assistant conversation turns.
"""

import asyncio
import logging
from collections import deque
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from models.chat import ChatMessage
from models.enums import MessageRole

from .mock_data import CHAT_HISTORY

logger = logging.getLogger(__name__)


def _seed_messages() -> list[ChatMessage]:
    now = datetime.now(timezone.utc)
    return [
        ChatMessage(
            id=message_id,
            type=MessageRole(role),
            content=content,
            timestamp=now - timedelta(seconds=age_seconds),
        )
        for message_id, role, content, age_seconds in CHAT_HISTORY
    ]


class ChatHistoryStore:
    """
    Keeps the most recent ``max_messages`` chat messages, oldest first.
    """

    def __init__(self, max_messages: int = 200, messages: Iterable[ChatMessage] | None = None):
        self.max_messages = max_messages
        seed = _seed_messages() if messages is None else messages
        self._messages: deque[ChatMessage] = deque(seed, maxlen=max_messages)
        self._lock = asyncio.Lock()

    async def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    async def append(self, *messages: ChatMessage) -> None:
        async with self._lock:
            self._messages.extend(messages)
        logger.debug(f"Chat history size: {len(self._messages)}")
