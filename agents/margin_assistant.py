"""
Module: agents.margin_assistant

Contains the MarginAssistant class: the chat assistant of the margin dashboard.
Forwards a single prompt (user question plus relevant catalog data) to the LLM
and records every exchange in the chat history store.
"""

import logging
import uuid
from datetime import datetime, timezone

from openai import AsyncOpenAI

from config.config import AssistantConfig
from connectors.chat_history_store import ChatHistoryStore
from connectors.mock_data import SUGGESTED_QUESTIONS
from connectors.product_store import ProductStore
from models.chat import ChatMessage, ChatMetadata
from models.enums import MessageRole
from models.query import QueryResult
from utils.openai_utils import completion_text, safe_chat_completion
from utils.query import paginate

from .prompts import (
    build_margin_prompt,
    canned_answer,
    top_margin_loss_lines,
    wants_top_loss_context,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MarginAssistant:
    """
    LLM-backed margin assistant.

    Without an API key the assistant still answers, using keyword-selected
    canned responses, so the dashboard stays usable offline.
    """

    def __init__(
        self,
        product_store: ProductStore,
        history_store: ChatHistoryStore,
        config: AssistantConfig | None = None,
        client: AsyncOpenAI | None = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.config = config or AssistantConfig()
        self.product_store = product_store
        self.history_store = history_store

        if client is not None:
            self.client = client
        elif self.config.llm_enabled:
            try:
                self.client = AsyncOpenAI(api_key=self.config.api_key)
                self.logger.info("AsyncOpenAI client initialized successfully.")
            except Exception as e:
                self.client = None
                self.logger.error(f"Failed to initialize OpenAI client: {e}")
        else:
            self.client = None
            self.logger.warning(
                "OpenAI API key missing or placeholder. Falling back to canned answers."
            )

    async def build_data_context(self, message: str) -> str:
        """Catalog data relevant to ``message``; empty when none applies."""
        if not wants_top_loss_context(message):
            return ""
        products = await self.product_store.snapshot()
        n = self.config.top_loss_count
        return (
            f"Here are the top {n} items that lost margin this month:\n"
            + top_margin_loss_lines(products, n)
        )

    async def reply(self, message: str) -> ChatMessage:
        """
        Answer a user message and append both turns to the history.

        Raises:
            Exception: whatever the LLM call raised after its retries.
        """
        user_message = ChatMessage(
            id=str(uuid.uuid4()),
            type=MessageRole.USER,
            content=message,
            timestamp=_now(),
        )
        self.logger.info(f"Processing chat message: '{message[:50]}'")

        if self.client is None:
            answer = canned_answer(message)
            content = answer.content
            metadata = ChatMetadata(query_type=answer.query_type, suggestions=list(answer.suggestions))
        else:
            prompt = build_margin_prompt(message, await self.build_data_context(message))
            completion = await safe_chat_completion(
                self.client,
                model=self.config.model,
                messages=[{"role": "user", "content": prompt}],
                logger=self.logger,
                retry_attempts=self.config.retry_attempts,
                retry_backoff=self.config.retry_backoff,
                temperature=self.config.temperature,
            )
            content = completion_text(completion)
            metadata = ChatMetadata(query_type="margin_analysis")

        assistant_message = ChatMessage(
            id=str(uuid.uuid4()),
            type=MessageRole.ASSISTANT,
            content=content,
            timestamp=_now(),
            metadata=metadata,
        )
        await self.history_store.append(user_message, assistant_message)
        return assistant_message

    async def history(self, limit: int, offset: int = 0) -> QueryResult[ChatMessage]:
        return paginate(await self.history_store.messages(), limit, offset)

    def suggested_questions(self) -> list[str]:
        return list(SUGGESTED_QUESTIONS)
