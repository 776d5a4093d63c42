"""
OpenAI helpers for the margin assistant: a retrying chat completion call and
extraction of the reply text.
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion, ChatCompletionMessageParam

__all__ = ["backoff_delays", "safe_chat_completion", "completion_text"]

module_logger = logging.getLogger(__name__)


def backoff_delays(retry_attempts: int, base: float) -> list[float]:
    """Pause before each retry: ``base``, ``2 * base``, ``4 * base``, ...

    One entry fewer than the number of attempts; at least one attempt is made.
    """
    return [base * 2**i for i in range(max(1, retry_attempts) - 1)]


async def safe_chat_completion(
    client: AsyncOpenAI | None,
    *,
    model: str,
    messages: Iterable[dict[str, Any]],
    logger: logging.Logger | None = None,
    retry_attempts: int = 3,
    retry_backoff: float = 1.0,
    **kwargs,
) -> ChatCompletion:
    """
    Call ``client.chat.completions.create``, retrying failures with exponential back-off.

    Args:
        client: An initialised ``AsyncOpenAI`` client.
        model: Model name, e.g. ``"gpt-4o-mini"``.
        messages: Chat messages sent unchanged to the endpoint.
        logger: Where attempts are reported; the module logger when omitted.
        retry_attempts: Total number of calls before giving up.
        retry_backoff: First pause in seconds, doubled after every failure.
        **kwargs: Forwarded to ``create`` (``temperature``, ``max_tokens``, ...).

    Raises:
        RuntimeError: if ``client`` is None.
        TypeError: if ``client`` is a synchronous ``OpenAI`` client.
        Exception: the error of the final attempt once every attempt failed.
    """
    if client is None:
        raise RuntimeError("OpenAI client is not initialised.")
    if not isinstance(client, AsyncOpenAI):
        raise TypeError("Sync OpenAI client provided to async safe_chat_completion.")

    log = logger or module_logger
    payload: list[ChatCompletionMessageParam] = list(messages)  # type: ignore[arg-type]
    delays = backoff_delays(retry_attempts, retry_backoff)
    attempts = len(delays) + 1
    loop = asyncio.get_running_loop()

    for attempt in range(1, attempts + 1):
        started = loop.time()
        try:
            completion = await client.chat.completions.create(
                model=model, messages=payload, **kwargs
            )
        except Exception as exc:  # noqa: BLE001
            log.warning("OpenAI call failed (attempt %s/%s): %s", attempt, attempts, exc)
            if attempt == attempts:
                raise
            await asyncio.sleep(delays[attempt - 1])
            continue
        log.debug(
            "OpenAI completions.create call succeeded | model=%s | attempt=%s | latency=%.2fs",
            model,
            attempt,
            loop.time() - started,
        )
        return completion
    raise AssertionError("unreachable")  # pragma: no cover


def completion_text(completion: Any) -> str:
    """First choice's message content, stripped; empty when there is none."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return (getattr(message, "content", None) or "").strip()
