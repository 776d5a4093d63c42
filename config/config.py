"""
Configuration classes for the MarginIQ service.
Defines API and assistant settings in a type-safe, extensible way.
Values can be overridden through environment variables (or a project `.env`).
"""

import os
from dataclasses import dataclass, field


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw or not raw.strip():
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


@dataclass
class ApiConfig:
    title: str = "MarginIQ API"
    version: str = "1.0.0"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    default_page_limit: int = 50

    @classmethod
    def from_env(cls) -> "ApiConfig":
        defaults = cls()
        return cls(
            title=os.getenv("MARGINIQ_API_TITLE", defaults.title),
            version=defaults.version,
            cors_origins=_env_list("MARGINIQ_CORS_ORIGINS", defaults.cors_origins),
            default_page_limit=_env_int("MARGINIQ_PAGE_LIMIT", defaults.default_page_limit),
        )


@dataclass
class AssistantConfig:
    model: str = "gpt-4o-mini"
    api_key: str | None = None
    temperature: float = 0.3
    retry_attempts: int = 3
    retry_backoff: float = 1.0
    max_history: int = 200  # Chat messages kept in memory
    top_loss_count: int = 10

    @property
    def llm_enabled(self) -> bool:
        return bool(self.api_key) and self.api_key != "YOUR_API_KEY_HERE"

    @classmethod
    def from_env(cls) -> "AssistantConfig":
        defaults = cls()
        return cls(
            model=os.getenv("MARGINIQ_MODEL", defaults.model),
            api_key=os.getenv("OPENAI_API_KEY") or None,
            temperature=_env_float("MARGINIQ_TEMPERATURE", defaults.temperature),
            retry_attempts=_env_int("MARGINIQ_RETRY_ATTEMPTS", defaults.retry_attempts),
            retry_backoff=_env_float("MARGINIQ_RETRY_BACKOFF", defaults.retry_backoff),
            max_history=_env_int("MARGINIQ_MAX_HISTORY", defaults.max_history),
        )


@dataclass
class AppConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    assistant: AssistantConfig = field(default_factory=AssistantConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(api=ApiConfig.from_env(), assistant=AssistantConfig.from_env())


# Example usage:
# config = AppConfig.from_env()
# app = create_app(config)
