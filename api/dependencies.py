"""
Service container injected into route handlers.

Handlers never touch module-level state; they receive the stores, the analyst
and the assistant through ``Depends(get_services)``.
"""

from dataclasses import dataclass

from fastapi import Request
from openai import AsyncOpenAI

from agents.margin_analysis import MarginAnalyst
from agents.margin_assistant import MarginAssistant
from config.config import AppConfig
from connectors.chat_history_store import ChatHistoryStore
from connectors.dashboard_feed import DashboardFeed
from connectors.kpi_store import KPIStore
from connectors.product_store import ProductStore
from connectors.suggestion_store import SuggestionStore


@dataclass
class Services:
    config: AppConfig
    products: ProductStore
    kpis: KPIStore
    suggestions: SuggestionStore
    chat_history: ChatHistoryStore
    feed: DashboardFeed
    analyst: MarginAnalyst
    assistant: MarginAssistant


def build_services(config: AppConfig, llm_client: AsyncOpenAI | None = None) -> Services:
    """Fresh stores seeded from mock data, wired to one analyst and one assistant."""
    products = ProductStore()
    chat_history = ChatHistoryStore(max_messages=config.assistant.max_history)
    return Services(
        config=config,
        products=products,
        kpis=KPIStore(),
        suggestions=SuggestionStore(),
        chat_history=chat_history,
        feed=DashboardFeed(),
        analyst=MarginAnalyst(products),
        assistant=MarginAssistant(products, chat_history, config.assistant, client=llm_client),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
