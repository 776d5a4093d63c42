"""
FastAPI application for the MarginIQ margin-intelligence dashboard.
Wires the in-memory stores, the margin analyst and the chat assistant into
the REST routers and installs the uniform response envelope.

Run with: uvicorn api.app:create_app --factory --reload
or:       python -m api.app
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from openai import AsyncOpenAI

from config.config import AppConfig
from utils.env import load_project_dotenv
from utils.logger import get_logger

from .dependencies import Services, build_services
from .responses import register_error_handlers
from .routes import ROUTERS

logger = get_logger("marginiq-api")


def create_app(
    config: AppConfig | None = None,
    services: Services | None = None,
    llm_client: AsyncOpenAI | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        config: Settings; read from the environment (and `.env`) when omitted.
        services: Pre-built stores and agents, mainly for tests.
        llm_client: Client handed to the assistant instead of one built from the API key.
    """
    if config is None:
        load_project_dotenv()
        config = services.config if services is not None else AppConfig.from_env()
    services = services or build_services(config, llm_client=llm_client)

    app = FastAPI(
        title=config.api.title,
        description="Margin intelligence dashboard: products, KPIs, suggestions and assistant",
        version=config.api.version,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.services = services
    register_error_handlers(app)
    for router in ROUTERS:
        app.include_router(router)

    logger.info(
        f"{config.api.title} ready | llm={'on' if services.assistant.client else 'off'} "
        f"| model={config.assistant.model}"
    )
    return app


def main() -> None:
    import uvicorn

    host = os.getenv("MARGINIQ_HOST", "127.0.0.1")
    port = int(os.getenv("MARGINIQ_PORT", "8000"))
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
