"""Liveness endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..dependencies import Services, get_services
from ..responses import ok

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health(services: Services = Depends(get_services)):
    return ok(
        {
            "status": "ok",
            "version": services.config.api.version,
            "llmEnabled": services.assistant.client is not None,
            "timestamp": datetime.now(timezone.utc),
        }
    )
