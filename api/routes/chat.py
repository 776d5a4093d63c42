"""Chat API: the margin assistant conversation."""

from fastapi import APIRouter, Depends, HTTPException, status

from models.api import ChatRequest
from models.query import parse_int

from ..dependencies import Services, get_services
from ..responses import ok, route_errors

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("/message")
@route_errors("Failed to process message")
async def send_message(
    body: ChatRequest | None = None,
    services: Services = Depends(get_services),
):
    if body is None or not body.message or not body.message.strip():
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Message is required")
    return ok(await services.assistant.reply(body.message))


@router.get("/history")
@route_errors("Failed to fetch chat history")
async def get_history(
    limit: str | None = None,
    offset: str | None = None,
    services: Services = Depends(get_services),
):
    result = await services.assistant.history(
        parse_int(limit, services.config.api.default_page_limit),
        parse_int(offset, 0),
    )
    return ok(
        {
            "messages": result.page,
            "total": result.total,
            "limit": result.limit,
            "offset": result.offset,
        }
    )


@router.get("/suggestions")
@route_errors("Failed to fetch suggestions")
async def get_suggested_questions(services: Services = Depends(get_services)):
    return ok(services.assistant.suggested_questions())
