"""Suggestions API: listing, review workflow (approve/reject) and generation."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from connectors.suggestion_store import SuggestionNotFound, SuggestionNotPending
from models.api import ApproveSuggestionRequest, GenerateRequest, RejectSuggestionRequest
from models.query import parse_int
from utils.kpi import suggestion_stats
from utils.query import paginate

from ..dependencies import Services, get_services
from ..responses import ok, route_errors

router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])

NOT_FOUND = "Suggestion not found"
NOT_PENDING = "Suggestion is not pending approval"


@router.get("")
@route_errors("Failed to fetch suggestions")
async def list_suggestions(
    status_filter: str | None = Query(None, alias="status"),
    suggestion_type: str | None = Query(None, alias="type"),
    product_id: str | None = Query(None, alias="productId"),
    limit: str | None = None,
    offset: str | None = None,
    services: Services = Depends(get_services),
):
    matches = await services.suggestions.search(
        status=status_filter, suggestion_type=suggestion_type, product_id=product_id
    )
    result = paginate(
        matches,
        parse_int(limit, services.config.api.default_page_limit),
        parse_int(offset, 0),
    )
    return ok(
        {
            "suggestions": result.page,
            "total": result.total,
            "limit": result.limit,
            "offset": result.offset,
        }
    )


@router.get("/stats")
@route_errors("Failed to fetch suggestion statistics")
async def get_suggestion_stats(services: Services = Depends(get_services)):
    return ok(suggestion_stats(await services.suggestions.search()))


@router.post("/generate")
@route_errors("Failed to generate suggestions")
async def generate_suggestions(
    body: GenerateRequest | None = None,
    services: Services = Depends(get_services),
):
    if body is None or not body.product_id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Product ID is required")
    generated = await services.analyst.generate_suggestions(body.product_id)
    if generated is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found")
    return ok(await services.suggestions.add(generated))


@router.get("/{suggestion_id}")
@route_errors("Failed to fetch suggestion")
async def get_suggestion(suggestion_id: str, services: Services = Depends(get_services)):
    suggestion = await services.suggestions.get(suggestion_id)
    if suggestion is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    return ok(suggestion)


@router.put("/{suggestion_id}/approve")
@route_errors("Failed to approve suggestion")
async def approve_suggestion(
    suggestion_id: str,
    body: ApproveSuggestionRequest | None = None,
    services: Services = Depends(get_services),
):
    notes = body.notes if body is not None else None
    try:
        return ok(await services.suggestions.approve(suggestion_id, notes))
    except SuggestionNotFound:
        raise HTTPException(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except SuggestionNotPending:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, NOT_PENDING)


@router.put("/{suggestion_id}/reject")
@route_errors("Failed to reject suggestion")
async def reject_suggestion(
    suggestion_id: str,
    body: RejectSuggestionRequest | None = None,
    services: Services = Depends(get_services),
):
    if body is None or not body.reason:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Rejection reason is required")
    try:
        return ok(await services.suggestions.reject(suggestion_id, body.reason))
    except SuggestionNotFound:
        raise HTTPException(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    except SuggestionNotPending:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, NOT_PENDING)
