"""Analysis API: per-product margin analysis and margin trends."""

from fastapi import APIRouter, Depends, HTTPException, status

from models.api import GenerateRequest

from ..dependencies import Services, get_services
from ..responses import ok, route_errors

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


@router.get("/trends")
@route_errors("Failed to fetch trends analysis")
async def get_margin_trends(
    category: str | None = None,
    region: str | None = None,
    timeframe: str = "30d",
    services: Services = Depends(get_services),
):
    return ok(services.analyst.trends(category=category, region=region, timeframe=timeframe))


@router.post("/generate")
@route_errors("Failed to generate analysis")
async def generate_analysis(
    body: GenerateRequest | None = None,
    services: Services = Depends(get_services),
):
    if body is None or not body.product_id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Product ID is required")
    analysis = await services.analyst.analyze(body.product_id, body.analysis_type)
    if analysis is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found")
    return ok(analysis)


@router.get("/{product_id}")
@route_errors("Failed to generate analysis")
async def get_analysis(product_id: str, services: Services = Depends(get_services)):
    analysis = await services.analyst.analyze(product_id)
    if analysis is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found")
    return ok(analysis)
