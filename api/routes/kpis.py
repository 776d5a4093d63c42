"""KPI API: metrics, summary, trends, ad-hoc calculation and target updates."""

from fastapi import APIRouter, Depends, HTTPException, status

from models.api import KPICalculationRequest, KPITargetUpdate
from utils.kpi import calculate_kpis, kpi_summary

from ..dependencies import Services, get_services
from ..responses import ok, route_errors

router = APIRouter(prefix="/api/kpis", tags=["kpis"])


@router.get("")
@route_errors("Failed to fetch KPIs")
async def list_kpis(
    category: str | None = None,
    timeframe: str = "current",
    services: Services = Depends(get_services),
):
    return ok(await services.kpis.metrics(name_contains=category))


@router.get("/summary")
@route_errors("Failed to fetch KPI summary")
async def get_kpi_summary(services: Services = Depends(get_services)):
    return ok(kpi_summary(await services.kpis.metrics()))


@router.get("/trends")
@route_errors("Failed to fetch KPI trends")
async def get_kpi_trends(
    timeframe: str = "30d",
    kpi: str | None = None,
    services: Services = Depends(get_services),
):
    if kpi:
        trends = await services.kpis.trend_series(kpi)
    else:
        trends = await services.kpis.trends()
    return ok({"timeframe": timeframe, "trends": trends})


@router.post("/calculate")
@route_errors("Failed to calculate KPIs")
async def calculate(
    body: KPICalculationRequest | None = None,
    services: Services = Depends(get_services),
):
    if body is None or body.products is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Products array is required")
    return ok(calculate_kpis([p.margin for p in body.products]))


@router.get("/{name}")
@route_errors("Failed to fetch KPI")
async def get_kpi(name: str, services: Services = Depends(get_services)):
    kpi = await services.kpis.get(name)
    if kpi is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "KPI not found")
    return ok(kpi)


@router.put("/{name}")
@route_errors("Failed to update KPI")
async def update_kpi_target(
    name: str,
    body: KPITargetUpdate | None = None,
    services: Services = Depends(get_services),
):
    if await services.kpis.get(name) is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "KPI not found")
    if body is None or body.target is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Target value is required")
    return ok(await services.kpis.update_target(name, body.target))
