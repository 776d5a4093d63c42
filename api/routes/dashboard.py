"""Dashboard API: the combined overview plus its individual panels."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from models.query import ProductQuery
from utils.kpi import top_issues
from utils.query import query_products

from ..dependencies import Services, get_services
from ..responses import ok, route_errors
from .products import product_page

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("")
@route_errors("Failed to fetch dashboard data")
async def get_dashboard(services: Services = Depends(get_services)):
    products = await services.products.snapshot()
    return ok(
        {
            "kpis": await services.kpis.metrics(),
            "products": products,
            "topIssues": top_issues(products),
            "recentAnalyses": await services.feed.recent_analyses(),
            "lastUpdated": datetime.now(timezone.utc),
        }
    )


@router.get("/kpis")
@route_errors("Failed to fetch KPI data")
async def get_dashboard_kpis(services: Services = Depends(get_services)):
    return ok(await services.kpis.metrics())


@router.get("/products")
@route_errors("Failed to fetch product data")
async def get_dashboard_products(request: Request, services: Services = Depends(get_services)):
    query = ProductQuery.from_query_params(
        request.query_params, services.config.api.default_page_limit
    )
    return ok(product_page(query_products(await services.products.snapshot(), query)))


@router.get("/alerts")
@route_errors("Failed to fetch alerts")
async def get_alerts(services: Services = Depends(get_services)):
    return ok(await services.feed.alerts())
