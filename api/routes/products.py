"""Products API: catalog listing, lookups, statistics, export and updates."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response
from pydantic import ValidationError

from models.product import ProductUpdate
from models.query import ProductQuery, QueryResult
from utils.export import products_to_csv
from utils.kpi import product_stats
from utils.query import query_products

from ..dependencies import Services, get_services
from ..responses import ok, route_errors

router = APIRouter(prefix="/api/products", tags=["products"])


def product_page(result: QueryResult) -> dict:
    return {
        "products": result.page,
        "total": result.total,
        "limit": result.limit,
        "offset": result.offset,
    }


@router.get("")
@route_errors("Failed to fetch products")
async def list_products(request: Request, services: Services = Depends(get_services)):
    query = ProductQuery.from_query_params(
        request.query_params, services.config.api.default_page_limit
    )
    result = query_products(await services.products.snapshot(), query)
    return ok(product_page(result))


# Static sub-paths must be registered before /{product_id}.


@router.get("/categories")
@route_errors("Failed to fetch categories")
async def list_categories(services: Services = Depends(get_services)):
    return ok(await services.products.categories())


@router.get("/regions")
@route_errors("Failed to fetch regions")
async def list_regions(services: Services = Depends(get_services)):
    return ok(await services.products.regions())


@router.get("/suppliers")
@route_errors("Failed to fetch suppliers")
async def list_suppliers(services: Services = Depends(get_services)):
    return ok(await services.products.suppliers())


@router.get("/stats")
@route_errors("Failed to fetch product statistics")
async def get_product_stats(services: Services = Depends(get_services)):
    return ok(product_stats(await services.products.snapshot()))


@router.get("/export")
@route_errors("Failed to export products")
async def export_products(request: Request, services: Services = Depends(get_services)):
    """CSV of the filtered, sorted catalog. Unpaginated unless ``limit`` is given."""
    snapshot = await services.products.snapshot()
    query = ProductQuery.from_query_params(request.query_params, default_limit=len(snapshot))
    result = query_products(snapshot, query)
    return Response(
        content=products_to_csv(result.page),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="margin_report.csv"'},
    )


@router.get("/{product_id}")
@route_errors("Failed to fetch product")
async def get_product(product_id: str, services: Services = Depends(get_services)):
    product = await services.products.get(product_id)
    if product is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found")
    return ok(product)


@router.put("/{product_id}")
@route_errors("Failed to update product")
async def update_product(
    product_id: str,
    body: ProductUpdate | None = None,
    services: Services = Depends(get_services),
):
    changes = body.changes() if body is not None else {}
    try:
        updated = await services.products.update(product_id, changes)
    except ValidationError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Invalid product update: {exc.errors()[0]['msg']}")
    if updated is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found")
    return ok(updated)
