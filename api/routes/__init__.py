"""HTTP routers, one per dashboard resource."""

from .analysis import router as analysis_router
from .chat import router as chat_router
from .dashboard import router as dashboard_router
from .health import router as health_router
from .kpis import router as kpis_router
from .products import router as products_router
from .suggestions import router as suggestions_router

ROUTERS = (
    health_router,
    products_router,
    dashboard_router,
    kpis_router,
    suggestions_router,
    analysis_router,
    chat_router,
)
