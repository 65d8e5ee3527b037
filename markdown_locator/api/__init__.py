"""API endpoints for the markdown locator."""

from .search import router as search_router
from .files import router as files_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "files_router",
    "health_router",
    "metrics_router",
]
