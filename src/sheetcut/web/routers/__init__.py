"""API routers for the REST API."""

from sheetcut.web.routers.export import router as export_router
from sheetcut.web.routers.optimize import router as optimize_router
from sheetcut.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "optimize_router",
    "validate_router",
]
