"""API routers for the REST API."""

from cabinetry.web.routers.catalog import router as catalog_router
from cabinetry.web.routers.export import router as export_router
from cabinetry.web.routers.pricing import router as pricing_router

__all__ = [
    "catalog_router",
    "export_router",
    "pricing_router",
]
