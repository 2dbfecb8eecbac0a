"""FastAPI REST API for the cabinetry interchange engine.

Exposes catalog import, assembly document export and the pricing
endpoints used by the admin screens.

Usage:
    uvicorn cabinetry.web:app --reload
"""

from cabinetry.web.app import app, create_app

__all__ = ["app", "create_app"]
