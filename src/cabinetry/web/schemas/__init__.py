"""Pydantic schemas for the REST API."""

from cabinetry.web.schemas.requests import (
    AssemblyExportRequest,
    CatalogImportRequest,
    PriceChangeSchema,
    PriceChangesRequest,
    PricingTableImportRequest,
)
from cabinetry.web.schemas.responses import (
    AssemblyExportResponse,
    CatalogImportResponse,
    ERROR_RESPONSES,
    ErrorResponseSchema,
    ExportFormatsSchema,
    PriceUpdateResponse,
    PricingImportResponse,
)

__all__ = [
    # Requests
    "AssemblyExportRequest",
    "CatalogImportRequest",
    "PriceChangeSchema",
    "PriceChangesRequest",
    "PricingTableImportRequest",
    # Responses
    "AssemblyExportResponse",
    "CatalogImportResponse",
    "ERROR_RESPONSES",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "PriceUpdateResponse",
    "PricingImportResponse",
]
