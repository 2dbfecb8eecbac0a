"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CatalogImportResponse(BaseModel):
    """Response for a catalog import."""

    success: bool = Field(default=True, description="Whether the import succeeded")
    imported: int = Field(..., description="Number of products written")
    category_counts: dict[str, int] = Field(
        default_factory=dict,
        serialization_alias="categoryCounts",
        description="Products per category",
    )
    message: str = Field(..., description="Summary message")


class AssemblyExportResponse(BaseModel):
    """Response carrying a generated assembly document."""

    xml: str = Field(..., description="Assembly XML document")
    filename: str = Field(..., description="Suggested file name, without extension")


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class PriceUpdateResponse(BaseModel):
    """Response for a batch of price changes."""

    updated: int = Field(..., description="Changes applied")
    failed: int = Field(..., description="Changes rejected")
    errors: list[str] = Field(default_factory=list, description="One message per failure")


class PricingImportResponse(BaseModel):
    """Response for a pricing table import."""

    success: bool = Field(default=True, description="Whether the request completed")
    inserted: int = Field(..., description="Rows written")
    updated: int = Field(default=0, description="Rows reported as updated")
    errors: list[str] = Field(default_factory=list, description="Failed batch messages")
    total: int = Field(..., description="Rows received")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    success: bool = Field(default=False, description="Always false")
    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )


# OpenAPI documentation for the error payload shared by every router.
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponseSchema, "description": "Missing or invalid input"},
    401: {"model": ErrorResponseSchema, "description": "Missing or invalid token"},
    403: {"model": ErrorResponseSchema, "description": "Admin access required"},
    500: {"model": ErrorResponseSchema, "description": "Store failure"},
}
