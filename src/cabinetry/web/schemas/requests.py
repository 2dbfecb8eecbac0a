"""Pydantic request schemas for the REST API.

Field names follow the browser client's camelCase payloads through
aliases; Python code uses the snake_case attribute names.

Values the commands check themselves are typed ``Any`` so a bad value
reaches the command and gets its own message instead of a schema
rejection.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cabinetry.application.dtos import PriceChange


class CatalogImportRequest(BaseModel):
    """Request for importing a catalog export."""

    model_config = ConfigDict(populate_by_name=True)

    xml_content: Any = Field(
        default=None,
        alias="xmlContent",
        description="Spreadsheet 2003 XML catalog document",
    )


class AssemblyExportRequest(BaseModel):
    """Request for exporting a job as an assembly document."""

    model_config = ConfigDict(populate_by_name=True)

    job_id: Any = Field(
        default=None, alias="jobId", description="Identifier of the job to export"
    )


class PriceChangeSchema(BaseModel):
    """One product price change."""

    model_config = ConfigDict(populate_by_name=True)

    sku: Any = Field(default=None, description="Product SKU")
    old_price: Any = Field(
        default=None, alias="oldPrice", description="Price shown to the editor"
    )
    new_price: Any = Field(default=None, alias="newPrice", description="Price to apply")

    def to_dto(self) -> PriceChange:
        return PriceChange(sku=self.sku, old_price=self.old_price, new_price=self.new_price)


class PriceChangesRequest(BaseModel):
    """Request for applying a batch of price changes."""

    changes: list[PriceChangeSchema] = Field(
        default_factory=list, description="Price changes to apply"
    )


class PricingTableImportRequest(BaseModel):
    """Request for importing spreadsheet rows into a pricing table."""

    table: str = Field(..., description="Target pricing table")
    records: list[dict[str, Any]] = Field(
        default_factory=list, description="Rows keyed by spreadsheet header"
    )
