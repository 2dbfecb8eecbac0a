"""Application layer - use cases and orchestration."""

from .errors import (
    AuthorizationError,
    InputError,
    InterchangeError,
    RecordValidationError,
    StoreError,
)
from .dtos import (
    ExportResult,
    ImportResult,
    PriceChange,
    PriceUpdateResult,
    PricingImportResult,
)
from .commands import (
    ExportJobCommand,
    ImportCatalogCommand,
    ImportPricingTableCommand,
    UpdatePricesCommand,
)

__all__ = [
    "AuthorizationError",
    "ExportJobCommand",
    "ExportResult",
    "ImportCatalogCommand",
    "ImportPricingTableCommand",
    "ImportResult",
    "InputError",
    "InterchangeError",
    "PriceChange",
    "PriceUpdateResult",
    "PricingImportResult",
    "RecordValidationError",
    "StoreError",
    "UpdatePricesCommand",
]
