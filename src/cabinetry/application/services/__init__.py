"""Application services composing domain logic for the commands."""

from cabinetry.application.services.catalog_builder import (
    CatalogRecordBuilder,
    parse_decimal,
)
from cabinetry.application.services.job_adapter import job_from_record
from cabinetry.application.services.pricing_normalizer import (
    PRICING_TABLES,
    normalize_pricing_record,
    to_snake_case,
)

__all__ = [
    "CatalogRecordBuilder",
    "PRICING_TABLES",
    "job_from_record",
    "normalize_pricing_record",
    "parse_decimal",
    "to_snake_case",
]
