"""Pure domain services: classification, part derivation, hardware counting."""

from .classifier import (
    CABINET_TYPE_RULES,
    CATEGORY_RULES,
    CatalogClassification,
    classify_cabinet_type,
    classify_category,
    classify_for_catalog,
    classify_for_export,
    default_dimensions,
    extract_counts,
)
from .hardware_aggregator import HardwareAggregator
from .part_deriver import PartDeriver, derive_parts

__all__ = [
    "CABINET_TYPE_RULES",
    "CATEGORY_RULES",
    "CatalogClassification",
    "HardwareAggregator",
    "PartDeriver",
    "classify_cabinet_type",
    "classify_category",
    "classify_for_catalog",
    "classify_for_export",
    "default_dimensions",
    "derive_parts",
    "extract_counts",
]
