"""Domain layer - catalog classification and cabinet geometry."""

from .entities import (
    CabinetPlacement,
    Customer,
    FinishSelection,
    HardwareLineItem,
    HardwareOptions,
    Job,
    PartSpec,
    ProductRecord,
    RoomConfig,
)
from .services import (
    HardwareAggregator,
    PartDeriver,
    classify_for_catalog,
    classify_for_export,
    derive_parts,
)
from .value_objects import (
    AssemblyDefaults,
    CabinetType,
    ConstructionConstants,
    Dimensions,
    DoorDrawerCounts,
    ProductCategory,
)

__all__ = [
    "AssemblyDefaults",
    "CabinetPlacement",
    "CabinetType",
    "ConstructionConstants",
    "Customer",
    "Dimensions",
    "DoorDrawerCounts",
    "FinishSelection",
    "HardwareAggregator",
    "HardwareLineItem",
    "HardwareOptions",
    "Job",
    "PartDeriver",
    "PartSpec",
    "ProductCategory",
    "ProductRecord",
    "RoomConfig",
    "classify_for_catalog",
    "classify_for_export",
    "derive_parts",
]
