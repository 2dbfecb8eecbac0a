"""Infrastructure layer - markup scanning, exporters and stores."""

from cabinetry.infrastructure.exporters import (
    AssemblyDefaults,
    AssemblyDocumentGenerator,
    Exporter,
    ExporterRegistry,
)
from cabinetry.infrastructure.formatters import (
    ClassificationFormatter,
    PartListFormatter,
)
from cabinetry.infrastructure.markup_scanner import (
    MarkupRow,
    MarkupTable,
    TabularMarkupScanner,
)
from cabinetry.infrastructure.stores import InMemoryStore, JsonFileStore

__all__ = [
    "AssemblyDefaults",
    "AssemblyDocumentGenerator",
    "ClassificationFormatter",
    "Exporter",
    "ExporterRegistry",
    "InMemoryStore",
    "JsonFileStore",
    "MarkupRow",
    "MarkupTable",
    "PartListFormatter",
    "TabularMarkupScanner",
]
