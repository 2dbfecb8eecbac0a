"""Exporter framework for job outputs.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery

Registered exporters:
- microvellum: Assembly markup document (cut-list and hardware) for CAM import

Usage:
    from cabinetry.infrastructure.exporters import ExporterRegistry

    generator_cls = ExporterRegistry.get("microvellum")
    xml = generator_cls().export_string(job)
"""

from cabinetry.infrastructure.exporters.base import Exporter, ExporterRegistry

# Import exporters to trigger registration
from cabinetry.infrastructure.exporters.assembly_xml import (
    AssemblyDefaults,
    AssemblyDocumentGenerator,
    escape_markup,
    format_number,
    round_position,
)

__all__ = [
    "AssemblyDefaults",
    "AssemblyDocumentGenerator",
    "Exporter",
    "ExporterRegistry",
    "escape_markup",
    "format_number",
    "round_position",
]
