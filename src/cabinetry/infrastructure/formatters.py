"""Plain-text output formatters for the CLI."""

from __future__ import annotations

from cabinetry.domain.entities import PartSpec
from cabinetry.domain.services.classifier import CatalogClassification


def _mm(value: float) -> str:
    return f"{value:g}"


class PartListFormatter:
    """Formats derived cabinet parts as a cut list table."""

    def format(self, parts: list[PartSpec]) -> str:
        """Format parts as a table, in derivation order."""
        if not parts:
            return "No parts derived."

        lines = [
            "CUT LIST",
            "=" * 78,
            f"{'Part':<14} {'Width':<10} {'Height':<10} {'Thick':<7} {'Material'}",
            "-" * 78,
        ]
        total_area = 0.0
        for part in parts:
            lines.append(
                f"{part.name:<14} {_mm(part.width):<10} {_mm(part.height):<10} "
                f"{_mm(part.thickness):<7} {part.material}"
            )
            total_area += part.width * part.height

        lines.append("-" * 78)
        lines.append(f"{'TOTAL':<14} {len(parts)} parts, {total_area / 1_000_000:.3f} m2")
        return "\n".join(lines)


class ClassificationFormatter:
    """Formats a catalog classification as labelled lines."""

    def format(self, name: str, classification: CatalogClassification) -> str:
        dims = classification.dimensions
        flags = [
            label
            for label, on in (
                ("corner", classification.is_corner),
                ("sink", classification.is_sink),
                ("blind", classification.is_blind),
            )
            if on
        ]
        lines = [
            f"Name:       {name}",
            f"Category:   {classification.category.value}",
            f"Type:       {classification.cabinet_type.value}",
            f"Doors:      {classification.counts.doors}",
            f"Drawers:    {classification.counts.drawers}",
            f"Default:    {_mm(dims.width)} x {_mm(dims.depth)} x {_mm(dims.height)} mm",
            f"Flags:      {', '.join(flags) if flags else '-'}",
        ]
        return "\n".join(lines)
