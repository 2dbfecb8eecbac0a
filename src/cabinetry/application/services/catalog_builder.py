"""Catalog record building from scanned markup rows.

Turns header-keyed rows into ``ProductRecord`` values: classification
comes from the product name, dimensions from the numeric cells with a
per-category fallback. Rows without a name or link id are dropped.
"""

from __future__ import annotations

import logging
import re
from collections import Counter

from cabinetry.application.config.schema import CatalogConfig
from cabinetry.application.errors import RecordValidationError
from cabinetry.domain.entities import ProductRecord
from cabinetry.domain.services.classifier import classify_for_catalog

logger = logging.getLogger(__name__)

# Leading decimal number of a cell, e.g. "600", " 575.5mm", "-3", ".5", "1e3".
_DECIMAL_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_decimal(text: str | None) -> float:
    """Parse the leading decimal number of a cell; 0 if there is none."""
    if not text:
        return 0.0
    match = _DECIMAL_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(0))


class CatalogRecordBuilder:
    """Builds product records from catalog rows.

    Attributes:
        columns: Column names to read from each row.
    """

    def __init__(self, columns: CatalogConfig | None = None) -> None:
        self.columns = columns or CatalogConfig()

    def build_record(self, row: dict[str, str]) -> ProductRecord:
        """Build one product record.

        Raises:
            RecordValidationError: If the row has no name or no link id.
        """
        cols = self.columns
        name = row.get(cols.name_column) or ""
        link_id = next((row[c] for c in cols.link_id_columns if row.get(c)), "")
        if not name or not link_id:
            raise RecordValidationError(
                "Row is missing a product name or link id", row=row
            )

        classification = classify_for_catalog(name)
        defaults = classification.dimensions
        width = parse_decimal(row.get(cols.width_column))
        depth = parse_decimal(row.get(cols.depth_column))
        height = parse_decimal(row.get(cols.height_column))

        return ProductRecord(
            link_id=link_id,
            name=name,
            category=classification.category,
            cabinet_type=classification.cabinet_type,
            default_width=width if width > 0 else defaults.width,
            default_depth=depth if depth > 0 else defaults.depth,
            default_height=height if height > 0 else defaults.height,
            door_count=classification.counts.doors,
            drawer_count=classification.counts.drawers,
            is_corner=classification.is_corner,
            is_sink=classification.is_sink,
            is_blind=classification.is_blind,
            spec_group=row.get(cols.spec_group_column) or None,
            room_component_type=row.get(cols.room_component_column) or None,
            raw_metadata=dict(row),
        )

    def build(self, rows: list[dict[str, str]]) -> tuple[list[ProductRecord], int]:
        """Build records for every valid row.

        Returns:
            The records in row order and the number of rows dropped.
        """
        records: list[ProductRecord] = []
        dropped = 0
        for index, row in enumerate(rows):
            try:
                records.append(self.build_record(row))
            except RecordValidationError as e:
                dropped += 1
                logger.debug(f"Dropping catalog row {index}: {e.message}")
        logger.info(f"Transformed {len(records)} valid products ({dropped} dropped)")
        return records, dropped

    @staticmethod
    def tally(records: list[ProductRecord]) -> dict[str, int]:
        """Count records per category, in order of first appearance."""
        return dict(Counter(record.category.value for record in records))
