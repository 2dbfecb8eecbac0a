"""Normalization of spreadsheet rows for the pricing tables.

Rows arrive keyed by spreadsheet headers ("Item Code", "unitPrice") with
every value as text. They are stored with snake_case columns and typed
values.
"""

from __future__ import annotations

import re
from typing import Any

# Table name -> column used to match existing rows on upsert.
PRICING_TABLES: dict[str, str] = {
    "parts_pricing": "name",
    "hardware_pricing": "item_code",
    "material_pricing": "item_code",
    "edge_pricing": "item_code",
    "door_drawer_pricing": "item_code",
    "stone_pricing": "brand",
    "labor_rates": "name",
}

_NUMERIC = re.compile(r"^-?\d+\.?\d*$")
_WHITESPACE = re.compile(r"\s+")
_UPPER = re.compile(r"([A-Z])")
_REPEATED_UNDERSCORE = re.compile(r"__+")


def to_snake_case(key: str) -> str:
    """Convert a header to a column name: ``"Item Code"`` -> ``"item_code"``."""
    key = _WHITESPACE.sub("_", key)
    key = _UPPER.sub(r"_\1", key).lower()
    if key.startswith("_"):
        key = key[1:]
    return _REPEATED_UNDERSCORE.sub("_", key)


def coerce_value(value: Any) -> Any:
    """Type a cell value.

    Numeric text becomes a float, empty text becomes None and
    ``"true"``/``"false"`` (any case) become booleans. Anything else is
    passed through.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        if _NUMERIC.match(value):
            return float(value)
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
    return value


def normalize_pricing_record(record: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``record`` with snake_case keys and typed values."""
    return {to_snake_case(key): coerce_value(value) for key, value in record.items()}
