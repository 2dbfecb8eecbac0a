"""Product classification from free-text product names.

Two classifiers live here and are deliberately kept apart:

- ``classify_for_catalog`` maps a catalog product name onto the full
  taxonomy (category, cabinet type, door/drawer counts, default size).
  It runs when a manufacturer catalog is imported.
- ``classify_for_export`` maps a placed cabinet's definition identifier
  onto a coarse category using identifier prefixes. It runs when an
  assembly document is generated and only feeds part derivation.

The two heuristics overlap in purpose but not in rules. Unifying them
would change the output of one of the two pipelines.

Catalog rules are ordered tuples evaluated first-match-wins against the
lower-cased name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from cabinetry.domain.value_objects import (
    CabinetType,
    Dimensions,
    DoorDrawerCounts,
    ProductCategory,
)

CATEGORY_RULES: tuple[tuple[ProductCategory, tuple[str, ...]], ...] = (
    (ProductCategory.TALL, ("tall", "pantry", "oven tower", "broom")),
    (ProductCategory.WALL, ("upper", "wall", "rangehood", "microwave")),
    (
        ProductCategory.ACCESSORY,
        ("panel", "filler", "spacer", "kick", "scribe", "moulding"),
    ),
)

CABINET_TYPE_RULES: tuple[tuple[CabinetType, tuple[str, ...]], ...] = (
    (CabinetType.DRAWER, ("drawer",)),
    (CabinetType.CORNER, ("corner",)),
    (CabinetType.SINK, ("sink",)),
    (CabinetType.BLIND, ("blind",)),
    (CabinetType.APPLIANCE, ("appliance", "oven")),
    (CabinetType.PANTRY, ("pantry",)),
    (CabinetType.RANGEHOOD, ("rangehood",)),
)

# Default (width, depth, height) in mm per category.
DEFAULT_DIMENSIONS: dict[ProductCategory, tuple[float, float, float]] = {
    ProductCategory.BASE: (600, 575, 870),
    ProductCategory.WALL: (600, 350, 720),
    ProductCategory.TALL: (600, 580, 2100),
    ProductCategory.ACCESSORY: (50, 580, 870),
}
CORNER_BASE_WIDTH = 900

_DRAWER_COUNT = re.compile(r"(\d+)\s*drawer")
_DOOR_COUNT = re.compile(r"(\d+)\s*door")


@dataclass(frozen=True)
class CatalogClassification:
    """Everything the catalog classifier derives from a product name."""

    category: ProductCategory
    cabinet_type: CabinetType
    counts: DoorDrawerCounts
    dimensions: Dimensions
    is_corner: bool
    is_sink: bool
    is_blind: bool


def classify_category(name: str) -> ProductCategory:
    """Return the catalog category for a product name (Base if no rule matches)."""
    lower = name.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in lower for keyword in keywords):
            return category
    return ProductCategory.BASE


def classify_cabinet_type(name: str) -> CabinetType:
    """Return the cabinet sub-type for a product name (Standard if no rule matches)."""
    lower = name.lower()
    for cabinet_type, keywords in CABINET_TYPE_RULES:
        if any(keyword in lower for keyword in keywords):
            return cabinet_type
    return CabinetType.STANDARD


def extract_counts(name: str) -> DoorDrawerCounts:
    """Read door and drawer counts from a product name.

    Digit-prefixed matches ("2 Drawer", "3door") win. A bare "drawer"
    means one drawer. With no counted match and no drawer at all, a name
    that mentions a door, or classifies as Standard, gets one door, or two
    when the name says "double".

    Examples:
        >>> extract_counts("2 Drawer Base")
        DoorDrawerCounts(doors=0, drawers=2)
        >>> extract_counts("Double Door Pantry")
        DoorDrawerCounts(doors=2, drawers=0)
    """
    lower = name.lower()
    drawer_match = _DRAWER_COUNT.search(lower)
    door_match = _DOOR_COUNT.search(lower)

    drawers = int(drawer_match.group(1)) if drawer_match else 0
    doors = int(door_match.group(1)) if door_match else 0

    if not drawer_match and "drawer" in lower:
        drawers = 1
    if not door_match and not drawer_match and "drawer" not in lower:
        if "door" in lower or classify_cabinet_type(name) == CabinetType.STANDARD:
            doors = 2 if "double" in lower else 1

    return DoorDrawerCounts(doors=doors, drawers=drawers)


def default_dimensions(category: ProductCategory | str, name: str) -> Dimensions:
    """Return the fallback size for a category.

    Unknown categories use the Base table. Base corner units are wider.
    """
    try:
        category = ProductCategory(category)
    except ValueError:
        category = ProductCategory.BASE
    width, depth, height = DEFAULT_DIMENSIONS[category]
    if category == ProductCategory.BASE and "corner" in name.lower():
        width = CORNER_BASE_WIDTH
    return Dimensions(width=width, depth=depth, height=height)


def classify_for_catalog(name: str) -> CatalogClassification:
    """Classify a catalog product name onto the full taxonomy."""
    lower = name.lower()
    category = classify_category(name)
    return CatalogClassification(
        category=category,
        cabinet_type=classify_cabinet_type(name),
        counts=extract_counts(name),
        dimensions=default_dimensions(category, name),
        is_corner="corner" in lower,
        is_sink="sink" in lower,
        is_blind="blind" in lower,
    )


def classify_for_export(definition_id: str | None) -> ProductCategory:
    """Coarse category of a placed cabinet from its definition identifier.

    "wall-" means Wall, "tall-" means Tall, anything else is Base. Never
    returns Accessory.
    """
    if definition_id and "wall-" in definition_id:
        return ProductCategory.WALL
    if definition_id and "tall-" in definition_id:
        return ProductCategory.TALL
    return ProductCategory.BASE
