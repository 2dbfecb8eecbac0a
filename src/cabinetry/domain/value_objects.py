"""Value objects for the cabinetry interchange domain."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

DEFAULT_PART_MATERIAL = "18mm White Melamine"
DEFAULT_BACKING_MATERIAL = "3mm White Backing"


class ProductCategory(str, Enum):
    """Top-level catalog category of a cabinet product."""

    BASE = "Base"
    WALL = "Wall"
    TALL = "Tall"
    ACCESSORY = "Accessory"


class CabinetType(str, Enum):
    """Cabinet sub-type derived from the product name.

    Attributes:
        STANDARD: Plain doored carcass, the fallback type.
        DRAWER: Drawer bank.
        CORNER: Corner carcass.
        SINK: Sink base.
        BLIND: Blind corner.
        APPLIANCE: Appliance housing (ovens, integrated appliances).
        PANTRY: Pantry unit.
        RANGEHOOD: Rangehood housing.
    """

    STANDARD = "Standard"
    DRAWER = "Drawer"
    CORNER = "Corner"
    SINK = "Sink"
    BLIND = "Blind"
    APPLIANCE = "Appliance"
    PANTRY = "Pantry"
    RANGEHOOD = "Rangehood"


@dataclass(frozen=True)
class DoorDrawerCounts:
    """Number of doors and drawers read from a product name."""

    doors: int = 0
    drawers: int = 0

    def __post_init__(self) -> None:
        if self.doors < 0 or self.drawers < 0:
            raise ValueError("Door and drawer counts must be non-negative")


@dataclass(frozen=True)
class Dimensions:
    """Cabinet dimensions in millimeters."""

    width: float
    depth: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.depth < 0 or self.height < 0:
            raise ValueError("Dimensions must be non-negative")


# Design-data keys (camelCase, as persisted by the layout editor) for each
# constant that a room's globalDimensions block may override.
_DESIGN_KEYS: dict[str, str] = {
    "toe_kick_height": "toeKickHeight",
    "base_height": "baseHeight",
    "base_depth": "baseDepth",
    "wall_height": "wallHeight",
    "wall_depth": "wallDepth",
    "tall_height": "tallHeight",
    "tall_depth": "tallDepth",
    "benchtop_thickness": "benchtopThickness",
    "benchtop_overhang": "benchtopOverhang",
    "splashback_height": "splashbackHeight",
    "door_gap": "doorGap",
    "shelf_setback": "shelfSetback",
}


@dataclass(frozen=True)
class ConstructionConstants:
    """Global construction constants driving all derived geometry.

    All values are millimeters and must be non-negative. Board and back
    panel thickness are carcass material properties and are not taken
    from room design data.
    """

    toe_kick_height: float = 135
    base_height: float = 730
    base_depth: float = 575
    wall_height: float = 720
    wall_depth: float = 350
    tall_height: float = 2100
    tall_depth: float = 580
    benchtop_thickness: float = 33
    benchtop_overhang: float = 25
    splashback_height: float = 600
    door_gap: float = 2
    shelf_setback: float = 5
    board_thickness: float = 18
    back_panel_thickness: float = 3

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must be non-negative")

    @property
    def wall_cabinet_offset(self) -> float:
        """Height of the underside of wall cabinets above the floor."""
        return (
            self.toe_kick_height
            + self.base_height
            + self.benchtop_thickness
            + self.splashback_height
        )

    def with_design_overrides(self, design: Mapping[str, Any] | None) -> ConstructionConstants:
        """Return a copy with values from a room's globalDimensions block.

        Missing, null, non-positive or non-numeric entries keep the current
        value.
        """
        if not design:
            return self
        overrides: dict[str, float] = {}
        for attr, key in _DESIGN_KEYS.items():
            value = design.get(key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                continue
            if value > 0:
                overrides[attr] = value
        if not overrides:
            return self
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(overrides)
        return ConstructionConstants(**values)


@dataclass(frozen=True)
class AssemblyDefaults:
    """Fallback labels and sizes used when a job leaves a field unset."""

    customer_name: str = "Unknown"
    finish_name: str = "Designer White"
    finish_hex: str = "#fcfcfc"
    part_material: str = DEFAULT_PART_MATERIAL
    backing_material: str = DEFAULT_BACKING_MATERIAL
    hinge_type: str = "Blum Inserta Soft Close"
    drawer_type: str = "Hafele Alto Slim"
    handle_id: str = "handle-bar-ss"
    cabinet_handle: str = "Bar Handle"
    hinge_side: str = "Left"
    room_width: float = 4000
    room_depth: float = 3000
    room_height: float = 2400
    room_shape: str = "Rectangle"
