"""Domain entities for catalog records, placed cabinets and export jobs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .value_objects import CabinetType, ProductCategory


@dataclass(frozen=True)
class ProductRecord:
    """A catalog product built from one row of an imported catalog.

    Every field except ``raw_metadata`` is a pure function of the product
    name (classification) or of the numeric dimension cells.

    Attributes:
        link_id: Stable external key used to upsert the record.
        name: Product name as it appears in the catalog.
        category: Top-level category (Base, Wall, Tall, Accessory).
        cabinet_type: Cabinet sub-type.
        default_width: Width in mm, from the catalog or the category default.
        default_depth: Depth in mm.
        default_height: Height in mm.
        door_count: Number of doors.
        drawer_count: Number of drawers.
        is_corner: Name mentions a corner unit.
        is_sink: Name mentions a sink unit.
        is_blind: Name mentions a blind unit.
        spec_group: Product spec group, if the catalog provides one.
        room_component_type: Room component type, if provided.
        raw_metadata: The full original row, column name to cell text.
    """

    link_id: str
    name: str
    category: ProductCategory
    cabinet_type: CabinetType
    default_width: float
    default_depth: float
    default_height: float
    door_count: int = 0
    drawer_count: int = 0
    is_corner: bool = False
    is_sink: bool = False
    is_blind: bool = False
    spec_group: str | None = None
    room_component_type: str | None = None
    raw_metadata: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Product name must not be empty")
        if not self.link_id:
            raise ValueError("Product link id must not be empty")

    def to_store_row(self) -> dict[str, Any]:
        """Convert to the column layout of the catalog products table."""
        return {
            "microvellum_link_id": self.link_id,
            "name": self.name,
            "category": self.category.value,
            "cabinet_type": self.cabinet_type.value,
            "default_width": self.default_width,
            "default_depth": self.default_depth,
            "default_height": self.default_height,
            "door_count": self.door_count,
            "drawer_count": self.drawer_count,
            "is_corner": self.is_corner,
            "is_sink": self.is_sink,
            "is_blind": self.is_blind,
            "spec_group": self.spec_group,
            "room_component_type": self.room_component_type,
            "raw_metadata": dict(self.raw_metadata),
        }


@dataclass(frozen=True)
class CabinetPlacement:
    """A cabinet placed in a room by the layout editor.

    Positions and sizes are millimeters, rotation is degrees.
    """

    cabinet_number: str | None
    definition_id: str
    width: float
    depth: float
    height: float
    x: float = 0
    y: float = 0
    z: float = 0
    rotation: float = 0
    hinge: str | None = None
    end_panel_left: bool = False
    end_panel_right: bool = False
    filler_left: float = 0
    filler_right: float = 0


@dataclass(frozen=True)
class PartSpec:
    """One physical cut part derived from a cabinet's dimensions."""

    name: str
    width: float
    height: float
    thickness: float
    material: str


@dataclass(frozen=True)
class HardwareLineItem:
    """A hardware requirement keyed by SKU."""

    sku: str
    qty: int
    description: str


@dataclass(frozen=True)
class Customer:
    """Customer contact details attached to a job."""

    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    company_name: str | None = None


@dataclass(frozen=True)
class RoomConfig:
    """Room shell dimensions as saved with a design."""

    width: float | None = None
    depth: float | None = None
    height: float | None = None
    shape: str | None = None


@dataclass(frozen=True)
class HardwareOptions:
    """Hardware selections made for a design."""

    hinge_type: str | None = None
    drawer_type: str | None = None
    handle_id: str | None = None
    supply_hardware: bool = True
    adjustable_legs: bool = True


@dataclass(frozen=True)
class FinishSelection:
    """The cabinet finish selected for a design."""

    id: str | None = None
    name: str | None = None
    hex: str | None = None


@dataclass(frozen=True)
class Job:
    """A customer job with its saved room design.

    Attributes:
        job_number: Human-facing job number.
        name: Job name.
        status: Workflow status label.
        delivery_method: Delivery method label.
        cost_excl_tax: Quoted cost excluding tax.
        cost_incl_tax: Quoted cost including tax.
        created_at: Creation timestamp, if known.
        notes: Free-text notes.
        customer: Customer details, if the job has a customer.
        cabinets: Placed cabinets in layout order.
        room: Room shell configuration.
        global_dimensions: Raw globalDimensions block from the design.
        hardware: Hardware selections.
        finish: Selected finish.
    """

    job_number: str
    name: str
    status: str | None = None
    delivery_method: str | None = None
    cost_excl_tax: float | None = None
    cost_incl_tax: float | None = None
    created_at: datetime | None = None
    notes: str | None = None
    customer: Customer | None = None
    cabinets: tuple[CabinetPlacement, ...] = ()
    room: RoomConfig = field(default_factory=RoomConfig)
    global_dimensions: dict[str, Any] = field(default_factory=dict)
    hardware: HardwareOptions = field(default_factory=HardwareOptions)
    finish: FinishSelection = field(default_factory=FinishSelection)
