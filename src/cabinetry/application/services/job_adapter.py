"""Adapter from stored job records to domain objects.

The job store returns the job row joined with its customer profile
(under ``profiles``). The room design is a JSON document saved by the
layout editor under ``design_data`` with camelCase keys.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from cabinetry.domain.entities import (
    CabinetPlacement,
    Customer,
    FinishSelection,
    HardwareOptions,
    Job,
    RoomConfig,
)

logger = logging.getLogger(__name__)

CABINET_ITEM_TYPE = "Cabinet"

# Accepts store timestamps with any number of fraction digits and a "Z" suffix.
_TIMESTAMP = TypeAdapter(datetime)


def _number(value: Any, default: float = 0) -> float:
    """Numeric design value, or ``default`` for anything non-numeric."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


def _optional_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _parse_timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return _TIMESTAMP.validate_python(str(value))
    except ValidationError:
        logger.warning(f"Ignoring unparsable job timestamp: {value!r}")
        return None


def cabinet_from_item(item: dict[str, Any]) -> CabinetPlacement:
    """Build a placement from one design item."""
    return CabinetPlacement(
        cabinet_number=_text(item.get("cabinetNumber")),
        definition_id=str(item.get("definitionId") or ""),
        width=_number(item.get("width")),
        depth=_number(item.get("depth")),
        height=_number(item.get("height")),
        x=_number(item.get("x")),
        y=_number(item.get("y")),
        z=_number(item.get("z")),
        rotation=_number(item.get("rotation")),
        hinge=_text(item.get("hinge")),
        end_panel_left=bool(item.get("endPanelLeft")),
        end_panel_right=bool(item.get("endPanelRight")),
        filler_left=_number(item.get("fillerLeft")),
        filler_right=_number(item.get("fillerRight")),
    )


def job_from_record(record: dict[str, Any]) -> Job:
    """Convert a joined job record into a ``Job``.

    Only design items with ``itemType == "Cabinet"`` become placements;
    appliances and structures are ignored.
    """
    design = record.get("design_data") or {}
    items = design.get("items") or []
    cabinets = tuple(
        cabinet_from_item(item)
        for item in items
        if isinstance(item, dict) and item.get("itemType") == CABINET_ITEM_TYPE
    )

    profile = record.get("profiles")
    customer = None
    if profile:
        customer = Customer(
            full_name=_text(profile.get("full_name")),
            email=_text(profile.get("email")),
            phone=_text(profile.get("phone")),
            company_name=_text(profile.get("company_name")),
        )

    room = design.get("room") or {}
    hardware = design.get("hardwareOptions") or {}
    finish = design.get("selectedFinish") or {}

    return Job(
        job_number=str(record.get("job_number") or ""),
        name=str(record.get("name") or ""),
        status=_text(record.get("status")),
        delivery_method=_text(record.get("delivery_method")),
        cost_excl_tax=_optional_number(record.get("cost_excl_tax")),
        cost_incl_tax=_optional_number(record.get("cost_incl_tax")),
        created_at=_parse_timestamp(record.get("created_at")),
        notes=_text(record.get("notes")),
        customer=customer,
        cabinets=cabinets,
        room=RoomConfig(
            width=_optional_number(room.get("width")),
            depth=_optional_number(room.get("depth")),
            height=_optional_number(room.get("height")),
            shape=_text(room.get("shape")),
        ),
        global_dimensions=dict(design.get("globalDimensions") or {}),
        hardware=HardwareOptions(
            hinge_type=_text(hardware.get("hingeType")),
            drawer_type=_text(hardware.get("drawerType")),
            handle_id=_text(hardware.get("handleId")),
            supply_hardware=hardware.get("supplyHardware") is not False,
            adjustable_legs=hardware.get("adjustableLegs") is not False,
        ),
        finish=FinishSelection(
            id=_text(finish.get("id")),
            name=_text(finish.get("name")),
            hex=_text(finish.get("hex")),
        ),
    )
