"""Assembly document generator for CAM import.

Serializes a job, its room configuration and every placed cabinet (with
derived cut parts) plus the aggregated hardware list into the fixed
``MicrovellumJob`` markup consumed by downstream CAM software.

The element names, attribute names, element order and whitespace of the
document are a wire contract. Free-text values are escaped for the five
reserved markup characters; positions are rounded half up to integers;
all other numbers are written as-is (integral values without a decimal
point).
"""

from __future__ import annotations

import logging
import math
from datetime import timezone
from pathlib import Path
from typing import ClassVar
from xml.sax.saxutils import escape

from cabinetry.domain.entities import CabinetPlacement, HardwareLineItem, Job, PartSpec
from cabinetry.domain.services.classifier import classify_for_export
from cabinetry.domain.services.hardware_aggregator import HardwareAggregator
from cabinetry.domain.services.part_deriver import PartDeriver
from cabinetry.domain.value_objects import AssemblyDefaults, ConstructionConstants
from cabinetry.infrastructure.exporters.base import ExporterRegistry

logger = logging.getLogger(__name__)

DOCUMENT_VERSION = "1.0"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Top-level blocks are separated by a line holding the block indent only.
SECTION_SEPARATOR = "\n  \n"

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_markup(value: object) -> str:
    """Escape ``& < > " '`` in a free-text value; ``None`` becomes empty."""
    if value is None:
        return ""
    return escape(str(value), _QUOTE_ENTITIES)


def format_number(value: object) -> str:
    """Write a number the way the document expects.

    Integral floats drop the trailing ``.0``; other numbers are written
    unchanged. Non-numeric values are escaped as text.
    """
    if isinstance(value, bool):
        return _yes_no(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return escape_markup(value)


def round_position(value: float | None) -> int:
    """Round a coordinate to the nearest integer, halves toward +infinity."""
    return math.floor((value or 0) + 0.5)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


@ExporterRegistry.register("microvellum")
class AssemblyDocumentGenerator:
    """Generates the assembly markup document for a job.

    Each call works on fresh part and hardware state, so one generator
    can serve concurrent requests.

    Attributes:
        constants: Construction constants before per-room overrides.
        defaults: Fallback labels for unset job fields.
    """

    format_name: ClassVar[str] = "microvellum"
    file_extension: ClassVar[str] = "xml"

    def __init__(
        self,
        constants: ConstructionConstants | None = None,
        defaults: AssemblyDefaults | None = None,
    ) -> None:
        self.constants = constants or ConstructionConstants()
        self.defaults = defaults or AssemblyDefaults()
        self._deriver = PartDeriver(
            self.constants, backing_material=self.defaults.backing_material
        )

    def export_string(self, job: Job) -> str:
        """Generate the complete document for ``job``."""
        constants = self.constants.with_design_overrides(job.global_dimensions)
        part_material = job.finish.name or self.defaults.part_material
        aggregator = HardwareAggregator()

        cabinet_blocks: list[str] = []
        for index, cabinet in enumerate(job.cabinets):
            category = classify_for_export(cabinet.definition_id)
            parts = self._deriver.derive(
                cabinet.width,
                cabinet.depth,
                cabinet.height,
                category,
                finish_material=part_material,
                definition_id=cabinet.definition_id,
                constants=constants,
            )
            cabinet_blocks.append(
                self._cabinet_block(job, cabinet, index, category.value, parts)
            )
            aggregator.add_cabinet(category, cabinet.hinge)

        sections = [
            f'{XML_DECLARATION}\n<MicrovellumJob version="{DOCUMENT_VERSION}">\n'
            + self._job_info(job),
            self._room_config(job),
            self._global_dimensions(constants),
            self._materials(job),
            self._hardware(job),
            f'  <Cabinets count="{len(job.cabinets)}">'
            + "".join(cabinet_blocks)
            + "\n  </Cabinets>",
            self._hardware_list(aggregator.items) + "\n</MicrovellumJob>",
        ]
        document = SECTION_SEPARATOR.join(sections)

        logger.info(
            f"Generated assembly document for job {job.job_number}: "
            f"{len(job.cabinets)} cabinets, {aggregator.total_count} hardware items, "
            f"{len(document)} chars"
        )
        return document

    def export(self, job: Job, path: Path) -> None:
        """Write the document for ``job`` to ``path`` as UTF-8."""
        path.write_text(self.export_string(job), encoding="utf-8")
        logger.info(f"Wrote assembly document to {path}")

    def _job_info(self, job: Job) -> str:
        customer = job.customer
        full_name = (customer and customer.full_name) or self.defaults.customer_name
        return "\n".join(
            [
                "  <JobInfo>",
                f"    <JobNumber>{escape_markup(job.job_number)}</JobNumber>",
                f"    <JobName>{escape_markup(job.name)}</JobName>",
                f"    <CustomerName>{escape_markup(full_name)}</CustomerName>",
                f"    <CustomerEmail>{escape_markup(customer and customer.email)}</CustomerEmail>",
                f"    <CustomerPhone>{escape_markup(customer and customer.phone)}</CustomerPhone>",
                f"    <CompanyName>{escape_markup(customer and customer.company_name)}</CompanyName>",
                f"    <Status>{escape_markup(job.status)}</Status>",
                f"    <DeliveryMethod>{escape_markup(job.delivery_method)}</DeliveryMethod>",
                f"    <CostExclTax>{format_number(job.cost_excl_tax or 0)}</CostExclTax>",
                f"    <CostInclTax>{format_number(job.cost_incl_tax or 0)}</CostInclTax>",
                f"    <Created>{self._created_date(job)}</Created>",
                f"    <Notes>{escape_markup(job.notes)}</Notes>",
                "  </JobInfo>",
            ]
        )

    def _room_config(self, job: Job) -> str:
        room = job.room
        d = self.defaults
        return "\n".join(
            [
                "  <RoomConfig>",
                f"    <Width>{format_number(room.width or d.room_width)}</Width>",
                f"    <Depth>{format_number(room.depth or d.room_depth)}</Depth>",
                f"    <Height>{format_number(room.height or d.room_height)}</Height>",
                f"    <Shape>{escape_markup(room.shape or d.room_shape)}</Shape>",
                "  </RoomConfig>",
            ]
        )

    @staticmethod
    def _global_dimensions(c: ConstructionConstants) -> str:
        elements = (
            ("ToeKickHeight", c.toe_kick_height),
            ("BaseHeight", c.base_height),
            ("BaseDepth", c.base_depth),
            ("WallHeight", c.wall_height),
            ("WallDepth", c.wall_depth),
            ("TallHeight", c.tall_height),
            ("TallDepth", c.tall_depth),
            ("BenchtopThickness", c.benchtop_thickness),
            ("BenchtopOverhang", c.benchtop_overhang),
            ("SplashbackHeight", c.splashback_height),
        )
        lines = ["  <GlobalDimensions>"]
        lines.extend(
            f"    <{tag}>{format_number(value)}</{tag}>" for tag, value in elements
        )
        lines.append("  </GlobalDimensions>")
        return "\n".join(lines)

    def _materials(self, job: Job) -> str:
        finish = job.finish
        d = self.defaults
        return "\n".join(
            [
                "  <Materials>",
                f'    <CabinetFinish id="{escape_markup(finish.id)}">'
                f"{escape_markup(finish.name or d.finish_name)}</CabinetFinish>",
                f"    <FinishColor>{escape_markup(finish.hex or d.finish_hex)}</FinishColor>",
                "  </Materials>",
            ]
        )

    def _hardware(self, job: Job) -> str:
        hardware = job.hardware
        d = self.defaults
        return "\n".join(
            [
                "  <Hardware>",
                f"    <HingeType>{escape_markup(hardware.hinge_type or d.hinge_type)}</HingeType>",
                f"    <DrawerType>{escape_markup(hardware.drawer_type or d.drawer_type)}</DrawerType>",
                f"    <HandleId>{escape_markup(hardware.handle_id or d.handle_id)}</HandleId>",
                f"    <SupplyHardware>{_yes_no(hardware.supply_hardware)}</SupplyHardware>",
                f"    <AdjustableLegs>{_yes_no(hardware.adjustable_legs)}</AdjustableLegs>",
                "  </Hardware>",
            ]
        )

    def _cabinet_block(
        self,
        job: Job,
        cabinet: CabinetPlacement,
        index: int,
        category: str,
        parts: list[PartSpec],
    ) -> str:
        d = self.defaults
        number = cabinet.cabinet_number or f"C{index + 1:02d}"
        lines = [
            "",
            "    <Cabinet>",
            f"      <CabinetNumber>{escape_markup(number)}</CabinetNumber>",
            f"      <Type>{category}</Type>",
            f"      <SKU>{escape_markup(cabinet.definition_id)}</SKU>",
            f"      <Width>{format_number(cabinet.width)}</Width>",
            f"      <Depth>{format_number(cabinet.depth)}</Depth>",
            f"      <Height>{format_number(cabinet.height)}</Height>",
            f"      <PositionX>{round_position(cabinet.x)}</PositionX>",
            f"      <PositionY>{round_position(cabinet.y)}</PositionY>",
            f"      <PositionZ>{round_position(cabinet.z)}</PositionZ>",
            f"      <Rotation>{format_number(cabinet.rotation or 0)}</Rotation>",
            f"      <Hinge>{escape_markup(cabinet.hinge or d.hinge_side)}</Hinge>",
            f"      <Material>{escape_markup(job.finish.name or d.finish_name)}</Material>",
            f"      <Handle>{escape_markup(job.hardware.handle_id or d.cabinet_handle)}</Handle>",
            f"      <EndPanelLeft>{_yes_no(cabinet.end_panel_left)}</EndPanelLeft>",
            f"      <EndPanelRight>{_yes_no(cabinet.end_panel_right)}</EndPanelRight>",
            f"      <FillerLeft>{format_number(cabinet.filler_left or 0)}</FillerLeft>",
            f"      <FillerRight>{format_number(cabinet.filler_right or 0)}</FillerRight>",
            "      <Parts>",
        ]
        lines.extend(
            f'        <Part name="{escape_markup(p.name)}" w="{format_number(p.width)}" '
            f'h="{format_number(p.height)}" d="{format_number(p.thickness)}" '
            f'material="{escape_markup(p.material)}" />'
            for p in parts
        )
        lines.extend(["      </Parts>", "    </Cabinet>"])
        return "\n".join(lines)

    @staticmethod
    def _hardware_list(items: list[HardwareLineItem]) -> str:
        lines = ["  <HardwareList>"]
        lines.extend(
            f'    <Item sku="{escape_markup(item.sku)}" qty="{item.qty}" '
            f'description="{escape_markup(item.description)}" />'
            for item in items
        )
        if not items:
            # An empty hardware list still renders its (blank) item line.
            lines.append("")
        lines.append("  </HardwareList>")
        return "\n".join(lines)

    @staticmethod
    def _created_date(job: Job) -> str:
        """Creation date as YYYY-MM-DD in UTC; empty when unknown."""
        if job.created_at is None:
            return ""
        created = job.created_at
        if created.tzinfo is not None:
            created = created.astimezone(timezone.utc)
        return created.date().isoformat()
