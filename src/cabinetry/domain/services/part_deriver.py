"""Cut part derivation for placed cabinets.

Derives the ordered list of carcass parts (gables, bottom, top, back,
doors, shelves) for one cabinet from its size, coarse category and the
global construction constants. Part order is part of the output
contract: downstream CAM tooling diffs successive exports.
"""

from __future__ import annotations

from cabinetry.domain.entities import PartSpec
from cabinetry.domain.value_objects import (
    DEFAULT_BACKING_MATERIAL,
    DEFAULT_PART_MATERIAL,
    ConstructionConstants,
    ProductCategory,
)

# Definition identifier fragments that select the front layout.
TWO_DOOR_MARKERS: tuple[str, ...] = ("2d", "2D")
DRAWER_MARKER = "dr"

# Shelf clearance across the internal width.
SHELF_WIDTH_CLEARANCE = 10

SHELF_COUNTS: dict[ProductCategory, int] = {
    ProductCategory.TALL: 4,
    ProductCategory.WALL: 2,
}
DEFAULT_SHELF_COUNT = 1


class PartDeriver:
    """Service deriving cut parts for a placed cabinet.

    Stateless apart from its configuration; ``derive`` is deterministic
    and has no side effects.
    """

    def __init__(
        self,
        constants: ConstructionConstants | None = None,
        backing_material: str = DEFAULT_BACKING_MATERIAL,
    ) -> None:
        self.constants = constants or ConstructionConstants()
        self.backing_material = backing_material

    def derive(
        self,
        width: float,
        depth: float,
        height: float,
        category: ProductCategory,
        finish_material: str = DEFAULT_PART_MATERIAL,
        definition_id: str | None = None,
        constants: ConstructionConstants | None = None,
    ) -> list[PartSpec]:
        """Derive the ordered part list for one cabinet.

        Args:
            width: Cabinet width in mm.
            depth: Cabinet depth in mm.
            height: Cabinet height in mm, including the toe kick for bases.
            category: Coarse export category.
            finish_material: Material label for exterior parts.
            definition_id: Catalog definition identifier; selects one door,
                two doors, or no door for drawer units.
            constants: Per-room constants overriding the service defaults.

        Returns:
            Parts in fixed order: Left Panel, Right Panel, Bottom, Top (not
            for Base), Back, door(s), shelves.
        """
        c = constants or self.constants
        board = c.board_thickness
        back = c.back_panel_thickness

        internal_width = width - 2 * board
        internal_depth = depth - back
        panel_height = height - c.toe_kick_height if category == ProductCategory.BASE else height

        parts: list[PartSpec] = [
            PartSpec("Left Panel", depth, panel_height, board, finish_material),
            PartSpec("Right Panel", depth, panel_height, board, finish_material),
            PartSpec("Bottom", internal_width, internal_depth, board, finish_material),
        ]
        if category != ProductCategory.BASE:
            parts.append(
                PartSpec("Top", internal_width, internal_depth, board, finish_material)
            )
        parts.append(PartSpec("Back", width, panel_height, back, self.backing_material))

        parts.extend(
            self._fronts(width, panel_height, definition_id, c, finish_material)
        )
        parts.extend(
            self._shelves(internal_width, internal_depth, category, c, finish_material)
        )
        return parts

    def _fronts(
        self,
        width: float,
        panel_height: float,
        definition_id: str | None,
        c: ConstructionConstants,
        material: str,
    ) -> list[PartSpec]:
        """Door parts; drawer units get none here."""
        identifier = definition_id or ""
        door_width = width - 2 * c.door_gap
        door_height = panel_height - 2 * c.door_gap

        if any(marker in identifier for marker in TWO_DOOR_MARKERS):
            leaf_width = door_width / 2 - 1
            return [
                PartSpec("Left Door", leaf_width, door_height, c.board_thickness, material),
                PartSpec("Right Door", leaf_width, door_height, c.board_thickness, material),
            ]
        if DRAWER_MARKER not in identifier:
            return [PartSpec("Door", door_width, door_height, c.board_thickness, material)]
        return []

    def _shelves(
        self,
        internal_width: float,
        internal_depth: float,
        category: ProductCategory,
        c: ConstructionConstants,
        material: str,
    ) -> list[PartSpec]:
        count = SHELF_COUNTS.get(category, DEFAULT_SHELF_COUNT)
        return [
            PartSpec(
                f"Shelf {i + 1}",
                internal_width - SHELF_WIDTH_CLEARANCE,
                internal_depth - c.shelf_setback,
                c.board_thickness,
                material,
            )
            for i in range(count)
        ]


def derive_parts(
    width: float,
    depth: float,
    height: float,
    category: ProductCategory,
    constants: ConstructionConstants | None = None,
    finish_material: str = DEFAULT_PART_MATERIAL,
    definition_id: str | None = None,
) -> list[PartSpec]:
    """Functional shortcut for ``PartDeriver().derive``."""
    return PartDeriver(constants).derive(
        width,
        depth,
        height,
        category,
        finish_material=finish_material,
        definition_id=definition_id,
    )
