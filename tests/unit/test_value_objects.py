"""Unit tests for domain value objects and entities."""

import pytest

from cabinetry.domain import (
    ConstructionConstants,
    Dimensions,
    DoorDrawerCounts,
    ProductCategory,
    ProductRecord,
    CabinetType,
)


class TestConstructionConstants:
    """Tests for ConstructionConstants."""

    def test_defaults(self) -> None:
        c = ConstructionConstants()
        assert c.toe_kick_height == 135
        assert c.base_height == 730
        assert c.board_thickness == 18
        assert c.back_panel_thickness == 3
        assert c.door_gap == 2
        assert c.shelf_setback == 5

    def test_wall_cabinet_offset(self) -> None:
        assert ConstructionConstants().wall_cabinet_offset == 135 + 730 + 33 + 600

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="door_gap must be non-negative"):
            ConstructionConstants(door_gap=-1)

    def test_design_overrides(self) -> None:
        c = ConstructionConstants().with_design_overrides(
            {"toeKickHeight": 150, "doorGap": 3, "benchtopThickness": 40.5}
        )
        assert c.toe_kick_height == 150
        assert c.door_gap == 3
        assert c.benchtop_thickness == 40.5
        assert c.base_height == 730

    @pytest.mark.parametrize("value", [None, 0, -10, "150", True])
    def test_invalid_overrides_keep_current_value(self, value) -> None:
        c = ConstructionConstants().with_design_overrides({"toeKickHeight": value})
        assert c.toe_kick_height == 135

    def test_board_thickness_is_not_overridable(self) -> None:
        c = ConstructionConstants().with_design_overrides({"boardThickness": 25})
        assert c.board_thickness == 18

    def test_no_design_returns_same_instance(self) -> None:
        c = ConstructionConstants()
        assert c.with_design_overrides(None) is c
        assert c.with_design_overrides({}) is c


class TestSmallValueObjects:
    """Tests for counts and dimensions."""

    def test_counts_non_negative(self) -> None:
        with pytest.raises(ValueError):
            DoorDrawerCounts(doors=-1, drawers=0)

    def test_dimensions_non_negative(self) -> None:
        with pytest.raises(ValueError):
            Dimensions(width=600, depth=-1, height=870)

    def test_category_values(self) -> None:
        assert [c.value for c in ProductCategory] == ["Base", "Wall", "Tall", "Accessory"]


class TestProductRecord:
    """Tests for ProductRecord invariants."""

    def _record(self, **overrides) -> ProductRecord:
        values = dict(
            link_id="MV-1",
            name="Base",
            category=ProductCategory.BASE,
            cabinet_type=CabinetType.STANDARD,
            default_width=600,
            default_depth=575,
            default_height=870,
        )
        values.update(overrides)
        return ProductRecord(**values)

    def test_requires_name(self) -> None:
        with pytest.raises(ValueError):
            self._record(name="")

    def test_requires_link_id(self) -> None:
        with pytest.raises(ValueError):
            self._record(link_id="")

    def test_store_row_copies_metadata(self) -> None:
        metadata = {"Name": "Base"}
        row = self._record(raw_metadata=metadata).to_store_row()
        row["raw_metadata"]["Name"] = "changed"
        assert metadata["Name"] == "Base"
