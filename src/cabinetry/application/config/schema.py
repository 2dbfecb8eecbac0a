"""Pydantic models for the interchange engine configuration file.

Every field has a default, so an empty JSON object is a valid
configuration and reproduces the fixed defaults of the assembly document.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cabinetry.domain.value_objects import AssemblyDefaults, ConstructionConstants

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class ConstructionConfig(BaseModel):
    """Global construction constants in millimeters."""

    model_config = ConfigDict(extra="forbid")

    toe_kick_height: float = Field(default=135, ge=0)
    base_height: float = Field(default=730, ge=0)
    base_depth: float = Field(default=575, ge=0)
    wall_height: float = Field(default=720, ge=0)
    wall_depth: float = Field(default=350, ge=0)
    tall_height: float = Field(default=2100, ge=0)
    tall_depth: float = Field(default=580, ge=0)
    benchtop_thickness: float = Field(default=33, ge=0)
    benchtop_overhang: float = Field(default=25, ge=0)
    splashback_height: float = Field(default=600, ge=0)
    door_gap: float = Field(default=2, ge=0)
    shelf_setback: float = Field(default=5, ge=0)
    board_thickness: float = Field(default=18, ge=0)
    back_panel_thickness: float = Field(default=3, ge=0)

    def to_constants(self) -> ConstructionConstants:
        """Convert to the domain value object."""
        return ConstructionConstants(**self.model_dump())


class ExportConfig(BaseModel):
    """Fallback labels written when a job leaves a field unset."""

    model_config = ConfigDict(extra="forbid")

    customer_name: str = "Unknown"
    finish_name: str = "Designer White"
    finish_hex: str = "#fcfcfc"
    part_material: str = "18mm White Melamine"
    backing_material: str = "3mm White Backing"
    hinge_type: str = "Blum Inserta Soft Close"
    drawer_type: str = "Hafele Alto Slim"
    handle_id: str = "handle-bar-ss"
    cabinet_handle: str = "Bar Handle"
    hinge_side: str = "Left"
    room_width: float = Field(default=4000, gt=0)
    room_depth: float = Field(default=3000, gt=0)
    room_height: float = Field(default=2400, gt=0)
    room_shape: str = "Rectangle"

    def to_defaults(self) -> AssemblyDefaults:
        """Convert to the exporter's defaults."""
        return AssemblyDefaults(**self.model_dump())


class CatalogConfig(BaseModel):
    """Column names read from imported catalog rows."""

    model_config = ConfigDict(extra="forbid")

    name_column: str = "Name"
    link_id_columns: list[str] = Field(
        default_factory=lambda: ["LinkID", "ID"], min_length=1
    )
    width_column: str = "Width"
    depth_column: str = "Depth"
    height_column: str = "Height"
    spec_group_column: str = "ProductSpecGroupName"
    room_component_column: str = "RoomComponentType"


class EngineConfiguration(BaseModel):
    """Root configuration for the interchange engine."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    construction: ConstructionConfig = Field(default_factory=ConstructionConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema_version '{v}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v
