"""Unit tests for AssemblyDocumentGenerator.

Tests cover:
- The exact document layout for an empty job (separators, blank hardware line)
- Job, customer, room, finish and hardware values with their defaults
- Cabinet blocks: numbering, positions, derived parts, hardware totals
- Escaping of free text and well-formedness of the result
- Number formatting helpers
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from xml.etree import ElementTree

import pytest

from cabinetry.application.services.job_adapter import job_from_record
from cabinetry.domain import (
    CabinetPlacement,
    ConstructionConstants,
    Customer,
    FinishSelection,
    Job,
)
from cabinetry.infrastructure.exporters import (
    AssemblyDefaults,
    AssemblyDocumentGenerator,
    Exporter,
    escape_markup,
    format_number,
    round_position,
)

EMPTY_JOB_DOCUMENT = "\n".join(
    [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<MicrovellumJob version="1.0">',
        "  <JobInfo>",
        "    <JobNumber>7</JobNumber>",
        "    <JobName>Empty</JobName>",
        "    <CustomerName>Unknown</CustomerName>",
        "    <CustomerEmail></CustomerEmail>",
        "    <CustomerPhone></CustomerPhone>",
        "    <CompanyName></CompanyName>",
        "    <Status></Status>",
        "    <DeliveryMethod></DeliveryMethod>",
        "    <CostExclTax>0</CostExclTax>",
        "    <CostInclTax>0</CostInclTax>",
        "    <Created></Created>",
        "    <Notes></Notes>",
        "  </JobInfo>",
        "  ",
        "  <RoomConfig>",
        "    <Width>4000</Width>",
        "    <Depth>3000</Depth>",
        "    <Height>2400</Height>",
        "    <Shape>Rectangle</Shape>",
        "  </RoomConfig>",
        "  ",
        "  <GlobalDimensions>",
        "    <ToeKickHeight>135</ToeKickHeight>",
        "    <BaseHeight>730</BaseHeight>",
        "    <BaseDepth>575</BaseDepth>",
        "    <WallHeight>720</WallHeight>",
        "    <WallDepth>350</WallDepth>",
        "    <TallHeight>2100</TallHeight>",
        "    <TallDepth>580</TallDepth>",
        "    <BenchtopThickness>33</BenchtopThickness>",
        "    <BenchtopOverhang>25</BenchtopOverhang>",
        "    <SplashbackHeight>600</SplashbackHeight>",
        "  </GlobalDimensions>",
        "  ",
        "  <Materials>",
        '    <CabinetFinish id="">Designer White</CabinetFinish>',
        "    <FinishColor>#fcfcfc</FinishColor>",
        "  </Materials>",
        "  ",
        "  <Hardware>",
        "    <HingeType>Blum Inserta Soft Close</HingeType>",
        "    <DrawerType>Hafele Alto Slim</DrawerType>",
        "    <HandleId>handle-bar-ss</HandleId>",
        "    <SupplyHardware>Yes</SupplyHardware>",
        "    <AdjustableLegs>Yes</AdjustableLegs>",
        "  </Hardware>",
        "  ",
        '  <Cabinets count="0">',
        "  </Cabinets>",
        "  ",
        "  <HardwareList>",
        "",
        "  </HardwareList>",
        "</MicrovellumJob>",
    ]
)


@pytest.fixture
def generator() -> AssemblyDocumentGenerator:
    return AssemblyDocumentGenerator()


@pytest.fixture
def sample_document(generator: AssemblyDocumentGenerator, job_record: dict) -> str:
    return generator.export_string(job_from_record(job_record))


def _cabinet_elements(document: str) -> list[ElementTree.Element]:
    root = ElementTree.fromstring(document.encode("utf-8"))
    return root.findall("./Cabinets/Cabinet")


class TestDocumentLayout:
    """Tests for the fixed document layout."""

    def test_empty_job_exact_document(self, generator: AssemblyDocumentGenerator) -> None:
        job = Job(job_number="7", name="Empty")
        assert generator.export_string(job) == EMPTY_JOB_DOCUMENT

    def test_cabinet_block_starts_on_new_line(self, sample_document: str) -> None:
        assert '  <Cabinets count="2">\n    <Cabinet>\n      <CabinetNumber>' in sample_document

    def test_cabinets_close_after_last_block(self, sample_document: str) -> None:
        assert "    </Cabinet>\n  </Cabinets>\n  \n  <HardwareList>" in sample_document

    def test_document_is_well_formed(self, sample_document: str) -> None:
        root = ElementTree.fromstring(sample_document.encode("utf-8"))
        assert root.tag == "MicrovellumJob"
        assert root.get("version") == "1.0"
        assert [child.tag for child in root] == [
            "JobInfo",
            "RoomConfig",
            "GlobalDimensions",
            "Materials",
            "Hardware",
            "Cabinets",
            "HardwareList",
        ]

    def test_deterministic(self, generator: AssemblyDocumentGenerator, job_record: dict) -> None:
        job = job_from_record(job_record)
        assert generator.export_string(job) == generator.export_string(job)


class TestJobValues:
    """Tests for job-level values of the sample job."""

    def test_job_info(self, sample_document: str) -> None:
        info = ElementTree.fromstring(sample_document.encode()).find("JobInfo")
        assert info.findtext("JobNumber") == "1042"
        assert info.findtext("JobName") == "Smith Kitchen Reno"
        assert info.findtext("CustomerName") == "Jo Smith"
        assert info.findtext("CompanyName") == "Smith & Sons"
        assert info.findtext("CostExclTax") == "12500.5"
        assert info.findtext("CostInclTax") == "13750"
        assert info.findtext("Created") == "2024-03-05"
        assert info.findtext("Notes") == "Soft-close & handles <brushed>"

    def test_free_text_is_escaped(self, sample_document: str) -> None:
        assert "<CompanyName>Smith &amp; Sons</CompanyName>" in sample_document
        assert "<Notes>Soft-close &amp; handles &lt;brushed&gt;</Notes>" in sample_document

    def test_room_config(self, sample_document: str) -> None:
        assert "    <Width>4200</Width>\n    <Depth>3600</Depth>" in sample_document
        assert "<Shape>LShape</Shape>" in sample_document

    def test_design_overrides_in_global_dimensions(self, sample_document: str) -> None:
        assert "<ToeKickHeight>150</ToeKickHeight>" in sample_document
        assert "<BaseHeight>720</BaseHeight>" in sample_document
        assert "<BaseDepth>575</BaseDepth>" in sample_document

    def test_materials_and_hardware(self, sample_document: str) -> None:
        assert '<CabinetFinish id="fin-7">Polar White Matt</CabinetFinish>' in sample_document
        assert "<FinishColor>#f4f4f2</FinishColor>" in sample_document
        assert "<HingeType>Blum Clip Top</HingeType>" in sample_document
        assert "<HandleId>handle-knob-bk</HandleId>" in sample_document
        assert "<SupplyHardware>Yes</SupplyHardware>" in sample_document
        assert "<AdjustableLegs>No</AdjustableLegs>" in sample_document

    def test_customer_name_default_when_profile_has_no_name(
        self, generator: AssemblyDocumentGenerator
    ) -> None:
        job = Job(job_number="1", name="x", customer=Customer(email="a@b.c"))
        document = generator.export_string(job)
        assert "<CustomerName>Unknown</CustomerName>" in document
        assert "<CustomerEmail>a@b.c</CustomerEmail>" in document

    def test_created_date_is_utc(self, generator: AssemblyDocumentGenerator) -> None:
        created = datetime(2024, 3, 6, 5, 0, tzinfo=timezone(timedelta(hours=10)))
        document = generator.export_string(Job(job_number="1", name="x", created_at=created))
        assert "<Created>2024-03-05</Created>" in document


class TestCabinetBlocks:
    """Tests for per-cabinet output."""

    def test_cabinet_values(self, sample_document: str) -> None:
        first, second = _cabinet_elements(sample_document)

        assert first.findtext("CabinetNumber") == "B01"
        assert first.findtext("Type") == "Base"
        assert first.findtext("SKU") == "base-2d-600"
        assert first.findtext("PositionX") == "13"
        assert first.findtext("PositionZ") == "0"
        assert first.findtext("Rotation") == "90"
        assert first.findtext("Hinge") == "Left"
        assert first.findtext("Material") == "Polar White Matt"
        assert first.findtext("Handle") == "handle-knob-bk"
        assert first.findtext("EndPanelLeft") == "Yes"
        assert first.findtext("EndPanelRight") == "No"
        assert first.findtext("FillerRight") == "25"

        assert second.findtext("CabinetNumber") == "C02"
        assert second.findtext("Type") == "Wall"
        assert second.findtext("PositionY") == "1488"

    def test_parts_follow_room_constants(self, sample_document: str) -> None:
        first, _ = _cabinet_elements(sample_document)
        parts = first.findall("./Parts/Part")
        assert [p.get("name") for p in parts] == [
            "Left Panel",
            "Right Panel",
            "Bottom",
            "Back",
            "Left Door",
            "Right Door",
            "Shelf 1",
        ]
        # 870 high less the room's 150 toe kick
        assert parts[0].get("h") == "720"
        assert parts[4].get("w") == "297"
        assert parts[4].get("h") == "716"
        assert parts[0].get("material") == "Polar White Matt"
        assert parts[3].get("material") == "3mm White Backing"
        assert parts[3].get("d") == "3"

    def test_part_line_format(self, sample_document: str) -> None:
        assert (
            '        <Part name="Bottom" w="564" h="572" d="18" '
            'material="Polar White Matt" />'
        ) in sample_document

    def test_hardware_list_totals(self, sample_document: str) -> None:
        assert (
            '  <HardwareList>\n'
            '    <Item sku="HINGE-BLUM-SC" qty="6" description="Blum Soft Close Hinge" />\n'
            '    <Item sku="HANDLE-STD" qty="2" description="Standard Handle" />\n'
            "  </HardwareList>\n</MicrovellumJob>"
        ) in sample_document

    def test_three_hinged_base_cabinets(self, generator: AssemblyDocumentGenerator) -> None:
        cabinets = tuple(
            CabinetPlacement(None, "base-1d-600", 600, 575, 870, hinge="Left")
            for _ in range(3)
        )
        document = generator.export_string(Job(job_number="1", name="x", cabinets=cabinets))
        assert 'sku="HINGE-BLUM-SC" qty="12"' in document
        assert 'sku="HANDLE-STD" qty="3"' in document
        assert [c.findtext("CabinetNumber") for c in _cabinet_elements(document)] == [
            "C01",
            "C02",
            "C03",
        ]

    def test_default_material_and_hinge(self, generator: AssemblyDocumentGenerator) -> None:
        cabinet = CabinetPlacement(None, "tall-2d-600", 600, 580, 2100)
        document = generator.export_string(Job(job_number="1", name="x", cabinets=(cabinet,)))
        (element,) = _cabinet_elements(document)
        assert element.findtext("Hinge") == "Left"
        assert element.findtext("Material") == "Designer White"
        assert element.findtext("Handle") == "Bar Handle"
        assert element.find("./Parts/Part").get("material") == "18mm White Melamine"
        # No hinge on the placement: handle only
        assert 'sku="HINGE-BLUM-SC"' not in document

    def test_escaped_identifiers(self, generator: AssemblyDocumentGenerator) -> None:
        cabinet = CabinetPlacement('B"1', "base<odd>&id", 600, 575, 870)
        finish = FinishSelection(id="f'1", name="Oak & Ash")
        document = generator.export_string(
            Job(job_number="1", name="x", cabinets=(cabinet,), finish=finish)
        )
        (element,) = _cabinet_elements(document)
        assert element.findtext("CabinetNumber") == 'B"1'
        assert element.findtext("SKU") == "base<odd>&id"
        assert element.find("./Parts/Part").get("material") == "Oak & Ash"


class TestConfiguration:
    """Tests for configured constants and defaults."""

    def test_custom_defaults(self) -> None:
        generator = AssemblyDocumentGenerator(
            defaults=AssemblyDefaults(customer_name="Walk-in", part_material="16mm Board")
        )
        cabinet = CabinetPlacement(None, "base-1d", 600, 575, 870)
        document = generator.export_string(Job(job_number="1", name="x", cabinets=(cabinet,)))
        assert "<CustomerName>Walk-in</CustomerName>" in document
        assert 'material="16mm Board"' in document

    def test_custom_constants(self) -> None:
        generator = AssemblyDocumentGenerator(constants=ConstructionConstants(toe_kick_height=100))
        document = generator.export_string(Job(job_number="1", name="x"))
        assert "<ToeKickHeight>100</ToeKickHeight>" in document

    def test_is_an_exporter(self, generator: AssemblyDocumentGenerator) -> None:
        assert isinstance(generator, Exporter)
        assert generator.format_name == "microvellum"
        assert generator.file_extension == "xml"

    def test_export_to_file(self, generator: AssemblyDocumentGenerator, tmp_path: Path) -> None:
        path = tmp_path / "job.xml"
        job = Job(job_number="7", name="Empty")
        generator.export(job, path)
        assert path.read_text(encoding="utf-8") == EMPTY_JOB_DOCUMENT


class TestFormatting:
    """Tests for value formatting helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (-1.5, -1), (-0.5, 0), (12.49, 12), (None, 0), (7, 7)],
    )
    def test_round_position(self, value, expected: int) -> None:
        assert round_position(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(600.0, "600"), (297.5, "297.5"), (13750, "13750"), (0, "0"), (True, "Yes")],
    )
    def test_format_number(self, value, expected: str) -> None:
        assert format_number(value) == expected

    def test_escape_markup(self) -> None:
        assert escape_markup("""a & b < c > d " e ' f""") == (
            "a &amp; b &lt; c &gt; d &quot; e &apos; f"
        )

    def test_escape_none(self) -> None:
        assert escape_markup(None) == ""
