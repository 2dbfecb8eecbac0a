"""Unit tests for the exporter registry and service factory wiring."""

import pytest

from cabinetry.application.commands import (
    ExportJobCommand,
    ImportCatalogCommand,
    ImportPricingTableCommand,
    UpdatePricesCommand,
)
from cabinetry.application.config import load_config_from_dict
from cabinetry.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from cabinetry.domain import Job
from cabinetry.infrastructure.exporters import AssemblyDocumentGenerator, ExporterRegistry
from cabinetry.infrastructure.stores import InMemoryStore


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_assembly_generator_registered(self) -> None:
        assert ExporterRegistry.is_registered("microvellum")
        assert ExporterRegistry.get("microvellum") is AssemblyDocumentGenerator
        assert "microvellum" in ExporterRegistry.available_formats()

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format 'pdf'"):
            ExporterRegistry.get("pdf")

    def test_register_custom_exporter(self) -> None:
        @ExporterRegistry.register("test-plain")
        class PlainExporter:
            format_name = "test-plain"
            file_extension = "txt"

            def export_string(self, job: Job) -> str:
                return job.name

        try:
            exporter_cls = ExporterRegistry.get("test-plain")
            assert exporter_cls().export_string(Job(job_number="1", name="x")) == "x"
        finally:
            ExporterRegistry._exporters.pop("test-plain", None)


class TestServiceFactory:
    """Tests for ServiceFactory."""

    def test_default_store_is_created_once(self) -> None:
        factory = ServiceFactory()
        store = factory.get_store()
        assert isinstance(store, InMemoryStore)
        assert factory.get_store() is store

    def test_commands_share_store(self, factory: ServiceFactory, store: InMemoryStore) -> None:
        assert isinstance(factory.create_import_catalog_command(), ImportCatalogCommand)
        export = factory.create_export_job_command()
        assert isinstance(export, ExportJobCommand)
        assert export.store is store
        assert isinstance(factory.create_update_prices_command(), UpdatePricesCommand)
        assert isinstance(factory.create_import_pricing_command(), ImportPricingTableCommand)

    def test_configuration_reaches_generator(self) -> None:
        config = load_config_from_dict(
            {
                "construction": {"toe_kick_height": 100},
                "export": {"customer_name": "Walk-in"},
            }
        )
        generator = ServiceFactory(config=config).get_assembly_generator()
        assert generator.constants.toe_kick_height == 100
        assert generator.defaults.customer_name == "Walk-in"

    def test_configuration_reaches_builder_and_deriver(self) -> None:
        config = load_config_from_dict(
            {
                "construction": {"board_thickness": 16},
                "export": {"backing_material": "6mm MDF"},
                "catalog": {"name_column": "Description"},
            }
        )
        factory = ServiceFactory(config=config)
        assert factory.get_record_builder().columns.name_column == "Description"
        deriver = factory.get_part_deriver()
        assert deriver.constants.board_thickness == 16
        assert deriver.backing_material == "6mm MDF"

    def test_default_factory_lifecycle(self) -> None:
        default = get_factory()
        assert get_factory() is default

        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom

        reset_factory()
        assert get_factory() is not custom
