"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cabinetry.application.config.schema import EngineConfiguration

if TYPE_CHECKING:
    from cabinetry.application.commands import (
        ExportJobCommand,
        ImportCatalogCommand,
        ImportPricingTableCommand,
        UpdatePricesCommand,
    )
    from cabinetry.application.services.catalog_builder import CatalogRecordBuilder
    from cabinetry.contracts.protocols import InterchangeStoreProtocol
    from cabinetry.domain.services.part_deriver import PartDeriver
    from cabinetry.infrastructure.exporters.assembly_xml import (
        AssemblyDocumentGenerator,
    )


@dataclass
class ServiceFactory:
    """Factory for creating configured commands and services.

    Centralizes service instantiation so the web and CLI layers share one
    configuration and one store, and tests can inject an in-memory store.

    Attributes:
        config: Engine configuration; defaults reproduce the fixed output.
        store: Store implementing every collaborator protocol. Defaults to
            an empty ``InMemoryStore``.
    """

    config: EngineConfiguration = field(default_factory=EngineConfiguration)
    store: "InterchangeStoreProtocol | None" = None

    def get_store(self) -> "InterchangeStoreProtocol":
        """Get or create the store."""
        if self.store is None:
            from cabinetry.infrastructure.stores import InMemoryStore

            self.store = InMemoryStore()
        return self.store

    def get_record_builder(self) -> "CatalogRecordBuilder":
        """Create a catalog record builder for the configured columns."""
        from cabinetry.application.services.catalog_builder import (
            CatalogRecordBuilder,
        )

        return CatalogRecordBuilder(self.config.catalog)

    def get_part_deriver(self) -> "PartDeriver":
        """Create a part deriver with the configured constants."""
        from cabinetry.domain.services.part_deriver import PartDeriver

        return PartDeriver(
            self.config.construction.to_constants(),
            backing_material=self.config.export.backing_material,
        )

    def get_assembly_generator(self) -> "AssemblyDocumentGenerator":
        """Create the assembly document generator."""
        from cabinetry.infrastructure.exporters.assembly_xml import (
            AssemblyDocumentGenerator,
        )

        return AssemblyDocumentGenerator(
            constants=self.config.construction.to_constants(),
            defaults=self.config.export.to_defaults(),
        )

    def create_import_catalog_command(self) -> "ImportCatalogCommand":
        """Create a catalog import command."""
        from cabinetry.application.commands import ImportCatalogCommand

        return ImportCatalogCommand(
            self.get_store(), builder=self.get_record_builder()
        )

    def create_export_job_command(self) -> "ExportJobCommand":
        """Create a job export command."""
        from cabinetry.application.commands import ExportJobCommand

        return ExportJobCommand(self.get_store(), self.get_assembly_generator())

    def create_update_prices_command(self) -> "UpdatePricesCommand":
        """Create a price update command."""
        from cabinetry.application.commands import UpdatePricesCommand

        return UpdatePricesCommand(self.get_store())

    def create_import_pricing_command(self) -> "ImportPricingTableCommand":
        """Create a pricing table import command."""
        from cabinetry.application.commands import ImportPricingTableCommand

        return ImportPricingTableCommand(self.get_store())


# Module-level default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
