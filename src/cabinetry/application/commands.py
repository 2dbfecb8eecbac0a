"""Application commands (use cases) for catalog import, job export and pricing."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from cabinetry.application.dtos import (
    ExportResult,
    ImportResult,
    PriceChange,
    PriceUpdateResult,
    PricingImportResult,
)
from cabinetry.application.errors import AuthorizationError, InputError, StoreError
from cabinetry.application.services.catalog_builder import CatalogRecordBuilder
from cabinetry.application.services.job_adapter import job_from_record
from cabinetry.application.services.pricing_normalizer import (
    PRICING_TABLES,
    normalize_pricing_record,
)
from cabinetry.infrastructure.exporters.assembly_xml import AssemblyDocumentGenerator
from cabinetry.infrastructure.markup_scanner import TabularMarkupScanner

if TYPE_CHECKING:
    from cabinetry.contracts.protocols import (
        AuthStoreProtocol,
        CatalogStoreProtocol,
        JobStoreProtocol,
        PricingStoreProtocol,
    )

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
PRICING_BATCH_SIZE = 100

_WHITESPACE_RUN = re.compile(r"\s+")


def require_admin(store: "AuthStoreProtocol", user_id: str | None) -> None:
    """Raise AuthorizationError unless ``user_id`` holds the admin role."""
    if not user_id or not store.has_role(user_id, ADMIN_ROLE):
        raise AuthorizationError("Admin access required", status_code=403)


def export_filename(job_number: str, job_name: str) -> str:
    """Download name for a job document, e.g. ``Job_1042_Smith_Kitchen``."""
    return f"Job_{job_number}_{_WHITESPACE_RUN.sub('_', job_name)}"


class ImportCatalogCommand:
    """Import a tabular-markup catalog export into the catalog store."""

    def __init__(
        self,
        store: "CatalogStoreProtocol",
        scanner: TabularMarkupScanner | None = None,
        builder: CatalogRecordBuilder | None = None,
    ) -> None:
        self.store = store
        self.scanner = scanner or TabularMarkupScanner()
        self.builder = builder or CatalogRecordBuilder()

    def execute(self, xml_content: str | None) -> ImportResult:
        """Scan, classify and upsert every product row.

        Raises:
            InputError: If the content is empty or holds no data rows.
            StoreError: If the upsert fails.
        """
        if not xml_content or not isinstance(xml_content, str):
            raise InputError("No XML content provided")

        logger.info(f"Importing catalog markup ({len(xml_content)} characters)")
        rows = self.scanner.scan(xml_content)
        if not rows:
            raise InputError("No products found in XML file")

        records, dropped = self.builder.build(rows)
        try:
            imported = self.store.upsert_products(
                [record.to_store_row() for record in records]
            )
        except StoreError as e:
            logger.error(f"Catalog upsert failed: {e.message}")
            raise StoreError(f"Database error: {e.message}") from e

        counts = self.builder.tally(records)
        logger.info(f"Imported {imported} products: {counts}")
        return ImportResult(imported=imported, category_counts=counts, dropped=dropped)


class ExportJobCommand:
    """Generate the assembly document for a stored job."""

    def __init__(
        self,
        store: "JobStoreProtocol",
        generator: AssemblyDocumentGenerator | None = None,
    ) -> None:
        self.store = store
        self.generator = generator or AssemblyDocumentGenerator()

    def execute(self, job_id: str | None) -> ExportResult:
        """Fetch the job with its customer and return the document.

        Raises:
            InputError: If no job id is given.
            StoreError: If the lookup fails or the job does not exist.
        """
        if not job_id or not isinstance(job_id, str):
            raise InputError("Job ID is required")

        record = self.store.fetch_job(job_id)
        if record is None:
            raise StoreError("Job not found")

        job = job_from_record(record)
        xml = self.generator.export_string(job)
        filename = export_filename(job.job_number, job.name)
        logger.info(f"Exported job {job_id} as {filename}")
        return ExportResult(xml=xml, filename=filename)


class UpdatePricesCommand:
    """Apply a batch of product price changes.

    Each change is processed on its own: a failed change is recorded in
    the result and the batch carries on.
    """

    def __init__(
        self,
        store: "PricingStoreProtocol",
        auth: "AuthStoreProtocol | None" = None,
    ) -> None:
        self.store = store
        self.auth = auth or store

    def execute(self, user_id: str | None, changes: list[PriceChange]) -> PriceUpdateResult:
        """Update prices and log history for an admin caller.

        Raises:
            AuthorizationError: If the caller is not an admin.
            InputError: If ``changes`` is empty.
        """
        require_admin(self.auth, user_id)
        if not changes:
            raise InputError("No price changes provided")

        logger.info(f"Processing {len(changes)} price changes")
        result = PriceUpdateResult()
        for change in changes:
            self._apply(change, user_id, result)

        logger.info(
            f"Price import complete: {result.updated} updated, {result.failed} failed"
        )
        return result

    def _apply(
        self, change: PriceChange, user_id: str | None, result: PriceUpdateResult
    ) -> None:
        problems = change.validate()
        if problems:
            result.record_failure(f"Error processing {change.sku}: {problems[0]}")
            return
        try:
            product = self.store.find_product_by_sku(change.sku)
            if product is None:
                result.record_failure(f"Product not found: {change.sku}")
                logger.warning(f"Price change skipped, unknown SKU {change.sku}")
                return
            try:
                self.store.update_product_price(product["id"], change.new_price)
            except StoreError as e:
                result.record_failure(f"Failed to update {change.sku}: {e.message}")
                logger.warning(f"Failed to update {change.sku}: {e.message}")
                return
            self.store.insert_price_history(
                {
                    "product_id": product["id"],
                    "old_price": change.old_price,
                    "new_price": change.new_price,
                    "changed_by": user_id,
                }
            )
        except StoreError as e:
            result.record_failure(f"Error processing {change.sku}: {e.message}")
            logger.warning(f"Error processing {change.sku}: {e.message}")
            return

        result.updated += 1
        logger.debug(
            f"Updated {change.sku}: ${change.old_price} -> ${change.new_price}"
        )


class ImportPricingTableCommand:
    """Upsert spreadsheet rows into one of the pricing tables."""

    def __init__(
        self,
        store: "PricingStoreProtocol",
        auth: "AuthStoreProtocol | None" = None,
        batch_size: int = PRICING_BATCH_SIZE,
    ) -> None:
        self.store = store
        self.auth = auth or store
        self.batch_size = batch_size

    def execute(
        self, user_id: str | None, table: str, records: list[dict[str, Any]]
    ) -> PricingImportResult:
        """Normalize and upsert ``records`` in batches.

        A failing batch is recorded as ``"Batch <n>: <message>"`` and the
        remaining batches are still written.

        Raises:
            AuthorizationError: If the caller is not an admin.
            InputError: If ``table`` is not a pricing table.
        """
        require_admin(self.auth, user_id)
        if table not in PRICING_TABLES:
            raise InputError(f"Invalid table: {table}")

        conflict_column = PRICING_TABLES[table]
        rows = [normalize_pricing_record(record) for record in records or []]
        logger.info(f"Importing {len(rows)} records to {table}")

        result = PricingImportResult(total=len(rows))
        for start in range(0, len(rows), self.batch_size):
            batch = rows[start : start + self.batch_size]
            try:
                result.inserted += self.store.upsert_pricing_rows(
                    table, batch, conflict_column
                )
            except StoreError as e:
                number = start // self.batch_size + 1
                logger.error(f"Batch error at {start}: {e.message}")
                result.errors.append(f"Batch {number}: {e.message}")

        logger.info(
            f"Import complete: {result.inserted} records processed, "
            f"{len(result.errors)} errors"
        )
        return result
