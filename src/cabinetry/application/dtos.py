"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ImportResult:
    """Outcome of a catalog import.

    Attributes:
        imported: Number of product records written to the store.
        category_counts: Records per category, in order of first appearance.
        dropped: Rows discarded for missing name or link id.
    """

    imported: int
    category_counts: dict[str, int] = field(default_factory=dict)
    dropped: int = 0

    @property
    def message(self) -> str:
        return f"Successfully imported {self.imported} products"


@dataclass
class ExportResult:
    """A generated assembly document and its download name."""

    xml: str
    filename: str


@dataclass
class PriceChange:
    """One requested price change for a product SKU.

    Fields hold whatever the caller sent; ``validate`` reports bad values
    so a batch can record them per change.
    """

    sku: str | None
    old_price: float | None
    new_price: float | None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not self.sku or not isinstance(self.sku, str):
            errors.append("SKU must not be empty")
        if not _is_number(self.new_price):
            errors.append(f"New price for {self.sku} must be a number")
        elif self.new_price < 0:
            errors.append(f"New price for {self.sku} cannot be negative")
        if self.old_price is not None and not _is_number(self.old_price):
            errors.append(f"Old price for {self.sku} must be a number")
        return errors


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class PriceUpdateResult:
    """Aggregate outcome of a batch of price changes."""

    updated: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    def record_failure(self, message: str) -> None:
        self.failed += 1
        self.errors.append(message)


@dataclass
class PricingImportResult:
    """Outcome of a pricing table import."""

    inserted: int = 0
    updated: int = 0
    total: int = 0
    errors: list[str] = field(default_factory=list)
