"""Store protocols for dependency injection.

The relational store holding catalog products, jobs, prices and user
roles is an external collaborator. Commands depend on these protocols;
infrastructure provides the implementations. Every method raises
``StoreError`` on a read or write failure.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CatalogStoreProtocol(Protocol):
    """Write access to the catalog products table."""

    def upsert_products(self, rows: list[dict[str, Any]]) -> int:
        """Insert or update product rows keyed by ``microvellum_link_id``.

        Args:
            rows: Product rows in store column layout.

        Returns:
            Number of rows written.
        """
        ...


@runtime_checkable
class JobStoreProtocol(Protocol):
    """Read access to jobs joined with their customer profile."""

    def fetch_job(self, job_id: str) -> dict[str, Any] | None:
        """Fetch a job row with the customer profile under ``profiles``.

        Returns:
            The joined record, or None if no job has this id.
        """
        ...


@runtime_checkable
class PricingStoreProtocol(Protocol):
    """Read/write access to product prices and pricing tables."""

    def find_product_by_sku(self, sku: str) -> dict[str, Any] | None:
        """Return ``{"id": ..., "price": ...}`` for a SKU, or None."""
        ...

    def update_product_price(self, product_id: str, price: float) -> None:
        """Set the current price of a product."""
        ...

    def insert_price_history(self, entry: dict[str, Any]) -> None:
        """Append one price history entry."""
        ...

    def upsert_pricing_rows(
        self, table: str, rows: list[dict[str, Any]], conflict_column: str
    ) -> int:
        """Insert or update rows of a pricing table.

        Returns:
            Number of rows written.
        """
        ...


@runtime_checkable
class AuthStoreProtocol(Protocol):
    """Caller identity and role lookups."""

    def resolve_user(self, token: str) -> str | None:
        """Return the user id for a bearer token, or None if invalid."""
        ...

    def has_role(self, user_id: str, role: str) -> bool:
        """Check whether a user holds a role."""
        ...


class InterchangeStoreProtocol(
    CatalogStoreProtocol,
    JobStoreProtocol,
    PricingStoreProtocol,
    AuthStoreProtocol,
    Protocol,
):
    """A store implementing every collaborator protocol."""
