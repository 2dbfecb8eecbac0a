"""Store implementations for the interchange commands.

``InMemoryStore`` keeps every table in dictionaries and backs tests and
the CLI. ``JsonFileStore`` persists the same tables to a JSON document so
the CLI can import a catalog in one run and export a job in another.

Tables:
    microvellum_products: catalog products keyed by ``microvellum_link_id``.
    jobs: job rows keyed by ``id``; ``customer_id`` refers to ``profiles``.
    profiles: customer profiles keyed by ``id``.
    products: priced products with ``id``, ``sku`` and ``price``.
    price_history: append-only price change log.
    pricing: pricing tables (``parts_pricing`` ...) keyed by conflict column.
    user_roles: user id to list of role names.
    tokens: bearer token to user id.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from cabinetry.application.errors import StoreError

logger = logging.getLogger(__name__)

CATALOG_KEY = "microvellum_link_id"


class InMemoryStore:
    """Dictionary-backed implementation of all store protocols."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        data = data or {}
        self.catalog: dict[str, dict[str, Any]] = {
            row[CATALOG_KEY]: row for row in data.get("microvellum_products", [])
        }
        self.jobs: dict[str, dict[str, Any]] = {
            str(row["id"]): row for row in data.get("jobs", [])
        }
        self.profiles: dict[str, dict[str, Any]] = {
            str(row["id"]): row for row in data.get("profiles", [])
        }
        self.products: dict[str, dict[str, Any]] = {
            str(row["id"]): row for row in data.get("products", [])
        }
        self.price_history: list[dict[str, Any]] = list(data.get("price_history", []))
        self.pricing: dict[str, list[dict[str, Any]]] = {
            table: list(rows) for table, rows in data.get("pricing", {}).items()
        }
        self.user_roles: dict[str, list[str]] = {
            user: list(roles) for user, roles in data.get("user_roles", {}).items()
        }
        self.tokens: dict[str, str] = dict(data.get("tokens", {}))

    # Catalog

    def upsert_products(self, rows: list[dict[str, Any]]) -> int:
        for row in rows:
            key = row.get(CATALOG_KEY)
            if not key:
                raise StoreError(f"Missing conflict column {CATALOG_KEY}")
            self.catalog[key] = copy.deepcopy(row)
        logger.debug(f"Upserted {len(rows)} catalog products")
        return len(rows)

    # Jobs

    def fetch_job(self, job_id: str) -> dict[str, Any] | None:
        job = self.jobs.get(str(job_id))
        if job is None:
            return None
        record = copy.deepcopy(job)
        customer_id = job.get("customer_id")
        profile = self.profiles.get(str(customer_id)) if customer_id is not None else None
        record["profiles"] = copy.deepcopy(profile) if profile else None
        return record

    # Pricing

    def find_product_by_sku(self, sku: str) -> dict[str, Any] | None:
        for product in self.products.values():
            if product.get("sku") == sku:
                return {"id": product["id"], "price": product.get("price")}
        return None

    def update_product_price(self, product_id: str, price: float) -> None:
        product = self.products.get(str(product_id))
        if product is None:
            raise StoreError(f"No product with id {product_id}")
        product["price"] = price

    def insert_price_history(self, entry: dict[str, Any]) -> None:
        self.price_history.append(dict(entry))

    def upsert_pricing_rows(
        self, table: str, rows: list[dict[str, Any]], conflict_column: str
    ) -> int:
        existing = self.pricing.setdefault(table, [])
        for row in rows:
            key = row.get(conflict_column)
            if key is None:
                raise StoreError(
                    f"null value in column \"{conflict_column}\" of relation \"{table}\""
                )
            for index, current in enumerate(existing):
                if current.get(conflict_column) == key:
                    existing[index] = dict(row)
                    break
            else:
                existing.append(dict(row))
        return len(rows)

    # Auth

    def resolve_user(self, token: str) -> str | None:
        return self.tokens.get(token)

    def has_role(self, user_id: str, role: str) -> bool:
        return role in self.user_roles.get(user_id, [])

    def to_dict(self) -> dict[str, Any]:
        """Serialize all tables back to the document layout."""
        return {
            "microvellum_products": list(self.catalog.values()),
            "jobs": list(self.jobs.values()),
            "profiles": list(self.profiles.values()),
            "products": list(self.products.values()),
            "price_history": self.price_history,
            "pricing": self.pricing,
            "user_roles": self.user_roles,
            "tokens": self.tokens,
        }


class JsonFileStore(InMemoryStore):
    """InMemoryStore loaded from, and saved back to, a JSON file.

    A missing file starts an empty store; ``save`` creates it.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        try:
            super().__init__(self._read())
        except KeyError as e:
            raise StoreError(f"Store file {self.path} has a row without {e}")

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            logger.info(f"Store file {self.path} not found, starting empty")
            return {}
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StoreError(f"Error reading store file: {self.path}: {e}")
        except json.JSONDecodeError as e:
            raise StoreError(
                f"Invalid JSON in store file: {self.path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            )

    def save(self) -> None:
        """Write every table back to the store file."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(self.to_dict(), indent=2, default=str), encoding="utf-8"
            )
        except OSError as e:
            raise StoreError(f"Error writing store file: {self.path}: {e}")
        logger.debug(f"Saved store to {self.path}")
