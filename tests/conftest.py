"""Pytest configuration and shared fixtures for interchange tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from cabinetry.application.factory import ServiceFactory, reset_factory
from cabinetry.infrastructure.stores import InMemoryStore

FIXTURES_PATH = Path(__file__).parent / "fixtures"

ADMIN_TOKEN = "admin-token"
STAFF_TOKEN = "staff-token"
ADMIN_ID = "user-admin"
STAFF_ID = "user-staff"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Sample data
# =============================================================================

SAMPLE_DESIGN: dict[str, Any] = {
    "room": {"width": 4200, "depth": 3600, "height": 2400, "shape": "LShape"},
    "globalDimensions": {"toeKickHeight": 150, "baseHeight": 720},
    "hardwareOptions": {
        "hingeType": "Blum Clip Top",
        "drawerType": "Blum Legrabox",
        "handleId": "handle-knob-bk",
        "supplyHardware": True,
        "adjustableLegs": False,
    },
    "selectedFinish": {"id": "fin-7", "name": "Polar White Matt", "hex": "#f4f4f2"},
    "items": [
        {
            "itemType": "Cabinet",
            "cabinetNumber": "B01",
            "definitionId": "base-2d-600",
            "width": 600,
            "depth": 575,
            "height": 870,
            "x": 12.5,
            "y": 0,
            "z": -0.5,
            "rotation": 90,
            "hinge": "Left",
            "endPanelLeft": True,
            "fillerRight": 25,
        },
        {
            "itemType": "Cabinet",
            "definitionId": "wall-1d-450",
            "width": 450,
            "depth": 350,
            "height": 720,
            "x": 700,
            "y": 1488,
            "z": 0,
            "hinge": "Right",
        },
        {
            "itemType": "Appliance",
            "definitionId": "fridge-900",
            "width": 900,
            "depth": 700,
            "height": 1800,
        },
    ],
}

SAMPLE_JOB_ROW: dict[str, Any] = {
    "id": "job-1",
    "job_number": 1042,
    "name": "Smith Kitchen Reno",
    "status": "quoted",
    "delivery_method": "pickup",
    "cost_excl_tax": 12500.5,
    "cost_incl_tax": 13750,
    "created_at": "2024-03-05T23:30:00Z",
    "notes": "Soft-close & handles <brushed>",
    "customer_id": "cust-1",
    "design_data": SAMPLE_DESIGN,
}

SAMPLE_PROFILE: dict[str, Any] = {
    "id": "cust-1",
    "full_name": "Jo Smith",
    "email": "jo@example.com",
    "phone": "0400 000 000",
    "company_name": "Smith & Sons",
}


def sample_store_data() -> dict[str, Any]:
    """Document-layout data for a store with one job, products and users."""
    return copy.deepcopy(
        {
            "jobs": [SAMPLE_JOB_ROW],
            "profiles": [SAMPLE_PROFILE],
            "products": [
                {"id": "p-1", "sku": "BASE-600", "price": 410.0},
                {"id": "p-2", "sku": "WALL-450", "price": 265.0},
            ],
            "user_roles": {ADMIN_ID: ["admin"], STAFF_ID: ["staff"]},
            "tokens": {ADMIN_TOKEN: ADMIN_ID, STAFF_TOKEN: STAFF_ID},
        }
    )


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Path to the shared fixture files."""
    return FIXTURES_PATH


@pytest.fixture
def catalog_xml() -> str:
    """Sample catalog export with five valid products and one nameless row."""
    return (FIXTURES_PATH / "catalogs" / "kitchen_catalog.xml").read_text(
        encoding="utf-8"
    )


@pytest.fixture
def job_record() -> dict[str, Any]:
    """A joined job record as returned by the job store."""
    record = copy.deepcopy(SAMPLE_JOB_ROW)
    record["profiles"] = copy.deepcopy(SAMPLE_PROFILE)
    return record


@pytest.fixture
def store() -> InMemoryStore:
    """In-memory store populated with the sample data."""
    return InMemoryStore(sample_store_data())


@pytest.fixture
def factory(store: InMemoryStore) -> ServiceFactory:
    """Service factory backed by the sample store."""
    return ServiceFactory(store=store)


@pytest.fixture(autouse=True)
def _reset_default_factory():
    """Keep the module-level default factory isolated between tests."""
    yield
    reset_factory()


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    """JSON store file holding the sample data."""
    path = tmp_path / "store.json"
    path.write_text(json.dumps(sample_store_data()), encoding="utf-8")
    return path
