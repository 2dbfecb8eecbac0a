"""Contracts between the application layer and its collaborators."""

from cabinetry.contracts.protocols import (
    AuthStoreProtocol,
    CatalogStoreProtocol,
    InterchangeStoreProtocol,
    JobStoreProtocol,
    PricingStoreProtocol,
)

__all__ = [
    "AuthStoreProtocol",
    "CatalogStoreProtocol",
    "InterchangeStoreProtocol",
    "JobStoreProtocol",
    "PricingStoreProtocol",
]
