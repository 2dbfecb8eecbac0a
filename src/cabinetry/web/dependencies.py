"""FastAPI dependency injection for interchange services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header

from cabinetry.application.commands import (
    ExportJobCommand,
    ImportCatalogCommand,
    ImportPricingTableCommand,
    UpdatePricesCommand,
    require_admin,
)
from cabinetry.application.errors import AuthorizationError
from cabinetry.application.factory import ServiceFactory, get_factory
from cabinetry.contracts.protocols import InterchangeStoreProtocol

BEARER_PREFIX = "Bearer "


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]


def get_store(factory: ServiceFactoryDep) -> InterchangeStoreProtocol:
    """Dependency for the shared store."""
    return factory.get_store()


StoreDep = Annotated[InterchangeStoreProtocol, Depends(get_store)]


def get_current_user(
    store: StoreDep,
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Raises:
        AuthorizationError: 401 if the header is missing or the token is unknown.
    """
    if not authorization:
        raise AuthorizationError("Missing authorization header", status_code=401)
    token = authorization.removeprefix(BEARER_PREFIX).strip()
    user_id = store.resolve_user(token)
    if not user_id:
        raise AuthorizationError("Invalid or expired session", status_code=401)
    return user_id


CurrentUserDep = Annotated[str, Depends(get_current_user)]


def get_admin_user(user_id: CurrentUserDep, store: StoreDep) -> str:
    """Dependency requiring the admin role; 403 otherwise."""
    require_admin(store, user_id)
    return user_id


AdminUserDep = Annotated[str, Depends(get_admin_user)]


def get_import_catalog_command(factory: ServiceFactoryDep) -> ImportCatalogCommand:
    """Dependency for ImportCatalogCommand."""
    return factory.create_import_catalog_command()


def get_export_job_command(factory: ServiceFactoryDep) -> ExportJobCommand:
    """Dependency for ExportJobCommand."""
    return factory.create_export_job_command()


def get_update_prices_command(factory: ServiceFactoryDep) -> UpdatePricesCommand:
    """Dependency for UpdatePricesCommand."""
    return factory.create_update_prices_command()


def get_import_pricing_command(factory: ServiceFactoryDep) -> ImportPricingTableCommand:
    """Dependency for ImportPricingTableCommand."""
    return factory.create_import_pricing_command()


# Type aliases for cleaner endpoint signatures
ImportCatalogCommandDep = Annotated[
    ImportCatalogCommand, Depends(get_import_catalog_command)
]
ExportJobCommandDep = Annotated[ExportJobCommand, Depends(get_export_job_command)]
UpdatePricesCommandDep = Annotated[
    UpdatePricesCommand, Depends(get_update_prices_command)
]
ImportPricingCommandDep = Annotated[
    ImportPricingTableCommand, Depends(get_import_pricing_command)
]
