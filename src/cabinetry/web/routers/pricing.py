"""Pricing endpoints: product price changes and pricing table imports."""

from fastapi import APIRouter

from cabinetry.web.dependencies import (
    CurrentUserDep,
    ImportPricingCommandDep,
    UpdatePricesCommandDep,
)
from cabinetry.web.schemas.requests import PriceChangesRequest, PricingTableImportRequest
from cabinetry.web.schemas.responses import (
    ERROR_RESPONSES,
    PricingImportResponse,
    PriceUpdateResponse,
)

router = APIRouter(prefix="/pricing", tags=["pricing"], responses=ERROR_RESPONSES)


@router.post("/price-changes", response_model=PriceUpdateResponse)
def apply_price_changes(
    request: PriceChangesRequest,
    user_id: CurrentUserDep,
    command: UpdatePricesCommandDep,
) -> PriceUpdateResponse:
    """Apply a batch of product price changes (admin only).

    Every change is attempted; failures are listed in ``errors``.
    """
    result = command.execute(user_id, [change.to_dto() for change in request.changes])
    return PriceUpdateResponse(
        updated=result.updated, failed=result.failed, errors=result.errors
    )


@router.post("/tables", response_model=PricingImportResponse)
def import_pricing_table(
    request: PricingTableImportRequest,
    user_id: CurrentUserDep,
    command: ImportPricingCommandDep,
) -> PricingImportResponse:
    """Upsert spreadsheet rows into a pricing table (admin only)."""
    result = command.execute(user_id, request.table, request.records)
    return PricingImportResponse(
        inserted=result.inserted,
        updated=result.updated,
        errors=result.errors,
        total=result.total,
    )
