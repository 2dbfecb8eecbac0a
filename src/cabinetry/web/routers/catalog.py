"""Catalog import endpoint."""

import logging

from fastapi import APIRouter

from cabinetry.web.dependencies import AdminUserDep, ImportCatalogCommandDep
from cabinetry.web.schemas.requests import CatalogImportRequest
from cabinetry.web.schemas.responses import ERROR_RESPONSES, CatalogImportResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"], responses=ERROR_RESPONSES)


@router.post("/import", response_model=CatalogImportResponse)
def import_catalog(
    request: CatalogImportRequest,
    admin_id: AdminUserDep,
    command: ImportCatalogCommandDep,
) -> CatalogImportResponse:
    """Import a Spreadsheet 2003 XML catalog export.

    Products are upserted by link id, so re-importing the same export
    updates rows instead of duplicating them.
    """
    logger.info(f"Catalog import requested by admin {admin_id}")
    result = command.execute(request.xml_content)
    return CatalogImportResponse(
        imported=result.imported,
        category_counts=result.category_counts,
        message=result.message,
    )
