"""Assembly document export endpoints."""

from fastapi import APIRouter

from cabinetry.infrastructure.exporters import ExporterRegistry
from cabinetry.web.dependencies import ExportJobCommandDep
from cabinetry.web.schemas.requests import AssemblyExportRequest
from cabinetry.web.schemas.responses import (
    ERROR_RESPONSES,
    AssemblyExportResponse,
    ExportFormatsSchema,
)

router = APIRouter(prefix="/export", tags=["export"], responses=ERROR_RESPONSES)


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/assembly", response_model=AssemblyExportResponse)
def export_assembly(
    request: AssemblyExportRequest,
    command: ExportJobCommandDep,
) -> AssemblyExportResponse:
    """Generate the assembly XML document for a job.

    Returns:
        The document text and a file name derived from the job number
        and name.
    """
    result = command.execute(request.job_id)
    return AssemblyExportResponse(xml=result.xml, filename=result.filename)
