"""Export format endpoints."""

import tempfile
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import Response

from sheetcut.application.config import CuttingJobConfig, validate_config
from sheetcut.domain import OptimizationResult
from sheetcut.infrastructure.exporters import Exporter, ExporterRegistry
from sheetcut.web.dependencies import OptimizeCommandDep
from sheetcut.web.exceptions import (
    ExportError,
    JobValidationError,
    UnsupportedFormatError,
)
from sheetcut.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


def _export_through_file(
    exporter: Exporter, result: OptimizationResult, format_name: str
) -> bytes:
    """Export via a temporary file for formats without string export."""
    with tempfile.NamedTemporaryFile(
        suffix=f".{exporter.file_extension}", delete=False
    ) as tmp:
        tmp_path = Path(tmp.name)

    try:
        exporter.export(result, tmp_path)
        return tmp_path.read_bytes()
    except ValueError as e:
        raise ExportError(str(e), format_name) from e
    finally:
        tmp_path.unlink(missing_ok=True)


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{format_name}",
    responses={
        400: {"model": ErrorResponseSchema},
        422: {"model": ErrorResponseSchema},
    },
)
async def export_job(
    format_name: str,
    job: CuttingJobConfig,
    command: OptimizeCommandDep,
) -> Response:
    """Optimize a job and return the result in an export format.

    Args:
        format_name: Registered export format (e.g. "svg", "dxf").
        job: The job, in job file format.
        command: Injected OptimizeCuttingCommand.

    Returns:
        The exported document as an attachment.

    Raises:
        UnsupportedFormatError: If the format is not registered.
        JobValidationError: If the job has duplicate ids.
        ExportError: If the exporter cannot render the result.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    validation = validate_config(job)
    if not validation.is_valid:
        raise JobValidationError(
            [{"path": e.path, "message": e.message} for e in validation.errors]
        )

    exporter = ExporterRegistry.get(format_name)()
    result = command.execute_config(job)

    try:
        content: str | bytes = exporter.export_string(result)
    except NotImplementedError:
        content = _export_through_file(exporter, result, format_name)
    except ValueError as e:
        raise ExportError(str(e), format_name) from e

    filename = f"{job.project_name}_{format_name}.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
