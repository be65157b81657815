"""Optimization endpoint."""

from fastapi import APIRouter

from sheetcut.application.config import CuttingJobConfig, validate_config
from sheetcut.infrastructure.serialization import result_to_dict
from sheetcut.web.dependencies import OptimizeCommandDep
from sheetcut.web.exceptions import JobValidationError
from sheetcut.web.schemas.responses import (
    ErrorResponseSchema,
    OptimizeResponseSchema,
    ValidationIssueSchema,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])


@router.post(
    "",
    response_model=OptimizeResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def optimize_job(
    job: CuttingJobConfig,
    command: OptimizeCommandDep,
) -> OptimizeResponseSchema:
    """Optimize a cutting job.

    Args:
        job: The job, in job file format.
        command: Injected OptimizeCuttingCommand.

    Returns:
        The serialized result plus any job warnings.

    Raises:
        JobValidationError: If the job has duplicate ids.
    """
    validation = validate_config(job)
    if not validation.is_valid:
        raise JobValidationError(
            [{"path": e.path, "message": e.message} for e in validation.errors]
        )

    result = command.execute_config(job)
    return OptimizeResponseSchema(
        project_name=job.project_name,
        result=result_to_dict(result),
        warnings=[
            ValidationIssueSchema(
                path=w.path, message=w.message, suggestion=w.suggestion
            )
            for w in validation.warnings
        ],
    )
