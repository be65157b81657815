"""Job validation endpoint."""

from typing import Any

from fastapi import APIRouter, Body

from sheetcut.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from sheetcut.web.schemas.responses import (
    ValidationIssueSchema,
    ValidationResultSchema,
)

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_job(
    job: dict[str, Any] = Body(...),
) -> ValidationResultSchema:
    """Validate a job without optimizing it.

    Schema errors are reported in the response body rather than as a 422,
    so clients can show them next to the offending fields.
    """
    try:
        config = load_config_from_dict(job)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                ValidationIssueSchema(path=d["path"], message=d["message"])
                for d in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            ValidationIssueSchema(path=e.path, message=e.message)
            for e in result.errors
        ],
        warnings=[
            ValidationIssueSchema(
                path=w.path, message=w.message, suggestion=w.suggestion
            )
            for w in result.warnings
        ],
    )
