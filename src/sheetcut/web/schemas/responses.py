"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ValidationIssueSchema(BaseModel):
    """A single validation error or warning."""

    path: str = Field(..., description="JSON path of the field concerned")
    message: str = Field(..., description="Human-readable description")
    suggestion: str | None = Field(default=None, description="Suggested fix")


class ValidationResultSchema(BaseModel):
    """Response for job validation."""

    is_valid: bool = Field(..., description="Whether the job can be optimized")
    errors: list[ValidationIssueSchema] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[ValidationIssueSchema] = Field(
        default_factory=list, description="Validation warnings"
    )


class OptimizeResponseSchema(BaseModel):
    """Response for an optimization run."""

    project_name: str = Field(..., description="Project name from the job")
    result: dict[str, Any] = Field(..., description="Serialized optimization result")
    warnings: list[ValidationIssueSchema] = Field(
        default_factory=list, description="Job warnings found before optimizing"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Body of every handled error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Machine-readable error category")
    details: Any = Field(default=None, description="Additional error data")
