"""Pydantic schemas for the REST API."""

from sheetcut.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    OptimizeResponseSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "OptimizeResponseSchema",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
