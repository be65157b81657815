"""Job file loading with readable error reporting.

Loading fails in one of three places: reading the file, parsing JSON, or
validating against the job schema. Each failure surfaces as a ConfigError
whose ``error_type`` names the stage and whose ``details`` carry the data a
caller needs to point the user at the problem.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from sheetcut.application.config.schema import CuttingJobConfig


class ConfigError(Exception):
    """Raised when a job file cannot be loaded or validated.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation
        path: Path to the job file, if loaded from disk
        details: Line/column for JSON errors, or one entry per schema error
            with path, message, value and error_type
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("pieces", 0, "width"))
        'pieces[0].width'
        >>> _format_json_path(("options", "grid_size"))
        'options.grid_size'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _validation_error(
    error: PydanticValidationError,
    path: Path | None = None,
) -> ConfigError:
    details = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]

    lines = ["Job validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail["value"] is not None and not isinstance(detail["value"], dict):
            line += f" (got: {detail['value']!r})"
        lines.append(line)

    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config_from_dict(
    data: dict[str, Any],
    path: Path | None = None,
) -> CuttingJobConfig:
    """Validate a job already parsed into a dictionary.

    Args:
        data: Parsed job data, e.g. an API request body.
        path: Source file, used only in error reports.

    Returns:
        The validated job.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    try:
        return CuttingJobConfig.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_config(path: Path) -> CuttingJobConfig:
    """Load and validate a job from a JSON file.

    Args:
        path: Path to the job file.

    Returns:
        The validated job.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     job = load_config(Path("kitchen.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(detail["path"], detail["message"])
    """
    if not path.exists():
        raise ConfigError(
            message=f"Job file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading job file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading job file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in job file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return load_config_from_dict(data, path)
