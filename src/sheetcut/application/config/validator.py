"""Validation results and feasibility advisories for cutting jobs.

Schema validation (types, ranges) happens in the pydantic models. The checks
here look at the job as a whole: duplicate identities are errors, while
pieces that cannot fit anywhere or a demand that exceeds the supply are
warnings, since the optimizer still runs and simply leaves pieces unplaced.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from sheetcut.application.config.schema import (
    CuttingJobConfig,
    PieceConfig,
    StockSheetConfig,
)


@dataclass
class ValidationError:
    """A blocking problem in a job.

    Attributes:
        path: JSON path to the offending field (e.g. "pieces[2].id")
        message: Human-readable description
        value: The offending value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern about a job.

    Attributes:
        path: JSON path to the field concerned
        message: Human-readable description
        suggestion: Optional remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _piece_fits_sheet(piece: PieceConfig, sheet: StockSheetConfig) -> bool:
    if piece.width <= sheet.width and piece.height <= sheet.height:
        return True
    return (
        piece.allow_rotation
        and piece.height <= sheet.width
        and piece.width <= sheet.height
    )


def _check_duplicate_ids(
    items: list[StockSheetConfig] | list[PieceConfig],
    prefix: str,
    result: ValidationResult,
) -> None:
    counts = Counter(item.id for item in items if item.id is not None)
    for i, item in enumerate(items):
        if item.id is not None and counts[item.id] > 1:
            result.add_error(f"{prefix}[{i}].id", "Duplicate id", item.id)


def validate_config(config: CuttingJobConfig) -> ValidationResult:
    """Run whole-job checks on a schema-valid job.

    Args:
        config: A job that already passed schema validation.

    Returns:
        Errors for duplicate identities, warnings for infeasible demand.
    """
    result = ValidationResult()

    _check_duplicate_ids(config.stock_sheets, "stock_sheets", result)
    _check_duplicate_ids(config.pieces, "pieces", result)

    available = [s for s in config.stock_sheets if s.quantity > 0]
    if not available:
        result.add_warning(
            "stock_sheets",
            "No stock sheets available",
            "Add at least one stock sheet with quantity > 0",
        )

    if sum(p.quantity for p in config.pieces) == 0:
        result.add_warning(
            "pieces",
            "No pieces requested",
            "Add at least one piece with quantity > 0",
        )

    if available:
        for i, piece in enumerate(config.pieces):
            if piece.quantity and not any(_piece_fits_sheet(piece, s) for s in available):
                suggestion = (
                    "Allow rotation or add a larger stock sheet"
                    if not piece.allow_rotation
                    else "Add a larger stock sheet"
                )
                result.add_warning(
                    f"pieces[{i}]",
                    f"Piece '{piece.label}' ({piece.width:g}x{piece.height:g}) "
                    f"does not fit on any stock sheet",
                    suggestion,
                )

    demand = sum(p.width * p.height * p.quantity for p in config.pieces)
    supply = sum(s.width * s.height * s.quantity for s in config.stock_sheets)
    if available and demand > supply:
        result.add_warning(
            "pieces",
            f"Requested area ({demand:g}) exceeds available stock area ({supply:g})",
            "Some pieces will be left unplaced",
        )

    return result
