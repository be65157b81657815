"""Plain-text cut report exporter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from sheetcut.infrastructure.exporters.base import ExporterRegistry
from sheetcut.infrastructure.formatters import CutReportFormatter

if TYPE_CHECKING:
    from sheetcut.domain import OptimizationResult


@ExporterRegistry.register("report")
class ReportExporter:
    """Writes the cut report produced by CutReportFormatter.

    Attributes:
        format_name: "report"
        file_extension: "txt"
    """

    format_name: ClassVar[str] = "report"
    file_extension: ClassVar[str] = "txt"
    media_type: ClassVar[str] = "text/plain"

    def __init__(self, unit: str = "mm", include_timestamp: bool = True) -> None:
        self.formatter = CutReportFormatter(
            unit=unit, include_timestamp=include_timestamp
        )

    def export(self, result: OptimizationResult, path: Path) -> None:
        path.write_text(self.export_string(result), encoding="utf-8")

    def export_string(self, result: OptimizationResult) -> str:
        return self.formatter.format(result) + "\n"
