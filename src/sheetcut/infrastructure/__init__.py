"""Infrastructure layer - rendering, serialization and file exports."""

from sheetcut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from sheetcut.infrastructure.exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    ReportExporter,
    SvgExporter,
)
from sheetcut.infrastructure.formatters import CutReportFormatter
from sheetcut.infrastructure.serialization import (
    result_from_dict,
    result_from_json,
    result_to_dict,
    result_to_json,
    stock_sheets_to_dicts,
)

__all__ = [
    "CutDiagramRenderer",
    "CutReportFormatter",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "ReportExporter",
    "SvgExporter",
    "result_from_dict",
    "result_from_json",
    "result_to_dict",
    "result_to_json",
    "stock_sheets_to_dicts",
]
