"""Exporter framework for optimization results.

Registered exporters:
- dxf: DXF drawing of every sheet for CNC cutting tables
- json: Full result, loadable with result_from_dict
- pdf: Printable cut report with sheet drawings
- report: Plain-text cut report
- svg: Cut diagrams with all sheets stacked vertically

Usage:
    from sheetcut.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    svg = ExporterRegistry.get("svg")().export_string(result)

    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["dxf", "svg"], result, project_name="kitchen")
"""

from sheetcut.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from sheetcut.infrastructure.exporters.dxf import DxfExporter
from sheetcut.infrastructure.exporters.pdf import PdfExporter
from sheetcut.infrastructure.exporters.report import ReportExporter
from sheetcut.infrastructure.exporters.result_json import JsonExporter
from sheetcut.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "PdfExporter",
    "ReportExporter",
    "SvgExporter",
]
