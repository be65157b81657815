"""Output handling for the optimize command.

Renders a result to stdout or a file in one of the console formats, and
handles the multi-format file export behind ``--output-formats``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Callable

import typer

from sheetcut.domain import offcuts_to_stock
from sheetcut.infrastructure import (
    CutDiagramRenderer,
    CutReportFormatter,
    ExporterRegistry,
    ExportManager,
    result_to_json,
    stock_sheets_to_dicts,
)

if TYPE_CHECKING:
    from sheetcut.domain import OptimizationResult

__all__ = [
    "CONSOLE_FORMATS",
    "handle_multi_format_export",
    "render_result",
    "save_offcuts",
]


CONSOLE_FORMATS: dict[str, Callable[["OptimizationResult"], str]] = {
    "text": lambda result: CutReportFormatter().format(result),
    "ascii": lambda result: CutDiagramRenderer().render_all_ascii(result),
    "json": result_to_json,
    "svg": lambda result: CutDiagramRenderer().render_combined_svg(result),
    "summary": lambda result: CutDiagramRenderer().render_waste_summary(result),
}


def render_result(result: "OptimizationResult", output_format: str) -> str:
    """Render a result in a console format.

    Raises:
        typer.Exit: If the format is unknown.
    """
    renderer = CONSOLE_FORMATS.get(output_format)
    if renderer is None:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(CONSOLE_FORMATS)}", err=True)
        raise typer.Exit(code=1)
    return renderer(result)


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: "OptimizationResult",
) -> dict[str, Path]:
    """Handle multi-format export via --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        result: The optimization result to export.

    Returns:
        Mapping of format name to written file.
    """
    available = ExporterRegistry.available_formats()
    if output_formats_str.lower() == "all":
        formats = available
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
    return files


def save_offcuts(result: "OptimizationResult", path: Path) -> int:
    """Write the result's offcuts as a ``stock_sheets`` list for a later job.

    Each offcut keeps the kerf of the sheet it was cut from.

    Returns:
        Number of offcuts written.
    """
    stock = [
        sheet
        for layout in result.layouts
        for sheet in offcuts_to_stock(layout.remaining_pieces, kerf=layout.sheet.kerf)
    ]
    path.write_text(
        json.dumps({"stock_sheets": stock_sheets_to_dicts(stock)}, indent=2),
        encoding="utf-8",
    )
    return len(stock)
