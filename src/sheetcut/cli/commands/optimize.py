"""Optimize command: pack a job file's pieces onto its stock sheets."""

import dataclasses
import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from sheetcut.application import OptimizeCuttingCommand
from sheetcut.application.config import (
    ConfigError,
    config_to_optimizer_options,
    config_to_pieces,
    config_to_stock_sheets,
    load_config,
    validate_config,
)
from sheetcut.cli.commands.output_handlers import (
    handle_multi_format_export,
    render_result,
    save_offcuts,
)
from sheetcut.cli.commands.validate import (
    display_load_error,
    display_validation_result,
)
from sheetcut.domain import OptimizerOptions

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _apply_overrides(options: OptimizerOptions, **overrides: Any) -> OptimizerOptions:
    """Replace options given on the command line.

    Raises:
        typer.Exit: If an override is out of range.
    """
    changes = {k: v for k, v in overrides.items() if v is not None}
    try:
        return dataclasses.replace(options, **changes)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def optimize_command(
    job_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file"),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Console output: text, ascii, json, svg, summary",
        ),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write console output to this file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (e.g. 'svg,dxf') or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for --output-formats files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = None,
    grid_size: Annotated[
        float | None,
        typer.Option("--grid-size", help="Offcut detection grid cell size"),
    ] = None,
    min_offcut: Annotated[
        float | None,
        typer.Option("--min-offcut", help="Minimum offcut width and height"),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option("--max-iterations", help="Cap on placement attempts"),
    ] = None,
    time_budget: Annotated[
        float | None,
        typer.Option("--time-budget", help="Search time limit in seconds"),
    ] = None,
    offcuts_file: Annotated[
        Path | None,
        typer.Option(
            "--save-offcuts",
            help="Write reusable offcuts as stock sheets for the next job",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log placement details"),
    ] = False,
) -> None:
    """Optimize a cutting job.

    Pieces that fit no remaining sheet are reported but do not fail the
    command.

    Example:
        sheetcut optimize kitchen-glass.json --format ascii
        sheetcut optimize kitchen-glass.json --output-formats svg,dxf --output-dir out
    """
    configure_logging(verbose)

    try:
        config = load_config(job_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    logger.debug(
        "Loaded job '%s': %d stock sheet type(s), %d piece type(s)",
        config.project_name,
        len(config.stock_sheets),
        len(config.pieces),
    )

    validation = validate_config(config)
    if not validation.is_valid:
        display_validation_result(validation)
        raise typer.Exit(code=1)

    options = _apply_overrides(
        config_to_optimizer_options(config),
        grid_size=grid_size,
        min_offcut_size=min_offcut,
        max_iterations=max_iterations,
        time_budget=time_budget,
    )

    result = OptimizeCuttingCommand().execute(
        config_to_stock_sheets(config),
        config_to_pieces(config),
        options,
    )

    if output_formats:
        handle_multi_format_export(
            output_formats,
            output_dir,
            project_name or config.project_name,
            result,
        )
    else:
        content = render_result(result, output_format.lower())
        if output_file is not None:
            output_file.write_text(content, encoding="utf-8")
            typer.echo(f"Wrote {output_format} output to {output_file}")
        else:
            typer.echo(content)

    if offcuts_file is not None:
        count = save_offcuts(result, offcuts_file)
        typer.echo(f"Saved {count} offcut(s) to {offcuts_file}")

    if result.unplaced_count:
        typer.echo(
            f"Warning: {result.unplaced_count} piece(s) could not be placed. "
            "You may need larger or more stock sheets.",
            err=True,
        )
    if result.budget_exhausted:
        typer.echo(
            "Warning: search budget exhausted before all pieces were evaluated.",
            err=True,
        )
