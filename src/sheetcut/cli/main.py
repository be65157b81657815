"""Typer CLI for cutting-stock optimization."""

import typer

from sheetcut.cli.commands import optimize_command, validate_command
from sheetcut.infrastructure.exporters import ExporterRegistry

app = typer.Typer(
    name="sheetcut",
    help="Pack rectangular pieces onto stock sheets with minimal waste.",
)

app.command(name="optimize")(optimize_command)
app.command(name="validate")(validate_command)


@app.command()
def formats() -> None:
    """List the registered export formats."""
    for format_name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(format_name)
        typer.echo(f"{format_name:<10} .{exporter_class.file_extension}")


if __name__ == "__main__":
    app()
