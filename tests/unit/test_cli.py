"""Unit tests for the optimize and formats CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from typer.testing import CliRunner

from sheetcut.cli.main import app


runner = CliRunner()


@pytest.fixture
def job_file(job_data: dict[str, Any], write_job: Callable[..., Path]) -> Path:
    return write_job(job_data)


class TestOptimizeConsoleOutput:
    """Tests for console formats."""

    def test_default_text_report(self, job_file: Path) -> None:
        """The default output is the cut report."""
        result = runner.invoke(app, ["optimize", str(job_file)])
        assert result.exit_code == 0
        assert "Cut Optimization Report" in result.output
        assert "Pieces Cut: 3 of 3" in result.output

    def test_ascii(self, job_file: Path) -> None:
        """--format ascii draws the sheets."""
        result = runner.invoke(app, ["optimize", str(job_file), "-f", "ascii"])
        assert result.exit_code == 0
        assert "SUMMARY: 1 sheet" in result.output

    def test_summary(self, job_file: Path) -> None:
        """--format summary prints the waste summary."""
        result = runner.invoke(app, ["optimize", str(job_file), "--format", "summary"])
        assert result.exit_code == 0
        assert "CUT OPTIMIZATION SUMMARY" in result.output

    def test_json(self, job_file: Path) -> None:
        """--format json prints the serialized result."""
        result = runner.invoke(app, ["optimize", str(job_file), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["placed_count"] == 3
        assert data["unplaced_pieces"] == []

    def test_svg(self, job_file: Path) -> None:
        """--format svg prints the combined diagram."""
        result = runner.invoke(app, ["optimize", str(job_file), "--format", "SVG"])
        assert result.exit_code == 0
        assert result.output.startswith("<svg")

    def test_unknown_format(self, job_file: Path) -> None:
        """An unknown console format fails."""
        result = runner.invoke(app, ["optimize", str(job_file), "--format", "xml"])
        assert result.exit_code == 1
        assert "Unknown format: xml" in result.output

    def test_output_file(self, job_file: Path, tmp_path: Path) -> None:
        """--output writes the rendering to a file."""
        out = tmp_path / "report.txt"
        result = runner.invoke(app, ["optimize", str(job_file), "-o", str(out)])
        assert result.exit_code == 0
        assert f"Wrote text output to {out}" in result.output
        assert "Sheet #1" in out.read_text(encoding="utf-8")


class TestOptimizeExport:
    """Tests for --output-formats."""

    def test_selected_formats(self, job_file: Path, tmp_path: Path) -> None:
        """Requested formats are written with the project name."""
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            [
                "optimize",
                str(job_file),
                "--output-formats",
                "svg, json",
                "--output-dir",
                str(out),
                "--project-name",
                "run1",
            ],
        )
        assert result.exit_code == 0
        assert "Exported files:" in result.output
        assert (out / "run1_svg.svg").exists()
        assert (out / "run1_json.json").exists()
        assert not (out / "run1_dxf.dxf").exists()

    def test_all_formats_use_job_project_name(
        self, job_file: Path, tmp_path: Path
    ) -> None:
        """'all' exports every registered format."""
        result = runner.invoke(
            app,
            ["optimize", str(job_file), "--output-formats", "all", "--output-dir", str(tmp_path)],
        )
        assert result.exit_code == 0
        names = sorted(p.name for p in tmp_path.glob("kitchen-glass_*"))
        assert names == [
            "kitchen-glass_dxf.dxf",
            "kitchen-glass_json.json",
            "kitchen-glass_pdf.pdf",
            "kitchen-glass_report.txt",
            "kitchen-glass_svg.svg",
        ]

    def test_unknown_export_format(self, job_file: Path, tmp_path: Path) -> None:
        """Unknown export formats fail before writing anything."""
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            ["optimize", str(job_file), "--output-formats", "svg,step", "--output-dir", str(out)],
        )
        assert result.exit_code == 1
        assert "Unknown formats: step" in result.output
        assert not out.exists()


class TestOptimizeOptions:
    """Tests for optimizer overrides and side outputs."""

    def test_invalid_override(self, job_file: Path) -> None:
        """Out-of-range overrides are rejected."""
        result = runner.invoke(app, ["optimize", str(job_file), "--grid-size", "0"])
        assert result.exit_code == 1
        assert "Grid size must be positive" in result.output

    def test_budget_warning(self, job_file: Path) -> None:
        """A tiny iteration cap is reported."""
        result = runner.invoke(
            app, ["optimize", str(job_file), "--max-iterations", "1"]
        )
        assert result.exit_code == 0
        assert "search budget exhausted" in result.output

    def test_save_offcuts(self, job_file: Path, tmp_path: Path) -> None:
        """--save-offcuts writes reusable stock for a later job."""
        offcuts = tmp_path / "offcuts.json"
        result = runner.invoke(
            app, ["optimize", str(job_file), "--save-offcuts", str(offcuts)]
        )
        assert result.exit_code == 0
        data = json.loads(offcuts.read_text(encoding="utf-8"))
        sheets = data["stock_sheets"]
        assert sheets
        assert f"Saved {len(sheets)} offcut(s)" in result.output
        assert all(sheet["id"].startswith("remaining-float-0-") for sheet in sheets)


class TestOptimizeErrors:
    """Tests for job errors and unplaced pieces."""

    def test_unplaced_pieces_warn_but_succeed(
        self, job_data: dict[str, Any], write_job: Callable[..., Path]
    ) -> None:
        """Unplaced pieces are a warning, not a failure."""
        job_data["pieces"].append({"label": "Table", "width": 2000, "height": 2000})
        result = runner.invoke(app, ["optimize", str(write_job(job_data))])
        assert result.exit_code == 0
        assert "Warning: 1 piece(s) could not be placed" in result.output

    def test_duplicate_ids_fail(
        self, job_data: dict[str, Any], write_job: Callable[..., Path]
    ) -> None:
        """Whole-job errors stop the run."""
        job_data["pieces"][0]["id"] = "x"
        job_data["pieces"][1]["id"] = "x"
        result = runner.invoke(app, ["optimize", str(write_job(job_data))])
        assert result.exit_code == 1
        assert "Duplicate id" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing job file fails."""
        result = runner.invoke(app, ["optimize", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_schema_error(
        self, job_data: dict[str, Any], write_job: Callable[..., Path]
    ) -> None:
        """Schema errors name the offending field."""
        job_data["pieces"][0]["width"] = 0
        result = runner.invoke(app, ["optimize", str(write_job(job_data))])
        assert result.exit_code == 1
        assert "pieces[0].width" in result.output


class TestFormatsCommand:
    """Tests for the formats command."""

    def test_lists_formats_with_extensions(self) -> None:
        """Every registered format is listed with its extension."""
        result = runner.invoke(app, ["formats"])
        assert result.exit_code == 0
        lines = result.output.strip().split("\n")
        assert [line.split() for line in lines] == [
            ["dxf", ".dxf"],
            ["json", ".json"],
            ["pdf", ".pdf"],
            ["report", ".txt"],
            ["svg", ".svg"],
        ]
