"""Tests for CutReportFormatter."""

from sheetcut.domain import (
    OptimizationResult,
    OptimizerOptions,
    Piece,
    StockSheet,
    optimize,
)
from sheetcut.infrastructure import CutReportFormatter


class TestCutReportFormatter:
    """Tests for the plain-text cut report."""

    def test_summary(self, single_piece_result: OptimizationResult) -> None:
        """The summary block lists the headline numbers."""
        text = CutReportFormatter().format(single_piece_result)
        assert text.startswith("Cut Optimization Report\n")
        assert "Total Sheets Used: 1" in text
        assert "Efficiency: 12.0%" in text
        assert "Average Waste: 88.0%" in text
        assert "Pieces Cut: 1 of 1" in text

    def test_sheet_section(self, single_piece_result: OptimizationResult) -> None:
        """Each sheet lists its cuts and scrap."""
        text = CutReportFormatter().format(single_piece_result)
        assert "Sheet #1: Glass" in text
        assert "  Dimensions: 1000 x 1000 mm" in text
        assert "  Scrap Pieces: 2" in text
        assert "    - Pane: 400 x 300 mm at (0, 0)" in text
        assert "  Remaining Scrap Pieces:" in text
        assert "    - 600 x 1000 mm at (400, 0)" in text

    def test_custom_title_and_unit(self, single_piece_result: OptimizationResult) -> None:
        """Title and unit are configurable."""
        text = CutReportFormatter(title="Shop Run", unit="in").format(single_piece_result)
        assert text.startswith("Shop Run\n")
        assert "400 x 300 in" in text

    def test_rotated_marker(self) -> None:
        """Rotated cuts are marked."""
        result = optimize(
            [StockSheet(label="Narrow", width=300, height=600)],
            [Piece(label="Rail", width=500, height=200)],
        )
        text = CutReportFormatter().format(result)
        assert "    - Rail: 200 x 500 mm at (0, 0) [Rotated]" in text

    def test_unplaced_grouped(self) -> None:
        """Copies of the same unplaced piece print as one line."""
        result = optimize(
            [StockSheet(label="A", width=100, height=100)],
            [Piece(label="Slab", width=500, height=500, quantity=3)],
        )
        text = CutReportFormatter().format(result)
        assert "Unplaced Pieces: 3" in text
        assert "  - Slab: 500 x 500 mm x3" in text

    def test_budget_note(self) -> None:
        """An exhausted budget is mentioned."""
        result = optimize(
            [StockSheet(label="A", width=1000, height=1000)],
            [Piece(label="P", width=100, height=100, quantity=2)],
            OptimizerOptions(max_iterations=2),
        )
        assert "search budget ran out" in CutReportFormatter().format(result)

    def test_timestamp_optional(self, single_piece_result: OptimizationResult) -> None:
        """The timestamp line appears only when requested."""
        assert "Generated on" not in CutReportFormatter().format(single_piece_result)
        stamped = CutReportFormatter(include_timestamp=True).format(single_piece_result)
        assert "Generated on" in stamped
