"""Tests for PdfExporter."""

from pathlib import Path

import fitz
import pytest

from sheetcut.domain import OptimizationResult, Piece, StockSheet, optimize
from sheetcut.infrastructure.exporters import PdfExporter


def _pdf_text(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as pdf:
        return "".join(page.get_text() for page in pdf)


class TestPdfExporter:
    """Tests for the printable PDF report."""

    def test_metadata(self) -> None:
        """Reports are .pdf files served as application/pdf."""
        assert PdfExporter.file_extension == "pdf"
        assert PdfExporter.media_type == "application/pdf"

    def test_string_export_unsupported(
        self, single_piece_result: OptimizationResult
    ) -> None:
        """PDF is binary and cannot be exported as a string."""
        with pytest.raises(NotImplementedError, match="binary"):
            PdfExporter().export_string(single_piece_result)

    def test_summary_and_sheet_details(
        self, single_piece_result: OptimizationResult
    ) -> None:
        """The summary and per-sheet figures are printed."""
        text = _pdf_text(PdfExporter().export_bytes(single_piece_result))
        assert "Cut Optimization Report" in text
        assert "Total Sheets Used: 1" in text
        assert "Efficiency: 12.0%" in text
        assert "Average Waste: 88.0%" in text
        assert "Pieces Cut: 1 of 1" in text
        assert "Sheet #1: Glass" in text
        assert "Dimensions: 1000 x 1000 mm" in text
        assert "Generated on" in text

    def test_cut_list_and_scrap_list(
        self, single_piece_result: OptimizationResult
    ) -> None:
        """Every placed piece and offcut is listed with its position."""
        text = _pdf_text(PdfExporter().export_bytes(single_piece_result))
        assert "Cut Pieces:" in text
        assert "- Pane: 400 x 300 mm at (0, 0)" in text
        assert "Remaining Scrap Pieces:" in text
        assert "- 600 x 1000 mm at (400, 0)" in text
        assert "- 400 x 700 mm at (0, 300)" in text

    def test_rotated_pieces_flagged(self) -> None:
        """Rotated placements carry the rotation flag."""
        result = optimize(
            [StockSheet(label="Strip stock", width=1000, height=500)],
            [Piece(label="Strip", width=300, height=1000)],
        )
        text = _pdf_text(PdfExporter().export_bytes(result))
        assert "- Strip: 1000 x 300 mm at (0, 0) [Rotated]" in text

    def test_unplaced_pieces_listed(
        self, multi_sheet_result: OptimizationResult
    ) -> None:
        """Pieces that fit nowhere are listed after the sheets."""
        text = _pdf_text(PdfExporter().export_bytes(multi_sheet_result))
        assert "Unplaced Pieces: 1" in text
        assert "- Huge: 2000 x 100 mm x1" in text

    def test_long_reports_span_pages(self) -> None:
        """Sheets that do not fit on one page continue on the next."""
        result = optimize(
            [StockSheet(label="Glass", width=1000, height=1000, quantity=3)],
            [Piece(label="Big", width=900, height=900, quantity=3)],
        )
        data = PdfExporter().export_bytes(result)
        with fitz.open(stream=data, filetype="pdf") as pdf:
            assert pdf.page_count >= 2
        text = _pdf_text(data)
        assert [n for n in (1, 2, 3) if f"Sheet #{n}: Glass" in text] == [1, 2, 3]

    def test_diagram_labels_pieces(
        self, single_piece_result: OptimizationResult
    ) -> None:
        """The sheet drawing labels each piece in addition to the cut list."""
        with_diagram = _pdf_text(PdfExporter().export_bytes(single_piece_result))
        without = _pdf_text(
            PdfExporter(include_diagrams=False).export_bytes(single_piece_result)
        )
        assert with_diagram.count("Pane") == 2
        assert without.count("Pane") == 1

    def test_unit_and_no_timestamp(
        self, single_piece_result: OptimizationResult
    ) -> None:
        """Unit and timestamp are configurable."""
        exporter = PdfExporter(unit="in", include_timestamp=False)
        text = _pdf_text(exporter.export_bytes(single_piece_result))
        assert "400 x 300 in" in text
        assert "Generated on" not in text

    def test_export_writes_file(
        self, tmp_path: Path, single_piece_result: OptimizationResult
    ) -> None:
        """export() writes a PDF document."""
        path = tmp_path / "report.pdf"
        PdfExporter(compress=False).export(single_piece_result, path)
        data = path.read_bytes()
        assert data.startswith(b"%PDF-")
        assert "Sheet #1: Glass" in _pdf_text(data)
