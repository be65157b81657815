"""PDF cut report exporter.

Prints the cut report on A4 pages with reportlab: the summary first, then
for each sheet a scaled drawing followed by its cut list and scrap list.
Pieces and offcuts are drawn with the sheet's bottom-left origin, which is
also the PDF page origin, so no axis flip is needed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas as rl_canvas

from sheetcut.infrastructure.exporters.base import ExporterRegistry
from sheetcut.infrastructure.formatters import group_unplaced

if TYPE_CHECKING:
    from reportlab.pdfgen.canvas import Canvas

    from sheetcut.domain import OptimizationResult, SheetLayout


logger = logging.getLogger(__name__)


PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 20 * mm
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN
DIAGRAM_HEIGHT = 70 * mm

# Colors
SHEET_FILL = HexColor("#F5F5F5")
SHEET_STROKE = HexColor("#333333")
PIECE_FILL = HexColor("#BBDEFB")
PIECE_STROKE = HexColor("#1565C0")
OFFCUT_FILL = HexColor("#C8E6C9")
OFFCUT_STROKE = HexColor("#2E7D32")
TEXT_COLOR = HexColor("#212121")


class _PageCursor:
    """Writes lines top to bottom, starting a new page when one fills up."""

    def __init__(self, pdf: Canvas) -> None:
        self.pdf = pdf
        self.y = PAGE_HEIGHT - MARGIN

    def new_page(self) -> None:
        self.pdf.showPage()
        self.y = PAGE_HEIGHT - MARGIN

    def reserve(self, height: float) -> None:
        if self.y - height < MARGIN:
            self.new_page()

    def text(
        self,
        line: str,
        size: float = 10,
        bold: bool = False,
        indent: float = 0,
        spacing: float = 1.4,
    ) -> None:
        leading = size * spacing
        self.reserve(leading)
        self.y -= leading
        self.pdf.setFillColor(TEXT_COLOR)
        self.pdf.setFont("Helvetica-Bold" if bold else "Helvetica", size)
        self.pdf.drawString(MARGIN + indent, self.y, line)

    def gap(self, height: float = 4 * mm) -> None:
        self.y -= height


@ExporterRegistry.register("pdf")
class PdfExporter:
    """Exports a printable cut report as PDF.

    Attributes:
        format_name: "pdf"
        file_extension: "pdf"
        unit: Length unit appended to dimensions.
        include_timestamp: Whether to print the generation time.
        include_diagrams: Whether to draw each sheet above its cut list.
        compress: Whether page content streams are compressed.
    """

    format_name: ClassVar[str] = "pdf"
    file_extension: ClassVar[str] = "pdf"
    media_type: ClassVar[str] = "application/pdf"

    def __init__(
        self,
        title: str = "Cut Optimization Report",
        unit: str = "mm",
        include_timestamp: bool = True,
        include_diagrams: bool = True,
        compress: bool = True,
    ) -> None:
        self.title = title
        self.unit = unit
        self.include_timestamp = include_timestamp
        self.include_diagrams = include_diagrams
        self.compress = compress

    def export(self, result: OptimizationResult, path: Path) -> None:
        path.write_bytes(self.export_bytes(result))
        logger.info(
            "Exported PDF report with %d sheet(s) to %s", result.total_sheets, path
        )

    def export_string(self, result: OptimizationResult) -> str:
        """PDF does not support string export.

        Raises:
            NotImplementedError: Always raises this exception.
        """
        raise NotImplementedError(
            "PDF format is binary and does not support string export. "
            "Use export() to write to a file instead."
        )

    def export_bytes(self, result: OptimizationResult) -> bytes:
        """Render the report and return the PDF document."""
        buffer = BytesIO()
        pdf = rl_canvas.Canvas(
            buffer, pagesize=A4, pageCompression=1 if self.compress else 0
        )
        pdf.setTitle(self.title)
        pdf.setAuthor("sheetcut")

        cursor = _PageCursor(pdf)
        self._draw_summary(cursor, result)

        for number, layout in enumerate(result.layouts, start=1):
            cursor.gap()
            self._draw_layout(cursor, number, layout)

        if result.unplaced_pieces:
            cursor.gap()
            cursor.text(
                f"Unplaced Pieces: {result.unplaced_count}", size=12, bold=True
            )
            for unit, count in group_unplaced(result.unplaced_pieces):
                cursor.text(
                    f"- {unit.label}: {self._dims(unit.width, unit.height)} x{count}",
                    indent=5 * mm,
                )

        if result.budget_exhausted:
            cursor.gap()
            cursor.text(
                "Note: the search budget ran out before every piece was evaluated.",
                size=9,
            )

        if self.include_timestamp:
            pdf.setFont("Helvetica-Oblique", 8)
            pdf.drawCentredString(
                PAGE_WIDTH / 2,
                MARGIN / 2,
                f"Generated on {datetime.now():%Y-%m-%d %H:%M:%S}",
            )

        pdf.save()
        return buffer.getvalue()

    def _dims(self, width: float, height: float) -> str:
        return f"{width:g} x {height:g} {self.unit}"

    def _draw_summary(self, cursor: _PageCursor, result: OptimizationResult) -> None:
        cursor.text(self.title, size=18, bold=True)
        cursor.gap()
        cursor.text("Summary", size=14, bold=True)
        cursor.text(f"Total Sheets Used: {result.total_sheets}")
        cursor.text(f"Efficiency: {result.efficiency:.1f}%")
        cursor.text(f"Average Waste: {result.total_waste:.1f}%")
        cursor.text(f"Pieces Cut: {result.placed_count} of {result.requested_count}")

    def _draw_layout(
        self, cursor: _PageCursor, number: int, layout: SheetLayout
    ) -> None:
        sheet = layout.sheet
        # Keep the heading on the same page as the sheet details
        cursor.reserve(30 * mm)
        cursor.text(f"Sheet #{number}: {sheet.label}", size=12, bold=True)
        cursor.text(f"Dimensions: {self._dims(sheet.width, sheet.height)}")
        cursor.text(f"Waste: {layout.waste_percentage:.1f}%")
        cursor.text(f"Pieces Cut: {layout.piece_count}")
        cursor.text(f"Scrap Pieces: {len(layout.remaining_pieces)}")

        if self.include_diagrams:
            self._draw_diagram(cursor, layout)

        cursor.text("Cut Pieces:", bold=True, indent=5 * mm)
        for placed in layout.placed_pieces:
            line = (
                f"- {placed.piece.label}: "
                f"{self._dims(placed.placed_width, placed.placed_height)} "
                f"at ({placed.x:g}, {placed.y:g})"
            )
            if placed.rotated:
                line += " [Rotated]"
            cursor.text(line, indent=10 * mm)

        if layout.remaining_pieces:
            cursor.text("Remaining Scrap Pieces:", bold=True, indent=5 * mm)
            for offcut in layout.remaining_pieces:
                cursor.text(
                    f"- {self._dims(offcut.width, offcut.height)} "
                    f"at ({offcut.x:g}, {offcut.y:g})",
                    indent=10 * mm,
                )

    def _draw_diagram(self, cursor: _PageCursor, layout: SheetLayout) -> None:
        sheet = layout.sheet
        scale = min(CONTENT_WIDTH / sheet.width, DIAGRAM_HEIGHT / sheet.height)
        width = sheet.width * scale
        height = sheet.height * scale

        cursor.reserve(height + 4 * mm)
        cursor.gap(2 * mm)
        pdf = cursor.pdf
        ox = MARGIN
        oy = cursor.y - height

        pdf.setFillColor(SHEET_FILL)
        pdf.setStrokeColor(SHEET_STROKE)
        pdf.setLineWidth(1)
        pdf.rect(ox, oy, width, height, fill=1, stroke=1)

        pdf.setFillColor(OFFCUT_FILL)
        pdf.setStrokeColor(OFFCUT_STROKE)
        pdf.setLineWidth(0.5)
        pdf.setDash(3, 2)
        for offcut in layout.remaining_pieces:
            pdf.rect(
                ox + offcut.x * scale,
                oy + offcut.y * scale,
                offcut.width * scale,
                offcut.height * scale,
                fill=1,
                stroke=1,
            )
        pdf.setDash()

        for placed in layout.placed_pieces:
            px = ox + placed.x * scale
            py = oy + placed.y * scale
            pw = placed.placed_width * scale
            ph = placed.placed_height * scale
            pdf.setFillColor(PIECE_FILL)
            pdf.setStrokeColor(PIECE_STROKE)
            pdf.setLineWidth(0.8)
            pdf.rect(px, py, pw, ph, fill=1, stroke=1)

            # Label only pieces large enough to hold readable text
            if pw > 30 and ph > 10:
                size = max(5, min(8, pw / 10))
                pdf.setFillColor(TEXT_COLOR)
                pdf.setFont("Helvetica", size)
                pdf.drawCentredString(
                    px + pw / 2, py + ph / 2 - size / 3, placed.piece.label
                )

        cursor.y = oy
        cursor.gap(2 * mm)
