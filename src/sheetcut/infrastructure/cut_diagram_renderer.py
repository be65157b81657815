"""Cut diagram rendering for sheet layouts.

This module provides SVG and ASCII rendering of sheet layouts showing piece
placements, dimensions, rotation indicators, and reusable offcuts.

Layout coordinates have their origin at the bottom-left of the sheet while
SVG and terminal rows grow downwards, so both renderers flip the y axis.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from sheetcut.domain import (
    OptimizationResult,
    PlacedPiece,
    RemainingPiece,
    SheetLayout,
)

# Fill colors cycled by the piece's position in the input list
PIECE_COLORS: tuple[str, ...] = (
    "#87CEEB",  # Sky blue
    "#90EE90",  # Light green
    "#DDA0DD",  # Plum
    "#F0E68C",  # Khaki
    "#FFB6C1",  # Light pink
    "#FFA07A",  # Light salmon
    "#DEB887",  # Burlywood
    "#E6E6FA",  # Lavender
)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


class CutDiagramRenderer:
    """Renders cut diagrams in SVG and ASCII formats.

    Attributes:
        scale: Pixels per sheet unit for SVG rendering.
        piece_stroke: Stroke color for piece outlines.
        offcut_fill: Fill color for reusable offcuts.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to show piece dimensions.
        show_labels: Whether to show piece labels.
        show_offcuts: Whether to draw reusable offcuts.
        use_piece_colors: Whether to color pieces by their source piece.
    """

    def __init__(
        self,
        scale: float = 0.5,
        piece_fill: str = "#ADD8E6",  # Light blue
        piece_stroke: str = "#000000",
        offcut_fill: str = "#E8E8E8",  # Light gray
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
        show_offcuts: bool = True,
        use_piece_colors: bool = True,
    ) -> None:
        self.scale = scale
        self.piece_fill = piece_fill
        self.piece_stroke = piece_stroke
        self.offcut_fill = offcut_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels
        self.show_offcuts = show_offcuts
        self.use_piece_colors = use_piece_colors

    def render_svg(
        self,
        layout: SheetLayout,
        sheet_number: int = 1,
        total_sheets: int = 1,
    ) -> str:
        """Generate SVG cut diagram for a single sheet.

        Args:
            layout: Sheet layout with placed pieces.
            sheet_number: One-based position of the sheet in the result.
            total_sheets: Total number of sheets (for header display).

        Returns:
            SVG string representation of the layout.
        """
        sheet = layout.sheet
        header_height = 30
        svg_width = sheet.width * self.scale
        svg_height = sheet.height * self.scale + header_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            self._render_header(
                layout, sheet_number, total_sheets, svg_width, header_height
            ),
            "  <!-- Sheet outline -->",
            f'  <rect x="0" y="{header_height}" '
            f'width="{svg_width}" height="{sheet.height * self.scale}" '
            f'fill="#F5F5F5" stroke="{self.piece_stroke}" stroke-width="2"/>',
        ]

        if self.show_offcuts and layout.remaining_pieces:
            parts.append("  <!-- Offcuts -->")
            for offcut in layout.remaining_pieces:
                parts.append(self._render_offcut(offcut, layout, header_height))

        parts.append("  <!-- Placed pieces -->")
        for placement in layout.placed_pieces:
            parts.append(self._render_piece(placement, layout, header_height))

        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, result: OptimizationResult) -> list[str]:
        """Generate SVG cut diagrams for all sheets, one string per sheet."""
        total = result.total_sheets
        return [
            self.render_svg(layout, i + 1, total)
            for i, layout in enumerate(result.layouts)
        ]

    def _to_svg_y(self, layout: SheetLayout, y: float, height: float, header: float) -> float:
        """SVG y of a rectangle's top edge given its bottom-left layout y."""
        return header + (layout.sheet.height - y - height) * self.scale

    def _render_header(
        self,
        layout: SheetLayout,
        sheet_number: int,
        total_sheets: int,
        svg_width: float,
        header_height: float,
    ) -> str:
        sheet = layout.sheet
        header_text = escape(
            f"Sheet {sheet_number} of {total_sheets} - {sheet.label} "
            f"({sheet.width:g} x {sheet.height:g}) - "
            f"{layout.waste_percentage:.1f}% waste"
        )
        return (
            f"  <!-- Header -->\n"
            f'  <rect x="0" y="0" width="{svg_width}" height="{header_height}" '
            f'fill="#E0E0E0"/>\n'
            f'  <text x="10" y="{header_height - 8}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{header_text}</text>'
        )

    def _piece_color(self, placement: PlacedPiece) -> str:
        if not self.use_piece_colors:
            return self.piece_fill
        return PIECE_COLORS[placement.piece.source_index % len(PIECE_COLORS)]

    def _render_piece(
        self,
        placement: PlacedPiece,
        layout: SheetLayout,
        header_height: float,
    ) -> str:
        w = placement.placed_width * self.scale
        h = placement.placed_height * self.scale
        x = placement.x * self.scale
        y = self._to_svg_y(layout, placement.y, placement.placed_height, header_height)
        fill = self._piece_color(placement)

        rect = (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" stroke="{self.piece_stroke}"/>'
        )

        font_size = min(12, min(w, h) / 6)
        if font_size < 6:
            # Too small for text
            return f"  {rect}"

        dims = f"{placement.placed_width:g} x {placement.placed_height:g}"
        if placement.rotated:
            dims += " (R)"

        text_x = x + w / 2
        text_y = y + h / 2
        parts = ["  <g>", f"    {rect}"]
        if self.show_labels:
            parts.append(
                f'    <text x="{text_x}" y="{text_y - font_size / 2}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size}" fill="{self.text_color}">'
                f"{escape(placement.piece.label)}</text>"
            )
        if self.show_dimensions:
            dims_y = text_y + font_size / 2 + 2 if self.show_labels else text_y
            parts.append(
                f'    <text x="{text_x}" y="{dims_y}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size * 0.8}" fill="{self.text_color}">{dims}</text>'
            )
        parts.append("  </g>")
        return "\n".join(parts)

    def _render_offcut(
        self,
        offcut: RemainingPiece,
        layout: SheetLayout,
        header_height: float,
    ) -> str:
        x = offcut.x * self.scale
        y = self._to_svg_y(layout, offcut.y, offcut.height, header_height)
        w = offcut.width * self.scale
        h = offcut.height * self.scale
        return (
            f'  <rect class="offcut" x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{self.offcut_fill}" stroke="#999999" stroke-dasharray="5,5"/>'
        )

    def render_combined_svg(self, result: OptimizationResult) -> str:
        """Generate a single SVG with all sheets stacked vertically.

        Args:
            result: Complete optimization result.

        Returns:
            Combined SVG string with all sheets.
        """
        if not result.layouts:
            return (
                '<svg width="100" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No sheets to display</text></svg>'
            )

        header_height = 30
        sheet_spacing = 20
        svg_width = max(layout.sheet.width for layout in result.layouts) * self.scale
        svg_height = sum(
            layout.sheet.height * self.scale + header_height + sheet_spacing
            for layout in result.layouts
        )

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
        ]

        y_offset = 0.0
        for number, sheet_svg in enumerate(self.render_all_svg(result), start=1):
            layout = result.layouts[number - 1]
            parts.append(f'  <g transform="translate(0, {y_offset})">')
            parts.append(f"    <!-- Sheet {number} -->")

            # Content between the opening <svg ...> and closing </svg>
            start_idx = sheet_svg.find(">") + 1
            end_idx = sheet_svg.rfind("</svg>")
            for line in sheet_svg[start_idx:end_idx].strip().split("\n"):
                if line.strip():
                    parts.append(f"  {line}")

            parts.append("  </g>")
            y_offset += layout.sheet.height * self.scale + header_height + sheet_spacing

        parts.append("</svg>")
        return "\n".join(parts)

    def render_ascii(
        self,
        layout: SheetLayout,
        width: int = 80,
        sheet_number: int = 1,
        total_sheets: int = 1,
    ) -> str:
        """Generate ASCII cut diagram for a single sheet.

        Args:
            layout: Sheet layout with placed pieces.
            width: Terminal width in characters.
            sheet_number: One-based position of the sheet in the result.
            total_sheets: Total number of sheets (for header display).

        Returns:
            ASCII string representation of the layout, top edge first.
        """
        sheet = layout.sheet
        usable_width = width - 2
        scale_x = usable_width / sheet.width

        # Terminal cells are about twice as tall as they are wide
        grid_height = max(int(usable_width * sheet.height / sheet.width * 0.5), 10)
        scale_y = grid_height / sheet.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for placement in layout.placed_pieces:
            self._draw_piece_ascii(grid, placement, scale_x, scale_y)

        lines = [
            f"Sheet {sheet_number} of {total_sheets} - {sheet.label} "
            f"({sheet.width:g} x {sheet.height:g}) - "
            f"{layout.waste_percentage:.1f}% waste",
            "+" + "-" * usable_width + "+",
        ]
        # Row 0 holds the bottom of the sheet
        for row in reversed(grid):
            lines.append("|" + "".join(row) + "|")
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_piece_ascii(
        self,
        grid: list[list[str]],
        placement: PlacedPiece,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0

        def clamp(value: float, limit: int) -> int:
            return max(0, min(int(value), limit - 1))

        x1 = clamp(placement.x * scale_x, grid_width)
        x2 = clamp((placement.x + placement.placed_width) * scale_x, grid_width)
        y1 = clamp(placement.y * scale_y, grid_height)
        y2 = clamp((placement.y + placement.placed_height) * scale_y, grid_height)

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        # Label under the top edge, dimensions below it
        dims = f"{placement.placed_width:g}x{placement.placed_height:g}"
        if placement.rotated:
            dims += "R"
        for row, text in ((y2 - 1, placement.piece.label), (y2 - 2, dims)):
            if row <= y1:
                break
            text = text[: max(0, x2 - x1 - 1)]
            for i, char in enumerate(text):
                grid[row][x1 + 1 + i] = char

    def render_all_ascii(self, result: OptimizationResult, width: int = 80) -> str:
        """Generate ASCII cut diagrams for all sheets followed by a summary."""
        if not result.layouts:
            return "No sheets to display."

        total = result.total_sheets
        parts: list[str] = []
        for number, layout in enumerate(result.layouts, start=1):
            parts.append(self.render_ascii(layout, width, number, total))
            parts.append("")

        parts.append("=" * width)
        parts.append(
            f"SUMMARY: {_plural(total, 'sheet')}, "
            f"{result.total_waste:.1f}% total waste"
        )
        if result.unplaced_count:
            parts.append(f"  Unplaced: {_plural(result.unplaced_count, 'piece')}")
        return "\n".join(parts)

    def render_waste_summary(self, result: OptimizationResult) -> str:
        """Generate text summary of waste, offcuts and unplaced pieces."""
        lines: list[str] = [
            "CUT OPTIMIZATION SUMMARY",
            "=" * 40,
            f"Total Sheets: {result.total_sheets}",
            f"Total Waste: {result.total_waste:.1f}%",
            f"Efficiency: {result.efficiency:.1f}%",
            f"Pieces Placed: {result.placed_count} of {result.requested_count}",
            "",
            "Per-Sheet Details:",
        ]

        for number, layout in enumerate(result.layouts, start=1):
            lines.append(
                f"  Sheet {number}: {layout.sheet.label}, "
                f"{_plural(layout.piece_count, 'piece')}, "
                f"{layout.waste_percentage:.1f}% waste"
            )

        offcuts = result.remaining_pieces
        if offcuts:
            lines.append("")
            lines.append(f"Reusable Offcuts: {len(offcuts)}")
            for offcut in offcuts:
                lines.append(
                    f"  {offcut.width:g} x {offcut.height:g} "
                    f"at ({offcut.x:g}, {offcut.y:g}) from {offcut.sheet_label}"
                )

        if result.unplaced_pieces:
            lines.append("")
            lines.append(f"Unplaced Pieces: {result.unplaced_count}")
            for unit in result.unplaced_pieces:
                lines.append(f"  {unit.label} ({unit.width:g} x {unit.height:g})")

        if result.budget_exhausted:
            lines.append("")
            lines.append("Search budget exhausted before all pieces were evaluated.")

        return "\n".join(lines)
