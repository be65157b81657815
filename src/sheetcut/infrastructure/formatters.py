"""Text formatters for optimization results."""

from __future__ import annotations

from datetime import datetime

from sheetcut.domain import OptimizationResult, SheetLayout, UnitPiece


def group_unplaced(unplaced: tuple[UnitPiece, ...]) -> list[tuple[UnitPiece, int]]:
    """Group unplaced units by source piece, keeping first-seen order.

    Returns:
        One (first unit, count) pair per source piece.
    """
    counts: dict[tuple[int, str], tuple[UnitPiece, int]] = {}
    for unit in unplaced:
        key = (unit.source_index, unit.label)
        first, count = counts.get(key, (unit, 0))
        counts[key] = (first, count + 1)
    return list(counts.values())


class CutReportFormatter:
    """Formats a full cut report: summary, per-sheet cuts and scrap.

    Lengths are printed in the job's own units with ``unit`` appended.
    """

    def __init__(
        self,
        title: str = "Cut Optimization Report",
        unit: str = "mm",
        include_timestamp: bool = False,
    ) -> None:
        self.title = title
        self.unit = unit
        self.include_timestamp = include_timestamp

    def _dims(self, width: float, height: float) -> str:
        return f"{width:g} x {height:g} {self.unit}"

    def format(self, result: OptimizationResult) -> str:
        """Format the report as plain text."""
        lines = [
            self.title,
            "=" * 60,
            "",
            "Summary",
            "-" * 60,
            f"Total Sheets Used: {result.total_sheets}",
            f"Efficiency: {result.efficiency:.1f}%",
            f"Average Waste: {result.total_waste:.1f}%",
            f"Pieces Cut: {result.placed_count} of {result.requested_count}",
        ]

        for number, layout in enumerate(result.layouts, start=1):
            lines.append("")
            lines.extend(self._format_layout(number, layout))

        if result.unplaced_pieces:
            lines.append("")
            lines.extend(self._format_unplaced(result.unplaced_pieces))

        if result.budget_exhausted:
            lines.append("")
            lines.append(
                "Note: the search budget ran out before every piece was evaluated."
            )

        if self.include_timestamp:
            lines.append("")
            lines.append(f"Generated on {datetime.now():%Y-%m-%d %H:%M:%S}")

        return "\n".join(lines)

    def _format_layout(self, number: int, layout: SheetLayout) -> list[str]:
        sheet = layout.sheet
        lines = [
            f"Sheet #{number}: {sheet.label}",
            f"  Dimensions: {self._dims(sheet.width, sheet.height)}",
            f"  Waste: {layout.waste_percentage:.1f}%",
            f"  Pieces Cut: {layout.piece_count}",
            f"  Scrap Pieces: {len(layout.remaining_pieces)}",
            "  Cut Pieces:",
        ]
        for placed in layout.placed_pieces:
            line = (
                f"    - {placed.piece.label}: "
                f"{self._dims(placed.placed_width, placed.placed_height)} "
                f"at ({placed.x:g}, {placed.y:g})"
            )
            if placed.rotated:
                line += " [Rotated]"
            lines.append(line)

        if layout.remaining_pieces:
            lines.append("  Remaining Scrap Pieces:")
            for offcut in layout.remaining_pieces:
                lines.append(
                    f"    - {self._dims(offcut.width, offcut.height)} "
                    f"at ({offcut.x:g}, {offcut.y:g})"
                )
        return lines

    def _format_unplaced(self, unplaced: tuple[UnitPiece, ...]) -> list[str]:
        lines = [f"Unplaced Pieces: {len(unplaced)}"]
        for unit, count in group_unplaced(unplaced):
            lines.append(
                f"  - {unit.label}: {self._dims(unit.width, unit.height)} x{count}"
            )
        return lines
