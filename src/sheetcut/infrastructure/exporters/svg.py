"""SVG exporter for cut diagrams.

Wraps CutDiagramRenderer to write every sheet of a result into one SVG, or
one SVG per sheet.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from sheetcut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from sheetcut.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from sheetcut.domain import OptimizationResult


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for cut layout diagrams.

    Attributes:
        format_name: "svg"
        file_extension: "svg"
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(
        self,
        scale: float = 0.5,
        show_dimensions: bool = True,
        show_labels: bool = True,
        show_offcuts: bool = True,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per sheet unit (default 0.5, so a 2000 mm sheet is
                1000 px wide).
            show_dimensions: Whether to show piece dimensions.
            show_labels: Whether to show piece labels.
            show_offcuts: Whether to draw reusable offcuts.
        """
        self.renderer = CutDiagramRenderer(
            scale=scale,
            show_dimensions=show_dimensions,
            show_labels=show_labels,
            show_offcuts=show_offcuts,
        )

    def export(self, result: OptimizationResult, path: Path) -> None:
        """Write all sheets stacked vertically into one SVG file."""
        path.write_text(self.export_string(result), encoding="utf-8")

    def export_string(self, result: OptimizationResult) -> str:
        return self.renderer.render_combined_svg(result)

    def export_individual_sheets(
        self, result: OptimizationResult, base_path: Path
    ) -> list[Path]:
        """Write one SVG file per sheet.

        Args:
            result: The optimization result.
            base_path: Files are named {stem}_1.svg, {stem}_2.svg, etc. A
                single-sheet result is written to ``base_path`` itself.

        Returns:
            Paths of the created files.
        """
        svgs = self.renderer.render_all_svg(result)
        created: list[Path] = []
        for i, svg_content in enumerate(svgs, start=1):
            if len(svgs) == 1:
                file_path = base_path
            else:
                suffix = base_path.suffix or ".svg"
                file_path = base_path.parent / f"{base_path.stem}_{i}{suffix}"
            file_path.write_text(svg_content, encoding="utf-8")
            created.append(file_path)
        return created
