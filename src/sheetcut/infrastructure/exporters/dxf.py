"""DXF format exporter for cutting layouts.

Generates 2D DXF files (R2010 format) for CNC cutting tables. Each used sheet
is drawn at true size, left to right with a gap between sheets, using the
same bottom-left origin as the layout coordinates.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from sheetcut.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from sheetcut.domain import OptimizationResult, PlacedPiece, SheetLayout


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "SHEET": {"color": 7, "linetype": "CONTINUOUS"},  # White - stock outlines
    "PIECES": {"color": 3, "linetype": "CONTINUOUS"},  # Green - cut outlines
    "OFFCUTS": {"color": 8, "linetype": "DASHED"},  # Gray - reusable offcuts
    "LABELS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - text labels
}


def _rectangle(x: float, y: float, width: float, height: float) -> list[tuple[float, float]]:
    return [
        (x, y),
        (x + width, y),
        (x + width, y + height),
        (x, y + height),
        (x, y),
    ]


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports sheet layouts as DXF drawings.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
        sheet_spacing: Gap between consecutive sheets, in sheet units.
        include_offcuts: Whether to draw offcut outlines.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(
        self,
        sheet_spacing: float = 100.0,
        include_offcuts: bool = True,
    ) -> None:
        if sheet_spacing < 0:
            raise ValueError("Sheet spacing must be non-negative")
        self.sheet_spacing = sheet_spacing
        self.include_offcuts = include_offcuts

    def export(self, result: OptimizationResult, path: Path) -> None:
        doc = self.build_document(result)
        doc.saveas(path)
        logger.info("Exported DXF with %d sheet(s) to %s", result.total_sheets, path)

    def export_string(self, result: OptimizationResult) -> str:
        stream = StringIO()
        self.build_document(result).write(stream)
        return stream.getvalue()

    def build_document(self, result: OptimizationResult) -> Drawing:
        """Create a DXF document with every sheet of the result drawn."""
        doc = ezdxf.new("R2010")
        self._setup_layers(doc)
        msp = doc.modelspace()

        if not result.layouts:
            logger.warning("No sheet layouts to export")

        offset_x = 0.0
        for number, layout in enumerate(result.layouts, start=1):
            self._draw_sheet(msp, layout, number, offset_x)
            offset_x += layout.sheet.width + self.sheet_spacing
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=props["color"])
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[10.0, 5.0, -5.0],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _draw_sheet(
        self, msp: Modelspace, layout: SheetLayout, number: int, offset_x: float
    ) -> None:
        sheet = layout.sheet
        msp.add_lwpolyline(
            _rectangle(offset_x, 0.0, sheet.width, sheet.height),
            dxfattribs={"layer": "SHEET"},
        )
        msp.add_mtext(
            f"Sheet {number}: {sheet.label} ({layout.waste_percentage:.1f}% waste)",
            dxfattribs={
                "layer": "LABELS",
                "char_height": self._text_height(sheet.width, sheet.height),
                "insert": (offset_x, sheet.height + self.sheet_spacing / 4),
                "attachment_point": 7,  # BOTTOM_LEFT
            },
        )

        for placement in layout.placed_pieces:
            self._draw_piece(msp, placement, offset_x)

        if self.include_offcuts:
            for offcut in layout.remaining_pieces:
                msp.add_lwpolyline(
                    _rectangle(offset_x + offcut.x, offcut.y, offcut.width, offcut.height),
                    dxfattribs={"layer": "OFFCUTS"},
                )

    def _draw_piece(self, msp: Modelspace, placement: PlacedPiece, offset_x: float) -> None:
        width = placement.placed_width
        height = placement.placed_height
        x = offset_x + placement.x
        msp.add_lwpolyline(
            _rectangle(x, placement.y, width, height),
            dxfattribs={"layer": "PIECES"},
        )

        dims = f"{width:g} x {height:g}"
        if placement.rotated:
            dims += " (R)"
        msp.add_mtext(
            f"{placement.piece.label}\n{dims}",
            dxfattribs={
                "layer": "LABELS",
                "char_height": self._text_height(width, height),
                "insert": (x + width / 2, placement.y + height / 2),
                "attachment_point": 5,  # MIDDLE_CENTER
            },
        )

    @staticmethod
    def _text_height(width: float, height: float) -> float:
        # 8% of the smaller side, kept readable on tiny and huge parts
        return max(5.0, min(50.0, min(width, height) * 0.08))
