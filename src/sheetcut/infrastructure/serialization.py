"""JSON-compatible serialization of optimization results.

The dictionary form carries enough data to rebuild an equal
OptimizationResult: every unit piece and sheet instance is stored with its
source record and indices, and derived values (keys, placed dimensions,
counts) are included for readers but ignored on load.
"""

from __future__ import annotations

import json
from typing import Any

from sheetcut.domain import (
    OptimizationResult,
    Piece,
    PlacedPiece,
    RemainingPiece,
    SheetInstance,
    SheetLayout,
    StockSheet,
    UnitPiece,
)


def _stock_sheet_to_dict(sheet: StockSheet) -> dict[str, Any]:
    return {
        "id": sheet.id,
        "label": sheet.label,
        "width": sheet.width,
        "height": sheet.height,
        "quantity": sheet.quantity,
        "kerf": sheet.kerf,
    }


def _piece_to_dict(piece: Piece) -> dict[str, Any]:
    return {
        "id": piece.id,
        "label": piece.label,
        "width": piece.width,
        "height": piece.height,
        "quantity": piece.quantity,
        "allow_rotation": piece.allow_rotation,
    }


def _unit_piece_to_dict(unit: UnitPiece) -> dict[str, Any]:
    return {
        "key": unit.key,
        "index": unit.index,
        "source_index": unit.source_index,
        "piece": _piece_to_dict(unit.piece),
    }


def _unit_piece_from_dict(data: dict[str, Any]) -> UnitPiece:
    return UnitPiece(
        piece=Piece(**data["piece"]),
        index=data["index"],
        source_index=data.get("source_index", 0),
    )


def _remaining_to_dict(offcut: RemainingPiece) -> dict[str, Any]:
    return {
        "id": offcut.id,
        "width": offcut.width,
        "height": offcut.height,
        "x": offcut.x,
        "y": offcut.y,
        "sheet_label": offcut.sheet_label,
    }


def _layout_to_dict(layout: SheetLayout) -> dict[str, Any]:
    sheet = layout.sheet
    return {
        "sheet": {
            "key": sheet.key,
            "index": sheet.index,
            "source_index": sheet.source_index,
            "stock": _stock_sheet_to_dict(sheet.sheet),
        },
        "placed_pieces": [
            {
                **_unit_piece_to_dict(p.piece),
                "x": p.x,
                "y": p.y,
                "rotated": p.rotated,
                "placed_width": p.placed_width,
                "placed_height": p.placed_height,
            }
            for p in layout.placed_pieces
        ],
        "waste_percentage": layout.waste_percentage,
        "remaining_pieces": [_remaining_to_dict(r) for r in layout.remaining_pieces],
    }


def _layout_from_dict(data: dict[str, Any]) -> SheetLayout:
    sheet_data = data["sheet"]
    sheet = SheetInstance(
        sheet=StockSheet(**sheet_data["stock"]),
        index=sheet_data["index"],
        source_index=sheet_data.get("source_index", 0),
    )
    placements = tuple(
        PlacedPiece(
            piece=_unit_piece_from_dict(p),
            x=p["x"],
            y=p["y"],
            rotated=p.get("rotated", False),
        )
        for p in data["placed_pieces"]
    )
    remaining = tuple(RemainingPiece(**r) for r in data.get("remaining_pieces", []))
    return SheetLayout(
        sheet=sheet,
        placed_pieces=placements,
        waste_percentage=data["waste_percentage"],
        remaining_pieces=remaining,
    )


def result_to_dict(result: OptimizationResult) -> dict[str, Any]:
    """Convert a result to JSON-compatible data.

    Args:
        result: The optimization result.

    Returns:
        Dictionary with layouts, summary metrics, offcuts and unplaced pieces.
    """
    return {
        "layouts": [_layout_to_dict(layout) for layout in result.layouts],
        "total_sheets": result.total_sheets,
        "total_waste": result.total_waste,
        "efficiency": result.efficiency,
        "area_weighted_waste": result.area_weighted_waste,
        "placed_count": result.placed_count,
        "unplaced_pieces": [_unit_piece_to_dict(u) for u in result.unplaced_pieces],
        "budget_exhausted": result.budget_exhausted,
    }


def result_from_dict(data: dict[str, Any]) -> OptimizationResult:
    """Rebuild a result from ``result_to_dict`` output.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If a stored record is invalid.
    """
    return OptimizationResult(
        layouts=tuple(_layout_from_dict(layout) for layout in data["layouts"]),
        total_waste=data["total_waste"],
        efficiency=data["efficiency"],
        unplaced_pieces=tuple(
            _unit_piece_from_dict(u) for u in data.get("unplaced_pieces", [])
        ),
        budget_exhausted=data.get("budget_exhausted", False),
    )


def result_to_json(result: OptimizationResult, indent: int | None = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent)


def result_from_json(text: str) -> OptimizationResult:
    return result_from_dict(json.loads(text))


def stock_sheets_to_dicts(sheets: list[StockSheet]) -> list[dict[str, Any]]:
    """Render stock sheets in job file form.

    The output can be pasted into the ``stock_sheets`` list of a job, which
    is how offcuts are fed back into the next run.
    """
    return [
        {k: v for k, v in _stock_sheet_to_dict(sheet).items() if v is not None}
        for sheet in sheets
    ]
