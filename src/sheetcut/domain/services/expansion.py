"""Quantity expansion of sheet and piece types into unit instances."""

from __future__ import annotations

from typing import Iterable, Iterator

from sheetcut.domain.value_objects import Piece, SheetInstance, StockSheet, UnitPiece


def expand_sheets(sheets: Iterable[StockSheet]) -> Iterator[SheetInstance]:
    """Yield one SheetInstance per physical sheet.

    Instances come out in input order: by sheet type, then by instance index
    within the type. Zero-quantity types yield nothing.
    """
    for source_index, sheet in enumerate(sheets):
        for i in range(sheet.quantity):
            yield SheetInstance(sheet=sheet, index=i, source_index=source_index)


def expand_pieces(pieces: Iterable[Piece]) -> Iterator[UnitPiece]:
    """Yield one UnitPiece per physical piece, in input order."""
    for source_index, piece in enumerate(pieces):
        for i in range(piece.quantity):
            yield UnitPiece(piece=piece, index=i, source_index=source_index)


def sort_by_area(units: Iterable[UnitPiece]) -> list[UnitPiece]:
    """Sort unit pieces largest area first for the largest-first heuristic.

    The sort is stable, so equal-area pieces keep their input order.
    """
    return sorted(units, key=lambda u: u.area, reverse=True)
