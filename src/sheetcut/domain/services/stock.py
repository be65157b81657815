"""Conversion of offcuts back into stock for a later job."""

from __future__ import annotations

from typing import Iterable

from sheetcut.domain.value_objects import RemainingPiece, StockSheet


def _format_length(value: float) -> str:
    return f"{value:g}"


def offcuts_to_stock(
    remaining: Iterable[RemainingPiece],
    kerf: float = 0.0,
) -> list[StockSheet]:
    """Turn offcuts into single-quantity stock sheets.

    Args:
        remaining: Offcuts selected for reuse.
        kerf: Kerf to apply when the new stock is cut.

    Returns:
        One StockSheet per offcut, identified by the offcut id.
    """
    stock: list[StockSheet] = []
    for offcut in remaining:
        label = (
            f"Offcut {_format_length(offcut.width)}x{_format_length(offcut.height)}"
            f" ({offcut.sheet_label})"
        )
        stock.append(
            StockSheet(
                label=label,
                width=offcut.width,
                height=offcut.height,
                quantity=1,
                kerf=kerf,
                id=offcut.id or None,
            )
        )
    return stock
