"""Waste and efficiency metrics for packed layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from sheetcut.domain.entities import SheetLayout


def sheet_waste_percentage(sheet_area: float, used_area: float) -> float:
    """Percentage of a sheet's area not covered by pieces."""
    if sheet_area <= 0:
        return 0.0
    return (sheet_area - used_area) / sheet_area * 100


def total_waste(layouts: Sequence[SheetLayout]) -> float:
    """Arithmetic mean of per-sheet waste percentages.

    Every sheet counts equally regardless of its size. Zero layouts give 0.
    """
    if not layouts:
        return 0.0
    return sum(layout.waste_percentage for layout in layouts) / len(layouts)


def efficiency(waste: float) -> float:
    """Efficiency as the complement of aggregate waste."""
    return 100.0 - waste


def area_weighted_waste(layouts: Sequence[SheetLayout]) -> float:
    """Waste over the combined area of all layouts.

    Reported alongside total_waste for comparison only.
    """
    total_area = sum(layout.sheet_area for layout in layouts)
    if total_area <= 0:
        return 0.0
    total_used = sum(layout.used_area for layout in layouts)
    return (total_area - total_used) / total_area * 100
