"""Geometric predicates for axis-aligned rectangles."""

from __future__ import annotations

from typing import Iterable

from sheetcut.domain.value_objects import Rect


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Separating-axis test on x and y.

    Touching edges (zero-area intersection) do not count as overlap.
    """
    return a.overlaps(b)


def overlaps_any(rect: Rect, occupied: Iterable[Rect]) -> bool:
    """True if rect overlaps at least one of the occupied rectangles."""
    return any(rect.overlaps(other) for other in occupied)


def fits_within(rect: Rect, width: float, height: float) -> bool:
    """True if rect lies inside [0, width] x [0, height]."""
    return rect.x >= 0 and rect.y >= 0 and rect.right <= width and rect.top <= height
