"""Anchor point generation for bottom-left placement search."""

from __future__ import annotations

from typing import Sequence

from sheetcut.domain.value_objects import Rect


def generate_candidate_positions(
    width: float,
    height: float,
    sheet_width: float,
    sheet_height: float,
    occupied: Sequence[Rect],
) -> list[tuple[float, float]]:
    """Propose anchor points for a width x height rectangle.

    The origin is always proposed. Every occupied rectangle adds up to five
    anchors hugging its right and top edges:

    - right of it, bottom-aligned
    - above it, left-aligned
    - at its top-right corner
    - right of it, top-aligned (only if the candidate is no taller)
    - above it, right-aligned (only if the candidate is no wider)

    Anchors whose rectangle would leave the sheet are dropped. No overlap
    filtering happens here.

    Args:
        width: Candidate width in the orientation being tried.
        height: Candidate height in the orientation being tried.
        sheet_width: Sheet width.
        sheet_height: Sheet height.
        occupied: Kerf-inflated rectangles already on the sheet.

    Returns:
        Distinct (x, y) anchors sorted by y, then x (bottom-left first).
    """
    positions: list[tuple[float, float]] = [(0.0, 0.0)]

    for o in occupied:
        fits_right = o.right + width <= sheet_width
        fits_above = o.top + height <= sheet_height

        if fits_right:
            positions.append((o.right, o.y))
        if fits_above:
            positions.append((o.x, o.top))
        if fits_right and fits_above:
            positions.append((o.right, o.top))
        if height <= o.height and fits_right:
            positions.append((o.right, o.top - height))
        if width <= o.width and fits_above:
            positions.append((o.right - width, o.top))

    in_bounds = [
        (x, y)
        for x, y in positions
        if x >= 0 and y >= 0 and x + width <= sheet_width and y + height <= sheet_height
    ]
    unique = list(dict.fromkeys(in_bounds))
    unique.sort(key=lambda p: (p[1], p[0]))
    return unique
