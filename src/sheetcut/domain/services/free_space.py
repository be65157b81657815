"""Offcut extraction from the unused area of a finished sheet.

The sheet is rasterized into square cells. Free cells are scanned row by row
(bottom to top, left to right) and grown greedily into rectangles: first as
wide as the row allows, then as tall as every cell under that width allows.

This is an approximation, not a maximal-rectangle partition. One free
region can be reported as several smaller offcuts depending on scan order.
"""

from __future__ import annotations

import logging
import math

from sheetcut.domain.services.placement import OccupiedSpace
from sheetcut.domain.value_objects import RemainingPiece

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 10.0
DEFAULT_MIN_OFFCUT_SIZE = 100.0


class GridFreeSpaceExtractor:
    """Greedy grid-based decomposition of free sheet area.

    Attributes:
        grid_size: Cell edge length, in sheet units.
        min_size: Minimum width and height for an offcut to be reported.
    """

    def __init__(
        self,
        grid_size: float = DEFAULT_GRID_SIZE,
        min_size: float = DEFAULT_MIN_OFFCUT_SIZE,
    ) -> None:
        if grid_size <= 0:
            raise ValueError("Grid size must be positive")
        if min_size < 0:
            raise ValueError("Minimum offcut size must be non-negative")
        self.grid_size = grid_size
        self.min_size = min_size

    def extract(self, space: OccupiedSpace) -> list[RemainingPiece]:
        """Return reusable offcuts for a finished sheet.

        Occupied cells are taken from the kerf-inflated footprints, so kerf
        clearance is never reported as reusable material.
        """
        sheet = space.sheet
        cell = self.grid_size
        cols = math.ceil(sheet.width / cell)
        rows = math.ceil(sheet.height / cell)

        occupied = [[False] * cols for _ in range(rows)]
        for rect in space.rects:
            x0 = math.floor(rect.x / cell)
            y0 = math.floor(rect.y / cell)
            x1 = min(math.ceil(rect.right / cell), cols)
            y1 = min(math.ceil(rect.top / cell), rows)
            for gy in range(y0, y1):
                row = occupied[gy]
                for gx in range(x0, x1):
                    row[gx] = True

        visited = [[False] * cols for _ in range(rows)]
        offcuts: list[RemainingPiece] = []

        for gy in range(rows):
            for gx in range(cols):
                if occupied[gy][gx] or visited[gy][gx]:
                    continue

                span = 0
                while (
                    gx + span < cols
                    and not occupied[gy][gx + span]
                    and not visited[gy][gx + span]
                ):
                    span += 1

                depth = 1
                while gy + depth < rows and self._row_is_free(
                    occupied[gy + depth], visited[gy + depth], gx, span
                ):
                    depth += 1

                for dy in range(depth):
                    visited_row = visited[gy + dy]
                    for dx in range(span):
                        visited_row[gx + dx] = True

                x = gx * cell
                y = gy * cell
                width = min((gx + span) * cell, sheet.width) - x
                height = min((gy + depth) * cell, sheet.height) - y

                if width >= self.min_size and height >= self.min_size:
                    offcuts.append(
                        RemainingPiece(
                            width=width,
                            height=height,
                            x=x,
                            y=y,
                            sheet_label=sheet.label,
                            id=f"remaining-{sheet.key}-{len(offcuts)}",
                        )
                    )

        logger.debug("Sheet %s: %d offcut(s) found", sheet.key, len(offcuts))
        return offcuts

    @staticmethod
    def _row_is_free(
        occupied_row: list[bool],
        visited_row: list[bool],
        start: int,
        span: int,
    ) -> bool:
        return not any(
            occupied_row[i] or visited_row[i] for i in range(start, start + span)
        )
