"""Single-piece placement search on one sheet."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sheetcut.domain.services.candidates import generate_candidate_positions
from sheetcut.domain.services.geometry import overlaps_any
from sheetcut.domain.value_objects import PlacedPiece, Rect, SheetInstance, UnitPiece

logger = logging.getLogger(__name__)


@dataclass
class OccupiedSpace:
    """Occupied-space accumulator for one sheet instance.

    A fresh accumulator is created for each sheet instance and owned by the
    packer for that sheet only.

    Attributes:
        sheet: The sheet instance being filled.
        rects: Kerf-inflated footprints used for overlap tests.
        placements: Committed placements, in commit order.
    """

    sheet: SheetInstance
    rects: list[Rect] = field(default_factory=list)
    placements: list[PlacedPiece] = field(default_factory=list)

    def occupy(self, placement: PlacedPiece) -> None:
        """Commit a placement and reserve its kerf-inflated footprint.

        Kerf grows the footprint to the right and top only. The placement's
        own geometry is recorded unchanged.
        """
        kerf = self.sheet.kerf
        self.placements.append(placement)
        self.rects.append(
            Rect(
                x=placement.x,
                y=placement.y,
                width=placement.placed_width + kerf,
                height=placement.placed_height + kerf,
            )
        )

    @property
    def is_empty(self) -> bool:
        return not self.placements


class PlacementEngine:
    """Finds the bottom-left-most feasible position for a single piece.

    The unrotated orientation is tried first; the rotated one only if the
    first yields nothing. Within an orientation the first anchor (sorted by
    y, then x) that overlaps nothing wins.
    """

    def find_placement(
        self,
        piece: UnitPiece,
        space: OccupiedSpace,
    ) -> PlacedPiece | None:
        """Return a feasible placement, or None if the piece does not fit.

        Args:
            piece: The unit piece to place.
            space: Current state of the sheet.

        Returns:
            The chosen placement, or None. None is a normal outcome.
        """
        sheet = space.sheet
        orientations = [(piece.width, piece.height, False)]
        if piece.allow_rotation:
            orientations.append((piece.height, piece.width, True))

        for width, height, rotated in orientations:
            if width > sheet.width or height > sheet.height:
                continue

            positions = generate_candidate_positions(
                width, height, sheet.width, sheet.height, space.rects
            )
            for x, y in positions:
                if not overlaps_any(Rect(x, y, width, height), space.rects):
                    if rotated:
                        logger.debug(
                            "Piece '%s' fits on sheet %s only when rotated",
                            piece.label,
                            sheet.key,
                        )
                    return PlacedPiece(piece=piece, x=x, y=y, rotated=rotated)

        return None
