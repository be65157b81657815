"""Scoring rules for choosing among feasible placements."""

from __future__ import annotations

from sheetcut.domain.value_objects import PlacedPiece

AREA_WEIGHT = 1000
POSITION_BASE = 1_000_000


class AreaFirstScorer:
    """Prefers the largest piece, then the lowest-leftmost position.

    score = area * 1000 + (1_000_000 - (x + y))

    Area dominates, so the packer effectively places the largest remaining
    piece that fits; position only separates pieces of equal area.
    """

    def __init__(
        self,
        area_weight: float = AREA_WEIGHT,
        position_base: float = POSITION_BASE,
    ) -> None:
        self.area_weight = area_weight
        self.position_base = position_base

    def score(self, placement: PlacedPiece) -> float:
        position_score = self.position_base - (placement.x + placement.y)
        return placement.area * self.area_weight + position_score
