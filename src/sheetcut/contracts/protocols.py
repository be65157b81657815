"""Protocols for the swappable heuristics of the cutting optimizer.

The orchestration loop depends only on these protocols, so alternative
scoring rules or offcut decompositions can be plugged in without touching it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sheetcut.domain.services.placement import OccupiedSpace
    from sheetcut.domain.value_objects import PlacedPiece, RemainingPiece


@runtime_checkable
class PlacementScorer(Protocol):
    """Ranks feasible placements; the highest score is committed.

    Example:
        ```python
        class LowestFirstScorer:
            def score(self, placement: PlacedPiece) -> float:
                return -placement.y
        ```
    """

    def score(self, placement: PlacedPiece) -> float:
        """Return the desirability of a feasible placement."""
        ...


@runtime_checkable
class FreeSpaceExtractor(Protocol):
    """Decomposes the unused area of a finished sheet into offcuts."""

    def extract(self, space: OccupiedSpace) -> list[RemainingPiece]:
        """Return reusable offcuts for a finished sheet.

        Args:
            space: The sheet's final occupied-space accumulator.

        Returns:
            Offcuts in the order they were found.
        """
        ...
