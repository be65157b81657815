"""Result aggregates produced by the cutting optimizer."""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import PlacedPiece, RemainingPiece, SheetInstance, UnitPiece


@dataclass(frozen=True)
class SheetLayout:
    """Layout of pieces on a single sheet instance.

    Attributes:
        sheet: The sheet instance the pieces were cut from.
        placed_pieces: Pieces placed on this sheet, in placement order.
        waste_percentage: Share of the sheet area not covered by pieces.
        remaining_pieces: Reusable offcuts found after packing.
    """

    sheet: SheetInstance
    placed_pieces: tuple[PlacedPiece, ...]
    waste_percentage: float
    remaining_pieces: tuple[RemainingPiece, ...] = ()

    def __post_init__(self) -> None:
        if not self.placed_pieces:
            raise ValueError("A sheet layout needs at least one placed piece")

    @property
    def sheet_area(self) -> float:
        return self.sheet.area

    @property
    def used_area(self) -> float:
        """Total true area of placed pieces (kerf excluded)."""
        return sum(p.area for p in self.placed_pieces)

    @property
    def piece_count(self) -> int:
        return len(self.placed_pieces)


@dataclass(frozen=True)
class OptimizationResult:
    """Complete result of one optimization call.

    Attributes:
        layouts: Sheet layouts in the order sheet instances were consumed.
        total_waste: Unweighted mean of per-sheet waste percentages.
        efficiency: 100 minus total_waste.
        unplaced_pieces: Unit pieces that were not placed on any sheet.
        budget_exhausted: True if the iteration or time budget stopped
            the search before every piece was evaluated.
    """

    layouts: tuple[SheetLayout, ...]
    total_waste: float
    efficiency: float
    unplaced_pieces: tuple[UnitPiece, ...] = ()
    budget_exhausted: bool = False

    @property
    def total_sheets(self) -> int:
        """Number of sheets with at least one placed piece."""
        return len(self.layouts)

    @property
    def placed_count(self) -> int:
        return sum(layout.piece_count for layout in self.layouts)

    @property
    def unplaced_count(self) -> int:
        return len(self.unplaced_pieces)

    @property
    def requested_count(self) -> int:
        return self.placed_count + self.unplaced_count

    @property
    def unevaluated_pieces(self) -> tuple[UnitPiece, ...]:
        """Pieces still open when the search budget ran out.

        Every unplaced piece counts, including pieces that were tried on
        earlier sheets and did not fit there: the sheets after the cutoff
        were never tried for them. Empty when the search ran to completion.
        """
        if not self.budget_exhausted:
            return ()
        return self.unplaced_pieces

    @property
    def remaining_pieces(self) -> tuple[RemainingPiece, ...]:
        """All offcuts across every sheet, in layout order."""
        return tuple(r for layout in self.layouts for r in layout.remaining_pieces)

    @property
    def area_weighted_waste(self) -> float:
        """Waste over the combined area of all used sheets.

        Informational only. total_waste stays the unweighted mean, which
        overstates the weight of small sheets when sheet sizes differ.
        """
        from .services.metrics import area_weighted_waste

        return area_weighted_waste(self.layouts)
