"""Greedy sheet packing and the top-level cutting optimizer.

Sheets are filled one at a time, strictly in input order. On each sheet the
packer repeatedly asks the placement engine about every still-unplaced
piece and commits only the single best-scoring placement, until a full pass
places nothing. Pieces placed on one sheet are removed from the shared pool,
so later sheets only see what earlier sheets left behind.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from sheetcut.contracts.protocols import FreeSpaceExtractor, PlacementScorer
from sheetcut.domain.entities import OptimizationResult, SheetLayout
from sheetcut.domain.services.expansion import (
    expand_pieces,
    expand_sheets,
    sort_by_area,
)
from sheetcut.domain.services.free_space import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MIN_OFFCUT_SIZE,
    GridFreeSpaceExtractor,
)
from sheetcut.domain.services.metrics import (
    efficiency,
    sheet_waste_percentage,
    total_waste,
)
from sheetcut.domain.services.placement import OccupiedSpace, PlacementEngine
from sheetcut.domain.services.scoring import AreaFirstScorer
from sheetcut.domain.value_objects import (
    Piece,
    PlacedPiece,
    SheetInstance,
    StockSheet,
    UnitPiece,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizerOptions:
    """Tunable settings for one optimization call.

    Attributes:
        grid_size: Cell size used by the offcut extractor.
        min_offcut_size: Minimum width and height of a reported offcut.
        max_iterations: Cap on placement attempts, or None for no cap.
        time_budget: Wall-clock cap in seconds, or None for no cap.
    """

    grid_size: float = DEFAULT_GRID_SIZE
    min_offcut_size: float = DEFAULT_MIN_OFFCUT_SIZE
    max_iterations: int | None = None
    time_budget: float | None = None

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError("Grid size must be positive")
        if self.min_offcut_size < 0:
            raise ValueError("Minimum offcut size must be non-negative")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError("Max iterations must be at least 1")
        if self.time_budget is not None and self.time_budget <= 0:
            raise ValueError("Time budget must be positive")


class SearchBudget:
    """Counts placement attempts against an iteration and time allowance.

    Once spent, the budget stays spent for the rest of the call.
    """

    def __init__(
        self,
        max_iterations: int | None = None,
        time_budget: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_iterations = max_iterations
        self.iterations = 0
        self.exhausted = False
        self._clock = clock
        self._deadline = clock() + time_budget if time_budget is not None else None

    def consume(self) -> bool:
        """Account for one placement attempt.

        Returns:
            False if the attempt is not allowed because the budget is spent.
        """
        if self.exhausted:
            return False
        if self.max_iterations is not None and self.iterations >= self.max_iterations:
            self.exhausted = True
        elif self._deadline is not None and self._clock() > self._deadline:
            self.exhausted = True
        if self.exhausted:
            logger.warning(
                "Search budget exhausted after %d placement attempts",
                self.iterations,
            )
            return False
        self.iterations += 1
        return True


class SheetPacker:
    """Fills one sheet instance using global best-fit selection.

    Attributes:
        engine: Finds a feasible position for one piece.
        scorer: Ranks feasible placements across pieces.
    """

    def __init__(
        self,
        engine: PlacementEngine | None = None,
        scorer: PlacementScorer | None = None,
    ) -> None:
        self.engine = engine or PlacementEngine()
        self.scorer = scorer or AreaFirstScorer()

    def pack_sheet(
        self,
        sheet: SheetInstance,
        pool: list[UnitPiece],
        budget: SearchBudget | None = None,
    ) -> OccupiedSpace:
        """Place as many pooled pieces as possible on one sheet.

        Placed pieces are removed from ``pool``. If the budget runs out in
        the middle of a pass, that pass commits nothing.

        Args:
            sheet: The sheet instance to fill.
            pool: Unplaced pieces shared across sheets, largest first.
            budget: Optional search budget.

        Returns:
            The sheet's final occupied space.
        """
        budget = budget or SearchBudget()
        space = OccupiedSpace(sheet=sheet)

        while pool:
            best: PlacedPiece | None = None
            best_score = 0.0
            best_index = -1

            for i, piece in enumerate(pool):
                if not budget.consume():
                    break
                placement = self.engine.find_placement(piece, space)
                if placement is None:
                    continue
                score = self.scorer.score(placement)
                if best is None or score > best_score:
                    best = placement
                    best_score = score
                    best_index = i

            if budget.exhausted or best is None:
                break

            space.occupy(best)
            del pool[best_index]
            logger.debug(
                "Sheet %s: placed '%s' at (%s, %s)%s",
                sheet.key,
                best.piece.label,
                best.x,
                best.y,
                " rotated" if best.rotated else "",
            )

        return space


class CuttingOptimizer:
    """Assigns pieces to a finite supply of stock sheets.

    Attributes:
        options: Tunable settings.
        packer: Per-sheet packing loop.
        extractor: Offcut decomposition for finished sheets.
    """

    def __init__(
        self,
        options: OptimizerOptions | None = None,
        packer: SheetPacker | None = None,
        extractor: FreeSpaceExtractor | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.options = options or OptimizerOptions()
        self.packer = packer or SheetPacker()
        self.extractor = extractor or GridFreeSpaceExtractor(
            grid_size=self.options.grid_size,
            min_size=self.options.min_offcut_size,
        )
        self._clock = clock

    def optimize(
        self,
        sheets: Sequence[StockSheet],
        pieces: Sequence[Piece],
    ) -> OptimizationResult:
        """Pack pieces onto sheets, largest first, sheet by sheet.

        Pieces that fit nowhere and sheets that stay empty are normal
        outcomes: the former are reported in ``unplaced_pieces``, the latter
        produce no layout.

        Args:
            sheets: Available stock, consumed in list order.
            pieces: Required pieces.

        Returns:
            The optimization result.
        """
        pool = sort_by_area(expand_pieces(pieces))
        requested = len(pool)
        budget = SearchBudget(
            max_iterations=self.options.max_iterations,
            time_budget=self.options.time_budget,
            clock=self._clock,
        )

        logger.debug("Packing %d pieces", requested)

        layouts: list[SheetLayout] = []
        for sheet in expand_sheets(sheets):
            if not pool or budget.exhausted:
                break

            space = self.packer.pack_sheet(sheet, pool, budget)
            if space.is_empty:
                logger.debug("Sheet %s: nothing fits, skipped", sheet.key)
                continue

            layout = self._build_layout(space)
            layouts.append(layout)
            logger.debug(
                "Sheet %s: %d pieces, %.1f%% waste",
                sheet.key,
                layout.piece_count,
                layout.waste_percentage,
            )

        if pool:
            logger.warning(
                "%d piece(s) could not be placed. "
                "You may need larger or more stock sheets.",
                len(pool),
            )

        waste = total_waste(layouts)
        return OptimizationResult(
            layouts=tuple(layouts),
            total_waste=waste,
            efficiency=efficiency(waste),
            unplaced_pieces=tuple(pool),
            budget_exhausted=budget.exhausted,
        )

    def _build_layout(self, space: OccupiedSpace) -> SheetLayout:
        placements = tuple(space.placements)
        used = sum(p.area for p in placements)
        return SheetLayout(
            sheet=space.sheet,
            placed_pieces=placements,
            waste_percentage=sheet_waste_percentage(space.sheet.area, used),
            remaining_pieces=tuple(self.extractor.extract(space)),
        )


def optimize(
    sheets: Sequence[StockSheet],
    pieces: Sequence[Piece],
    options: OptimizerOptions | None = None,
) -> OptimizationResult:
    """Run the cutting optimizer with default heuristics.

    Example:
        >>> result = optimize(
        ...     [StockSheet(label="Glass", width=1000, height=1000)],
        ...     [Piece(label="Pane", width=400, height=300)],
        ... )
        >>> result.total_sheets
        1
    """
    return CuttingOptimizer(options).optimize(sheets, pieces)
