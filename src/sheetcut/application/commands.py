"""Application commands (use cases) for cutting optimization."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from sheetcut.application.config import (
    CuttingJobConfig,
    config_to_optimizer_options,
    config_to_pieces,
    config_to_stock_sheets,
)
from sheetcut.domain import (
    CuttingOptimizer,
    OptimizationResult,
    OptimizerOptions,
    Piece,
    StockSheet,
)

logger = logging.getLogger(__name__)


class OptimizeCuttingCommand:
    """Command to pack required pieces onto available stock.

    A fresh optimizer is built for every call, so a command instance can be
    reused across jobs without sharing state.
    """

    def __init__(
        self,
        optimizer_factory: Callable[[OptimizerOptions], CuttingOptimizer] | None = None,
    ) -> None:
        self.optimizer_factory = optimizer_factory or CuttingOptimizer

    def execute(
        self,
        sheets: Sequence[StockSheet],
        pieces: Sequence[Piece],
        options: OptimizerOptions | None = None,
    ) -> OptimizationResult:
        """Execute the optimization.

        Args:
            sheets: Available stock, consumed in list order.
            pieces: Required pieces.
            options: Optimizer settings; defaults when omitted.

        Returns:
            OptimizationResult with layouts, offcuts and unplaced pieces.
        """
        optimizer = self.optimizer_factory(options or OptimizerOptions())
        result = optimizer.optimize(sheets, pieces)
        logger.info(
            "Placed %d of %d pieces on %d sheet(s), %.1f%% waste",
            result.placed_count,
            result.requested_count,
            result.total_sheets,
            result.total_waste,
        )
        return result

    def execute_config(self, config: CuttingJobConfig) -> OptimizationResult:
        """Execute the optimization described by a validated job."""
        return self.execute(
            config_to_stock_sheets(config),
            config_to_pieces(config),
            config_to_optimizer_options(config),
        )
