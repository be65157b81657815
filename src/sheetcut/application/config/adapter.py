"""Conversion from validated job configuration to domain objects."""

from sheetcut.application.config.schema import (
    CuttingJobConfig,
    OptimizerOptionsConfig,
)
from sheetcut.domain import OptimizerOptions, Piece, StockSheet


def config_to_stock_sheets(config: CuttingJobConfig) -> list[StockSheet]:
    """Convert configured stock sheets, preserving their order."""
    return [
        StockSheet(
            label=sheet.label,
            width=sheet.width,
            height=sheet.height,
            quantity=sheet.quantity,
            kerf=sheet.kerf,
            id=sheet.id,
        )
        for sheet in config.stock_sheets
    ]


def config_to_pieces(config: CuttingJobConfig) -> list[Piece]:
    """Convert configured pieces, preserving their order."""
    return [
        Piece(
            label=piece.label,
            width=piece.width,
            height=piece.height,
            quantity=piece.quantity,
            id=piece.id,
            allow_rotation=piece.allow_rotation,
        )
        for piece in config.pieces
    ]


def config_to_optimizer_options(
    config: CuttingJobConfig | OptimizerOptionsConfig,
) -> OptimizerOptions:
    """Convert optimizer settings from a job or its options block."""
    options = config.options if isinstance(config, CuttingJobConfig) else config
    return OptimizerOptions(
        grid_size=options.grid_size,
        min_offcut_size=options.min_offcut_size,
        max_iterations=options.max_iterations,
        time_budget=options.time_budget_seconds,
    )
