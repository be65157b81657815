"""Domain layer - cutting-stock model and optimization engine."""

from .entities import OptimizationResult, SheetLayout
from .services import (
    CuttingOptimizer,
    OptimizerOptions,
    offcuts_to_stock,
    optimize,
)
from .value_objects import (
    Piece,
    PlacedPiece,
    Rect,
    RemainingPiece,
    SheetInstance,
    StockSheet,
    UnitPiece,
)

__all__ = [
    "CuttingOptimizer",
    "OptimizationResult",
    "OptimizerOptions",
    "Piece",
    "PlacedPiece",
    "Rect",
    "RemainingPiece",
    "SheetInstance",
    "SheetLayout",
    "StockSheet",
    "UnitPiece",
    "offcuts_to_stock",
    "optimize",
]
