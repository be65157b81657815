"""Domain services for the cutting optimizer."""

from .candidates import generate_candidate_positions
from .expansion import expand_pieces, expand_sheets, sort_by_area
from .free_space import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MIN_OFFCUT_SIZE,
    GridFreeSpaceExtractor,
)
from .geometry import fits_within, overlaps_any, rects_overlap
from .metrics import (
    area_weighted_waste,
    efficiency,
    sheet_waste_percentage,
    total_waste,
)
from .packer import (
    CuttingOptimizer,
    OptimizerOptions,
    SearchBudget,
    SheetPacker,
    optimize,
)
from .placement import OccupiedSpace, PlacementEngine
from .scoring import AreaFirstScorer
from .stock import offcuts_to_stock

__all__ = [
    "AreaFirstScorer",
    "CuttingOptimizer",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_MIN_OFFCUT_SIZE",
    "GridFreeSpaceExtractor",
    "OccupiedSpace",
    "OptimizerOptions",
    "PlacementEngine",
    "SearchBudget",
    "SheetPacker",
    "area_weighted_waste",
    "efficiency",
    "expand_pieces",
    "expand_sheets",
    "fits_within",
    "generate_candidate_positions",
    "offcuts_to_stock",
    "optimize",
    "overlaps_any",
    "rects_overlap",
    "sheet_waste_percentage",
    "sort_by_area",
    "total_waste",
]
