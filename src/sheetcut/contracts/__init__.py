"""Contracts between the optimizer's orchestration and its heuristics."""

from .protocols import FreeSpaceExtractor, PlacementScorer

__all__ = [
    "FreeSpaceExtractor",
    "PlacementScorer",
]
