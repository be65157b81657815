"""Application layer - use cases and job configuration."""

from .commands import OptimizeCuttingCommand

__all__ = ["OptimizeCuttingCommand"]
