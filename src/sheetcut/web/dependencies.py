"""FastAPI dependency injection for optimization services."""

from typing import Annotated

from fastapi import Depends

from sheetcut.application import OptimizeCuttingCommand


def get_optimize_command() -> OptimizeCuttingCommand:
    """Dependency for OptimizeCuttingCommand."""
    return OptimizeCuttingCommand()


# Type alias for cleaner endpoint signatures
OptimizeCommandDep = Annotated[OptimizeCuttingCommand, Depends(get_optimize_command)]
