"""CLI command implementations for the sheetcut application.

This package contains the subcommands of the sheetcut CLI:
- optimize: Pack a job onto stock sheets and render or export the result
- validate: Validate a job file
"""

from sheetcut.cli.commands.optimize import optimize_command
from sheetcut.cli.commands.validate import validate_command

__all__ = ["optimize_command", "validate_command"]
