"""Command implementations for qmd-history."""

from qmd_history.commands.uninstall import cmd_uninstall

__all__ = [
    "cmd_uninstall",
]
