"""CLI commands for filekit.

This package contains all subcommand implementations.
"""

from filekit.cli.commands import empty, info, ls

__all__ = ["empty", "info", "ls"]
