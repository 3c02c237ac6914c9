"""CLI commands for gauntlet.

This package contains all command implementations.
"""

from gauntlet.cli.commands import snap

__all__ = ["snap"]
