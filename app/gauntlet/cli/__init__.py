"""CLI package for gauntlet.

This package contains the Typer application and its commands.
"""

from gauntlet.cli.main import app

__all__ = ["app"]
