"""Utility modules for gauntlet.

This module exports commonly used utility functions.
"""

from gauntlet.utils.formatting import (
    console,
    err_console,
    print_line,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_line",
    "print_warning",
]
