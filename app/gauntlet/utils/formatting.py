"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.segment import Segment, Segments
from rich.style import Style

from gauntlet.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_line(message: str, style: str, target: Console | None = None) -> None:
    """Print a message verbatim as a single styled line.

    The message is emitted as a raw segment: no markup parsing, no
    wrapping or cropping, and tabs are not expanded, so a path is
    printed exactly as it exists on disk.

    Args:
        message: Text to print.
        style: Theme style name. Unknown names print unstyled.
        target: Console to print to. Defaults to the shared stdout console.
    """
    out = target or console
    segments = [Segment(message, out.get_style(style, default=Style.null())), Segment.line()]
    out.print(Segments(segments), crop=False)


def print_warning(message: str, target: Console | None = None) -> None:
    """Print a warning message, to stderr unless another console is given."""
    (target or err_console).print(f"[warning]Warning:[/] {escape(message)}", soft_wrap=True)
