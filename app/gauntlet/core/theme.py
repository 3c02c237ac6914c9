"""Output styles for gauntlet.

Four styles colour snap output. Defaults ship in ``data/theme.toml``;
a ``theme.toml`` in the config directory may override any of them.
"""

import functools
import logging
import tomllib
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from rich.theme import Theme

from gauntlet.core.paths import get_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"),
]


class OutputStyles(BaseModel):
    """Colors for the lines a snap prints.

    Attributes:
        info: Advisory and "nothing found" messages.
        dry_run: "[Dry Run] Would delete" lines.
        removed: "Deleted" lines.
        warning: Prefix of deletion warnings on stderr.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    info: HexColor = "#0ec1c8"
    dry_run: HexColor = "#b2bec3"
    removed: HexColor = "#f53263"
    warning: HexColor = "#f5b332"

    def to_rich_theme(self) -> Theme:
        """Map each style onto a Rich style of the same name."""
        return Theme(
            {
                "info": self.info,
                "dry_run": self.dry_run,
                "removed": f"bold {self.removed}",
                "warning": self.warning,
            }
        )


def _read_colors(source: Path | Traversable) -> dict[str, object]:
    """Read the [colors] table of a theme file, or nothing if unusable."""
    try:
        with source.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", source, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", source)
        return {}
    return colors


def load_styles(user_path: Path | None = None) -> OutputStyles:
    """Load the bundled styles with the user's overrides applied.

    Args:
        user_path: Override file. Defaults to the XDG config location.

    Returns:
        Validated styles, or the built-in defaults if validation fails.
    """
    bundled = _read_colors(resources.files("gauntlet.data").joinpath("theme.toml"))
    overrides = _read_colors(user_path or get_theme_path())

    try:
        return OutputStyles.model_validate({**bundled, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme, using defaults: %s", e)
        return OutputStyles()


@functools.cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once per process."""
    return load_styles().to_rich_theme()
