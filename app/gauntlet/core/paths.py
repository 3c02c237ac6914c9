"""XDG-compliant path management for gauntlet.

gauntlet keeps no state of its own; the only location it reads is the
configuration directory holding an optional theme override.

XDG defaults:
- Config: ~/.config/gauntlet/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "gauntlet"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/gauntlet/ (or XDG_CONFIG_HOME/gauntlet/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/gauntlet/theme.toml.
    """
    return get_config_dir() / "theme.toml"

