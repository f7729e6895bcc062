"""
Path constants and utilities for comodoro.

The configuration file lives under ~/.config/comodoro/ unless the
COMODORO_CONFIG environment variable points elsewhere.
"""

import os
from pathlib import Path

CONFIG_ENV = "COMODORO_CONFIG"

# Base directories
CONFIG_HOME = Path.home() / ".config" / "comodoro"

# Default configuration file
CONFIG_FILE = CONFIG_HOME / "config.json"


def config_file() -> Path:
    """Return the active configuration file path."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def ensure_dirs(path: Path | None = None) -> None:
    """Create the directory holding the configuration file if it doesn't exist."""
    (path or config_file()).parent.mkdir(parents=True, exist_ok=True)
