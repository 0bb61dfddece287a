"""
Centralized path resolution for cb.

The data directory (~/.cb/) holds the config file. Supports the CB_HOME
env var override for testing and custom installs. The record file lives
outside it, in /tmp by default.
"""

import os
from pathlib import Path

DEFAULT_RECORD_PATH = "/tmp/cb.txt"


def get_data_dir() -> Path:
    """Return the cb data directory path.

    Checks CB_HOME env var first, then falls back to ~/.cb/.
    """
    env_dir = os.environ.get("CB_HOME")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".cb"


def get_config_path() -> Path:
    """Return the path to the config TOML file."""
    return get_data_dir() / "config.toml"


def resolve_record_path(path: str) -> Path:
    """Expand ~ in a record path, falling back to the default location."""
    return Path(path or DEFAULT_RECORD_PATH).expanduser()
