"""
Run options for cb.

Defaults come from ~/.cb/config.toml (or CB_HOME/config.toml) when it
exists; command-line flags are layered on top with
RunOptions.with_overrides(). The result is one immutable snapshot that
is handed to every pipeline stage.
"""

import dataclasses
import enum
import sys
import tomllib
from pathlib import Path
from typing import Optional

from ._paths import DEFAULT_RECORD_PATH, get_config_path


# Default configuration values
_DEFAULTS = {
    "output": {
        "file": DEFAULT_RECORD_PATH,
        "save": True,
        "append": False,
        "trim": False,
        "raw": False,
        "verbose": False,
    },
    "clipboard": {
        "enabled": True,
        "backend": "",
        "clear": False,
    },
}


class QuietMode(enum.Enum):
    DISABLED = "disabled"
    SUPPRESS_ALL = "suppress_all"
    LIMIT = "limit"


@dataclasses.dataclass(frozen=True)
class QuietSetting:
    """How much of the captured text to echo to the terminal."""

    mode: QuietMode = QuietMode.DISABLED
    lines: int = 0

    @classmethod
    def from_value(cls, value: Optional[int]) -> "QuietSetting":
        """Build from a ``-q`` value: None or <= 0 hides everything."""
        if value is None or value <= 0:
            return cls(QuietMode.SUPPRESS_ALL)
        return cls(QuietMode.LIMIT, value)


@dataclasses.dataclass(frozen=True)
class RunOptions:
    """Immutable configuration for a single run."""

    head_lines: int = 0
    tail_lines: int = 0
    quiet: QuietSetting = QuietSetting()
    file: str = DEFAULT_RECORD_PATH
    save_file: bool = True
    append: bool = False
    capture_stderr: bool = False
    clipboard_enabled: bool = True
    clipboard_backend: str = ""
    clear_clipboard: bool = False
    verbose: bool = False
    raw: bool = False
    trim: bool = False
    delay: int = 0

    def with_overrides(self, **kwargs) -> "RunOptions":
        """Return new RunOptions with specified fields overridden.

        Only applies overrides for non-None values, so CLI flags
        that weren't specified don't clobber config file values.
        """
        updates = {k: v for k, v in kwargs.items() if v is not None}
        return dataclasses.replace(self, **updates) if updates else self


def load_options(config_path: Optional[Path] = None) -> RunOptions:
    """Load defaults from the TOML config file, if there is one.

    Args:
        config_path: Explicit path to config file. If None, uses
                     CB_HOME/config.toml or ~/.cb/config.toml.

    Returns:
        RunOptions with file values merged over the built-in defaults.
    """
    path = config_path or get_config_path()

    if not path.is_file():
        return RunOptions()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        _warn(f"Could not read config file {path}: {e}")
        return RunOptions()

    try:
        parsed = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        _warn(f"Could not parse config file {path}: {e}")
        return RunOptions()

    return _build_options(parsed)


def _build_options(parsed: dict) -> RunOptions:
    """Build RunOptions from a parsed TOML dict, using defaults for missing keys."""
    def _get(section: str, key: str):
        default = _DEFAULTS[section][key]
        table = parsed.get(section, {})
        val = table.get(key, default) if isinstance(table, dict) else default
        if isinstance(default, bool):
            if isinstance(val, str):
                return val.lower() in ("true", "1", "yes")
            return bool(val)
        return str(val)

    return RunOptions(
        file=_get("output", "file"),
        save_file=_get("output", "save"),
        append=_get("output", "append"),
        trim=_get("output", "trim"),
        raw=_get("output", "raw"),
        verbose=_get("output", "verbose"),
        clipboard_enabled=_get("clipboard", "enabled"),
        clipboard_backend=_get("clipboard", "backend"),
        clear_clipboard=_get("clipboard", "clear"),
    )


def format_config(options: RunOptions, config_path: Optional[Path] = None) -> str:
    """Format the effective options for display (used by --config)."""
    path = config_path or get_config_path()

    def _b(value: bool) -> str:
        return str(value).lower()

    lines = [
        f"Config file: {path}",
        f"  exists: {'yes' if path.is_file() else 'no'}",
        "",
        "[output]",
        f"  file = {options.file}",
        f"  save = {_b(options.save_file)}",
        f"  append = {_b(options.append)}",
        f"  trim = {_b(options.trim)}",
        f"  raw = {_b(options.raw)}",
        f"  verbose = {_b(options.verbose)}",
        "",
        "[clipboard]",
        f"  enabled = {_b(options.clipboard_enabled)}",
        f"  backend = {options.clipboard_backend or '(auto)'}",
        f"  clear = {_b(options.clear_clipboard)}",
    ]
    return "\n".join(lines)


def _warn(msg: str) -> None:
    """Print a warning to stderr."""
    print(f"cb: config: {msg}", file=sys.stderr)
