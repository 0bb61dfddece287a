"""
Version information for cb.

This file is the canonical source for version numbers.
To bump version: edit MAJOR, MINOR, PATCH below (and pyproject.toml).

Version levels:
  PROJECT_PHASE: Global project maturity (prealpha -> alpha -> beta -> stable).
  PHASE:         Per-MINOR feature set maturity (alpha -> beta -> None).
"""

MAJOR = 0
MINOR = 0
PATCH = 1
PHASE = None  # Per-MINOR feature set: None, "alpha", "beta", "rc1", etc.
PROJECT_PHASE = "prealpha"  # Project-wide: "prealpha", "alpha", "beta", "stable"

__version__ = f"{MAJOR}.{MINOR}.{PATCH}"
__app_name__ = "cb"


def get_version():
    """Return the full version string."""
    return __version__


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_display_version():
    """Return a human-friendly version string with project phase.

    Example: 'PREALPHA 0.0.1' or 'BETA 0.5.1-alpha' or '1.0.0'
    """
    base = get_base_version()
    if PROJECT_PHASE and PROJECT_PHASE != "stable":
        return f"{PROJECT_PHASE.upper()} {base}"
    return base


VERSION = get_version()
BASE_VERSION = get_base_version()
DISPLAY_VERSION = get_display_version()
