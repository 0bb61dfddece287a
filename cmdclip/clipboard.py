"""
Linux clipboard abstraction.

Uses whichever command-line helper is installed, checked in this order:
- Wayland: wl-copy
- X11: xclip
- X11: xsel

No Python dependencies required — uses subprocess calls to native tools.
"""

import shutil
import subprocess
from typing import List, Optional


class ClipboardError(Exception):
    """Raised when clipboard operations fail."""
    pass


class ClipboardBackend:
    """Base class for clipboard backends.

    Subclasses name a helper executable and the fixed arguments that
    make it read new clipboard contents from stdin.
    """

    name = "base"
    command: List[str] = []

    def copy(self, data: bytes) -> None:
        """Replace the clipboard contents with ``data``."""
        tool = self.command[0]
        try:
            proc = subprocess.run(
                self.command,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                timeout=10,
            )
        except FileNotFoundError:
            raise ClipboardError(f"{tool} not found")
        except subprocess.TimeoutExpired:
            raise ClipboardError(f"{tool} timed out")
        except OSError as e:
            raise ClipboardError(f"{tool} could not be started: {e}")
        if proc.returncode != 0:
            raise ClipboardError(
                f"{tool} failed: {proc.stderr.decode(errors='replace').strip()}"
            )

    def clear(self) -> None:
        """Blank the clipboard by copying empty input."""
        self.copy(b"")

    @classmethod
    def available(cls) -> bool:
        return bool(cls.command) and shutil.which(cls.command[0]) is not None


class WaylandBackend(ClipboardBackend):
    """Wayland clipboard via wl-copy."""

    name = "wayland"
    command = ["wl-copy"]


class XclipBackend(ClipboardBackend):
    """X11 clipboard via xclip."""

    name = "xclip"
    command = ["xclip", "-selection", "clipboard"]


class XselBackend(ClipboardBackend):
    """X11 clipboard via xsel."""

    name = "xsel"
    command = ["xsel", "--clipboard", "--input"]


# Backend detection order — first match on PATH wins
_BACKENDS = [
    WaylandBackend,
    XclipBackend,
    XselBackend,
]


def detect_backend() -> ClipboardBackend:
    """Auto-detect and return the first installed clipboard backend."""
    for backend_cls in _BACKENDS:
        if backend_cls.available():
            return backend_cls()
    tried = ", ".join(b.command[0] for b in _BACKENDS)
    raise ClipboardError(f"no clipboard tool found (tried: {tried})")


def get_backend(name: Optional[str] = None) -> ClipboardBackend:
    """Get a clipboard backend by name, or auto-detect."""
    if not name:
        return detect_backend()

    for backend_cls in _BACKENDS:
        if backend_cls.name == name:
            if not backend_cls.available():
                raise ClipboardError(f"Backend '{name}' is not available on this system")
            return backend_cls()

    available_names = [b.name for b in _BACKENDS]
    raise ClipboardError(f"Unknown backend '{name}'. Available: {', '.join(available_names)}")
