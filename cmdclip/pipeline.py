"""
Core capture-to-clipboard logic.

Runs a command, cleans up its output, saves it to the record file,
copies it to the clipboard, then echoes it to stdout. Every step runs
to completion before the next one starts.
"""

import sys
import time
from datetime import datetime
from typing import Callable, Optional, Sequence, TextIO

from ._paths import resolve_record_path
from .clipboard import ClipboardBackend, ClipboardError, get_backend
from .config import QuietMode, RunOptions
from .executor import run_command
from .record import format_record, write_record
from .transform import apply_transforms, limit_lines


def run_capture(
    command: Sequence[str],
    options: RunOptions,
    backend: Optional[ClipboardBackend] = None,
    stdout: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
    now: Optional[datetime] = None,
) -> str:
    """
    Capture a command's output and publish it.

    Args:
        command: The command and its arguments.
        options: Settings for this run.
        backend: Clipboard backend to use instead of auto-detecting one.
        stdout: Stream for the echo and verbose status lines.
        sleep: Used for the --delay pause.
        now: Timestamp for the record header (defaults to the current time).

    Returns:
        The transformed text that was saved and copied.

    Raises:
        SpawnError: the command could not be started.
        CommandFailedError: the command exited non-zero and stderr was
            not being captured.
        RecordWriteError: the record file could not be written.
        ClipboardError: the clipboard could not be set.
    """
    out = stdout or sys.stdout

    result = run_command(command, capture_stderr=options.capture_stderr)
    if result.error is not None:
        raise result.error

    if options.delay > 0:
        if options.verbose:
            print(f"Waiting {options.delay} seconds...", file=out)
        sleep(options.delay)

    text = apply_transforms(result.output, options)

    if options.save_file:
        record = format_record(command, text, timestamp=now)
        path = write_record(resolve_record_path(options.file), record, append=options.append)
        if options.verbose:
            print(f"Output written to {path}", file=out)

    if options.clipboard_enabled:
        if backend is None:
            backend = get_backend(options.clipboard_backend or None)
        if options.clear_clipboard:
            try:
                backend.clear()
            except ClipboardError as e:
                if options.verbose:
                    print(f"cb: warning: could not clear clipboard: {e}", file=sys.stderr)
        backend.copy(text.encode(errors="surrogateescape"))
        if options.verbose:
            lines = text.count("\n") + 1
            print(f"Copied {lines} lines to clipboard", file=out)

    _echo(text, options, out)
    return text


def _echo(text: str, options: RunOptions, out: TextIO) -> None:
    """Print the captured text, honouring -q."""
    quiet = options.quiet
    if quiet.mode is QuietMode.SUPPRESS_ALL:
        return

    shown = text
    if quiet.mode is QuietMode.LIMIT:
        shown = limit_lines(text, quiet.lines)

    if not shown:
        return
    if not shown.endswith("\n"):
        shown += "\n"

    # write bytes where possible so non-UTF-8 output passes through as-is
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(shown)
        out.flush()
        return
    out.flush()
    buffer.write(shown.encode(errors="surrogateescape"))
    buffer.flush()
