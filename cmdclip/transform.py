"""Text clean-up applied to captured output before it is saved or copied."""

import re

from .config import RunOptions

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences (colours, cursor movement)."""
    return _ANSI_RE.sub("", text)


def trim(text: str) -> str:
    """Remove leading and trailing whitespace, newlines included."""
    return text.strip()


def apply_line_filters(text: str, head: int = 0, tail: int = 0) -> str:
    """Keep the first ``head`` lines, then the last ``tail`` of those.

    A limit of zero, or one at least as large as the line count,
    leaves the text alone.
    """
    if head <= 0 and tail <= 0:
        return text

    lines = text.split("\n")

    if 0 < head < len(lines):
        lines = lines[:head]

    if 0 < tail < len(lines):
        lines = lines[-tail:]

    return "\n".join(lines)


def limit_lines(text: str, max_lines: int) -> str:
    """Return the first ``max_lines`` lines; used for terminal echo only."""
    if max_lines <= 0:
        return text

    lines = text.split("\n")
    if len(lines) <= max_lines:
        return text

    return "\n".join(lines[:max_lines])


def apply_transforms(text: str, options: RunOptions) -> str:
    """Run the saved/copied chain: strip, trim, then head/tail."""
    if not options.raw:
        text = strip_ansi(text)
    if options.trim:
        text = trim(text)
    return apply_line_filters(text, options.head_lines, options.tail_lines)
