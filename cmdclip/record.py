"""
Record file output.

Each run is saved as one block:

    [2026-01-31 14:02:11 "ls -l"]:
    <output>

Overwrite mode leaves only the newest block; append mode turns the file
into a running log.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Union

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class RecordWriteError(Exception):
    """Raised when the record file cannot be written."""
    pass


def format_record(invocation: Sequence[str], text: str,
                  timestamp: Optional[datetime] = None) -> str:
    """Render the header line and text for one run."""
    ts = (timestamp or datetime.now()).strftime(TIMESTAMP_FORMAT)
    label = " ".join(invocation)
    return f'[{ts} "{label}"]:\n{text}\n'


def write_record(path: Union[str, Path], record: str, append: bool = False) -> Path:
    """Write a record to ``path``, creating parent directories as needed.

    Returns the path that was written.
    """
    target = Path(path)
    mode = "a" if append else "w"
    try:
        target.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        with open(target, mode, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(record)
    except OSError as e:
        raise RecordWriteError(f"{target}: {e.strerror or e}") from e
    return target
