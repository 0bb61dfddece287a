"""
Child command execution.

Runs the wrapped command without a shell and captures its output in
memory. In capture-stderr mode the two streams share one pipe, so the
captured text keeps the order the child wrote it in. The child reads
from /dev/null, never from the terminal.
"""

import subprocess
from typing import Optional, Sequence


class SpawnError(Exception):
    """Raised when the command cannot be started at all."""
    pass


class CommandFailedError(Exception):
    """The command ran but exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        msg = f"exit status {returncode}"
        if stderr:
            msg = f"{msg} (stderr: {stderr.strip()})"
        super().__init__(msg)


class CaptureResult:
    """Output captured from one command run."""

    __slots__ = ("output", "returncode", "error")

    def __init__(self, output: str, returncode: int,
                 error: Optional[CommandFailedError] = None):
        self.output = output
        self.returncode = returncode
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None


def run_command(argv: Sequence[str], capture_stderr: bool = False) -> CaptureResult:
    """
    Run a command and capture what it prints.

    Args:
        argv: Command and arguments. Must not be empty.
        capture_stderr: Merge stderr into the captured output. A non-zero
            exit is not treated as a failure in this mode.

    Returns:
        CaptureResult with the decoded output (surrogateescape, so the
        original bytes can be recovered). When the command exits
        non-zero in separate mode, ``error`` carries the exit status and
        the child's stderr; ``output`` still holds whatever went to stdout.

    Raises:
        SpawnError: the executable could not be found or launched.
    """
    if not argv:
        raise ValueError("no command given")

    try:
        proc = subprocess.run(
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if capture_stderr else subprocess.PIPE,
        )
    except FileNotFoundError:
        raise SpawnError(f"{argv[0]}: command not found")
    except PermissionError:
        raise SpawnError(f"{argv[0]}: permission denied")
    except OSError as e:
        raise SpawnError(f"{argv[0]}: {e}")

    # undecodable bytes survive as surrogates and are re-encoded unchanged
    output = proc.stdout.decode(errors="surrogateescape")

    if capture_stderr or proc.returncode == 0:
        return CaptureResult(output, proc.returncode)

    stderr = proc.stderr.decode(errors="replace") if proc.stderr else ""
    return CaptureResult(
        output, proc.returncode, CommandFailedError(proc.returncode, stderr)
    )
