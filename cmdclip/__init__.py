"""
cmdclip - run a command, keep its output, and put it on the clipboard.

Runs the command, strips terminal colour codes, saves the output to a
timestamped log file and copies it to the Linux clipboard.

Usage:
    cb ls -l                  # stdout + /tmp/cb.txt + clipboard
    cb -h 10 dmesg            # keep only the first 10 lines
    cb -a -f ~/log.txt make   # append a record to a log
    cb -q -e make test        # capture stderr too, print nothing
"""

from ._version import __version__, get_version, get_base_version, VERSION, BASE_VERSION

__all__ = [
    "__version__",
    "get_version",
    "get_base_version",
    "VERSION",
    "BASE_VERSION",
]
