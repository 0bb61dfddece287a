"""
Command-line interface for cb.

Usage:
    cb echo "hello world"         # stdout + /tmp/cb.txt + clipboard
    cb -h 10 dmesg                # keep only the first 10 lines
    cb -f output.txt -v ps aux    # write to output.txt, report each step
    cb -e -v somecommand          # include stderr in the capture
    cb --version                  # show version

Flags must come before the command; everything from the first
non-flag word on is passed to the command untouched.
"""

import argparse
import sys

from ._version import __version__, get_display_version

_EPILOG = (
    "examples:\n"
    '  cb echo "hello world"\n'
    "  cb ls -l /home/user\n"
    "  cb -h 10 dmesg\n"
    "  cb -f output.txt -v ps aux\n"
    "  cb -e -v somecommand\n"
    "\n"
    "notes:\n"
    "  - requires wl-copy (Wayland) or xclip/xsel (X11) for clipboard support\n"
    '  - output is saved with a timestamp header: [date time "command"]:\n'
)


# Flags whose value is the following word
_VALUE_FLAGS = {"-h", "-t", "-f", "--delay", "--backend"}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    -h is the head-line limit, so the automatic help option is replaced
    by a long-only --help.
    """
    p = argparse.ArgumentParser(
        prog="cb",
        description=(
            "Run any command, capture its output, save it to a file "
            "and copy it to the clipboard."
        ),
        usage="%(prog)s [flags] <command> [args...]",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
        add_help=False,
        allow_abbrev=False,
    )

    p.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        metavar="COMMAND",
        help="command to run, with its arguments",
    )

    p.add_argument(
        "-h",
        type=int,
        dest="head",
        metavar="X",
        help="copy only the first X lines of output",
    )

    p.add_argument(
        "-t",
        type=int,
        dest="tail",
        metavar="X",
        help="copy only the last X lines of output",
    )

    p.add_argument(
        "-q",
        type=int,
        dest="quiet",
        metavar="X",
        help="suppress stdout entirely, or show only X lines",
    )

    # bare -q, rewritten by _expand_quiet() so it never takes the command name
    p.add_argument(
        "--quiet-all",
        action="store_true",
        help=argparse.SUPPRESS,
    )

    p.add_argument(
        "-f",
        dest="file",
        metavar="FILE",
        help="write output to FILE instead of /tmp/cb.txt",
    )

    p.add_argument(
        "-c", "--clear",
        action="store_true",
        help="clear clipboard before writing",
    )

    p.add_argument(
        "-e", "--error",
        action="store_true",
        dest="capture_stderr",
        help="capture stderr along with stdout",
    )

    p.add_argument(
        "-a", "--append",
        action="store_true",
        help="append output to file instead of overwriting",
    )

    p.add_argument(
        "-n",
        action="store_true",
        dest="no_clipboard",
        help="disable clipboard, only save to file",
    )

    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="show what was copied / debug info",
    )

    p.add_argument(
        "--no-temp",
        action="store_true",
        help="skip writing the output file entirely",
    )

    p.add_argument(
        "-r", "--raw",
        action="store_true",
        help="preserve terminal formatting/ANSI codes",
    )

    p.add_argument(
        "--delay",
        type=int,
        default=0,
        metavar="N",
        help="wait N seconds before copying output",
    )

    p.add_argument(
        "--trim",
        action="store_true",
        help="trim leading and trailing whitespace",
    )

    p.add_argument(
        "--backend",
        metavar="NAME",
        help="force clipboard backend (wayland, xclip, xsel)",
    )

    p.add_argument(
        "--config",
        action="store_true",
        dest="show_config",
        help="show current configuration",
    )

    p.add_argument(
        "--version",
        action="version",
        version=f"cb {get_display_version()} ({__version__})",
    )

    p.add_argument(
        "--help",
        action="help",
        help="display this help message",
    )

    return p


def _is_int(word: str) -> bool:
    return word.lstrip("-").isdigit()


def _expand_quiet(argv):
    """Rewrite a bare ``-q`` in the flag prefix as ``--quiet-all``.

    ``-q`` only takes the next word when it is a number. Scanning stops
    at the first word that is not a flag, since that word starts the
    command and everything after it belongs to the command.
    """
    argv = list(argv)
    i = 0
    while i < len(argv):
        word = argv[i]
        if word == "--" or not word.startswith("-") or _is_int(word):
            break
        if word == "-q":
            if i + 1 < len(argv) and _is_int(argv[i + 1]):
                i += 1
            else:
                argv[i] = "--quiet-all"
        elif word in _VALUE_FLAGS:
            i += 1
        i += 1
    return argv


def parse_args(argv=None):
    """Parse flags and split off the command to run."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_expand_quiet(argv))

    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]

    args.command = tuple(command)
    return parser, args


def options_from_args(args, base=None):
    """Layer parsed CLI flags over the config-file defaults."""
    from .config import QuietSetting, load_options

    base = base or load_options()
    quiet = None
    if args.quiet is not None or args.quiet_all:
        quiet = QuietSetting.from_value(args.quiet)
    return base.with_overrides(
        head_lines=args.head,
        tail_lines=args.tail,
        quiet=quiet,
        file=args.file or None,
        save_file=False if args.no_temp else None,
        append=args.append or None,
        capture_stderr=args.capture_stderr or None,
        clipboard_enabled=False if args.no_clipboard else None,
        clipboard_backend=args.backend or None,
        clear_clipboard=args.clear or None,
        verbose=args.verbose or None,
        raw=args.raw or None,
        trim=args.trim or None,
        delay=args.delay or None,
    )


def main(argv=None):
    """Main entry point."""
    parser, args = parse_args(argv)
    options = options_from_args(args)

    # --config: show effective configuration
    if args.show_config:
        from .config import format_config
        print(format_config(options))
        return

    if not args.command:
        print("cb: no command specified", file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(1)

    from .clipboard import ClipboardError
    from .executor import CommandFailedError, SpawnError
    from .pipeline import run_capture
    from .record import RecordWriteError

    try:
        run_capture(args.command, options)
    except (SpawnError, CommandFailedError) as e:
        print(f"cb: error executing command: {e}", file=sys.stderr)
        sys.exit(1)
    except RecordWriteError as e:
        print(f"cb: error writing to file: {e}", file=sys.stderr)
        sys.exit(1)
    except ClipboardError as e:
        print(f"cb: error copying to clipboard: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
