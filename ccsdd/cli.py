"""Command-line front door for ccsdd.

Resolves the verb from argv, prints help or version text, and dispatches
into the command registry. This is the only place that picks an exit code.
"""

from __future__ import annotations

import logging
import sys

from . import __version__
from .config import load_log_level
from .registry import COMMANDS, CommandUsageError, get_command

PROGRAM_NAME = "ccsdd"
HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-v")
_COLUMN_WIDTH = 31

logger = logging.getLogger(__name__)


def render_help() -> str:
    """Build usage text listing every registered command."""
    lines = [
        f"CCSDD v{__version__}",
        "Cross-platform helper for Kiro spec-driven development",
        "",
        "USAGE:",
        f"  {PROGRAM_NAME} <command> [arguments]",
        "",
        "COMMANDS:",
    ]
    lines.extend(f"  {command.signature:<{_COLUMN_WIDTH}}{command.description}" for command in COMMANDS)
    lines.extend(
        [
            "",
            "OPTIONS:",
            f"  {'--version, -v':<{_COLUMN_WIDTH}}Show version",
            f"  {'--help, -h':<{_COLUMN_WIDTH}}Show this help",
        ]
    )
    return "\n".join(lines)


def _configure_logging() -> None:
    logging.basicConfig(
        level=load_log_level(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _use_utf8_output() -> None:
    """Switch stdout/stderr to UTF-8 so emoji messages survive legacy code pages."""
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Run one command and return the process exit code.

    ``argv`` excludes the program name and defaults to ``sys.argv[1:]``.
    """
    _use_utf8_output()
    args = list(sys.argv[1:] if argv is None else argv)
    verb = args[0] if args else None

    if verb is None or verb in HELP_FLAGS:
        print(render_help())
        return 0
    if verb in VERSION_FLAGS:
        print(__version__)
        return 0

    command = get_command(verb)
    if command is None:
        print(f"Unknown command: {verb}", file=sys.stderr)
        print(f'Run "{PROGRAM_NAME} --help" for available commands', file=sys.stderr)
        return 1

    _configure_logging()
    try:
        command.invoke(args[1:])
    except Exception as exc:
        if not isinstance(exc, CommandUsageError):
            logger.debug("command %s failed", verb, exc_info=True)
        print(f"Error executing {verb}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
