"""Error reporting to the standard error stream."""

from __future__ import annotations

import sys
from typing import Any, NoReturn, Optional, TextIO

from loxparse.fmt import format_c

EXIT_FAILURE = 1


def report(line: int, where: str, message: str, stream: Optional[TextIO] = None) -> None:
    """Write a located error message."""
    out = sys.stderr if stream is None else stream
    out.write(f"[line {line}] Error{where}: {message}\n")


def error(line: int, message: str, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Format message with args and report it for the given line."""
    report(line, "", format_c(message, *args), stream)


def exit_with(status: int = EXIT_FAILURE, message: Optional[str] = None) -> NoReturn:
    """Write message, if any, to standard error and exit with status."""
    if message is not None:
        sys.stderr.write(message)
    raise SystemExit(status)