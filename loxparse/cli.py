"""Command-line entry point: parse a script or an interactive prompt."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence, TextIO

from loxparse.errors import error
from loxparse.parser import ParseError, Parser
from loxparse.printer import print_ast
from loxparse.scanner import ScanError, scan_tokens
from loxparse.tokens import TokenType

try:
    import readline
except ImportError:
    readline = None  # type: ignore[assignment]

EXIT_SUCCESS = 0
EX_USAGE = 64
EX_DATAERR = 65

PROMPT = "shell> "


def read_entire_file(path: str) -> str:
    """Return the whole content of a file as text."""
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def run(source: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Scan and parse source, printing the tree; return an exit status."""
    out_stream = sys.stdout if out is None else out
    source = source.partition("\0")[0]
    try:
        tokens = scan_tokens(source, err)
    except ScanError:
        return EX_DATAERR
    parser = Parser(tokens, err)
    try:
        expr = parser.expression()
    except ParseError:
        expr = None
    rest = parser.peek()
    if rest.type is not TokenType.EOF:
        if rest.lexeme is not None:
            error(rest.line, "Invalid syntax: %s", rest.lexeme, stream=err)
    else:
        print_ast(expr, out_stream)
    return EXIT_SUCCESS


def run_prompt(out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
    """Read lines interactively and run each one until end of input."""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            clear = getattr(readline, "clear_history", None)
            if clear is not None:
                clear()
            (sys.stdout if out is None else out).write("exit\n")
            break
        run(line, out, err)


def run_file(path: str) -> NoReturn:
    """Run the script at path and exit with its status."""
    try:
        source = read_entire_file(path)
    except OSError as exc:
        sys.stderr.write(f"{path}: {exc.strerror or exc}\n")
        raise SystemExit(EX_DATAERR) from None
    raise SystemExit(run(source))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a script given as the only argument, or the prompt without one."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("Usage: jlox [script]")
        raise SystemExit(EX_USAGE)
    if len(args) == 1:
        run_file(args[0])
    run_prompt()
    return EXIT_SUCCESS