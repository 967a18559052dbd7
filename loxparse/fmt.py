"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X %%."""

from __future__ import annotations

import re
from operator import index
from typing import Any, Iterator, TextIO

from loxparse.strbuilder import StringBuilder

_SPEC = re.compile(r"%([cspdiuxX%]?)", re.DOTALL)
_INT_MOD = 2**32
_INT_HALF = 2**31


def _to_int32(n: Any) -> int:
    return (index(n) + _INT_HALF) % _INT_MOD - _INT_HALF


def _next(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _append_spec(sb: StringBuilder, spec: str, values: Iterator[Any], strict: bool) -> None:
    if spec in ("", "%"):
        sb.append_char("%")
        return
    value = _next(values, spec)
    if spec == "c":
        if isinstance(value, str):
            sb.append_char(value)
        else:
            sb.append_char(chr(index(value) % 256))
    elif spec == "s":
        if value is None:
            if strict:
                raise ValueError("%s given None")
            return
        sb.append(value)
    elif spec in ("d", "i"):
        sb.append_int(_to_int32(value))
    elif spec == "u":
        sb.append_unsigned(value)
    elif spec in ("x", "X"):
        sb.append_hex(index(value) % _INT_MOD, spec == "X")
    elif spec == "p":
        sb.append_pointer(value)


def _render(fmt: str, args: tuple[Any, ...], strict: bool) -> str:
    sb = StringBuilder(len(fmt))
    values = iter(args)
    pos = 0
    for match in _SPEC.finditer(fmt):
        sb.append(fmt[pos : match.start()])
        _append_spec(sb, match.group(1), values, strict)
        pos = match.end()
    sb.append(fmt[pos:])
    return sb.build()


def format_c(fmt: str, *args: Any) -> str:
    """Format args into a new string.

    A ``%`` followed by an unsupported character is kept as a literal
    ``%``. Passing None for ``%s`` raises ValueError; too few arguments
    raise TypeError.
    """
    return _render(fmt, args, strict=True)


def write_format(stream: TextIO, fmt: str, *args: Any) -> int:
    """Format args, write them to stream and return the number of characters.

    None given for ``%s`` writes nothing.
    """
    text = _render(fmt, args, strict=False)
    stream.write(text)
    return len(text)