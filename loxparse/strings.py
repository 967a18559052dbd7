"""Small string helpers: character classes, integer parsing and slicing."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = frozenset("\t\f\n\v\r ")


def is_space(c: str) -> bool:
    """Return True for the six ASCII whitespace characters."""
    return c in _SPACES and len(c) == 1


def is_alpha(c: str) -> bool:
    """Return True for an ASCII letter."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def is_digit(c: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return len(c) == 1 and "0" <= c <= "9"


def parse_int(text: str) -> int:
    """Parse a leading signed decimal integer that fits in 32 bits.

    Leading whitespace is skipped and anything after the digits is ignored.
    Text without digits yields 0. A value outside the 32-bit signed range
    raises OverflowError.
    """
    rest = text.lstrip("\t\f\n\v\r ")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for c in rest:
        if not is_digit(c):
            break
        value = value * 10 + (ord(c) - ord("0")) * sign
        if not INT_MIN <= value <= INT_MAX:
            raise OverflowError(f"integer out of range: {text!r}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty pieces."""
    if not sep:
        raise ValueError("separator must not be empty")
    return [piece for piece in text.split(sep) if piece]


def join_with(start: str, end: str, sep: str) -> str:
    """Join two strings with a separator between them."""
    return f"{start}{sep}{end}"


def search_prefix(haystack: Iterable[str], needle: str) -> Optional[str]:
    """Return the first entry of haystack that starts with needle, or None."""
    return next((item for item in haystack if item.startswith(needle)), None)


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most n characters, returning the code-point difference.

    The result is zero when the compared parts are equal, negative when
    first sorts before second and positive otherwise. Comparison stops at
    the end of the shorter string or at a NUL character.
    """
    if n <= 0:
        return 0
    for x, y in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if x != y or x == "\0":
            return ord(x) - ord(y)
    return 0


def bounded_copy(text: str, size: int) -> tuple[str, int]:
    """Copy text into a buffer of size characters including the terminator.

    Returns the copy, truncated to size - 1 characters, together with the
    full length of text so the caller can detect truncation.
    """
    if size <= 0:
        return "", len(text)
    return text[: size - 1], len(text)