"""A growable string builder with numeric append helpers."""

from __future__ import annotations

from operator import index
from typing import Optional

_MIN_CAPACITY = 10
_UINT_MOD = 2**32
_ULONG_MOD = 2**64


class StringBuilder:
    """Accumulate text piece by piece and produce the final string.

    The builder tracks a capacity that starts at no less than ten
    characters and doubles whenever an append would not leave room for a
    terminator, so ``capacity > len(builder)`` always holds.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = max(_MIN_CAPACITY, capacity)
        self._chunks: list[str] = []
        self._length = 0

    def _ensure(self, extra: int) -> None:
        while self.capacity < self._length + extra + 1:
            self.capacity <<= 1

    def _push(self, piece: str) -> None:
        self._ensure(len(piece))
        self._chunks.append(piece)
        self._length += len(piece)

    def _collapse(self) -> str:
        text = "".join(self._chunks)
        self._chunks = [text] if text else []
        return text

    def append(self, text: Optional[str], length: int = 0) -> "StringBuilder":
        """Append text, or only its first ``length`` characters when length > 0."""
        if text is None:
            raise TypeError("cannot append None")
        if length < 0:
            raise ValueError("length must not be negative")
        if not text:
            return self
        piece = text if length == 0 else text[:length]
        self._push(piece)
        return self

    def append_char(self, c: str) -> "StringBuilder":
        """Append a single character."""
        if len(c) != 1:
            raise ValueError("expected exactly one character")
        self._push(c)
        return self

    def append_int(self, n: int) -> "StringBuilder":
        """Append a signed decimal integer."""
        self._push(str(index(n)))
        return self

    def append_unsigned(self, n: int) -> "StringBuilder":
        """Append an integer as a 32-bit unsigned decimal value."""
        self._push(str(index(n) % _UINT_MOD))
        return self

    def append_hex(self, n: int, uppercase: bool = False) -> "StringBuilder":
        """Append an integer as a 64-bit unsigned hexadecimal value."""
        self._push(format(index(n) % _ULONG_MOD, "X" if uppercase else "x"))
        return self

    def append_pointer(self, address: Optional[int]) -> "StringBuilder":
        """Append an address as ``0x``-prefixed hex, or ``(nil)`` for None."""
        if address is None:
            self._push("(nil)")
            return self
        self._push("0x")
        return self.append_hex(address)

    def truncate(self, length: int) -> None:
        """Shorten the contents to ``length`` characters; longer lengths do nothing."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length >= self._length:
            return
        text = self._collapse()[:length]
        self._chunks = [text] if text else []
        self._length = length

    def clear(self) -> None:
        """Remove all contents."""
        self.truncate(0)

    def drop(self, count: int) -> None:
        """Remove ``count`` characters from the front."""
        if count <= 0:
            return
        if count >= self._length:
            self.clear()
            return
        text = self._collapse()[count:]
        self._chunks = [text]
        self._length = len(text)

    def build(self) -> str:
        """Return the contents and leave the builder empty."""
        text = self._collapse()
        self.clear()
        return text

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self._collapse()