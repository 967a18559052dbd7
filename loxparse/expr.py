"""Expression tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from loxparse.tokens import Token


class LiteralKind(Enum):
    """The kinds of literal value."""

    NUMBER = auto()
    STRING = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()


@dataclass(frozen=True)
class Literal:
    """A literal number, string, boolean or nil."""

    kind: LiteralKind
    value: Union[float, str, bool, None] = None

    @staticmethod
    def number(value: float) -> "Literal":
        """Create a number literal."""
        return Literal(LiteralKind.NUMBER, float(value))

    @staticmethod
    def string(value: str) -> "Literal":
        """Create a string literal."""
        if value is None:
            raise ValueError("string literal needs a value")
        return Literal(LiteralKind.STRING, str(value))

    @staticmethod
    def boolean(value: bool) -> "Literal":
        """Create a true or false literal."""
        return Literal(LiteralKind.TRUE if value else LiteralKind.FALSE, bool(value))

    @staticmethod
    def nil() -> "Literal":
        """Create the nil literal."""
        return Literal(LiteralKind.NIL, None)


def _require(**parts: Optional[object]) -> None:
    for name, value in parts.items():
        if value is None:
            raise ValueError(f"{name} must not be None")


@dataclass(frozen=True)
class Grouping:
    """A parenthesised expression."""

    expression: "Expr"

    def __post_init__(self) -> None:
        _require(expression=self.expression)


@dataclass(frozen=True)
class Unary:
    """A prefix operator applied to one operand."""

    op: Token
    right: "Expr"

    def __post_init__(self) -> None:
        _require(op=self.op, right=self.right)


@dataclass(frozen=True)
class Binary:
    """An infix operator applied to two operands."""

    left: "Expr"
    op: Token
    right: "Expr"

    def __post_init__(self) -> None:
        _require(left=self.left, op=self.op, right=self.right)


Expr = Union[Literal, Grouping, Unary, Binary]