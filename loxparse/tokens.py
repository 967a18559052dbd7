"""Token kinds and the tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterable, Optional


class TokenType(Enum):
    """Every kind of token the scanner can produce."""

    # Single-character tokens.
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()
    # One or two character tokens.
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    # Literals.
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    # Keywords.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()
    EOF = auto()
    SKIPPABLE = auto()
    UNKNOWN = auto()

    def label(self) -> Optional[str]:
        """Return the display label of this kind, or None for SKIPPABLE."""
        if self is TokenType.SKIPPABLE:
            return None
        if self is TokenType.UNKNOWN:
            return "T_UNKOWN"
        return f"T_{self.name}"


@dataclass(frozen=True)
class Token:
    """A single scanned token.

    Keywords and the end-of-input marker carry no lexeme.
    """

    type: TokenType
    lexeme: Optional[str] = None
    literal: Any = None
    line: int = 1

    def describe(self) -> str:
        """Return the kind label followed by the lexeme and literal, if any."""
        label = self.type.label() or self.type.name
        if not self.lexeme:
            return label
        if self.literal is not None:
            return f"{label} {self.lexeme} {self.literal}"
        return f"{label} {self.lexeme}"


def format_tokens(tokens: Iterable[Token], newline: bool = True) -> str:
    """Describe every token, each followed by a newline when requested."""
    end = "\n" if newline else ""
    return "".join(f"{token.describe()}{end}" for token in tokens)