"""Turning source text into a list of tokens."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

from loxparse.errors import error
from loxparse.strings import is_alpha, is_digit
from loxparse.tokens import Token, TokenType

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

_WITH_EQUAL = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

_KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_BLANKS = " \r\t"


class ScanError(Exception):
    """Raised when the source cannot be scanned."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"[line {line}] {message}")
        self.line = line
        self.message = message


def _is_word_char(c: str) -> bool:
    return is_alpha(c) or c == "_" or is_digit(c)


class Scanner:
    """Scan source text into tokens, reporting problems to a stream."""

    def __init__(self, source: str, stream: Optional[TextIO] = None) -> None:
        self.source = source
        self._stream = stream
        self._current = 0
        self._line = 1

    def _peek(self, offset: int = 0) -> str:
        pos = self._current + offset
        return self.source[pos] if pos < len(self.source) else ""

    def _advance(self) -> str:
        c = self._peek()
        self._current += 1
        return c

    def _match(self, expected: str) -> bool:
        if self._peek() == expected:
            self._current += 1
            return True
        return False

    def _token(self, kind: TokenType, lexeme: Optional[str]) -> Token:
        return Token(kind, lexeme, None, self._line)

    def _skip_line_comment(self) -> None:
        while self._peek() and self._peek() != "\n":
            self._current += 1
        if self._match("\n"):
            self._line += 1

    def _skip_block_comment(self) -> None:
        while self._peek() and not (self._peek() == "*" and self._peek(1) == "/"):
            if self._peek() == "\n":
                self._line += 1
            self._current += 1
        if self._peek() == "*" and self._peek(1) == "/":
            self._current += 2
        if self._match("\n"):
            self._line += 1

    def _string(self) -> Token:
        start = self._current
        while self._peek() and self._peek() != '"':
            if self._peek() == "\n":
                self._line += 1
            self._current += 1
        if not self._peek():
            error(self._line, "Unterminated string.", stream=self._stream)
            raise ScanError(self._line, "Unterminated string.")
        text = self.source[start : self._current]
        self._current += 1
        return self._token(TokenType.STRING, text)

    def _number(self) -> Token:
        start = self._current - 1
        while is_digit(self._peek()):
            self._current += 1
        if self._peek() == "." and is_digit(self._peek(1)):
            self._current += 1
            while is_digit(self._peek()):
                self._current += 1
        return self._token(TokenType.NUMBER, self.source[start : self._current])

    def _word(self) -> Token:
        start = self._current - 1
        while _is_word_char(self._peek()):
            self._current += 1
        text = self.source[start : self._current]
        kind = _KEYWORDS.get(text)
        if kind is None:
            return self._token(TokenType.IDENTIFIER, text)
        return self._token(kind, None)

    def _scan_token(self) -> Optional[Token]:
        c = self._advance()
        while c and c in _BLANKS:
            c = self._advance()
        if not c:
            return None
        if c == "\n":
            self._line += 1
            return None
        if c in _SINGLE:
            return self._token(_SINGLE[c], c)
        if c == "/":
            if self._match("/"):
                self._skip_line_comment()
                return None
            if self._match("*"):
                self._skip_block_comment()
                return None
            return self._token(TokenType.SLASH, c)
        if c in _WITH_EQUAL:
            single, double = _WITH_EQUAL[c]
            if self._match("="):
                return self._token(double, c + "=")
            return self._token(single, c)
        if c == '"':
            return self._string()
        if is_digit(c):
            return self._number()
        if is_alpha(c) or c == "_":
            return self._word()
        error(self._line, "Unexpected character.", stream=self._stream)
        return self._token(TokenType.UNKNOWN, c)

    def _tokens(self) -> Iterator[Token]:
        while self._current < len(self.source):
            token = self._scan_token()
            if token is not None:
                yield token

    def scan(self) -> list[Token]:
        """Return every token in the source followed by an EOF token."""
        self._current = 0
        self._line = 1
        tokens = list(self._tokens())
        tokens.append(Token(TokenType.EOF, None, None, self._line))
        return tokens


def scan_tokens(source: str, stream: Optional[TextIO] = None) -> list[Token]:
    """Scan source into tokens, ending with an EOF token."""
    return Scanner(source, stream).scan()