"""Recursive-descent parsing of expressions from a token list."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TextIO

from loxparse.errors import error
from loxparse.expr import Binary, Expr, Grouping, Literal, Unary
from loxparse.tokens import Token, TokenType

_MISSING_PAREN = "Expect ')' after expression."
_MISSING_EXPR = "Expect expression."


class ParseError(Exception):
    """Raised when no expression can be parsed at the current token."""

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(f"[line {token.line}] {message}")
        self.token = token
        self.message = message


class Parser:
    """Parse tokens into an expression tree.

    Grammar, from lowest to highest precedence: equality, comparison,
    term, factor, unary, primary. Binary operators associate to the left.
    """

    def __init__(self, tokens: Iterable[Token], stream: Optional[TextIO] = None) -> None:
        self.tokens = list(tokens)
        if not self.tokens:
            raise ValueError("no tokens to parse")
        self._stream = stream
        self._current = 0

    def peek(self) -> Token:
        """Return the token the parser currently stands on."""
        if self._current < len(self.tokens):
            return self.tokens[self._current]
        return Token(TokenType.EOF, None, None, self.tokens[-1].line)

    def _previous(self) -> Token:
        return self.tokens[self._current - 1]

    def _match(self, *types: TokenType) -> bool:
        token = self.peek()
        if token.type is TokenType.EOF or token.type not in types:
            return False
        self._current += 1
        return True

    def expression(self) -> Expr:
        """Parse one expression starting at the current token."""
        if self.peek().type is TokenType.EOF:
            raise ParseError(self.peek(), _MISSING_EXPR)
        return self._equality()

    def _binary(self, operand: Callable[[], Expr], *types: TokenType) -> Expr:
        left = operand()
        while self._match(*types):
            op = self._previous()
            left = Binary(left, op, operand())
        return left

    def _equality(self) -> Expr:
        return self._binary(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Expr:
        return self._binary(
            self._term,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expr:
        return self._binary(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expr:
        return self._binary(self._unary, TokenType.SLASH, TokenType.STAR)

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            op = self._previous()
            return Unary(op, self._unary())
        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal.boolean(False)
        if self._match(TokenType.TRUE):
            return Literal.boolean(True)
        if self._match(TokenType.NIL):
            return Literal.nil()
        if self._match(TokenType.NUMBER):
            return Literal.number(float(self._previous().lexeme or "0"))
        if self._match(TokenType.STRING):
            return Literal.string(self._previous().lexeme or "")
        if self._match(TokenType.LEFT_PAREN):
            inner = self.expression()
            if not self._match(TokenType.RIGHT_PAREN):
                token = self.peek()
                error(token.line, _MISSING_PAREN, stream=self._stream)
                raise ParseError(token, _MISSING_PAREN)
            return Grouping(inner)
        raise ParseError(self.peek(), _MISSING_EXPR)


def parse(tokens: Iterable[Token], stream: Optional[TextIO] = None) -> Expr:
    """Parse a complete expression, raising ParseError if tokens remain after it."""
    parser = Parser(tokens, stream)
    expr = parser.expression()
    rest = parser.peek()
    if rest.type is not TokenType.EOF:
        raise ParseError(rest, "Unexpected token after expression.")
    return expr