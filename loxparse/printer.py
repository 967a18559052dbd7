"""Rendering expression trees as parenthesised prefix text."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from loxparse.expr import Binary, Expr, Grouping, Literal, LiteralKind, Unary


def _literal(lit: Literal) -> str:
    if lit.kind is LiteralKind.NIL:
        return "nil"
    if lit.kind is LiteralKind.TRUE:
        return "true"
    if lit.kind is LiteralKind.FALSE:
        return "false"
    if lit.kind is LiteralKind.STRING:
        return str(lit.value)
    if lit.kind is LiteralKind.NUMBER:
        return f"{lit.value:f}"
    return "<?>"


def format_ast(expr: Optional[Expr]) -> str:
    """Return the tree as one line of prefix notation; None renders as ``empty``."""
    if expr is None:
        return "empty"
    if isinstance(expr, Literal):
        return _literal(expr)
    if isinstance(expr, Grouping):
        return f"(group {format_ast(expr.expression)})"
    if isinstance(expr, Unary):
        return f"({expr.op.lexeme} {format_ast(expr.right)})"
    if isinstance(expr, Binary):
        return f"({expr.op.lexeme} {format_ast(expr.left)} {format_ast(expr.right)})"
    raise TypeError(f"not an expression: {expr!r}")


def print_ast(expr: Optional[Expr], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree followed by a newline."""
    out = sys.stdout if file is None else file
    out.write(format_ast(expr) + "\n")