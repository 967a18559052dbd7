"""Scanner, expression parser and AST printer for the Lox language."""

__version__ = "0.1.0"