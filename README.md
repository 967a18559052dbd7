# loxparse

loxparse scans Lox source text into tokens and parses a single expression
into a syntax tree. It prints that tree in a parenthesised prefix form.

The parser handles the expression grammar. That covers literals (numbers,
strings, `true`, `false`, `nil`), grouping with parentheses, unary `!` and
`-`, and the binary operators `* /`, `+ -`, `< <= > >=` and `== !=`. Binary
operators associate to the left. The scanner also recognises the remaining
Lox punctuation and keywords. It skips `//` line comments and `/* ... */`
block comments.

## Installation

```
pip install .
```

To run the tests, install with the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

With no arguments, `loxparse` starts an interactive prompt (`shell> `).
Each line you enter is parsed and its tree is printed. End the session with
end-of-file (Ctrl-D). The prompt then prints `exit`.

```
loxparse
shell> 1 + 2 * (3 - 4)
(+ 1.000000 (* 2.000000 (group (- 3.000000 4.000000))))
```

Numbers are printed with six decimal places. An empty line prints `empty`.

Pass a single file to parse its contents and exit:

```
loxparse script.lox
```

Errors go to standard error in the form `[line N] Error: message`. Examples
are `Unexpected character.`, `Unterminated string.` and
`Expect ')' after expression.`. If tokens remain after the expression,
`Invalid syntax: <lexeme>` is reported and no tree is printed.

Exit statuses:

- 65: the input holds an unterminated string, or the file cannot be read.
- 64: more than one argument was given. A usage line is printed in this case.
- 0: every other case, including syntax errors.

## Library use

```python
from loxparse.scanner import scan_tokens
from loxparse.parser import parse
from loxparse.printer import format_ast

tokens = scan_tokens("-(1 + 2) == 3")
expr = parse(tokens)
print(format_ast(expr))
# (== (- (group (+ 1.000000 2.000000))) 3.000000)
```

- `loxparse.tokens`: `TokenType`, an enum with a `label()` method that gives
  names such as `T_PLUS`. `Token` is a frozen dataclass with `type`,
  `lexeme`, `literal` and `line`, and a `describe()` method.
  `format_tokens` describes a sequence of tokens.
- `loxparse.scanner`: `Scanner` and `scan_tokens`. Both return a list of
  tokens that ends with an `EOF` token. An unterminated string raises
  `ScanError`. An unexpected character is reported and scanned as an
  `UNKNOWN` token.
- `loxparse.parser`: `Parser`, with `expression()` and `peek()`, and
  `parse`. `parse` raises `ParseError` when no expression can be read or
  when tokens remain after it.
- `loxparse.expr`: the tree nodes `Literal` (built with `Literal.number`,
  `Literal.string`, `Literal.boolean` or `Literal.nil`), `Grouping`, `Unary`
  and `Binary`. It also defines `LiteralKind`.
- `loxparse.printer`: `format_ast` returns the tree as text, and `print_ast`
  writes it followed by a newline.
- `loxparse.errors`: `report`, `error` and `exit_with`.
- `loxparse.cli`: `run`, `run_file`, `run_prompt`, `read_entire_file` and
  `main`. Each error-reporting function takes an optional stream for
  messages. The default is standard error.

Smaller helpers are also included:

- `loxparse.strbuilder.StringBuilder`, a growable string buffer. It has
  append methods for text, characters, signed, unsigned and hexadecimal
  integers, and pointers. It also has `truncate`, `drop`, `clear` and
  `build`.
- `loxparse.fmt.format_c` and `loxparse.fmt.write_format`, printf-style
  formatting for the `%c %s %p %d %i %u %x %X %%` conversions.
- `loxparse.linereader.LineReader`, which reads a text or binary stream
  line by line using fixed-size reads.
- `loxparse.strings`, small string utilities: `is_space`, `is_alpha`,
  `is_digit`, `parse_int`, `split`, `join_with`, `search_prefix`,
  `substring`, `compare_n` and `bounded_copy`.

## What it does not do

loxparse only scans and parses expressions. It does not evaluate them. It
has no statements, variables, functions or classes. Keywords such as `var`,
`print` or `fun` are scanned as tokens, but the parser does not accept them.