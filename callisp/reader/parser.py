"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits plain Python values, the same ones the evaluator works on:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - integers -> int (signed 64-bit)
    - floats -> float (needs a '.' or an exponent)
    - +inf.0 / -inf.0 / +nan.0 -> non-finite float
    - true / false -> bool
    - 'x -> [Symbol("quote"), x]
"""

from __future__ import annotations

import math
import re
from typing import Iterator, Optional

from callisp import SExpression, INT_MIN, INT_MAX
from callisp.errors import CallispSyntaxError
from callisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?\d+(?:\.\d*(?:[eE][+-]?\d+)?|[eE][+-]?\d+)\Z")
NUMERIC_START_RE = re.compile(r"[+-]?\d")

# Non-finite floats, as printed by callisp.printer
NONFINITE_FLOATS: dict[str, float] = {
    "+inf.0": math.inf,
    "-inf.0": -math.inf,
    "+nan.0": math.nan,
    "-nan.0": math.nan,
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:].lstrip()
            if not rest:
                break
            if rest.startswith('"'):
                raise CallispSyntaxError("Unterminated string literal")
            raise CallispSyntaxError(f"Unexpected character {rest[0]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break


def unescape(literal: str) -> str:
    """Decode a quoted string token into its text."""
    body = literal[1:-1]
    out = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\":
            i += 1
            esc = body[i]
            if esc not in STRING_ESCAPES:
                raise CallispSyntaxError(f"Unknown string escape \\{esc}")
            out.append(STRING_ESCAPES[esc])
        else:
            out.append(c)
        i += 1
    return "".join(out)


def parse_atom(token: str) -> SExpression:
    """Turn a bare token into a number, a boolean or a Symbol."""
    if INT_RE.match(token):
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise CallispSyntaxError(f"Integer literal out of range: {token}")
        return value
    if FLOAT_RE.match(token):
        return float(token)
    if token in NONFINITE_FLOATS:
        return NONFINITE_FLOATS[token]
    if NUMERIC_START_RE.match(token):
        raise CallispSyntaxError(f"Invalid number literal: {token}")
    if token == "true":
        return True
    if token == "false":
        return False
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "string":
            self.advance()
            return unescape(tok_val)

        # 'x -> (quote x)
        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise CallispSyntaxError("Expected an expression after quote")
            return [QUOTE, expr]

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type == "rparen":
                    self.advance()
                    return items
                if next_type is None:
                    raise CallispSyntaxError("Unmatched '('")
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise CallispSyntaxError("Unexpected ')'")

        raise CallispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse_all(source: str) -> Iterator[SExpression]:
    """Lazily parse every expression in `source`."""
    return TokenStream(lex(source)).parse_all()


def parse(source: str) -> SExpression:
    """Parse `source`, which must hold exactly one complete expression."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise CallispSyntaxError("Expected an expression")
    if stream.peek()[0] is not None:
        raise CallispSyntaxError("Unexpected input after expression")
    return expr
