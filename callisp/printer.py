"""Printed representation of callisp values.

`display` is a pure function of the value. For every value built only from
atoms and lists, the reader parses the printed text back to an equal value.
"""

from __future__ import annotations

import math
from io import StringIO

from callisp import LispValue
from callisp.types.function import Function
from callisp.types.lisp_type import LispType
from callisp.types.symbol import Symbol
from callisp.types.unspecified import UnspecifiedType

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}


def nonfinite_literal(value: float) -> str:
    """Spell inf, -inf and nan the way the reader reads them back."""
    if math.isnan(value):
        return "+nan.0"
    return "+inf.0" if value > 0 else "-inf.0"


def quote_string(text: str) -> str:
    """Quote `text` as a string literal the reader accepts."""
    return '"' + "".join(_ESCAPES.get(c, c) for c in text) + '"'


def display(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()


def _write(buffer: StringIO, value: LispValue) -> None:
    match value:
        case bool():
            buffer.write("true" if value else "false")
        case float() if not math.isfinite(value):
            buffer.write(nonfinite_literal(value))
        case int() | float():
            buffer.write(repr(value))
        case str():
            buffer.write(quote_string(value))
        case Symbol():
            buffer.write(value.id)
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(buffer, item)
            buffer.write(")")
        case Function():
            buffer.write(repr(value))
        case LispType():
            buffer.write(f"#<type {value}>")
        case UnspecifiedType():
            pass
        case _:
            buffer.write(repr(value))
