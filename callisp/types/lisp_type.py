from __future__ import annotations

from enum import Enum

from callisp import LispValue
from callisp.types.function import Function
from callisp.types.symbol import Symbol
from callisp.types.unspecified import UnspecifiedType


class LispType(Enum):
    """Reflective tag naming a value category, as returned by `type`."""

    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    BOOL = "Bool"
    LIST = "List"
    FUNCTION = "Function"
    TYPE = "Type"
    SYMBOL = "Symbol"
    UNSPECIFIED = "Unspecified"

    def __str__(self):
        return self.value


def type_of(value: LispValue) -> LispType:
    """Project any value onto its LispType tag."""
    # bool is a subclass of int, so it must be tested first
    match value:
        case bool():
            return LispType.BOOL
        case int():
            return LispType.INT
        case float():
            return LispType.FLOAT
        case str():
            return LispType.STRING
        case Symbol():
            return LispType.SYMBOL
        case list():
            return LispType.LIST
        case Function():
            return LispType.FUNCTION
        case LispType():
            return LispType.TYPE
        case UnspecifiedType():
            return LispType.UNSPECIFIED
    raise TypeError(f"Not a callisp value: {value!r}")
