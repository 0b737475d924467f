from __future__ import annotations

import math

from callisp import LispValue
from callisp.types.function import Function
from callisp.types.lisp_type import type_of


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for callisp values.

    Values of different types are never equal (so 1, 1.0 and true are all
    distinct), lists compare element-wise, and functions are never equal to
    anything, themselves included. Two NaN floats are equal, keeping equality
    reflexive for every value `/` can produce.
    """
    if isinstance(a, Function) or isinstance(b, Function):
        return False
    if type_of(a) is not type_of(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, float):
        return a == b or (math.isnan(a) and math.isnan(b))
    return a == b
