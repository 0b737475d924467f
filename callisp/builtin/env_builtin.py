"""Built-in functions for the callisp runtime environment.

This module defines core arithmetic, comparison, list processing, predicates,
evaluation and reflection builtins, and the registration helper that places
them in a builtin table under their fixed names.

Numeric rules: integers stay integers while every operand is an integer; any
float operand makes the result a float. `/` always produces a float and follows
IEEE semantics for division by zero.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from callisp import LispValue, INT_MIN, INT_MAX
from callisp.errors import CallispTypeError
from callisp.printer import display
from callisp.types.arity import Arity, AtLeast, Exactly
from callisp.types.environment import Environment
from callisp.types.equality import values_equal
from callisp.types.function import Builtin
from callisp.types.lisp_type import LispType, type_of
from callisp.types.symbol import Symbol
from callisp.evaluation.evaluator import evaluate


def is_number(x: LispValue) -> bool:
    # bool is an int subclass but not a number here
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def check_int(value: int) -> int:
    """Keep integer results inside the signed 64-bit range."""
    if not INT_MIN <= value <= INT_MAX:
        raise CallispTypeError(f"Integer overflow: {value}")
    return value


def numbers(name: str, args: list[LispValue]) -> list[int | float]:
    for a in args:
        if not is_number(a):
            raise CallispTypeError(f"All arguments to {name} must be numbers, got {display(a)}")
    return args


def _all_ints(args: list[int | float]) -> bool:
    return all(isinstance(a, int) for a in args)


def _fold(name: str, op: Callable, args: list[LispValue]) -> int | float:
    nums = numbers(name, args)
    if _all_ints(nums):
        # every intermediate result must stay in range too
        return reduce(lambda acc, x: check_int(op(acc, x)), nums)
    return reduce(op, (float(x) for x in nums))


def float_div(a: float, b: float) -> float:
    """IEEE division: x/0 is +-inf and 0/0 is nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the sum of all arguments."""
    return _fold("+", operator.add, expr)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if len(expr) == 1:
        (x,) = numbers("-", expr)
        return check_int(-x) if isinstance(x, int) else -x
    return _fold("-", operator.sub, expr)


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    return _fold("*", operator.mul, expr)


def div(env: Environment, expr: list[LispValue]) -> float:
    """Divide left-to-right as floats; with one arg returns the reciprocal."""
    nums = [float(x) for x in numbers("/", expr)]
    if len(nums) == 1:
        return float_div(1.0, nums[0])
    return reduce(float_div, nums)


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        nums = numbers(name, expr)
        return all(op(a, b) for a, b in zip(nums, nums[1:]))

    compare.__name__ = f"compare_{op.__name__}"
    compare.__doc__ = f"Chainable {name}: true if it holds for every adjacent pair."
    return compare


lt = _chain("<", operator.lt)
lte = _chain("<=", operator.le)
gt = _chain(">", operator.gt)
gte = _chain(">=", operator.ge)


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """True if every argument is structurally equal to the first."""
    first = expr[0]
    return all(values_equal(first, other) for other in expr[1:])


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


def is_list(env: Environment, expr: list[LispValue]) -> bool:
    return isinstance(expr[0], list)


def is_empty(env: Environment, expr: list[LispValue]) -> bool:
    """True for a list with no elements; false for anything else."""
    xs = expr[0]
    return isinstance(xs, list) and not xs


def count(env: Environment, expr: list[LispValue]) -> int:
    xs = expr[0]
    if not isinstance(xs, list):
        raise CallispTypeError(f"count expects a list, got {display(xs)}")
    return len(xs)


# -------------------------------
# Evaluation and reflection
# -------------------------------
def eval_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """(eval x): evaluate the value x as an expression in the current environment."""
    return evaluate(expr[0], env)


def type_builtin(env: Environment, expr: list[LispValue]) -> LispType:
    return type_of(expr[0])


def define_builtins(table: dict[Symbol, LispValue], entries: list[tuple[str, Arity, Callable]]) -> None:
    """Wrap each (name, arity, fn) entry as a Builtin and add it to `table`."""
    for name, arity, fn in entries:
        table[Symbol(name)] = Builtin(name, arity, fn)


def register(table: dict[Symbol, LispValue]) -> None:
    """Register the core builtin functions into the given table."""
    define_builtins(
        table,
        [
            ("+", AtLeast(1), add),
            ("-", AtLeast(1), sub),
            ("*", AtLeast(1), mul),
            ("/", AtLeast(1), div),
            ("eval", Exactly(1), eval_builtin),
            ("equal?", AtLeast(2), equals),
            ("<", AtLeast(2), lt),
            ("<=", AtLeast(2), lte),
            (">", AtLeast(2), gt),
            (">=", AtLeast(2), gte),
            ("list", AtLeast(0), list_builtin),
            ("list?", Exactly(1), is_list),
            ("empty?", Exactly(1), is_empty),
            ("count", Exactly(1), count),
            ("type", Exactly(1), type_builtin),
        ],
    )
