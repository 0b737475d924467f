# Core type aliases for the callisp data model.
# Code and data share one representation: plain Python values (int, float, str,
# bool, list) plus a handful of callisp types (Symbol, Function, LispType,
# Unspecified). There is no separate AST node class.
#
# Naming guidance:
# - SExpression: use in reader/special-form code for syntactic forms.
# - LispValue:   use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms: evaluate(expr, env)
EvaluatorFn = Callable[..., LispValue]

# Bounds of the integer type (signed 64-bit).
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
