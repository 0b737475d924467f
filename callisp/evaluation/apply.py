"""Application engine for callisp.

Centralizes the calling convention shared by the evaluator and by builtins
that call back into user functions: the callee must be a Function, its arity
contract must accept the argument count, and only then is it invoked.
"""

from callisp import LispValue
from callisp.errors import CallispTypeError
from callisp.types.environment import Environment
from callisp.types.function import Function
from callisp.printer import display


def apply(fn: LispValue, args: list[LispValue], env: Environment) -> LispValue:
    """Apply `fn` to already-evaluated `args` in `env`.

    Raises CallispTypeError if `fn` is not callable and CallispArityError,
    before any of the callee's logic runs, if the argument count is rejected.
    """
    if not isinstance(fn, Function):
        raise CallispTypeError(f"Cannot apply non-function {display(fn)}")
    fn.arity.check(len(args), fn.name)
    return fn.invoke(env, args)
