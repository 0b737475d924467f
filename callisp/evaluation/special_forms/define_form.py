from callisp import EvaluatorFn
from callisp import SExpression, LispValue
from callisp.errors import CallispArityError, CallispTypeError
from callisp.types.environment import Environment
from callisp.types.symbol import Symbol
from callisp.types.unspecified import Unspecified


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost scope: at top level that is a global, inside a
    closure body it is a local that disappears when the call returns.
    """
    if len(tail) != 2:
        raise CallispArityError("define requires exactly 2 arguments", expected=2, got=len(tail))

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise CallispTypeError(f"define expects a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.bind(name, value)
    return Unspecified
