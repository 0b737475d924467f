from callisp import EvaluatorFn
from callisp import SExpression, LispValue
from callisp.errors import CallispArityError, CallispTypeError
from callisp.types.environment import Environment
from callisp.types.function import Closure
from callisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (p1 p2 ...) body)
    The body is captured unevaluated; nothing from `env` is captured.
    """
    if len(tail) != 2:
        raise CallispArityError(
            "lambda requires a parameter list and a body", expected=2, got=len(tail)
        )

    params, body = tail
    if not isinstance(params, list):
        raise CallispTypeError(f"lambda parameters must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise CallispTypeError(f"lambda parameter must be a symbol, got {p!r}")
    if len(set(params)) != len(params):
        raise CallispTypeError("lambda parameters must be distinct")

    return Closure(params, body)
