from callisp import SExpression, LispValue, EvaluatorFn
from callisp.errors import CallispArityError
from callisp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise CallispArityError("quote expects exactly 1 argument", expected=1, got=len(tail))
    return tail[0]
