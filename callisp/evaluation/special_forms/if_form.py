from callisp import EvaluatorFn
from callisp import SExpression, LispValue
from callisp.errors import CallispArityError
from callisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if cond then else)
    Only the literal boolean false is falsey; exactly one branch is evaluated.
    """
    if len(tail) != 3:
        raise CallispArityError(
            "if requires a condition, a then-expression and an else-expression",
            expected=3,
            got=len(tail),
        )

    cond, then_expr, else_expr = tail
    if evaluate_fn(cond, env) is False:
        return evaluate_fn(else_expr, env)
    return evaluate_fn(then_expr, env)
