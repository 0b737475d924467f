"""Core evaluator for the callisp interpreter.

A recursive tree walker: lists are special forms or applications, symbols are
looked up in the environment, and everything else evaluates to itself.
"""

from __future__ import annotations

import logging

from callisp import SExpression, LispValue
from callisp.errors import CallispTypeError
from callisp.types.environment import Environment
from callisp.types.symbol import Symbol
from callisp.evaluation.apply import apply
from callisp.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value.

    Errors propagate unchanged to the caller; once an argument fails to
    evaluate, the remaining arguments are never evaluated.
    """
    match expr:
        case []:
            raise CallispTypeError("Cannot evaluate an empty list")

        case [head, *tail]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                logger.debug("special form %s", head)
                return SPECIAL_FORMS[head](tail, env, evaluate)

            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, env)

        case Symbol():
            return env.lookup(expr)

    # --- Atoms, functions, types and Unspecified return as-is ---
    return expr
