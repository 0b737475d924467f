"""Callable values: native builtins and user closures.

Both variants share one calling convention, `invoke(env, args)`, taking the
already-evaluated argument list and the current Environment. Arity is checked
by `callisp.evaluation.apply.apply` before `invoke` is reached.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, TYPE_CHECKING

from callisp import SExpression, LispValue
from callisp.types.arity import Arity, Exactly
from callisp.types.symbol import Symbol

if TYPE_CHECKING:
    from callisp.types.environment import Environment


class Function:
    """Common base for callables. No two functions are ever equal."""

    __slots__ = ()

    arity: Arity

    @property
    def name(self) -> str:
        raise NotImplementedError

    def invoke(self, env: Environment, args: list[LispValue]) -> LispValue:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    __hash__ = object.__hash__


class Builtin(Function):
    """A native function with a fixed arity contract."""

    __slots__ = ("_name", "arity", "fn")

    def __init__(
        self,
        name: str,
        arity: Arity,
        fn: Callable[[Environment, list[LispValue]], LispValue],
    ):
        self._name = name
        self.arity = arity
        self.fn = fn

    @property
    def name(self) -> str:
        return self._name

    def invoke(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"#<builtin {self._name}>"


class Closure(Function):
    """A user lambda: parameter names plus an unevaluated body.

    The body is held by reference; the evaluator never mutates it, so every
    call evaluates the same shared tree afresh.
    """

    __slots__ = ("params", "body", "arity")

    def __init__(self, params: list[Symbol], body: SExpression):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        self.arity = Exactly(len(self.params))

    @property
    def name(self) -> str:
        return "lambda"

    def invoke(self, env: Environment, args: list[LispValue]) -> LispValue:
        # Free variables resolve through the caller's environment at call time.
        from callisp.evaluation.evaluator import evaluate

        env.push_scope(dict(zip(self.params, args)))
        try:
            return evaluate(self.body, env)
        finally:
            env.pop_scope()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()
