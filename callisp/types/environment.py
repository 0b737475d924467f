"""Runtime environment for callisp.

The Environment is an ordered stack of scopes, each a mapping from Symbol to an
evaluated value. The bottom (root) scope holds the builtin table and is never
popped. Closure calls push one scope on entry and pop it on exit.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from callisp import LispValue
from callisp.errors import CallispTypeError, CallispUndefinedIdentifier
from callisp.types.symbol import Symbol


class Environment:
    """Stack of scopes mapping Symbols to values, innermost last."""

    __slots__ = ("scopes",)

    def __init__(self, bindings: Optional[Mapping[Symbol, LispValue]] = None):
        self.scopes: list[dict[Symbol, LispValue]] = [dict(bindings or {})]

    @classmethod
    def root(cls, builtins: Optional[Mapping[Symbol, LispValue]] = None) -> Environment:
        """Create a fresh environment seeded with a builtin table.

        Each call builds its own root scope, so independent interpreters never
        share bindings. Pass `builtins` to substitute a different table.
        """
        if builtins is None:
            # Lazy import: the builtin library depends on the evaluator
            from callisp.builtin import builtin_table
            builtins = builtin_table()
        return cls(builtins)

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def push_scope(self, bindings: Optional[Mapping[Symbol, LispValue]] = None) -> None:
        """Add an innermost scope pre-populated with `bindings`."""
        self.scopes.append(dict(bindings or {}))

    def pop_scope(self) -> None:
        """Remove the innermost scope. The root scope can never be removed."""
        if len(self.scopes) <= 1:
            raise RuntimeError("Cannot pop the root scope of an environment")
        self.scopes.pop()

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`, searching innermost scope first.

        Raises CallispUndefinedIdentifier if no scope binds it.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        raise CallispUndefinedIdentifier(name)

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the innermost scope, overwriting any binding there.

        Outer scopes are never touched; a same-named outer binding is shadowed.
        """
        if not isinstance(name, Symbol):
            raise CallispTypeError(f"Cannot bind {name!r}: not a symbol")
        self.scopes[-1][name] = value

    def __contains__(self, name: Symbol) -> bool:
        return any(name in scope for scope in self.scopes)

    def _write_vars(self, buffer: StringIO, scope: dict[Symbol, LispValue]) -> None:
        """Write one scope's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost scope only, with an indicator for enclosing scopes."""
        with StringIO() as buffer:
            self._write_vars(buffer, self.scopes[-1])
            if len(self.scopes) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<Environment depth={len(self.scopes)} innermost=")
            self._write_vars(buffer, self.scopes[-1])
            buffer.write(">")
            return buffer.getvalue()
