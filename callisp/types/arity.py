"""Arity contracts for callables.

A contract is checked by the application engine before a callable runs; a
mismatch raises CallispArityError and the callable's logic is never entered.
"""

from __future__ import annotations

from dataclasses import dataclass

from callisp.errors import CallispArityError


class Arity:
    """Base class for the closed set of argument-count contracts."""

    def accepts(self, count: int) -> bool:
        raise NotImplementedError

    def check(self, count: int, name: str = "function") -> None:
        if not self.accepts(count):
            raise CallispArityError(
                f"{name} expects {self}, got {count} argument{'' if count == 1 else 's'}",
                expected=self,
                got=count,
            )


@dataclass(frozen=True)
class AtLeast(Arity):
    n: int

    def accepts(self, count: int) -> bool:
        return count >= self.n

    def __str__(self):
        return f"at least {self.n}"


@dataclass(frozen=True)
class Exactly(Arity):
    n: int

    def accepts(self, count: int) -> bool:
        return count == self.n

    def __str__(self):
        return f"exactly {self.n}"


@dataclass(frozen=True, init=False)
class OneOf(Arity):
    counts: frozenset[int]

    def __init__(self, *counts: int):
        object.__setattr__(self, "counts", frozenset(counts))

    def accepts(self, count: int) -> bool:
        return count in self.counts

    def __str__(self):
        return "one of " + ", ".join(str(c) for c in sorted(self.counts))
