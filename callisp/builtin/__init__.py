from __future__ import annotations

from callisp import LispValue
from callisp.types.symbol import Symbol


def builtin_table() -> dict[Symbol, LispValue]:
    """Build a fresh table of every builtin, used to seed a root environment."""
    from callisp.builtin import env_builtin, io_builtin

    table: dict[Symbol, LispValue] = {}
    env_builtin.register(table)
    io_builtin.register(table)
    return table
