"""I/O and process builtins: putstr, readline, use, exit.

These are ordinary builtins layered on the core; the evaluator treats them like
any other function value.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from callisp import LispValue
from callisp.config import get_search_roots
from callisp.errors import CallispIOError, CallispTypeError
from callisp.printer import display
from callisp.reader.parser import parse_all
from callisp.types.arity import Exactly, OneOf
from callisp.types.environment import Environment
from callisp.types.symbol import Symbol
from callisp.types.unspecified import Unspecified
from callisp.evaluation.evaluator import evaluate
from callisp.builtin.env_builtin import define_builtins

logger = logging.getLogger(__name__)


def putstr(env: Environment, args: list[LispValue]) -> LispValue:
    """(putstr "text"): write the string and a newline to stdout."""
    text = args[0]
    if not isinstance(text, str):
        raise CallispTypeError(f"putstr expects a string, got {display(text)}")
    try:
        print(text)
    except OSError as e:
        raise CallispIOError(f"putstr: {e}") from e
    return Unspecified


def readline(env: Environment, args: list[LispValue]) -> str:
    """(readline): one line from stdin without its line terminator."""
    try:
        line = sys.stdin.readline()
    except OSError as e:
        raise CallispIOError(f"readline: {e}") from e
    if not line:
        raise CallispIOError("readline: end of input")
    return line.removesuffix("\n").removesuffix("\r")


def resolve_source(name: str) -> Path:
    """Find a source file: as given, then under each CALLISP_PATH root."""
    path = Path(name)
    if path.is_file() or path.is_absolute():
        return path
    for root in get_search_roots():
        candidate = root / path
        if candidate.is_file():
            return candidate
    return path


def load_source(path: Path, env: Environment) -> LispValue:
    """Evaluate every expression of a source file in `env`; return the last value."""
    try:
        code = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CallispIOError(f"Cannot read {path}: {e}") from e
    result: LispValue = Unspecified
    for expr in parse_all(code):
        result = evaluate(expr, env)
    return result


def use(env: Environment, args: list[LispValue]) -> LispValue:
    """(use "file.lisp"): load a source file into the current environment."""
    name = args[0]
    if not isinstance(name, str):
        raise CallispTypeError(f"use expects a file name string, got {display(name)}")
    path = resolve_source(name)
    logger.debug("use %s -> %s", name, path)
    return load_source(path, env)


def exit_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(exit [code]): terminate the process with an integer status."""
    code = args[0] if args else 0
    if isinstance(code, bool) or not isinstance(code, int):
        raise CallispTypeError(f"exit expects an integer code, got {display(code)}")
    raise SystemExit(code)


def register(table: dict[Symbol, LispValue]) -> None:
    """Register the I/O builtins into the given table."""
    define_builtins(
        table,
        [
            ("putstr", Exactly(1), putstr),
            ("readline", Exactly(0), readline),
            ("use", Exactly(1), use),
            ("exit", OneOf(0, 1), exit_builtin),
        ],
    )
