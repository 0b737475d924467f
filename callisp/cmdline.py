"""
This is an interpreter for callisp, a small Lisp dialect.

With a file argument, the file is evaluated and the process exits non-zero on
the first error. Without one, an interactive REPL is started.

    callisp program.lisp
    callisp
"""
from __future__ import annotations

import argparse
import logging
import sys

from callisp.config import get_log_level
from callisp.errors import CallispError
from callisp.interpreter import Interpreter
from callisp.repl import repl

parser = argparse.ArgumentParser(
    prog="callisp",
    description="Interpreter for the callisp Lisp dialect.",
)
parser.add_argument("program", nargs="?", help="source file to run; omit for a REPL.")
parser.add_argument('-v', "--verbose", action="count", default=0, help="Log more (-v info, -vv debug).")


def run_file(path: str, interpreter: Interpreter | None = None) -> int:
    interpreter = interpreter or Interpreter()
    try:
        interpreter.eval_file(path)
    except CallispError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("RecursionError: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)
    if args.verbose:
        level = logging.INFO if args.verbose == 1 else logging.DEBUG
    else:
        level = get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.program:
        return run_file(args.program)
    repl()
    return 0
