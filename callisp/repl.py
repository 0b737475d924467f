"""Line-based read-eval-print loop.

Each input line is read and evaluated in full; errors are reported and the
loop continues. Unspecified results are not printed.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from callisp.config import get_prompt
from callisp.errors import CallispError
from callisp.interpreter import Interpreter
from callisp.printer import display
from callisp.types.unspecified import Unspecified

logger = logging.getLogger(__name__)


def repl(
    interpreter: Interpreter | None = None,
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Run the REPL until end of input (or until `exit` raises SystemExit)."""
    interpreter = interpreter or Interpreter()
    out = out or sys.stdout
    err = err or sys.stderr
    prompt = get_prompt() if prompt is None else prompt

    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            out.write("\n")
            return
        except KeyboardInterrupt:
            out.write("\n")
            continue
        if not line.strip():
            continue
        try:
            result = interpreter.eval(line)
        except CallispError as e:
            logger.debug("error evaluating %r", line, exc_info=True)
            print(f"{type(e).__name__}: {e}", file=err)
            continue
        except RecursionError:
            print("RecursionError: maximum recursion depth exceeded", file=err)
            continue
        if result is not Unspecified:
            print(display(result), file=out)
