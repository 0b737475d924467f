from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from callisp import LispValue
from callisp.reader.parser import parse_all
from callisp.types.environment import Environment
from callisp.types.symbol import Symbol
from callisp.types.unspecified import Unspecified
from callisp.evaluation.evaluator import evaluate
from callisp.builtin.io_builtin import load_source

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates callisp code against one long-lived Environment.
    Each instance owns an independent root scope seeded with the builtins.
    """

    def __init__(
        self,
        builtins: Mapping[Symbol, LispValue] | None = None,
        prelude: str | None = None,
    ):
        self.env: Environment = Environment.root(builtins)
        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` and return the last value."""
        result: LispValue = Unspecified
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result

    def eval_file(self, path: str | Path) -> LispValue:
        path = Path(path)
        logger.info("Loading %s", path)
        return load_source(path, self.env)
