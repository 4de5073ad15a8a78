from __future__ import annotations

import logging
import sys

from scm import Value
from scm.config import get_recursion_limit
from scm.evaluation.evaluator import evaluate
from scm.parsing.parser import parse
from scm.printer import show
from scm.reader.reader import read
from scm.reader.syntax import Syntax
from scm.types.environment import Environment
from scm.types.values import VOID

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads, parses and evaluates scm source against one global environment.
    Definitions persist across calls.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()
        # No tail calls: deep user recursion needs a deep host stack
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

    def eval_syntax(self, syntax: Syntax) -> Value:
        expr = parse(syntax, self.env)
        logger.debug("parsed %r", expr)
        value = evaluate(expr, self.env)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("=> %s", show(value))
        return value

    def run(self, code: str) -> list[Value]:
        """Evaluate every form in `code` and return all results."""
        return [self.eval_syntax(syntax) for syntax in read(code)]

    def eval(self, code: str) -> Value:
        """Evaluate every form in `code` and return the last result (void if none)."""
        results = self.run(code)
        return results[-1] if results else VOID
