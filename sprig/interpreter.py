from __future__ import annotations

import logging
import sys

from sprig import LispValue
from sprig.builtin.env_builtin import register
from sprig.config import get_recursion_limit
from sprig.errors import EvalError
from sprig.evaluation.evaluator import evaluate
from sprig.printer import pr_str
from sprig.reader.parser import parse_all
from sprig.types.environment import Environment
from sprig.types.nil import Nil

logger = logging.getLogger(__name__)


def ensure_recursion_limit(limit: int) -> None:
    """Raise the process-wide Python recursion limit to at least `limit`."""
    if sys.getrecursionlimit() < limit:
        logger.debug("raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Read, evaluate and print Sprig source against one root environment.
    Definitions persist across calls; the interactive loop around it is the
    caller's business.
    """
    def __init__(self, prelude: str | None = None):
        ensure_recursion_limit(get_recursion_limit())
        self.env = Environment.new_root()
        register(self.env)

        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order and return the last value.

        The whole of `code` is read first; a parse error runs nothing.
        """
        forms = list(parse_all(code))
        result: LispValue = Nil
        for expr in forms:
            result = self.eval_form(expr)
        return result

    def eval_form(self, expr) -> LispValue:
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            logger.warning("evaluation exceeded the Python recursion limit")
            raise EvalError("maximum recursion depth exceeded") from None

    def rep(self, code: str) -> str:
        """Evaluate `code` and return the readable printed result."""
        return pr_str(self.eval(code), True)
