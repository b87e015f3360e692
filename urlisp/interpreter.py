"""Line-at-a-time interpreter façade used by front ends.

Reads the first expression of a line, evaluates it against the interpreter's
environment and renders either the value or the error message. Anything after
the first expression is ignored, and `consumed` reports exactly what was read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from urlisp import LispValue
from urlisp.builtin.prelude import standard_environment
from urlisp.errors import UrLispError, UrLispSyntaxError
from urlisp.evaluation.evaluator import evaluate
from urlisp.reader.parser import parse_one
from urlisp.types.environment import Environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvalResult:
    consumed: str
    output: str
    value: LispValue = None
    error: Optional[UrLispError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Interpreter:
    def __init__(self, env: Optional[Environment] = None):
        self.env: Environment = env if env is not None else standard_environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate the first expression in `code`; errors propagate."""
        expr, _ = parse_one(code)
        return evaluate(expr, self.env)

    def eval_line(self, code: str) -> EvalResult:
        """Evaluate the first expression in `code`, rendering errors as output."""
        try:
            expr, consumed = parse_one(code)
        except UrLispSyntaxError as err:
            logger.info("parse error: %s", err)
            return EvalResult(code, str(err), error=err)

        logger.debug("evaluating %s", expr)
        try:
            value = evaluate(expr, self.env)
        except UrLispError as err:
            logger.info("evaluation error: %s", err)
            return EvalResult(consumed, str(err), error=err)
        return EvalResult(consumed, str(value), value=value)

    def bound_names(self) -> list[str]:
        return self.env.bound_names()

    @staticmethod
    def render(result: EvalResult) -> str:
        return f"{result.consumed}\n\n=> {result.output}\n"
