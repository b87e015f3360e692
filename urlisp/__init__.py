# Core type aliases for UrLisp's data model.
# Values double as syntax: the reader produces Symbol, int and LispList, and the
# evaluator consumes and returns the same types plus callables.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed into the call protocol to avoid an import cycle
EvaluatorFn = Callable[..., LispValue]

# Integers are fixed-width: signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

# Public interface for front ends. Imported after the aliases above, which the
# submodules import from this package.
from urlisp.reader.parser import parse_one  # noqa: E402
from urlisp.evaluation.evaluator import evaluate  # noqa: E402
from urlisp.builtin.base_env import base_environment  # noqa: E402
from urlisp.builtin.prelude import standard_environment  # noqa: E402


def bound_names(env) -> list[str]:
    """Names visible from `env`, innermost frame first, without duplicates."""
    return env.bound_names()


def to_source(value: LispValue) -> str:
    """Printed form of a value, or the message of an error."""
    return str(value)


__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "parse_one",
    "evaluate",
    "base_environment",
    "standard_environment",
    "bound_names",
    "to_source",
]
