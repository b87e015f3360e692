"""Core evaluator for the UrLisp interpreter.

Integers and callables evaluate to themselves, symbols are looked up in the
environment chain, and a non-empty list is a call: its head is evaluated to a
callable, which receives the remaining elements unevaluated together with the
caller's environment.

There is no tail-call elimination. Evaluation depth grows with expression
nesting and with user-level recursion; exhausting the host stack raises
RecursionError, which is fatal and deliberately not caught here.
"""

from __future__ import annotations

from urlisp import SExpression, LispValue
from urlisp.errors import UrLispEmptyListError, UrLispNotCallable, UrLispTypeError
from urlisp.evaluation.apply import call
from urlisp.types.callables import Callable
from urlisp.types.environment import Environment
from urlisp.types.lisp_list import LispList
from urlisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case bool():
            raise UrLispTypeError(expr, "Not a Lisp value")
        case int():
            return expr
        case Symbol():
            return env.lookup(expr)
        case LispList(items=()):
            raise UrLispEmptyListError(expr, "Cannot evaluate the empty list as a call")
        case LispList():
            operator = evaluate(expr[0], env)
            if not isinstance(operator, Callable):
                raise UrLispNotCallable(expr, f"{operator} is not a callable object")
            return call(operator, expr.rest(), env, evaluate)
        case Callable():
            return expr
    raise UrLispTypeError(expr, "Not a Lisp value")
