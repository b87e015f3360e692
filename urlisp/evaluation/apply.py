"""Call protocol for UrLisp callables.

A call proceeds in four steps:
- arity check: the argument count must equal the parameter count exactly;
- a label frame holding the function itself, for labelled functions only;
- binding: a fresh frame chained onto the *caller's* environment, holding either
  the evaluated arguments (functions) or the raw argument expressions (macros
  and special forms);
- body evaluation: the stored body, or the host computation for primitives.

`cond` is variadic and replaces the whole protocol with clause dispatch.
"""

from __future__ import annotations

from urlisp import EvaluatorFn, LispValue
from urlisp.errors import UrLispArityError, UrLispCondError
from urlisp.evaluation.primitives import apply_primitive
from urlisp.types.callables import Callable, CallableKind, Primitive
from urlisp.types.environment import Environment
from urlisp.types.lisp_list import LispList
from urlisp.types.symbol import is_true


def check_arity(fn: Callable, args: LispList) -> None:
    if len(args) < fn.arity:
        raise UrLispArityError(fn, f"Too few arguments passed for parameter list {fn.params}")
    if len(args) > fn.arity:
        raise UrLispArityError(fn, f"Too many arguments passed for parameter list {fn.params}")


def bind_arguments(
    fn: Callable, args: LispList, caller_env: Environment, evaluate_fn: EvaluatorFn
) -> Environment:
    """Return a new frame over `caller_env` binding `fn`'s parameters.

    Eager callables evaluate each argument in `caller_env`, left to right; the
    first failure propagates before the frame is ever used.
    """
    frame = Environment(outer=caller_env)
    for param, arg in zip(fn.params, args):
        frame.define(param, evaluate_fn(arg, caller_env) if fn.eager else arg)
    return frame


def evaluate_body(fn: Callable, frame: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if isinstance(fn, Primitive):
        return apply_primitive(fn, frame)
    return evaluate_fn(fn.body, frame)


def call_cond(args: LispList, caller_env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(cond (p1 e1) (p2 e2) ...): value of the first e whose p yields t."""
    for clause in args:
        if not isinstance(clause, LispList) or len(clause) != 2:
            raise UrLispCondError(clause, "cond clause must be a (predicate consequent) list")
        predicate, consequent = clause
        if is_true(evaluate_fn(predicate, caller_env)):
            return evaluate_fn(consequent, caller_env)
    raise UrLispCondError(args, "No cond clause matched")


def call(
    fn: Callable, args: LispList, caller_env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Invoke `fn` on the unevaluated argument expressions `args`."""
    match fn.kind:
        case CallableKind.COND:
            return call_cond(args, caller_env, evaluate_fn)
        case CallableKind.LABELLED_FUNCTION:
            # Self-reference comes from re-binding the label on every call
            label_env = Environment(outer=caller_env)
            label_env.define(fn.label, fn)
            caller_env = label_env
        case CallableKind.FUNCTION | CallableKind.MACRO | CallableKind.SPECIAL_FORM:
            pass

    check_arity(fn, args)
    frame = bind_arguments(fn, args, caller_env, evaluate_fn)
    return evaluate_body(fn, frame, evaluate_fn)
