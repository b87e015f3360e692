"""Primitive environment: the builtins every UrLisp program starts from."""
from __future__ import annotations

from urlisp.evaluation.primitives import PrimitiveOp, make_primitive
from urlisp.types.callables import CondForm
from urlisp.types.environment import Environment
from urlisp.types.symbol import Symbol


def register(env: Environment) -> None:
    """Register every primitive and the `cond` special form into `env`."""
    env.update({Symbol(op.value): make_primitive(op) for op in PrimitiveOp})
    env.define(Symbol("cond"), CondForm())


def base_environment() -> Environment:
    env = Environment()
    register(env)
    return env
