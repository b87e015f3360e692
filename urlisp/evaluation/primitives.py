"""Builtin primitives of UrLisp.

The primitive set is closed: `PrimitiveOp` enumerates every builtin and
`apply_primitive` matches on it to compute the body step. Parameter values are
read back from the frame the call protocol bound them in.

    name    params              eager
    quote   (arg)               no
    eq      (a b)               yes
    car     (arg)               yes
    cdr     (arg)               yes
    atom    (a)                 yes
    cons    (e lst)             yes
    le      (a b)               yes
    plus    (a b)               yes
    mult    (a b)               yes
    lambda  (param_lst body)    no
    macro   (param_lst body)    no
    label   (lbl lambdaform)    no
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from urlisp import LispValue, INT_MIN, INT_MAX
from urlisp.errors import UrLispOverflowError, UrLispTypeError
from urlisp.types.callables import Function, LabelledFunction, Macro, Primitive
from urlisp.types.environment import Environment
from urlisp.types.lisp_list import LispList, NIL
from urlisp.types.symbol import Symbol, LAMBDA, T


class PrimitiveOp(enum.Enum):
    QUOTE = "quote"
    EQ = "eq"
    CAR = "car"
    CDR = "cdr"
    ATOM = "atom"
    CONS = "cons"
    LE = "le"
    PLUS = "plus"
    MULT = "mult"
    LAMBDA = "lambda"
    MACRO = "macro"
    LABEL = "label"


@dataclass(frozen=True)
class PrimitiveSpec:
    params: tuple[str, ...]
    eager: bool


PRIMITIVES: dict[PrimitiveOp, PrimitiveSpec] = {
    PrimitiveOp.QUOTE: PrimitiveSpec(("arg",), eager=False),
    PrimitiveOp.EQ: PrimitiveSpec(("a", "b"), eager=True),
    PrimitiveOp.CAR: PrimitiveSpec(("arg",), eager=True),
    PrimitiveOp.CDR: PrimitiveSpec(("arg",), eager=True),
    PrimitiveOp.ATOM: PrimitiveSpec(("a",), eager=True),
    PrimitiveOp.CONS: PrimitiveSpec(("e", "lst"), eager=True),
    PrimitiveOp.LE: PrimitiveSpec(("a", "b"), eager=True),
    PrimitiveOp.PLUS: PrimitiveSpec(("a", "b"), eager=True),
    PrimitiveOp.MULT: PrimitiveSpec(("a", "b"), eager=True),
    PrimitiveOp.LAMBDA: PrimitiveSpec(("param_lst", "body"), eager=False),
    PrimitiveOp.MACRO: PrimitiveSpec(("param_lst", "body"), eager=False),
    PrimitiveOp.LABEL: PrimitiveSpec(("lbl", "lambdaform"), eager=False),
}


def make_primitive(op: PrimitiveOp) -> Primitive:
    spec = PRIMITIVES[op]
    params = LispList(Symbol(p) for p in spec.params)
    return Primitive(op.value, op, params, spec.eager)


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_atom(value: LispValue) -> bool:
    return isinstance(value, Symbol) or is_integer(value)


def truth(flag: bool) -> LispValue:
    return T if flag else NIL


def _integer_operands(fn: Primitive, a: LispValue, b: LispValue) -> tuple[int, int]:
    for operand in (a, b):
        if not is_integer(operand):
            raise UrLispTypeError(operand, f"{fn.name} requires integer operands")
    return a, b


def _checked(fn: Primitive, result: int) -> int:
    if not INT_MIN <= result <= INT_MAX:
        raise UrLispOverflowError(fn, f"Integer result {result} is out of range")
    return result


def check_params(param_lst: LispValue) -> LispList:
    if not isinstance(param_lst, LispList):
        raise UrLispTypeError(param_lst, "Parameter list must be a list")
    for p in param_lst:
        if not isinstance(p, Symbol):
            raise UrLispTypeError(p, f"Parameter '{p}' is not an atom")
    return param_lst


def apply_primitive(fn: Primitive, frame: Environment) -> LispValue:
    args = [frame.lookup(p) for p in fn.params]

    match fn.op:
        case PrimitiveOp.QUOTE:
            return args[0]

        case PrimitiveOp.EQ:
            a, b = args
            if is_atom(a) and is_atom(b):
                return truth(type(a) is type(b) and a == b)
            return truth(isinstance(a, LispList) and isinstance(b, LispList) and not a and not b)

        case PrimitiveOp.CAR:
            lst = args[0]
            if not isinstance(lst, LispList):
                raise UrLispTypeError(lst, "car requires a list")
            if not lst:
                raise UrLispTypeError(lst, "car of an empty list")
            return lst[0]

        case PrimitiveOp.CDR:
            lst = args[0]
            if not isinstance(lst, LispList):
                raise UrLispTypeError(lst, "cdr requires a list")
            return lst.rest()

        case PrimitiveOp.ATOM:
            return truth(is_atom(args[0]))

        case PrimitiveOp.CONS:
            head, lst = args
            if not isinstance(lst, LispList):
                raise UrLispTypeError(lst, "Second argument to cons must be a list")
            return lst.cons(head)

        case PrimitiveOp.LE:
            a, b = _integer_operands(fn, *args)
            return truth(a <= b)

        case PrimitiveOp.PLUS:
            a, b = _integer_operands(fn, *args)
            return _checked(fn, a + b)

        case PrimitiveOp.MULT:
            a, b = _integer_operands(fn, *args)
            return _checked(fn, a * b)

        case PrimitiveOp.LAMBDA:
            param_lst, body = args
            return Function(check_params(param_lst), body)

        case PrimitiveOp.MACRO:
            param_lst, body = args
            return Macro(check_params(param_lst), body)

        case PrimitiveOp.LABEL:
            lbl, lambdaform = args
            if not isinstance(lbl, Symbol):
                raise UrLispTypeError(lbl, "label name must be a symbol")
            if not (
                isinstance(lambdaform, LispList)
                and len(lambdaform) == 3
                and lambdaform[0] == LAMBDA
            ):
                raise UrLispTypeError(lambdaform, "label requires a (lambda params body) form")
            _, param_lst, body = lambdaform
            return LabelledFunction(lbl, check_params(param_lst), body)

    raise UrLispTypeError(fn, f"Unknown primitive {fn.op}")
