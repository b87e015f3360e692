"""Callable values: user functions, fexpr macros, labelled functions and primitives.

Every callable carries a closed `CallableKind`; the call protocol in
`urlisp.evaluation.apply` matches on it rather than on an open class hierarchy.
Callables hold no defining environment: each call chains its frame onto the
caller's environment.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Optional

from urlisp import SExpression
from urlisp.types.lisp_list import LispList, NIL
from urlisp.types.symbol import Symbol

if TYPE_CHECKING:
    from urlisp.evaluation.primitives import PrimitiveOp


class CallableKind(enum.Enum):
    FUNCTION = "function"
    MACRO = "macro"
    SPECIAL_FORM = "special-form"
    LABELLED_FUNCTION = "labelled-function"
    COND = "cond"


# Kinds whose arguments are evaluated in the caller's environment before binding.
EAGER_KINDS = frozenset({CallableKind.FUNCTION, CallableKind.LABELLED_FUNCTION})


class Callable:
    """Parameter list plus optional body; the shared shape of all callables."""

    __slots__ = ("params", "body")
    kind: CallableKind

    def __init__(self, params: LispList, body: Optional[SExpression] = None):
        self.params: LispList = params
        self.body: Optional[SExpression] = body

    @property
    def eager(self) -> bool:
        return self.kind in EAGER_KINDS

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params}, {self.body})"


class Function(Callable):
    __slots__ = ()
    kind = CallableKind.FUNCTION

    def __str__(self) -> str:
        return "#<function>"


class Macro(Callable):
    __slots__ = ()
    kind = CallableKind.MACRO

    def __str__(self) -> str:
        return "#<macro>"


class LabelledFunction(Function):
    """A function that binds its own label to itself on every call."""

    __slots__ = ("label",)
    kind = CallableKind.LABELLED_FUNCTION

    def __init__(self, label: Symbol, params: LispList, body: SExpression):
        super().__init__(params, body)
        self.label: Symbol = label

    def __str__(self) -> str:
        return f"#<labelled_function {self.label}>"


class Primitive(Callable):
    """A builtin whose body step is computed by the host, selected by `op`."""

    __slots__ = ("name", "op", "_kind")

    def __init__(self, name: str, op: PrimitiveOp, params: LispList, eager: bool):
        super().__init__(params, None)
        self.name = name
        self.op = op
        self._kind = CallableKind.FUNCTION if eager else CallableKind.SPECIAL_FORM

    @property
    def kind(self) -> CallableKind:  # type: ignore[override]
        return self._kind

    def __str__(self) -> str:
        if self._kind is CallableKind.SPECIAL_FORM:
            return f"#<special form '{self.name}'>"
        return f"#<builtin function '{self.name}'>"


class CondForm(Callable):
    """The variadic conditional; it implements the whole call step itself."""

    __slots__ = ()
    kind = CallableKind.COND

    def __init__(self):
        super().__init__(NIL, None)

    def __str__(self) -> str:
        return "#<special form 'cond'>"
