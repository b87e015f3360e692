"""Runtime environment for UrLisp.

The Environment stores bindings of Symbols to Lisp values in a single frame and
links to the frame chain it extends through `outer`. A child never mutates its
outer chain, so one chain may be shared by any number of children; every call
creates a fresh child of the *caller's* environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from urlisp import LispValue
from urlisp.errors import UrLispUnboundSymbol, UrLispTypeError
from urlisp.types.symbol import Symbol


class Environment:
    """Chain of frames mapping Symbols to Lisp values, innermost first."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        Shadows any binding of the same name further out in the chain.
        Raises UrLispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise UrLispTypeError(name, "Cannot bind a non-symbol")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `symbol`."""
        for env in self.frames():
            if symbol in env.vars:
                return env
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UrLispUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UrLispUnboundSymbol(name, "Symbol is not bound")
        return env.vars[name]

    def bound_names(self) -> list[str]:
        """Names visible from this frame, innermost first, each listed once."""
        seen: dict[str, None] = {}
        for env in self.frames():
            for k in env.vars:
                seen.setdefault(k.id, None)
        return list(seen)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        for env in self.frames():
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
        return f"<Environment chain: {' -> '.join(chain)}>"
