"""Immutable list values.

A LispList is both a call form produced by the reader and a data value produced
by evaluation. It is backed by a tuple, so `car`, `cdr` and `cons` can never
alias-corrupt a list held by a caller.
"""

from __future__ import annotations

from typing import Iterable, Iterator


class LispList:
    __slots__ = ("items",)

    def __init__(self, items: Iterable = ()):
        self.items: tuple = tuple(items)

    @classmethod
    def of(cls, *items) -> LispList:
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return LispList(self.items[index])
        return self.items[index]

    def __bool__(self) -> bool:
        return bool(self.items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LispList) and _same_items(self.items, other.items)

    def __hash__(self) -> int:
        return hash(("LispList", self.items))

    def cons(self, head) -> LispList:
        """New list with `head` in front of this list's elements."""
        return LispList((head, *self.items))

    def rest(self) -> LispList:
        return LispList(self.items[1:])

    def __repr__(self):
        return f"LispList({list(self.items)!r})"

    def __str__(self):
        return "(" + " ".join(str(item) for item in self.items) + ")"


def _same_items(a: tuple, b: tuple) -> bool:
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        # 1 == True in Python; integers never compare equal to non-integers here
        if type(x) is not type(y) or x != y:
            return False
    return True


NIL = LispList()
