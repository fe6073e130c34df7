"""Native procedures exposed to Lisp code."""

from __future__ import annotations

from typing import Callable

from kappa import LispValue

# Native signature: (arena, evaluated args) -> value
NativeFn = Callable[..., LispValue]


class Builtin:
    """A named native procedure; receives the arena and its evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, arena, args: list[LispValue]) -> LispValue:
        return self.fn(arena, args)

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"
