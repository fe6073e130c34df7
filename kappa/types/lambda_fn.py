"""Closure representation for Kappa."""

from __future__ import annotations

from io import StringIO

from kappa import SExpression, EnvId
from kappa.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and the id of its closure frame.

    The closure does not own a frame: `env` is an arena id, so several closures
    may share one captured frame and no reference cycle forms between them.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: EnvId):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: SExpression = body
        self.env: EnvId = env

    def __str__(self) -> str:
        from kappa.printer import to_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda {self} @{self.env}>"
