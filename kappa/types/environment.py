"""Runtime environment for Kappa.

Frames bind Symbols to evaluated Lisp values and point at their parent frame
by id. All frames live in one EnvironmentArena: ids are stable indices into an
append-only list, so a frame is never moved or reclaimed once created. Closures
hold a frame id rather than the frame itself, which keeps the graph free of
ownership cycles.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterable, Optional

from kappa import LispValue, EnvId
from kappa.types.errors import UnboundSymbol, UnknownFrame, TypeMismatch
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Frame:
    """One lexical scope: a Symbol -> value mapping plus an optional parent id."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[EnvId] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: EnvId | None = outer

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(f" -> #{self.outer}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Frame {self}>"


class EnvironmentArena:
    """Index-addressed store of frames; the frame graph is a forest of parent links."""

    __slots__ = ("frames",)

    def __init__(self):
        self.frames: list[Frame] = []

    def __len__(self) -> int:
        return len(self.frames)

    def frame(self, env_id: EnvId) -> Frame:
        # Negative indices would silently wrap around
        if not isinstance(env_id, int) or not 0 <= env_id < len(self.frames):
            raise UnknownFrame(env_id)
        return self.frames[env_id]

    def _insert(self, frame: Frame) -> EnvId:
        self.frames.append(frame)
        return len(self.frames) - 1

    def create_root(self) -> EnvId:
        """Allocate a parentless frame."""
        env_id = self._insert(Frame())
        logger.debug("created root frame #%d", env_id)
        return env_id

    def create_child(
        self,
        parameters: Iterable[Symbol],
        arguments: Iterable[LispValue],
        parent_id: EnvId,
    ) -> EnvId:
        """Allocate a frame binding `parameters` positionally to `arguments`.

        The shorter sequence governs: surplus arguments are dropped and
        surplus parameters stay unbound. Arity is checked by the caller.
        """
        self.frame(parent_id)
        frame = Frame(outer=parent_id)
        frame.vars.update(zip(parameters, arguments))
        env_id = self._insert(frame)
        logger.debug("created frame #%d (parent #%d)", env_id, parent_id)
        return env_id

    def bind_local(self, env_id: EnvId, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the frame at `env_id` only; no upward search."""
        if not isinstance(name, Symbol):
            raise TypeMismatch("symbol", type(name).__name__, "define")
        self.frame(env_id).vars[name] = value

    def update(self, env_id: EnvId, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in one frame."""
        for k, v in mapping.items():
            self.bind_local(env_id, k, v)

    def find_owner(self, env_id: EnvId, name: Symbol) -> EnvId:
        """Return the id of the nearest frame in the chain that binds `name`."""
        current: EnvId | None = env_id
        while current is not None:
            frame = self.frame(current)
            if name in frame.vars:
                return current
            current = frame.outer
        raise UnboundSymbol(name)

    def resolve(self, env_id: EnvId, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, searching outward from `env_id`."""
        return self.frame(self.find_owner(env_id, name)).vars[name]

    def mutate(self, owner_id: EnvId, name: Symbol, value: LispValue) -> None:
        """Overwrite an existing binding; never creates one."""
        frame = self.frame(owner_id)
        if name not in frame.vars:
            raise UnboundSymbol(name)
        frame.vars[name] = value

    def chain(self, env_id: EnvId) -> list[EnvId]:
        """Ids from `env_id` out to its root, innermost first."""
        ids = []
        current: EnvId | None = env_id
        while current is not None:
            ids.append(current)
            current = self.frame(current).outer
        return ids

    def __repr__(self) -> str:
        """Detailed arena representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<EnvironmentArena ")
            buffer.write(" ".join(f"#{i}{{{len(f.vars)}}}" for i, f in enumerate(self.frames)))
            buffer.write(">")
            return buffer.getvalue()
