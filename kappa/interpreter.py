from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from kappa import LispValue, EnvId
from kappa.builtin.env_builtin import register
from kappa.config import strict_arity_from_env
from kappa.evaluation.evaluator import evaluate
from kappa.printer import to_string
from kappa.reader.parser import lex, TokenStream
from kappa.runtime_context import set_strict_arity
from kappa.types.environment import EnvironmentArena

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Kappa code.
    Owns the environment arena and the root frame; both persist across calls,
    so define/set! effects accumulate for the life of the interpreter.
    """

    def __init__(self, prelude: str | None = None, *, strict_arity: bool | None = None):
        self.strict_arity = strict_arity_from_env() if strict_arity is None else strict_arity
        self.arena = EnvironmentArena()
        self.root: EnvId = self.arena.create_root()
        register(self.arena, self.root)

        if prelude:
            self.eval_prelude(prelude)

    def read(self, code: str | Iterable[str]) -> list[LispValue]:
        """Read every form of a submission without evaluating any."""
        return list(TokenStream(lex(code)).parse_all())

    def evaluate(self, expr: LispValue) -> LispValue:
        """Evaluate one already-read form in the root frame."""
        set_strict_arity(self.strict_arity)
        return evaluate(expr, self.arena, self.root)

    def eval_all(self, code: str | Iterable[str]) -> list[LispValue]:
        """Read and evaluate every form of one submission, in order.

        The whole submission is read before anything is evaluated, so a
        reader error leaves the arena untouched.
        """
        return [value for _, value in self.eval_iter(code)]

    def eval_iter(self, code: str | Iterable[str]) -> Iterator[tuple[LispValue, LispValue]]:
        """Yield (form, value) pairs as each top-level form finishes evaluating."""
        logger.debug("submission: %r", code)
        for expr in self.read(code):
            yield expr, self.evaluate(expr)

    def eval(self, code: str | Iterable[str]) -> LispValue:
        results = self.eval_all(code)
        if not results:
            return []
        if len(results) == 1:
            return results[0]
        return results

    def eval_prelude(self, code: str | Iterable[str]) -> None:
        for expr in self.read(code):
            self.evaluate(expr)

    def load(self, path: str | Path) -> list[LispValue]:
        """Evaluate a source file; forms may span lines."""
        logger.info("loading %s", path)
        with open(path, encoding="utf-8") as f:
            return self.eval_all(f)

    def render(self, code: str | Iterable[str]) -> list[str]:
        """Evaluate a submission and render each result."""
        return [to_string(value) for value in self.eval_all(code)]
