"""Line-at-a-time read-eval-print loop for Kappa.

Each submitted line is read completely and its forms are evaluated in order.
Failures are reported and the loop moves on to the next line; only the
interpreter's arena carries state from one line to the next.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from kappa.interpreter import Interpreter
from kappa.printer import to_string
from kappa.types.errors import KappaError

logger = logging.getLogger(__name__)


def describe_error(exc: BaseException, form=None) -> str:
    kind = getattr(exc, "kind", type(exc).__name__)
    where = f" in {to_string(form)}" if form is not None else ""
    return f"error: {kind}: {exc}{where}"


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        prompt: str = "kappa> ",
        input_fn: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ):
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.prompt = prompt
        self.input_fn = input_fn
        self.out = out

    def _write(self, text: str) -> None:
        print(text, file=self.out if self.out is not None else sys.stdout)

    def submit(self, line: str) -> list[str]:
        """Evaluate one submission; return the rendered results and any diagnostic."""
        try:
            forms = self.interpreter.read(line)
        except KappaError as e:
            logger.debug("unreadable submission: %r", line, exc_info=True)
            return [describe_error(e)]
        except RecursionError:
            # the reader recurses once per open paren
            logger.debug("submission nested too deeply: %d chars", len(line))
            return [describe_error(RecursionError("maximum recursion depth exceeded"))]

        rendered: list[str] = []
        for form in forms:
            try:
                value = self.interpreter.evaluate(form)
            except KappaError as e:
                logger.debug("evaluation failed: %r", form, exc_info=True)
                rendered.append(describe_error(e, form))
                break
            except RecursionError:
                # no tail calls: deep recursion exhausts the Python stack
                rendered.append(describe_error(RecursionError("maximum recursion depth exceeded"), form))
                break
            rendered.append(to_string(value))
        return rendered

    def run(self) -> None:
        try:
            import readline  # noqa: F401  (line editing and history for input())
        except ImportError:
            logger.debug("readline unavailable; plain input()")

        while True:
            try:
                line = self.input_fn(self.prompt)
            except (EOFError, KeyboardInterrupt):
                self._write("\nAborted!")
                break
            for text in self.submit(line):
                self._write(text)
