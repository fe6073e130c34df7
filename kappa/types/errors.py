"""Exception hierarchy for the Kappa reader and evaluator.

Every failure raised while reading or evaluating a submission derives from
KappaError, so the REPL can report it and carry on with the next line.
Each class names its `kind`, which is what diagnostics print.
"""

from __future__ import annotations

from typing import Optional


class KappaError(Exception):
    """ Base class for all Kappa errors"""

    kind = "KappaError"


# -------------------------------
# Reader errors
# -------------------------------
class LexError(KappaError):
    """ Raised when the tokenizer meets text it cannot turn into a form"""

    kind = "LexError"


class UnexpectedCloseParen(LexError):
    """ Raised when ')' appears where an expression is expected"""

    kind = "UnexpectedCloseParen"

    def __init__(self, message: str = "unexpected ')'"):
        super().__init__(message)


class UnterminatedString(LexError):
    """ Raised when a string literal is not closed on the line it opens on"""

    kind = "UnterminatedString"

    def __init__(self, fragment: str, line_no: Optional[int] = None):
        where = f" on line {line_no}" if line_no is not None else ""
        super().__init__(f"unterminated string literal {fragment.rstrip()}{where}")
        self.fragment = fragment
        self.line_no = line_no


class ParseError(KappaError):
    kind = "ParseError"


class UnexpectedEof(ParseError):
    """ Raised when input ends inside an open list or after a quote marker"""

    kind = "UnexpectedEof"

    def __init__(self, message: str = "unexpected end of input"):
        super().__init__(message)


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(KappaError):
    kind = "EvalError"


class UnboundSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

    kind = "UnboundSymbol"

    def __init__(self, name):
        super().__init__(f"unbound symbol {name}")
        self.name = str(name)


class EmptyApplication(EvalError):
    """ Raised when the empty list is evaluated"""

    kind = "EmptyApplication"

    def __init__(self, message: str = "cannot evaluate empty list"):
        super().__init__(message)


class NotCallable(EvalError):
    """ Raised when the head of an application is not a procedure"""

    kind = "NotCallable"

    def __init__(self, value):
        from kappa.printer import to_string

        super().__init__(f"cannot apply non-procedure {to_string(value)}")
        self.value = value


class TypeMismatch(EvalError):
    """ Raised when a value of the wrong kind reaches an operation"""

    kind = "TypeMismatch"

    def __init__(self, expected: str, got: str, where: str | None = None):
        prefix = f"{where}: " if where else ""
        super().__init__(f"{prefix}expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a procedure or form is incorrect"""

    kind = "ArityMismatch"

    def __init__(self, name: str, expected, got: int):
        super().__init__(f"{name} expects {expected} argument(s), got {got}")
        self.name = name
        self.expected = expected
        self.got = got


class UnknownFrame(KappaError):
    """ Raised when an environment id does not name a frame in the arena"""

    kind = "UnknownFrame"

    def __init__(self, env_id):
        super().__init__(f"no frame with id {env_id}")
        self.env_id = env_id
