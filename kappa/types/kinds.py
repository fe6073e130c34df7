"""Kind names and coercions shared by the evaluator and the builtins."""

from __future__ import annotations

from kappa import LispValue
from kappa.types.errors import TypeMismatch
from kappa.types.lambda_fn import Lambda
from kappa.types.procedure import Builtin
from kappa.types.symbol import Symbol


def kind_of(value: LispValue) -> str:
    """Return the kind name reported in TypeMismatch diagnostics."""
    # bool is checked first: it is an int subclass in Python
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, float):
        return "number"
    if isinstance(value, complex):
        return "complex"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    if isinstance(value, (Builtin, Lambda)):
        return "procedure"
    return type(value).__name__


def is_number(value: LispValue) -> bool:
    return isinstance(value, float)


def is_numeric(value: LispValue) -> bool:
    """Number or Complex."""
    return isinstance(value, (float, complex))


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Builtin, Lambda))


def as_number(value: LispValue, where: str | None = None) -> float:
    if not is_number(value):
        raise TypeMismatch("number", kind_of(value), where)
    return value


def as_numeric(value: LispValue, where: str | None = None) -> float | complex:
    if not is_numeric(value):
        raise TypeMismatch("number or complex", kind_of(value), where)
    return value


def as_list(value: LispValue, where: str | None = None) -> list:
    if not isinstance(value, list):
        raise TypeMismatch("list", kind_of(value), where)
    return value


def as_symbol(value: LispValue, where: str | None = None) -> Symbol:
    if not isinstance(value, Symbol):
        raise TypeMismatch("symbol", kind_of(value), where)
    return value


def as_bool(value: LispValue, where: str | None = None) -> bool:
    """Boolean coercion: a Bool is itself, a List is true iff non-empty."""
    if isinstance(value, bool):
        return value
    if isinstance(value, list):
        return bool(value)
    raise TypeMismatch("bool or list", kind_of(value), where)
