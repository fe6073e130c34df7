"""Built-in procedures for the Kappa root frame.

This module defines arithmetic, comparison, list processing, predicates,
higher-order application helpers, and the registration routine that installs
them into the root frame of an arena. Every builtin receives the arena and its
already-evaluated arguments.
"""
from __future__ import annotations

import math

from kappa import LispValue, EnvId
from kappa.evaluation.apply import apply as apply_engine
from kappa.evaluation.evaluator import evaluate
from kappa.printer import to_string
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import ArityMismatch, TypeMismatch
from kappa.types.kinds import (
    as_bool,
    as_list,
    as_number,
    as_numeric,
    is_number,
    is_procedure,
    kind_of,
)
from kappa.types.procedure import Builtin
from kappa.types.symbol import Symbol


def _exactly(name: str, expr: list[LispValue], n: int) -> list[LispValue]:
    if len(expr) != n:
        raise ArityMismatch(name, n, len(expr))
    return expr


def _at_least(name: str, expr: list[LispValue], n: int) -> list[LispValue]:
    if len(expr) < n:
        raise ArityMismatch(name, f"at least {n}", len(expr))
    return expr


def _binary_numeric(name: str, expr: list[LispValue]):
    a, b = _exactly(name, expr, 2)
    return as_numeric(a, name), as_numeric(b, name)


def _binary_real(name: str, expr: list[LispValue]) -> tuple[float, float]:
    a, b = _exactly(name, expr, 2)
    return as_number(a, name), as_number(b, name)


# -------------------------------
# Arithmetic
# -------------------------------
def add(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    a, b = _binary_numeric("+", expr)
    return a + b


def sub(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    a, b = _binary_numeric("-", expr)
    return a - b


def mul(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    a, b = _binary_numeric("*", expr)
    return a * b


def divide(a, b):
    """IEEE division: a zero divisor gives an infinity or NaN instead of raising."""
    if b != 0:
        return a / b
    if isinstance(a, complex) or isinstance(b, complex):
        return complex(math.nan, math.nan)
    if a == 0 or math.isnan(a):
        return math.nan
    # the sign of a zero divisor matters: 1/-0 is -inf
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def div(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    a, b = _binary_numeric("/", expr)
    return divide(a, b)


def _is_odd_integer(p: float) -> bool:
    return p.is_integer() and math.fmod(p, 2.0) != 0


def _log_magnitude(z: complex) -> float:
    """log|z| without forming |z|, which can overflow."""
    a, b = abs(z.real), abs(z.imag)
    big, small = max(a, b), min(a, b)
    if big == 0:
        return -math.inf
    return math.log(big) + 0.5 * math.log1p((small / big) ** 2)


def _complex_pow_polar(base: complex, power: complex) -> complex:
    """exp(power * log(base)) with an overflowing scale saturating to infinity."""
    log_r = _log_magnitude(base)
    theta = math.atan2(base.imag, base.real)
    re = power.real * log_r - power.imag * theta
    im = power.imag * log_r + power.real * theta
    try:
        scale = math.exp(re)
    except OverflowError:
        scale = math.inf
    return complex(scale * math.cos(im), scale * math.sin(im))


def absolute(arena: EnvironmentArena, expr: list[LispValue]) -> float:
    (x,) = _exactly("abs", expr, 1)
    x = as_numeric(x, "abs")
    try:
        return float(abs(x))
    except OverflowError:
        # |a+bi| beyond the largest double
        return math.inf


def expt(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    base, power = _binary_numeric("expt", expr)
    if isinstance(base, complex) or isinstance(power, complex):
        try:
            return complex(base) ** complex(power)
        except ZeroDivisionError:
            return complex(math.nan, math.nan)
        except OverflowError:
            return _complex_pow_polar(complex(base), complex(power))
    try:
        return math.pow(base, power)
    except ValueError:
        if base == 0 and power < 0:
            # pole at zero: odd integer powers keep the sign of the zero
            return math.copysign(math.inf, base) if _is_odd_integer(power) else math.inf
        # real domain error, e.g. (expt -8 0.5)
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(power):
            return -math.inf
        return math.inf


def round_half_away(arena: EnvironmentArena, expr: list[LispValue]) -> float:
    """Round to the nearest integer, halves away from zero."""
    (x,) = _exactly("round", expr, 1)
    x = as_number(x, "round")
    if math.isnan(x) or math.isinf(x):
        return x
    magnitude = abs(x)
    whole = math.floor(magnitude)
    # magnitude - whole is exact, so the halfway test rounds only once
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), x)


def minimum(arena: EnvironmentArena, expr: list[LispValue]) -> float:
    _at_least("min", expr, 1)
    return min(as_number(x, "min") for x in expr)


def maximum(arena: EnvironmentArena, expr: list[LispValue]) -> float:
    _at_least("max", expr, 1)
    return max(as_number(x, "max") for x in expr)


# -------------------------------
# Comparison
# -------------------------------
def lt(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    a, b = _binary_real("<", expr)
    return a < b


def lte(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    a, b = _binary_real("<=", expr)
    return a <= b


def gt(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    a, b = _binary_real(">", expr)
    return a > b


def gte(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    a, b = _binary_real(">=", expr)
    return a >= b


def num_eq(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    a, b = _binary_numeric("=", expr)
    return a == b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; procedures are never equal, not even to themselves."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if is_procedure(a) or is_procedure(b):
        return False
    # kinds first: in Python True == 1.0
    return kind_of(a) == kind_of(b) and a == b


def equal_p(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    a, b = _exactly("equal?", expr, 2)
    return is_equal(a, b)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(arena: EnvironmentArena, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


def car(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    (xs,) = _exactly("car", expr, 1)
    if not isinstance(xs, list) or not xs:
        raise TypeMismatch("non-empty list", kind_of(xs), "car")
    return xs[0]


def cdr(arena: EnvironmentArena, expr: list[LispValue]) -> list[LispValue]:
    (xs,) = _exactly("cdr", expr, 1)
    return as_list(xs, "cdr")[1:]


def cons(arena: EnvironmentArena, expr: list[LispValue]) -> list[LispValue]:
    head, tail = _exactly("cons", expr, 2)
    return [head] + as_list(tail, "cons")


def append(arena: EnvironmentArena, expr: list[LispValue]) -> list[LispValue]:
    result: list[LispValue] = []
    for xs in expr:
        result.extend(as_list(xs, "append"))
    return result


def length(arena: EnvironmentArena, expr: list[LispValue]) -> float:
    (xs,) = _exactly("length", expr, 1)
    return float(len(as_list(xs, "length")))


def null_p(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    (xs,) = _exactly("null?", expr, 1)
    return isinstance(xs, list) and not xs


def list_p(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    (xs,) = _exactly("list?", expr, 1)
    return isinstance(xs, list)


# -------------------------------
# Procedure application
# -------------------------------
def apply(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    """(apply f a (b c) ...) calls f with List arguments spliced one level: (f a b c ...)."""
    fn, *rest = _at_least("apply", expr, 1)
    args: list[LispValue] = []
    for x in rest:
        if isinstance(x, list):
            args.extend(x)
        else:
            args.append(x)
    return apply_engine(fn, args, arena, evaluate)


def map_builtin(arena: EnvironmentArena, expr: list[LispValue]) -> list[LispValue]:
    fn, xs = _exactly("map", expr, 2)
    return [apply_engine(fn, [x], arena, evaluate) for x in as_list(xs, "map")]


# -------------------------------
# Predicates and logic
# -------------------------------
def number_p(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    (x,) = _exactly("number?", expr, 1)
    return is_number(x)


def symbol_p(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    (x,) = _exactly("symbol?", expr, 1)
    return isinstance(x, Symbol)


def procedure_p(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    (x,) = _exactly("procedure?", expr, 1)
    return is_procedure(x)


def logical_not(arena: EnvironmentArena, expr: list[LispValue]) -> bool:
    (x,) = _exactly("not", expr, 1)
    return not as_bool(x, "not")


# -------------------------------
# Control and side effects
# -------------------------------
def begin(arena: EnvironmentArena, expr: list[LispValue]) -> LispValue:
    # operands arrive already evaluated, in order
    return _at_least("begin", expr, 1)[-1]


def print_builtin(arena: EnvironmentArena, expr: list[LispValue]) -> list:
    print(" ".join(to_string(x) for x in expr))
    return []


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "abs": absolute,
    "expt": expt,
    "round": round_half_away,
    "min": minimum,
    "max": maximum,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "=": num_eq,
    "equal?": equal_p,
    "list": list_builtin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "append": append,
    "length": length,
    "null?": null_p,
    "list?": list_p,
    "apply": apply,
    "map": map_builtin,
    "number?": number_p,
    "symbol?": symbol_p,
    "procedure?": procedure_p,
    "not": logical_not,
    "begin": begin,
    "print": print_builtin,
}

CONSTANTS = {
    "pi": math.pi,
}


# -------------------------------
# Registration
# -------------------------------
def register(arena: EnvironmentArena, env_id: EnvId) -> None:
    """Install every builtin procedure and constant into the frame `env_id`."""
    arena.update(env_id, {Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    arena.update(env_id, {Symbol(name): value for name, value in CONSTANTS.items()})
