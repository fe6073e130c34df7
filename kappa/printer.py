"""Render Kappa values as source text.

Atoms and lists print in a form the reader accepts back, so rendering and
re-reading a value free of procedures yields an equal value.
"""

from __future__ import annotations

import math

from kappa import LispValue
from kappa.types.lambda_fn import Lambda
from kappa.types.procedure import Builtin
from kappa.types.symbol import Symbol

# Integral floats at or above this magnitude keep their exponent form
_INTEGRAL_LIMIT = 1e16


def format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer() and abs(n) < _INTEGRAL_LIMIT:
        text = str(int(n))
        return "-0" if text == "0" and math.copysign(1.0, n) < 0 else text
    return repr(n)


def format_complex(z: complex) -> str:
    real = format_number(z.real)
    if math.copysign(1.0, z.imag) < 0:
        return f"{real}-{format_number(-z.imag)}i"
    return f"{real}+{format_number(z.imag)}i"


def to_string(x: LispValue) -> str:
    if x is True:
        return "#t"
    if x is False:
        return "#f"
    if isinstance(x, Symbol):
        return x.id
    if isinstance(x, float):
        return format_number(x)
    if isinstance(x, complex):
        return format_complex(x)
    if isinstance(x, str):
        return f'"{x}"'
    if isinstance(x, list):
        return "(" + " ".join(to_string(e) for e in x) + ")"
    if isinstance(x, Builtin):
        return "<function>"
    if isinstance(x, Lambda):
        return "<procedure>"
    return repr(x)
