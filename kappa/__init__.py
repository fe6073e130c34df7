# Core type aliases for Kappa's data model.
# Plain Python types carry both code (forms) and runtime values:
#   Symbol -> kappa.types.symbol.Symbol, Number -> float, Complex -> complex,
#   Bool -> bool, String -> str, List -> list.
# Procedures are Builtin (native) or Lambda (closure) instances.
#
# Naming guidance:
# - SExpression: reader/parser code, syntactic forms (code-as-data).
# - LispValue:  evaluator/runtime code, evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: (expr, arena, env_id) -> value
EvaluatorFn = Callable[..., LispValue]

# Arena ids are plain list indices
EnvId = int

__version__ = "0.1.0"
