"""Application engine for Kappa.

Centralizes procedure application for the interpreter so that the evaluator
and the higher-order builtins (apply, map) share one invocation path:
- Builtin procedures run directly against the evaluated arguments and the arena.
- Lambdas get one fresh child frame of their captured frame per call, and their
  body is evaluated there.
"""

from __future__ import annotations

from kappa import LispValue, EvaluatorFn
from kappa.runtime_context import get_strict_arity
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import ArityMismatch, NotCallable
from kappa.types.lambda_fn import Lambda
from kappa.types.procedure import Builtin


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    arena: EnvironmentArena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    With strict arity (the default) the argument count must equal the number
    of formals. Otherwise the shorter sequence governs the binding: extra
    arguments are dropped and missing parameters stay unbound.
    """
    if get_strict_arity() and len(args) != len(fn.formals):
        raise ArityMismatch("lambda", len(fn.formals), len(args))
    new_env = arena.create_child(fn.formals, args, fn.env)
    return evaluate_fn(fn.body, arena, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    arena: EnvironmentArena,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin; anything else is NotCallable."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, arena, evaluate_fn)
    if isinstance(head, Builtin):
        return head(arena, args)
    raise NotCallable(head)
