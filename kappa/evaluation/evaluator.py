"""Core evaluator for the Kappa interpreter.

A plain recursive tree walker: special forms are dispatched by head symbol,
every other non-empty list is an application. There is no tail-call
elimination, so Python stack depth tracks the nesting depth of the program.
"""

from __future__ import annotations

import logging

from kappa import SExpression, LispValue, EnvId
from kappa.evaluation.apply import apply
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import EmptyApplication, NotCallable
from kappa.types.kinds import is_procedure
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, arena: EnvironmentArena, env_id: EnvId) -> LispValue:
    """Evaluate `expr` in the frame `env_id` of `arena`."""
    if isinstance(expr, Symbol):
        return arena.resolve(env_id, expr)

    if isinstance(expr, list):
        if not expr:
            raise EmptyApplication()

        head, *tail_args = expr
        if isinstance(head, Symbol) and head in SPECIAL_FORMS:
            logger.debug("special form %s in frame #%d", head, env_id)
            return SPECIAL_FORMS[head](tail_args, arena, env_id, evaluate)

        proc = evaluate(head, arena, env_id)
        if not is_procedure(proc):
            raise NotCallable(proc)
        # Arguments are evaluated left to right in the calling frame
        args = [evaluate(arg, arena, env_id) for arg in tail_args]
        return apply(proc, args, arena, evaluate)

    # --- Atoms and procedures evaluate to themselves ---
    return expr
