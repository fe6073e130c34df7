from kappa import EvaluatorFn, EnvId
from kappa import SExpression, LispValue
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import ArityMismatch


def quote_form(
    tail: list[SExpression],
    arena: EnvironmentArena,
    env_id: EnvId,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr): return expr unevaluated."""
    if len(tail) != 1:
        raise ArityMismatch("quote", 1, len(tail))
    return tail[0]
