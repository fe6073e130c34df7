from kappa import EvaluatorFn, EnvId
from kappa import SExpression, LispValue
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import ArityMismatch
from kappa.types.kinds import as_bool


def if_form(
    tail: list[SExpression],
    arena: EnvironmentArena,
    env_id: EnvId,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (if test then else): the else branch is mandatory
    if len(tail) != 3:
        raise ArityMismatch("if", 3, len(tail))

    test, consequent, alternative = tail
    if as_bool(evaluate_fn(test, arena, env_id), "if"):
        return evaluate_fn(consequent, arena, env_id)
    return evaluate_fn(alternative, arena, env_id)
