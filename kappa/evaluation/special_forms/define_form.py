from kappa import EvaluatorFn, EnvId
from kappa import SExpression, LispValue
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import ArityMismatch
from kappa.types.kinds import as_symbol


def define_form(
    tail: list[SExpression],
    arena: EnvironmentArena,
    env_id: EnvId,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only, shadowing any outer binding. Returns the value.
    """
    if len(tail) != 2:
        raise ArityMismatch("define", 2, len(tail))

    name, val_expr = tail
    name = as_symbol(name, "define")
    value = evaluate_fn(val_expr, arena, env_id)
    arena.bind_local(env_id, name, value)
    return value
