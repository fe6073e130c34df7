from kappa import EvaluatorFn, EnvId
from kappa import SExpression, LispValue
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import ArityMismatch
from kappa.types.kinds import as_symbol


def set_form(
    tail: list[SExpression],
    arena: EnvironmentArena,
    env_id: EnvId,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise ArityMismatch("set!", 2, len(tail))
    var_sym, val_expr = tail
    var_sym = as_symbol(var_sym, "set!")
    value = evaluate_fn(val_expr, arena, env_id)
    # set! never creates a binding: the owner must already exist
    owner = arena.find_owner(env_id, var_sym)
    arena.mutate(owner, var_sym, value)
    return True
