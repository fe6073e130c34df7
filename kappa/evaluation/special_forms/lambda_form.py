from kappa import EvaluatorFn, EnvId
from kappa import SExpression, LispValue
from kappa.types.environment import EnvironmentArena
from kappa.types.errors import ArityMismatch
from kappa.types.kinds import as_list, as_symbol
from kappa.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    arena: EnvironmentArena,
    env_id: EnvId,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body): exactly one body form, captured unevaluated
    if len(tail) != 2:
        raise ArityMismatch("lambda", 2, len(tail))

    params, body = tail
    formals = [as_symbol(p, "lambda parameter") for p in as_list(params, "lambda")]
    return Lambda(formals, body, env_id)
