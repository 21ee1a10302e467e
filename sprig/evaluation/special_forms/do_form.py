from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import ArityError
from sprig.types.environment import Environment


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise ArityError("do requires at least one argument")
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env)
