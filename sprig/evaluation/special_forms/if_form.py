from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import ArityError
from sprig.types.environment import Environment
from sprig.types.equality import is_truthy
from sprig.types.nil import Nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise ArityError("if requires 2 or 3 arguments")

    cond = evaluate_fn(tail[0], env)
    # Lisp truthiness: anything not nil or false is true
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
