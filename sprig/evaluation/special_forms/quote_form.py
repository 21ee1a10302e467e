from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import ArityError
from sprig.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x unevaluated."""
    if len(tail) != 1:
        raise ArityError("quote requires exactly 1 argument")
    return tail[0]
