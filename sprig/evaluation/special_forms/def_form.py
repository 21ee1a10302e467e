from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import ArityError, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current scope, never a new one, and returns the bound value.
    """
    if len(tail) != 2:
        raise ArityError("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SprigTypeError("def! first argument must be a symbol")
    value = evaluate_fn(val_expr, env)
    return env.set(name, value)
