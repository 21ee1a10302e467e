from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import ArityError, InvalidSpecialForm, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* (name init ...) body)
    Each init is evaluated in the partially built scope, so it sees the
    bindings before it but not itself or later ones.
    """
    if len(tail) != 2:
        raise ArityError("let* requires exactly 2 arguments")

    bindings, body = tail
    if not isinstance(bindings, list):
        raise InvalidSpecialForm("let* first argument must be a list or vector")
    if len(bindings) % 2 != 0:
        raise InvalidSpecialForm("let* requires an even number of binding forms")

    new_env = Environment.new_child(env)
    for name, init in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise SprigTypeError("let* binding key must be a symbol")
        new_env.set(name, evaluate_fn(init, new_env))

    return evaluate_fn(body, new_env)
