from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import ArityError, InvalidSpecialForm, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.function import Function, VARIADIC_MARKER
from sprig.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn* (a b & rest) body)
    The body stays unevaluated; the current scope is captured by reference.
    """
    if len(tail) != 2:
        raise ArityError("fn* requires exactly 2 arguments")

    params, body = tail
    if not isinstance(params, list):
        raise InvalidSpecialForm("fn* first argument must be a list or vector")

    for i, param in enumerate(params):
        if not isinstance(param, Symbol):
            raise SprigTypeError("fn* parameters must be symbols")
        if param == VARIADIC_MARKER and i != len(params) - 2:
            raise InvalidSpecialForm("& must be followed by exactly one symbol")

    return Function(list(params), body, env)
