"""Core evaluator for the Sprig interpreter.

Implements structural evaluation of atoms and containers, special-form
dispatch and ordinary function application. Evaluation is plain recursion
on the Python call stack; there is no tail-call elimination.
"""

from __future__ import annotations

import logging

from sprig import SExpression, LispValue
from sprig.config import get_debug_symbol
from sprig.evaluation.apply import apply
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.printer import pr_str
from sprig.types.collections import HashMap, Vector
from sprig.types.environment import Environment
from sprig.types.equality import is_truthy
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)

DEBUG_SYMBOL = Symbol(get_debug_symbol())


def debug_enabled(env: Environment) -> bool:
    flag = env.get(DEBUG_SYMBOL)
    return flag is not None and is_truthy(flag)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, tracing the step when the debug symbol is set."""
    traced = debug_enabled(env)
    if traced:
        logger.info("EVAL: %s", pr_str(expr, True))

    match expr:
        case Symbol():
            result = env.lookup(expr)

        case Vector():
            result = Vector([evaluate(item, env) for item in expr])

        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                result = SPECIAL_FORMS[head](tail_args, env, evaluate)
            else:
                # Evaluate head and arguments left to right, then apply.
                fn = evaluate(head, env)
                args = [evaluate(arg, env) for arg in tail_args]
                result = apply(fn, args, env, evaluate)

        case []:
            result = []

        case HashMap():
            # keys pass through unevaluated
            result = HashMap([(key, evaluate(value, env)) for key, value in expr.pairs])

        case _:
            # --- Atoms return as-is ---
            result = expr

    if traced:
        logger.info("%s", pr_str(result, True))
    return result
