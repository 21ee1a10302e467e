"""Application engine for Sprig.

Function application semantics in one place:
- Closures get a fresh scope over their captured environment (never the
  caller's) with parameters bound from the already-evaluated arguments.
- Builtins registered in the environment are called with (env, args).
- Anything else in head position is an error.
"""

from __future__ import annotations

from sprig import EvaluatorFn, LispValue
from sprig.errors import NotAFunction
from sprig.printer import pr_str
from sprig.types.environment import Environment
from sprig.types.function import Builtin, Function
from sprig.types.nil import Nil


def bind_arguments(fn: Function, args: list[LispValue]) -> Environment:
    """Return the scope a call to `fn` evaluates its body in.

    - Fixed parameters bind positionally; missing ones bind to Nil.
    - Surplus arguments of a non-variadic function are ignored.
    - A variadic rest name receives the surplus as a list (possibly empty).
    """
    fixed = fn.fixed_params
    values = [args[i] if i < len(args) else Nil for i in range(len(fixed))]
    local_env = Environment.with_bindings(fn.env, fixed, values)
    if fn.variadic:
        local_env.set(fn.rest_param, list(args[len(fixed):]))
    return local_env


def apply_function(fn: Function, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(fn.body, bind_arguments(fn, args))


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a closure or a builtin; raise NotAFunction otherwise."""
    if isinstance(head, Function):
        return apply_function(head, args, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    raise NotAFunction(f"not a function: {pr_str(head, True)}")
