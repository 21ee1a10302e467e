"""Built-in functions for the Sprig runtime environment.

This module defines integer arithmetic, comparison, list predicates, string
formatting and output, and the registration helper that installs them in
the root scope as Builtin values.
"""
from __future__ import annotations

import logging
from typing import Callable

from sprig import LispValue
from sprig.errors import ArityError, DivisionByZero, IntegerOverflow, SprigTypeError
from sprig.printer import pr_str
from sprig.types.collections import Vector
from sprig.types.environment import Environment
from sprig.types.equality import equals, is_truthy
from sprig.types.function import Builtin
from sprig.types.nil import Nil
from sprig.types.number import in_range, is_number

logger = logging.getLogger(__name__)


def _expect_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        plural = "argument" if n == 1 else "arguments"
        raise ArityError(f"{name} requires exactly {n} {plural}")


def _two_numbers(name: str, expr: list[LispValue]) -> tuple[int, int]:
    _expect_arity(name, expr, 2)
    a, b = expr
    if not is_number(a) or not is_number(b):
        raise SprigTypeError(f"{name} requires number arguments")
    return a, b


def _checked(name: str, value: int) -> int:
    if not in_range(value):
        raise IntegerOverflow(f"integer overflow in {name}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _two_numbers("+", expr)
    return _checked("+", a + b)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _two_numbers("-", expr)
    return _checked("-", a - b)


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _two_numbers("*", expr)
    return _checked("*", a * b)


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Integer division truncating toward zero, as 64-bit hardware division does."""
    a, b = _two_numbers("/", expr)
    if b == 0:
        raise DivisionByZero("division by zero")
    q = abs(a) // abs(b)
    return _checked("/", q if (a < 0) == (b < 0) else -q)


# -------------------------------
# Comparison
# -------------------------------
def equal(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("=", expr, 2)
    return equals(expr[0], expr[1])


def lt(env: Environment, expr: list[LispValue]) -> bool:
    a, b = _two_numbers("<", expr)
    return a < b


def lte(env: Environment, expr: list[LispValue]) -> bool:
    a, b = _two_numbers("<=", expr)
    return a <= b


def gt(env: Environment, expr: list[LispValue]) -> bool:
    a, b = _two_numbers(">", expr)
    return a > b


def gte(env: Environment, expr: list[LispValue]) -> bool:
    a, b = _two_numbers(">=", expr)
    return a >= b


# -------------------------------
# Lists
# -------------------------------
def make_list(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


def is_list(env: Environment, expr: list[LispValue]) -> bool:
    """Vectors are sequences but not lists."""
    _expect_arity("list?", expr, 1)
    return isinstance(expr[0], list) and not isinstance(expr[0], Vector)


def is_empty(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("empty?", expr, 1)
    xs = expr[0]
    # nil counts as the empty sequence, matching count
    if xs is Nil:
        return True
    if isinstance(xs, list):
        return not xs
    raise SprigTypeError("empty? requires a list, vector, or nil argument")


def count(env: Environment, expr: list[LispValue]) -> int:
    _expect_arity("count", expr, 1)
    xs = expr[0]
    if xs is Nil:
        return 0
    if isinstance(xs, list):
        return len(xs)
    raise SprigTypeError("count requires a list, vector, or nil argument")


# -------------------------------
# Strings and output
# -------------------------------
def pr_str_builtin(env: Environment, expr: list[LispValue]) -> str:
    return " ".join(pr_str(x, True) for x in expr)


def str_builtin(env: Environment, expr: list[LispValue]) -> str:
    return "".join(pr_str(x, False) for x in expr)


def prn(env: Environment, expr: list[LispValue]) -> LispValue:
    print(" ".join(pr_str(x, True) for x in expr), flush=True)
    return Nil


def println(env: Environment, expr: list[LispValue]) -> LispValue:
    print(" ".join(pr_str(x, False) for x in expr), flush=True)
    return Nil


def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    """Logical NOT for a single value; only Nil and false are falsey."""
    _expect_arity("not", expr, 1)
    return not is_truthy(expr[0])


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equal,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "list": make_list,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "pr-str": pr_str_builtin,
    "str": str_builtin,
    "prn": prn,
    "println": println,
    "not": logical_not,
}


def register(env: Environment) -> Environment:
    """Install every builtin in `env` as a Builtin value."""
    for name, fn in BUILTINS.items():
        env.set(name, Builtin(name, fn))
    logger.debug("registered %d builtins", len(BUILTINS))
    return env
