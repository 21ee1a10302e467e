"""Printer: render Sprig values back to source text.

`readable=True` produces text the reader can read back (strings quoted and
escaped); `readable=False` is the display form used by `str` and `println`.
"""

from __future__ import annotations

from sprig import LispValue
from sprig.types.collections import HashMap, Vector
from sprig.types.function import Builtin, Function
from sprig.types.nil import Nil
from sprig.types.symbol import Keyword, Symbol

FUNCTION_PLACEHOLDER = "#<function>"


def escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def pr_str(expr: LispValue, readable: bool = True) -> str:
    if expr is Nil:
        return "nil"
    if isinstance(expr, bool):
        return "true" if expr else "false"
    if isinstance(expr, int):
        return str(expr)
    if isinstance(expr, str):
        return f'"{escape(expr)}"' if readable else expr
    if isinstance(expr, (Symbol, Keyword)):
        return str(expr)
    if isinstance(expr, Vector):
        return "[" + _join(expr, readable) + "]"
    if isinstance(expr, list):
        return "(" + _join(expr, readable) + ")"
    if isinstance(expr, HashMap):
        return "{" + " ".join(
            f"{pr_str(k, readable)} {pr_str(v, readable)}" for k, v in expr.pairs
        ) + "}"
    if isinstance(expr, (Function, Builtin)):
        # never expose a closure's captured scope
        return FUNCTION_PLACEHOLDER
    return str(expr)


def _join(items: list[LispValue], readable: bool) -> str:
    return " ".join(pr_str(item, readable) for item in items)
