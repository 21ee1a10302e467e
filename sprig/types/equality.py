"""Structural equality and truthiness over Sprig values."""

from __future__ import annotations

from sprig import LispValue
from sprig.types.collections import HashMap
from sprig.types.function import Builtin, Function
from sprig.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    """Only Nil and false are falsy; 0, "" and empty sequences are truthy."""
    return not (value is Nil or value is False)


def equals(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values.

    - Lists and vectors compare element-wise and equal each other.
    - Maps are equal when their pairs can be matched one-to-one.
    - Functions are never equal to anything, including themselves.
    - Bool and Number are distinct kinds even though Python has True == 1.
    """
    if isinstance(a, (Function, Builtin)) or isinstance(b, (Function, Builtin)):
        return False
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(equals(x, y) for x, y in zip(a, b))
    if isinstance(a, HashMap) and isinstance(b, HashMap):
        return _pairs_match(list(a.pairs), list(b.pairs))
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if type(a) != type(b):
        return False
    return a == b


def _pairs_match(left: list, right: list) -> bool:
    if len(left) != len(right):
        return False
    remaining = list(right)
    for k, v in left:
        for i, (rk, rv) in enumerate(remaining):
            if equals(k, rk) and equals(v, rv):
                del remaining[i]
                break
        else:
            return False
    return True
