"""Numbers are Python ints held to the signed 64-bit range."""

from __future__ import annotations

from sprig import LispValue

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but a distinct Lisp kind
    return isinstance(value, int) and not isinstance(value, bool)


def in_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX
