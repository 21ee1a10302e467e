from sprig.types.nil import Nil, NilType
from sprig.types.symbol import Symbol, Keyword
from sprig.types.collections import Vector, HashMap
from sprig.types.function import Function, Builtin
from sprig.types.environment import Environment
from sprig.types.equality import equals, is_truthy

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Keyword",
    "Vector",
    "HashMap",
    "Function",
    "Builtin",
    "Environment",
    "equals",
    "is_truthy",
]
