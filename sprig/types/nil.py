from __future__ import annotations


class NilType:
    """The canonical "no value". Falsy, and equal only to itself."""

    _instance: NilType | None = None

    def __new__(cls):
        # Copies and unpickling must keep `is Nil` checks valid
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
