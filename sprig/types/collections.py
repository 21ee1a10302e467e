"""Container kinds beyond the plain Python list.

Lists are represented by `list`. Vectors share the list representation but
are a distinct kind, so they get a thin subclass. Maps keep their entries as
an ordered sequence of pairs; duplicate keys are legal and retained.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from sprig import LispValue


class Vector(list):
    """`[a b c]`: evaluated like a list but printed and matched as a vector."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"


class HashMap:
    """`{k v ...}`: an ordered sequence of (key, value) pairs."""

    __slots__ = ("pairs",)

    def __init__(self, pairs: Iterable[tuple[LispValue, LispValue]] = ()):
        self.pairs: tuple[tuple[LispValue, LispValue], ...] = tuple(pairs)

    def get(self, key: LispValue, default: LispValue = None) -> LispValue:
        """Value of the first pair whose key is structurally equal to `key`."""
        from sprig.types.equality import equals

        for k, v in self.pairs:
            if equals(k, key):
                return v
        return default

    def keys(self) -> list[LispValue]:
        return [k for k, _ in self.pairs]

    def values(self) -> list[LispValue]:
        return [v for _, v in self.pairs]

    def __iter__(self) -> Iterator[tuple[LispValue, LispValue]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __eq__(self, other: object) -> bool:
        from sprig.types.equality import equals

        return isinstance(other, HashMap) and equals(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HashMap({list(self.pairs)!r})"
