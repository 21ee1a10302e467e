"""Runtime environment for Sprig.

An Environment stores this scope's own bindings of names to evaluated Lisp
values plus an optional `outer` link to the enclosing scope. Scopes are
shared by reference: closures and in-progress frames keep their chain alive,
and a binding made through one reference is visible to every holder.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from sprig import LispValue
from sprig.errors import UnboundSymbol
from sprig.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    # --- Construction ---
    @classmethod
    def new_root(cls) -> Environment:
        """The global scope: no outer."""
        return cls()

    @classmethod
    def new_child(cls, outer: Environment) -> Environment:
        return cls(outer)

    @classmethod
    def with_bindings(
        cls,
        outer: Environment | None,
        names: Iterable[Symbol | str],
        values: Iterable[LispValue],
    ) -> Environment:
        """New scope over `outer` binding names[i] -> values[i] positionally."""
        env = cls(outer)
        for name, value in zip(names, values):
            env.set(name, value)
        return env

    # --- Bindings ---
    def set(self, name: Symbol | str, value: LispValue) -> LispValue:
        """Bind `name` in this scope only, returning `value`."""
        self.vars[str(name)] = value
        return value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = str(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> Optional[LispValue]:
        """Value bound to `name` on the chain, or None if unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[str(name)]

    def lookup(self, name: Symbol | str) -> LispValue:
        """Like get, but raises UnboundSymbol on a miss."""
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(f"symbol not found: {name}")
        return env.vars[str(name)]

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's names into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(self.vars))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; names only, never values."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
