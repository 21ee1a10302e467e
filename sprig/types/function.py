"""Callable values: user closures created by `fn*` and native builtins."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from sprig import SExpression, LispValue
from sprig.types.symbol import Symbol

if TYPE_CHECKING:
    from sprig.types.environment import Environment

VARIADIC_MARKER = Symbol("&")


class Function:
    """A closure: parameter names, an unevaluated body and the defining scope.

    `params` keeps the literal `&` marker in place; `variadic` is set when it
    is present. The captured `env` is shared, not copied, so later `def!`s in
    that scope are visible to the body.
    """

    __slots__ = ("params", "body", "env", "variadic")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        variadic: bool | None = None,
    ):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        self.env: Environment = env
        self.variadic: bool = (
            VARIADIC_MARKER in self.params if variadic is None else variadic
        )

    @property
    def fixed_params(self) -> tuple[Symbol, ...]:
        if self.variadic:
            return self.params[: self.params.index(VARIADIC_MARKER)]
        return self.params

    @property
    def rest_param(self) -> Symbol | None:
        if self.variadic:
            return self.params[self.params.index(VARIADIC_MARKER) + 1]
        return None

    # Functions never compare equal, not even to themselves
    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"<Function ({' '.join(str(p) for p in self.params)})>"


class Builtin:
    """A native operation registered in the root scope under `name`.

    `fn` is called as `fn(env, args)` with already-evaluated arguments.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Environment, list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"
