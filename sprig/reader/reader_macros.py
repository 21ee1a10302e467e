"""Quote-family reader macros.

Maps sigil tokens (', `, ~, ~@, @, ^) to builders that consume the next
parsed form(s) and wrap them in the corresponding list form.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from sprig import SExpression
from sprig.types.symbol import Symbol

if TYPE_CHECKING:
    from sprig.reader.parser import TokenStream


class ReaderMacros:
    """Registry of sigil -> (number of forms consumed, builder)."""

    def __init__(self):
        self.macros: dict[str, tuple[int, Callable[..., SExpression]]] = {}

    def define(self, sigil: str, arity: int, build: Callable[..., SExpression]) -> None:
        """Register a reader macro for a given sigil token."""
        self.macros[sigil] = (arity, build)

    def dispatch(self, sigil: str, stream: TokenStream) -> SExpression:
        """Read the forms the macro needs, in source order, and build its list."""
        arity, build = self.macros[sigil]
        args = [stream.parse_expr() for _ in range(arity)]
        return build(*args)


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

for _sigil, _name in QUOTE_FORMS.items():
    reader_macros.define(_sigil, 1, lambda form, name=_name: [name, form])

# ^meta form => (with-meta form meta): meta is read first, emitted last
reader_macros.define("^", 2, lambda meta, form: [Symbol("with-meta"), form, meta])
