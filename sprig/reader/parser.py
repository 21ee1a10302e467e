"""
  Lisp Reader, Lexer and Parser

- Streaming: `lex` is a generator and `TokenStream` pulls tokens on demand
- Emits Python values rather than a dedicated node type:

    - nil / true / false -> Nil / True / False
    - integers -> int (signed 64-bit range)
    - symbols -> Symbol
    - :keywords -> Keyword
    - strings -> str
    - ( ... ) -> list
    - [ ... ] -> Vector
    - { ... } -> HashMap (ordered pairs)
    - quote family -> [Symbol("quote"), expr], etc. (see reader_macros)
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from sprig import SExpression
from sprig.errors import (
    EmptyInput,
    InvalidToken,
    NestingTooDeep,
    UnexpectedClosingDelimiter,
    UnexpectedEof,
    UnterminatedString,
)
from sprig.reader.reader_macros import reader_macros
from sprig.types.collections import HashMap, Vector
from sprig.types.nil import Nil
from sprig.types.number import in_range
from sprig.types.symbol import Keyword, Symbol

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"[\s,]*(?:"  # whitespace and commas separate tokens
    r"(?P<comment>;[^\n]*)"  # line comment
    r"|(?P<sigil>~@|['`~@^])"  # quote family; ~@ before ~
    r"|(?P<open>[(\[{])"  # ( [ {
    r"|(?P<close>[)\]}])"  # ) ] }
    r"|(?P<amp>&)"  # variadic marker
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote that never closes
    r"|(?P<atom>[^\s\[\]{}()'\"`,;]+)"  # numbers, symbols, keywords, literals
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"-?[0-9]+")
KEYWORD_RE = re.compile(r"[A-Za-z0-9_\-+*/<>=!?]+")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

CLOSERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}

ESCAPES: dict[str, str] = {"n": "\n"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples.

    Token types are "sigil", "open", "close", "string" and "atom"; `&` is
    yielded as an atom.
    """
    pos = 0
    n = len(source)
    while pos < n:
        match = TOKEN_RE.match(source, pos)
        if match is None:
            # only separators left
            break
        kind = match.lastgroup
        pos = match.end()
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise UnterminatedString("unterminated string")
        if kind == "amp":
            yield "atom", "&"
            continue
        yield kind, match.group(kind)


def unescape(body: str) -> str:
    """Resolve \\n, \\\\ and \\" ; any other escaped character stands for itself."""
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def read_atom(token: str) -> SExpression:
    if token in LITERALS:
        return LITERALS[token]
    if INT_RE.fullmatch(token):
        value = int(token)
        if not in_range(value):
            raise InvalidToken(f"integer literal out of range: {token}")
        return value
    if token.startswith(":"):
        name = token[1:]
        if not KEYWORD_RE.fullmatch(name):
            raise InvalidToken(f"invalid keyword: {token}")
        return Keyword(name)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Read exactly one form."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise UnexpectedEof("unexpected end of input")

        if tok_type == "sigil":
            return reader_macros.dispatch(tok_val, self)

        if tok_type == "open":
            if tok_val == "{":
                return self._read_map()
            items = self._read_sequence(CLOSERS[tok_val])
            return items if tok_val == "(" else Vector(items)

        if tok_type == "close":
            raise UnexpectedClosingDelimiter(f"unexpected closing delimiter '{tok_val}'")

        if tok_type == "string":
            return unescape(tok_val[1:-1])

        return read_atom(tok_val)

    def _read_sequence(self, closer: str) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise UnexpectedEof(f"unexpected end of input, expected '{closer}'")
            if tok_type == "close" and tok_val == closer:
                self.advance()
                return items
            items.append(self.parse_expr())

    def _read_map(self) -> HashMap:
        pairs: list[tuple[SExpression, SExpression]] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise UnexpectedEof("unexpected end of input, expected '}'")
            if tok_type == "close" and tok_val == "}":
                self.advance()
                return HashMap(pairs)
            key = self.parse_expr()
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise UnexpectedEof("unexpected end of input, expected a map value")
            if tok_type == "close" and tok_val == "}":
                raise UnexpectedClosingDelimiter("map literal has a key without a value")
            pairs.append((key, self.parse_expr()))

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            try:
                expr = self.parse_expr()
            except RecursionError:
                raise NestingTooDeep("input nested too deeply") from None
            yield expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level form in `source`.

    Raises EmptyInput when the source holds nothing but separators and comments.
    """
    stream = TokenStream(lex(source))
    if stream.peek()[0] is None:
        raise EmptyInput("empty input")
    yield from stream.parse_all()


def parse(source: str) -> SExpression:
    """Read `source` and return its first form; trailing forms must still be well formed."""
    forms = list(parse_all(source))
    if len(forms) > 1:
        logger.debug("parse: ignoring %d trailing form(s)", len(forms) - 1)
    return forms[0]
