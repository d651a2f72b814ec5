"""
  Reader: tokenizer and recursive-descent parser

- Streaming, lazy tokenization over one chunk of source text
- Emits mal values directly (forms are values):

    - nil / true / false / undefined -> Nil / True / False / Undefined
    - integers / decimals -> int / float
    - "strings" -> str, escapes resolved
    - :name -> Keyword
    - identifiers -> interned Symbol
    - ( ... ) -> List,  [ ... ] -> Vector,  { ... } -> HashMap
    - 'x `x ~x ~@x @x -> (quote x) (quasiquote x) (unquote x) (splice-unquote x) (deref x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from mal import SExpression
from mal.errors import ReadError, UnexpectedToken
from mal.types.hash_map import HashMap
from mal.types.nil import Nil, Undefined
from mal.types.sequence import List, Vector
from mal.types.symbol import Keyword, Symbol
from mal.reader.reader_macros import reader_macros


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<splice>~@)"  # two-character splice marker
    r"|(?P<special>[\[\]{}()'`~^@])"  # brackets and prefix characters
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # double-quoted strings (maybe unterminated)
    r"|(?P<comment>;[^\n]*)"  # line comment
    r"|(?P<atom>[^\s\[\]{}('\"`,;)]+)"  # everything else up to a delimiter
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"-?[0-9]+")
FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)
SYMBOL_RE = re.compile(r"[&_A-Za-z][-_A-Za-z0-9!*]*")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
    "undefined": Undefined,
}

CLOSERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples; comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only whitespace and commas remain
            break
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def unescape(body: str) -> str:
    return ESCAPE_RE.sub(lambda m: "\n" if m.group(1) == "n" else m.group(1), body)


def read_atom(token: str) -> SExpression:
    """Classify a non-bracket token, in a fixed priority order."""
    if token in LITERALS:
        return LITERALS[token]
    if Symbol.is_interned(token):
        return Symbol(token)
    if token.startswith(":"):
        if len(token) == 1:
            raise UnexpectedToken(token)
        return Keyword(token[1:])
    if INTEGER_RE.fullmatch(token):
        return int(token)
    if FLOAT_RE.fullmatch(token):
        return float(token)
    if STRING_RE.fullmatch(token):
        return unescape(token[1:-1])
    if token.startswith('"'):
        raise ReadError(f"unbalanced string: {token}")
    if SYMBOL_RE.fullmatch(token):
        return Symbol(token)
    raise UnexpectedToken(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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

    def parse_expr(self) -> SExpression | None:
        """Parse one form; None when the stream is exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        # ------------------------
        # Dispatch reader macros first
        # ------------------------
        if tok_type in ("splice", "special") and reader_macros.is_macro(tok_val):
            self.advance()  # consume the macro token
            return reader_macros.dispatch(tok_val, self)

        if tok_type == "special":
            self.advance()
            if tok_val == "(":
                return List(self._read_until(tok_val))
            if tok_val == "[":
                return Vector(self._read_until(tok_val))
            if tok_val == "{":
                return HashMap.from_sequence(List(self._read_until(tok_val)))
            if tok_val == "^":
                raise ReadError("metadata syntax '^' is not supported")
            raise ReadError(f"unexpected '{tok_val}'")

        self.advance()
        return read_atom(tok_val)

    def _read_until(self, opener: str) -> list[SExpression]:
        end = CLOSERS[opener]
        items: list[SExpression] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise ReadError("unexpected end of input")
            if tok_type == "special" and tok_val in (")", "]", "}"):
                self.advance()
                if tok_val != end:
                    raise ReadError(f"expected '{end}', got '{tok_val}'")
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_str(source: str) -> SExpression | None:
    """Read the first top-level form of `source`; None for blank or comment-only input."""
    return TokenStream(lex(source)).parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Read every top-level form of `source`."""
    return list(TokenStream(lex(source)).parse_all())
