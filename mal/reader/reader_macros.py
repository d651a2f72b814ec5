from __future__ import annotations

from mal import SExpression
from mal.errors import ReadError
from mal.types.sequence import List
from mal.types.symbol import Symbol


class ReaderMacros:
    """
    Registry of prefix reader macros.
    Maps a prefix token (like ', `, ~, ~@, @) to the Symbol that heads the
    two-element list wrapping the next form read from the stream.
    """

    def __init__(self):
        self.macros: dict[str, Symbol] = {}

    def define(self, token: str, head: Symbol) -> None:
        """Register a reader macro for a given prefix token."""
        self.macros[token] = head

    def is_macro(self, token: str) -> bool:
        return token in self.macros

    def dispatch(self, token: str, stream: "TokenStream") -> SExpression:
        """Read the next form and wrap it: @x => (deref x)."""
        if token not in self.macros:
            raise ReadError(f"no reader macro defined for {token!r}")
        form = stream.parse_expr()
        if form is None:
            raise ReadError("unexpected end of input")
        return List((self.macros[token], form))


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

for key, name in QUOTE_FORMS.items():
    reader_macros.define(key, name)
