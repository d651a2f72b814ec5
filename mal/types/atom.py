from __future__ import annotations

from mal import LispValue


class Atom:
    """Mutable single-value cell; the only value whose contents change in place."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def reset(self, value: LispValue) -> LispValue:
        self.value = value
        return value

    def __repr__(self) -> str:
        from mal.printer import render
        return render(self)
