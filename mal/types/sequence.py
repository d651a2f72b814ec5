"""Sequential values: List (code and data) and Vector (data only).

Both are immutable tuple subclasses that differ only in how they print and in
whether the evaluator treats them as an application.
"""

from __future__ import annotations

from typing import Iterator

from mal import LispValue
from mal.types.nil import Undefined


class Sequence(tuple):
    __slots__ = ()

    def get(self, index: int) -> LispValue:
        """Indexed get; out-of-range (including negative) positions are Undefined."""
        if 0 <= index < len(self):
            return tuple.__getitem__(self, index)
        return Undefined

    def slice(self, start: int, end: int | None = None) -> Sequence:
        return type(self)(tuple.__getitem__(self, slice(start, end)))

    def group(self, n: int = 2) -> Iterator[tuple]:
        """Yield consecutive chunks of `n` items; the last one may be short."""
        for i in range(0, len(self), n):
            yield tuple.__getitem__(self, slice(i, i + n))

    def first(self) -> LispValue:
        return self.get(0)

    def rest(self) -> List:
        return List(tuple.__getitem__(self, slice(1, None)))

    def last(self) -> LispValue:
        return self.get(len(self) - 1)

    def __eq__(self, other) -> bool:
        from mal.types.value import equal
        return equal(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    __hash__ = tuple.__hash__

    def __repr__(self) -> str:
        from mal.printer import render
        return render(self)


class List(Sequence):
    __slots__ = ()


class Vector(Sequence):
    __slots__ = ()
