"""Immutable map keyed by Keyword or String values.

Derived maps (assoc/dissoc) are always new instances; the source map is never
touched after construction.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from mal import LispValue
from mal.errors import UnexpectedLength, UnexpectedTokenType
from mal.types.nil import Undefined
from mal.types.symbol import Keyword


def _check_key(key: LispValue) -> LispValue:
    if isinstance(key, (Keyword, str)):
        return key
    from mal.types.value import Kind
    raise UnexpectedTokenType(key, (Kind.KEYWORD, Kind.STRING))


class HashMap:
    __slots__ = ("_data",)

    def __init__(self, pairs: Iterable[tuple[LispValue, LispValue]] = ()):
        self._data: dict[LispValue, LispValue] = {}
        for key, value in pairs:
            self._data[_check_key(key)] = value

    @classmethod
    def from_sequence(cls, items) -> HashMap:
        """Build from a flat k1 v1 k2 v2 ... sequence, which must have even length."""
        if len(items) % 2 != 0:
            raise UnexpectedLength(items, 2)
        return cls(_pairs(items))

    def assoc(self, *kvs: LispValue) -> HashMap:
        if len(kvs) % 2 != 0:
            from mal.types.sequence import List
            raise UnexpectedLength(List(kvs), 2)
        result = HashMap(self._data.items())
        for key, value in _pairs(kvs):
            result._data[_check_key(key)] = value
        return result

    def dissoc(self, *keys: LispValue) -> HashMap:
        drop = {_check_key(k) for k in keys}
        return HashMap((k, v) for k, v in self._data.items() if k not in drop)

    def get(self, key: LispValue, default: LispValue = Undefined) -> LispValue:
        if not isinstance(key, (Keyword, str)):
            return default
        return self._data.get(key, default)

    def contains(self, key: LispValue) -> bool:
        return isinstance(key, (Keyword, str)) and key in self._data

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def items(self):
        return self._data.items()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self._data)

    def __contains__(self, key: LispValue) -> bool:
        return self.contains(key)

    def __eq__(self, other) -> bool:
        from mal.types.value import equal
        return equal(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self) -> str:
        from mal.printer import render
        return render(self)


def _pairs(items) -> Iterator[tuple[LispValue, LispValue]]:
    it = iter(items)
    return zip(it, it)
