"""Variant classification, capability queries and structural equality.

`kind_of` is the single exhaustive match over every runtime variant; the
capability queries and error messages are built on top of it.
"""

from __future__ import annotations

from enum import Enum

from mal import LispValue
from mal.types.atom import Atom
from mal.types.hash_map import HashMap
from mal.types.lambda_fn import Closure
from mal.types.native_fn import NativeFunction
from mal.types.nil import NilType, UndefinedType
from mal.types.sequence import List, Vector
from mal.types.symbol import Keyword, Symbol


class Kind(Enum):
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    NIL = "Nil"
    UNDEFINED = "Undefined"
    SYMBOL = "Symbol"
    KEYWORD = "Keyword"
    LIST = "List"
    VECTOR = "Vector"
    MAP = "Map"
    ATOM = "Atom"
    CLOSURE = "Closure"
    NATIVE = "NativeFunction"
    FOREIGN = "Foreign"


SEQUENTIAL = (Kind.LIST, Kind.VECTOR)
CALLABLE = (Kind.CLOSURE, Kind.NATIVE)


def kind_of(value: LispValue) -> Kind:
    # bool must come before int: True/False are ints to Python
    match value:
        case bool():
            return Kind.BOOLEAN
        case int() | float():
            return Kind.NUMBER
        case str():
            return Kind.STRING
        case NilType():
            return Kind.NIL
        case UndefinedType():
            return Kind.UNDEFINED
        case Symbol():
            return Kind.SYMBOL
        case Keyword():
            return Kind.KEYWORD
        case List():
            return Kind.LIST
        case Vector():
            return Kind.VECTOR
        case HashMap():
            return Kind.MAP
        case Atom():
            return Kind.ATOM
        case Closure():
            return Kind.CLOSURE
        case NativeFunction():
            return Kind.NATIVE
        case _:
            return Kind.FOREIGN


def is_sequential(value: LispValue) -> bool:
    return kind_of(value) in SEQUENTIAL


def is_callable(value: LispValue) -> bool:
    return kind_of(value) in CALLABLE


def is_truthy(value: LispValue) -> bool:
    """Everything is truthy except `false` and `nil` (0, "" and () included)."""
    return value is not False and value is not NilType()


def equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality as seen by the language's `=`."""
    if a is b:
        return True
    ka, kb = kind_of(a), kind_of(b)
    if ka in SEQUENTIAL and kb in SEQUENTIAL:
        if len(a) != len(b):
            return False
        return all(equal(x, y) for x, y in zip(a, b))
    if ka is not kb:
        return False
    match ka:
        case Kind.NUMBER | Kind.STRING | Kind.BOOLEAN | Kind.FOREIGN:
            return a == b
        case Kind.MAP:
            if len(a) != len(b):
                return False
            return all(k in b and equal(v, b.get(k)) for k, v in a.items())
        case _:
            # interned, singleton and reference variants compare by identity
            return False
