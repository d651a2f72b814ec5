from __future__ import annotations


class NilType:
    """The language's explicit null. Falsy; equal only to itself."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __reduce__(self):
        return (NilType, ())


class UndefinedType:
    """Marks an absent value (missing map key, out-of-range index). Distinct from Nil."""

    _instance: UndefinedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "undefined"

    def __reduce__(self):
        return (UndefinedType, ())


Nil = NilType()
Undefined = UndefinedType()
