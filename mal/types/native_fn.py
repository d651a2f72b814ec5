from __future__ import annotations

from typing import Callable

from mal import LispValue


class NativeFunction:
    """Host-level callable installed in the root environment.

    The wrapped function receives the calling environment and the list of
    already evaluated arguments; it validates arity and types itself.
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: Callable[..., LispValue], name: str | None = None):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "anonymous")

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"#<native-function {self.name}>"
