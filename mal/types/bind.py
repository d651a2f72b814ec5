from __future__ import annotations

from typing import Iterable, NamedTuple

from mal import LispValue
from mal.errors import InvalidRestParameter, UnexpectedTokenType
from mal.types.nil import Nil
from mal.types.sequence import List
from mal.types.symbol import Symbol

REST_MARKER = Symbol("&")


class ParamSpec(NamedTuple):
    """Parsed lambda list: positional names plus an optional variadic capture."""

    names: tuple[Symbol, ...]
    rest: Symbol | None = None

    @property
    def declared(self) -> tuple[Symbol, ...]:
        """The parameter list as it was written, rest marker included."""
        if self.rest is None:
            return self.names
        return self.names + (REST_MARKER, self.rest)


def parse_params(params: Iterable[LispValue]) -> ParamSpec:
    """
    Validate a written parameter list and split off the rest parameter.

    Every entry must be a Symbol. The rest marker `&` may only appear as the
    second-to-last entry; the symbol after it captures the remaining args.
    """
    params = list(params)
    for p in params:
        if not isinstance(p, Symbol):
            from mal.types.value import Kind
            raise UnexpectedTokenType(p, (Kind.SYMBOL,))

    for index, p in enumerate(params):
        if p is REST_MARKER and index != len(params) - 2:
            raise InvalidRestParameter(p)

    if len(params) >= 2 and params[-2] is REST_MARKER:
        return ParamSpec(tuple(params[:-2]), params[-1])
    return ParamSpec(tuple(params))


def bind_arguments(
    spec: ParamSpec,
    supplied_args: Iterable[LispValue],
    bindings: dict[Symbol, LispValue],
) -> None:
    """
    Single source of truth for lambda-list binding.

    Positional names bind in order; positions with no supplied argument bind
    to Nil. Extra arguments are ignored unless a rest name is declared, in
    which case it receives a fresh List of everything from its position on.
    """
    supplied = list(supplied_args)
    for index, name in enumerate(spec.names):
        bindings[name] = supplied[index] if index < len(supplied) else Nil
    if spec.rest is not None:
        bindings[spec.rest] = List(supplied[len(spec.names):])
