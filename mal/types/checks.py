"""Argument validation helpers shared by special forms and native functions."""

from __future__ import annotations

from typing import Sized

from mal import LispValue
from mal.errors import (
    MultipleParametersError,
    ParametersError,
    UnexpectedLength,
    UnexpectedTokenType,
)
from mal.types.value import Kind, kind_of


def check_arity(symbol, args: Sized, expected: int) -> None:
    if len(args) != expected:
        raise ParametersError(symbol, expected, len(args))


def check_min_arity(symbol, args: Sized, minimum: int) -> None:
    if len(args) < minimum:
        raise MultipleParametersError(symbol, minimum, len(args))


def check_type(value: LispValue, *expected: Kind) -> LispValue:
    """Return `value` unchanged if its kind is one of `expected`."""
    if kind_of(value) not in expected:
        raise UnexpectedTokenType(value, expected)
    return value


def check_all(values, *expected: Kind) -> None:
    for value in values:
        check_type(value, *expected)


def check_even_length(instance: Sized, base: int = 2) -> None:
    if len(instance) % base != 0:
        raise UnexpectedLength(instance, base)
