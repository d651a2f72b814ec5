"""Error taxonomy shared by the reader, evaluator and native library.

Every error is fatal at the point it is raised; the interpreter front-end
catches MalError per top-level form and carries on with the next one.
"""

from __future__ import annotations

from typing import Any, Iterable


class MalError(Exception):
    """ Base class for all mal errors"""

    def __init__(self, message: str = "MalError"):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ReadError(MalError):
    """ Raised when source text is malformed at the lexical or structural level"""

    def __init__(self, message: str):
        super().__init__(f"Error while reading: {message}")


class UnexpectedToken(ReadError):
    """ Raised when a token matches none of the atom shapes"""

    def __init__(self, token: str):
        super().__init__(f"unexpected token: {token}")
        self.token = token


class UnexpectedLength(MalError):
    """ Raised when a grouped-pair structure has an element count that is not a multiple of `base`"""

    def __init__(self, instance: Any, base: int):
        from mal.printer import render
        super().__init__(
            f"Unexpected length: {len(instance)}, expected multiple of {base} - {render(instance)}"
        )
        self.instance = instance
        self.base = base


class NotFound(MalError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, symbol: Any, env: Any):
        super().__init__(f"Not found: {symbol}")
        self.symbol = symbol
        self.env = env


class UnexpectedTokenType(MalError):
    """ Raised when a value is not one of the variants accepted at a call site"""

    def __init__(self, token: Any, expected: Iterable[Any]):
        from mal.printer import render
        from mal.types.value import kind_of
        self.token = token
        self.expected = tuple(expected)
        names = ", ".join(str(getattr(k, "value", k)) for k in self.expected)
        super().__init__(
            f"Unexpected token type: {kind_of(token).value} {render(token)}, expected: {names}"
        )


class ParametersError(MalError):
    """ Raised when a fixed-arity form or function gets the wrong number of arguments"""

    def __init__(self, symbol: Any, expected: int, got: int):
        super().__init__(f"{symbol} needs {expected} parameters, called {got}")
        self.symbol = symbol
        self.expected = expected
        self.got = got


class MultipleParametersError(ParametersError):
    """ Raised when a variadic form or function gets fewer than the minimum number of arguments"""

    def __init__(self, symbol: Any, expected: int, got: int):
        super().__init__(symbol, expected, got)
        self.message = f"{symbol} needs at least {expected} parameters, called {got}"
        self.args = (self.message,)


class InvalidRestParameter(MalError):
    """ Raised when the rest marker is not the second-to-last parameter"""

    def __init__(self, instance: Any):
        super().__init__(
            f"Invalid rest parameter: {instance} should be followed by exactly one name"
        )
        self.instance = instance


class NotCallable(MalError):
    """ Raised when the head of an application is neither a closure nor a native function"""

    def __init__(self, instance: Any):
        from mal.printer import render
        super().__init__(f"Not callable: {render(instance)}")
        self.instance = instance


class IndexOutOfRange(MalError):
    """ Raised when nth is asked for a position outside a sequence"""

    def __init__(self, instance: Any, index: int):
        from mal.printer import render
        super().__init__(f"Index out of range: {index} in {render(instance)}")
        self.instance = instance
        self.index = index
