"""Closure representation for user-defined functions."""

from __future__ import annotations

from io import StringIO

from mal import SExpression, LispValue
from mal.types.bind import ParamSpec
from mal.types.environment import Environment


class Closure:
    """A first-class function: parameter spec, body form and defining env.

    The defining environment is held by reference, never copied; several
    closures may share it and it lives as long as any of them is reachable.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: ParamSpec, body: SExpression, env: Environment):
        self.params: ParamSpec = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from mal.printer import render
        with StringIO() as buffer:
            buffer.write("(fn* (")
            buffer.write(" ".join(str(p) for p in self.params.declared))
            buffer.write(") ")
            buffer.write(render(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style source of the closure."""
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` against the parameter spec in a child of the defining env."""
        return Environment(self.env, self.params, args)
