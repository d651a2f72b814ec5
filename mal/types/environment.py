"""Runtime environment for mal.

The Environment stores bindings of interned Symbols to evaluated values and
supports nested scopes via an `outer` link. Scopes are shared by reference:
closures and child scopes keep their outer chain alive for as long as they
are reachable.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from mal import LispValue
from mal.errors import NotFound
from mal.types.bind import ParamSpec, bind_arguments, parse_params
from mal.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        params: ParamSpec | Iterable[Symbol] | None = None,
        args: Iterable[LispValue] | None = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        if params is not None:
            spec = params if isinstance(params, ParamSpec) else parse_params(params)
            bind_arguments(spec, args or (), self.vars)

    @property
    def root(self) -> Environment:
        """The outermost scope of this chain (the global environment)."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def set(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` in this scope only, shadowing any outer binding."""
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost scope first.

        Raises NotFound, carrying the symbol and this (innermost) scope.
        """
        env = self.find(name)
        if env is None:
            raise NotFound(name, self)
        return env.vars[name]

    def has(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[k] = v

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the root frame is elided."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env.outer is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            chain.append(f"<root: {len(env.vars)} bindings>")
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
