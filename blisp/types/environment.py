"""Runtime environment for blisp.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. Bindings are stored by value: `put` keeps a copy
of what it is given and `get` hands back a copy of what it holds, so no two
places in a running program ever share a mutable value.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from blisp import LispValue
from blisp.errors import BlispInvalidSymbol
from blisp.types.symbol import Symbol
from blisp.types.values import LispError, copy_value


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        # Non-owning: the root lives as long as its interpreter, and any other
        # parent is the scope of the closure that created this one.
        self.outer: Environment | None = outer

    def put(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in this scope.

        Raises BlispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise BlispInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = copy_value(value)

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in the outermost scope."""
        self.root().put(name, value)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`, or an undefined-symbol error."""
        env = self.find(name)
        if env is None:
            return LispError(f"undefined symbol: {name}")
        return copy_value(env.vars[name])

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def copy(self) -> Environment:
        """Copy this frame's bindings; the parent link is shared, not copied."""
        env = Environment(self.outer)
        for k, v in self.vars.items():
            env.vars[k] = copy_value(v)
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.put(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

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
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
