from __future__ import annotations
import sys


class Symbol:
    """An identifier; evaluating one looks its name up in the environment.

    Names are interned, so equality and hashing stay cheap for the
    environment lookups done on every evaluation.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise ValueError(f"symbol name must be a non-empty string, got {name!r}")
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
