from __future__ import annotations
import sys

from lispeval.types.term import Term


class Symbol(Term):
    __slots__ = ("id",)

    type = "symbol"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def eval(self, env) -> Term:
        return env.lookup(self.id)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
