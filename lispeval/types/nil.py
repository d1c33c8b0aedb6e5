from __future__ import annotations

from lispeval.types.term import Term


class NilType(Term):
    __slots__ = ()

    type = "nil"

    def eval(self, env) -> Term:
        return self

    def __str__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(None)


Nil = NilType()
