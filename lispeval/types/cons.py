"""Cons cells and conversions between Lisp lists and Python lists."""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from lispeval.types.errors import LispTypeError
from lispeval.types.nil import Nil
from lispeval.types.symbol import Symbol
from lispeval.types.term import Term


class Cons(Term):
    """A pair; chains of pairs ending in Nil are proper lists."""

    __slots__ = ("car", "cdr")

    type = "cons"

    def __init__(self, car: Term, cdr: Term):
        self.car: Term = car
        self.cdr: Term = cdr

    def eval(self, env) -> Term:
        # Lazy import to avoid circular imports
        from lispeval.evaluation.evaluator import eval_cons
        return eval_cons(self, env)

    def __eq__(self, other) -> bool:
        a, b = self, other
        while isinstance(a, Cons):
            if not isinstance(b, Cons) or a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a == b

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(str(self.car))
            term = self.cdr
            while isinstance(term, Cons):
                buffer.write(" ")
                buffer.write(str(term.car))
                term = term.cdr
            if term is not Nil:
                buffer.write(" . ")
                buffer.write(str(term))
            buffer.write(")")
            return buffer.getvalue()


def term_to_list(term: Term) -> list[Term]:
    """Return the elements of a proper list; raise LispTypeError otherwise."""
    items: list[Term] = []
    while isinstance(term, Cons):
        items.append(term.car)
        term = term.cdr
    if term is not Nil:
        raise LispTypeError("list", term.type)
    return items


def list_to_term(items: Iterable[Term], tail: Term = Nil) -> Term:
    result = tail
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def form1(name: str, arg: Term) -> Term:
    """Build the two-element form (name arg)."""
    return Cons(Symbol(name), Cons(arg, Nil))
