"""Term base class, numbers, and shape checks shared by the evaluator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from lispeval.types.errors import LispArityError, LispTypeError

if TYPE_CHECKING:
    from lispeval.types.environment import Environment


class Term:
    """A value or a piece of code.

    Subclasses set `type` to the kind name used in error messages and implement
    `eval` and `__str__`.
    """

    __slots__ = ()

    type: str = "term"

    def eval(self, env: Environment) -> Term:
        raise NotImplementedError

    def print(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return str(self)


def format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Number(Term):
    __slots__ = ("value",)

    type = "number"

    def __init__(self, value: int | float):
        self.value = value

    def eval(self, env: Environment) -> Term:
        return self

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return format_number(self.value)


def check_type(term: Term, kind: str) -> None:
    """Raise LispTypeError unless `term` is of kind `kind`."""
    if term.type != kind:
        raise LispTypeError(kind, term.type)


def check_num_args(name: str, expected: int, args: Sequence[Term]) -> None:
    if len(args) != expected:
        raise LispArityError(name, expected, len(args))
