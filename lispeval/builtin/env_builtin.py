"""Built-in functions for the lispeval global environment.

This module defines core arithmetic, comparison, list processing and
predicates, and the registration helper that installs them as Builtin
function values.
"""
from __future__ import annotations

from functools import reduce
import operator
from typing import Callable

from lispeval.types.cons import Cons, list_to_term
from lispeval.types.environment import Environment
from lispeval.types.errors import LispError, LispTooFewArguments, LispTypeError
from lispeval.types.function import Builtin, Function
from lispeval.types.nil import Nil
from lispeval.types.symbol import Symbol
from lispeval.types.term import Number, Term, check_num_args

T = Symbol("t")


def _truth(flag: bool) -> Term:
    return T if flag else Nil


def _numbers(args: list[Term]) -> list[int | float]:
    values = []
    for arg in args:
        if not isinstance(arg, Number):
            raise LispTypeError("number", arg.type)
        values.append(arg.value)
    return values


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Term]) -> Term:
    """Return the numeric sum of all arguments (0 for none)."""
    return Number(sum(_numbers(args)))


def sub(args: list[Term]) -> Term:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise LispTooFewArguments("-")
    values = _numbers(args)
    if len(values) == 1:
        return Number(-values[0])
    return Number(reduce(operator.sub, values))


def mul(args: list[Term]) -> Term:
    """Return the product of all arguments (1 for none)."""
    return Number(reduce(operator.mul, _numbers(args), 1))


def div(args: list[Term]) -> Term:
    """Divide the first argument by the rest; integer results stay integers."""
    if not args:
        raise LispTooFewArguments("/")
    values = _numbers(args)
    if len(values) == 1:
        values = [1] + values
    result = values[0]
    for v in values[1:]:
        if v == 0:
            raise LispError("/: division by zero")
        result = result / v
    if isinstance(result, float) and result.is_integer():
        result = int(result)
    return Number(result)


def _comparison(name: str, op: Callable[[int | float, int | float], bool]) -> Callable[[list[Term]], Term]:
    def compare(args: list[Term]) -> Term:
        if not args:
            raise LispTooFewArguments(name)
        values = _numbers(args)
        return _truth(all(op(a, b) for a, b in zip(values, values[1:])))
    compare.__doc__ = f"Return t if every adjacent pair of numbers satisfies {name}."
    return compare


# -------------------------------
# Lists
# -------------------------------
def cons(args: list[Term]) -> Term:
    check_num_args("cons", 2, args)
    return Cons(args[0], args[1])


def car(args: list[Term]) -> Term:
    """Head of a pair; (car nil) is nil."""
    check_num_args("car", 1, args)
    if args[0] is Nil:
        return Nil
    if not isinstance(args[0], Cons):
        raise LispTypeError("cons", args[0].type)
    return args[0].car


def cdr(args: list[Term]) -> Term:
    """Tail of a pair; (cdr nil) is nil."""
    check_num_args("cdr", 1, args)
    if args[0] is Nil:
        return Nil
    if not isinstance(args[0], Cons):
        raise LispTypeError("cons", args[0].type)
    return args[0].cdr


def make_list(args: list[Term]) -> Term:
    return list_to_term(args)


# -------------------------------
# Predicates
# -------------------------------
def _kind_predicate(name: str, kind: str) -> Callable[[list[Term]], Term]:
    def predicate(args: list[Term]) -> Term:
        check_num_args(name, 1, args)
        return _truth(args[0].type == kind)
    return predicate


def is_eq(args: list[Term]) -> Term:
    """Identity for pairs and functions, value equality for atoms."""
    check_num_args("eq?", 2, args)
    a, b = args
    if isinstance(a, (Cons, Function)) or isinstance(b, (Cons, Function)):
        return _truth(a is b)
    return _truth(a == b)


def is_equal(args: list[Term]) -> Term:
    """Structural equality."""
    check_num_args("equal?", 2, args)
    return _truth(args[0] == args[1])


def lisp_not(args: list[Term]) -> Term:
    check_num_args("not", 1, args)
    return _truth(args[0] is Nil)


BUILTINS: dict[str, Callable[[list[Term]], Term]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": _comparison("=", operator.eq),
    "<": _comparison("<", operator.lt),
    ">": _comparison(">", operator.gt),
    "<=": _comparison("<=", operator.le),
    ">=": _comparison(">=", operator.ge),
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": make_list,
    "null?": _kind_predicate("null?", "nil"),
    "pair?": _kind_predicate("pair?", "cons"),
    "symbol?": _kind_predicate("symbol?", "symbol"),
    "number?": _kind_predicate("number?", "number"),
    "function?": _kind_predicate("function?", "function"),
    "eq?": is_eq,
    "equal?": is_equal,
    "not": lisp_not,
}


def register(env: Environment) -> None:
    """Install the builtin functions and the constant t into `env`."""
    env.define("t", T)
    for name, routine in BUILTINS.items():
        env.define(name, Builtin(name, routine))


def new_global_environment() -> Environment:
    """Return a fresh root environment populated with the builtins."""
    env = Environment()
    register(env)
    return env
