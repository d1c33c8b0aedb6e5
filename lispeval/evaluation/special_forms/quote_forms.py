"""Special forms: quote, quasiquote, unquote.

The quasiquote engine tracks a nesting level. Level 0 is ordinary evaluation;
each enclosing quasiquote adds one and each unquote removes one. An unquote
that brings the level back to 0 evaluates its argument; deeper markers are
rebuilt so they stay inert.
"""

from __future__ import annotations

from lispeval.types.cons import Cons, form1, list_to_term, term_to_list
from lispeval.types.environment import Environment
from lispeval.types.errors import LispUnquoteWithoutQuasiquote
from lispeval.types.symbol import Symbol
from lispeval.types.term import Term, check_num_args


def eval_quasi(term: Term, level: int, env: Environment) -> Term:
    if isinstance(term, Cons) and isinstance(term.car, Symbol):
        s = term.car.id
        if s in ("quasiquote", "unquote"):
            args = term_to_list(term.cdr)
            check_num_args(s, 1, args)
            if s == "quasiquote":
                inner = eval_quasi(args[0], level + 1, env)
                return inner if level == 0 else form1("quasiquote", inner)
            if level == 0:
                raise LispUnquoteWithoutQuasiquote()
            if level == 1:
                return args[0].eval(env)
            return form1("unquote", eval_quasi(args[0], level - 1, env))

    if level == 0:
        return term.eval(env)
    if isinstance(term, Cons):
        # Fresh cells: the result never shares structure with the template
        return Cons(eval_quasi(term.car, level, env), eval_quasi(term.cdr, level, env))
    return term


def quote_form(args: list[Term], env: Environment) -> Term:
    check_num_args("quote", 1, args)
    return args[0]


def quasiquote_form(args: list[Term], env: Environment) -> Term:
    check_num_args("quasiquote", 1, args)
    return eval_quasi(form1("quasiquote", args[0]), 0, env)


def unquote_form(args: list[Term], env: Environment) -> Term:
    return eval_quasi(Cons(Symbol("unquote"), list_to_term(args)), 0, env)
