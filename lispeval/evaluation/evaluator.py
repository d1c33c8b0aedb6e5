"""Core evaluator for Cons terms.

Numbers, Nil, Symbols and Functions evaluate themselves through Term.eval; a
Cons is either a special form, recognised by the exact text of its head symbol
before any environment lookup, or an ordinary function application.
"""

from __future__ import annotations

from lispeval.evaluation.apply import apply
from lispeval.evaluation.special_forms import SPECIAL_FORMS
from lispeval.types.cons import Cons, term_to_list
from lispeval.types.environment import Environment
from lispeval.types.symbol import Symbol
from lispeval.types.term import Term, check_type


def eval_cons(form: Cons, env: Environment) -> Term:
    args = term_to_list(form.cdr)

    # --- Special forms handling ---
    head = form.car
    if isinstance(head, Symbol):
        handler = SPECIAL_FORMS.get(head.id)
        if handler is not None:
            return handler(args, env)

    # --- Ordinary function application ---
    fn = head.eval(env)
    check_type(fn, "function")
    values = [arg.eval(env) for arg in args]
    return apply(fn, values, form)
