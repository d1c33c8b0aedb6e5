"""Special form: defmacro.

Registers a closure as a macro transformer in the active context's macro
registry. Only the function shape (defmacro (name . params) body...) exists.
"""

from __future__ import annotations

from lispeval.evaluation.special_forms.lambda_form import make_closure
from lispeval.runtime_context import get_current_context
from lispeval.types.environment import Environment
from lispeval.types.errors import LispTooFewArguments, LispUnsupportedMacroForm
from lispeval.types.symbol import Symbol
from lispeval.types.term import Term, check_type


def defmacro_form(args: list[Term], env: Environment) -> Term:
    if not args:
        raise LispTooFewArguments("defmacro")

    target = args[0]
    if isinstance(target, Symbol):
        raise LispUnsupportedMacroForm(target.id)
    check_type(target, "cons")
    check_type(target.car, "symbol")

    name = target.car.id
    transformer = make_closure(name, target.cdr, args[1:], env)
    get_current_context().macros.define_macro(name, transformer)
    return Symbol(name)
