from __future__ import annotations

from typing import Optional

from lispeval.types.cons import Cons
from lispeval.types.environment import Environment
from lispeval.types.errors import LispTooFewArguments
from lispeval.types.function import Closure
from lispeval.types.symbol import Symbol
from lispeval.types.term import Term, check_type


def parse_params(params_term: Term) -> tuple[list[str], Optional[str]]:
    """Return (required parameter names, rest parameter name or None).

    (a b)      -> ["a", "b"], None
    (a . rest) -> ["a"], "rest"
    args       -> [], "args"
    """
    params: list[str] = []
    while isinstance(params_term, Cons):
        check_type(params_term.car, "symbol")
        params.append(params_term.car.id)
        params_term = params_term.cdr

    if isinstance(params_term, Symbol):
        return params, params_term.id
    check_type(params_term, "nil")
    return params, None


def make_closure(name: str, params_term: Term, body: list[Term], env: Environment) -> Closure:
    params, rest = parse_params(params_term)
    return Closure(name, params, rest, body, env)


def lambda_form(args: list[Term], env: Environment) -> Term:
    # (lambda params body...), an empty body makes the function return nil.
    if not args:
        raise LispTooFewArguments("lambda")
    return make_closure("(lambda)", args[0], args[1:], env)
