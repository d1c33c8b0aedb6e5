"""Special form: define.

    (define name expr...)          bind the value of the last expr
    (define (name . params) body...)  bind a named closure

Both shapes bind into the global environment (the root of the current chain),
whatever scope the form appears in.
"""

from __future__ import annotations

import logging

from lispeval.evaluation.sequence import eval_sequence
from lispeval.evaluation.special_forms.lambda_form import make_closure
from lispeval.types.environment import Environment
from lispeval.types.errors import LispTooFewArguments
from lispeval.types.symbol import Symbol
from lispeval.types.term import Term, check_type

logger = logging.getLogger(__name__)


def define_form(args: list[Term], env: Environment) -> Term:
    if not args:
        raise LispTooFewArguments("define")

    target = args[0]
    if isinstance(target, Symbol):
        name = target.id
        value = eval_sequence(args, env, 1)
    else:
        check_type(target, "cons")
        check_type(target.car, "symbol")
        name = target.car.id
        value = make_closure(name, target.cdr, args[1:], env)
        logger.debug("%s is %s", name, value.describe())

    env.root().define(name, value)
    logger.debug("defined %s in global environment", name)
    return value
