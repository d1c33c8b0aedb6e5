from __future__ import annotations

from typing import List, Optional

from lispeval.types.cons import list_to_term
from lispeval.types.environment import Environment
from lispeval.types.errors import LispArityError, LispTooFewArguments
from lispeval.types.term import Term


def bind_arguments(
    name: str,
    params: List[str],
    rest: Optional[str],
    supplied_args: List[Term],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding.

    Supports:
    - Positional required parameters (exact count when there is no rest parameter)
    - A rest parameter capturing the remaining supplied args as a proper list

    Returns a new Environment whose outer is the closure_env, populated with
    the bindings for evaluating the callee body.
    """
    if rest is None:
        if len(supplied_args) != len(params):
            raise LispArityError(name, len(params), len(supplied_args))
    elif len(supplied_args) < len(params):
        raise LispTooFewArguments(name)

    local_env = Environment(outer=closure_env)
    for param, value in zip(params, supplied_args):
        local_env.define(param, value)
    if rest is not None:
        local_env.define(rest, list_to_term(supplied_args[len(params):]))
    return local_env
