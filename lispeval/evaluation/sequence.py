from __future__ import annotations

from typing import Sequence

from lispeval.types.environment import Environment
from lispeval.types.nil import Nil
from lispeval.types.term import Term


def eval_sequence(terms: Sequence[Term], env: Environment, start: int = 0) -> Term:
    """Evaluate terms[start:] in order and return the last value (Nil if none)."""
    value: Term = Nil
    for term in terms[start:]:
        value = term.eval(env)
    return value
