"""Special form: let.

Accepts both binding shapes:
    (let (x 1 y 2) body...)        flat name/value pairs
    (let ((x 1) (y 2)) body...)    one two-element list per binding
Every value expression sees only the enclosing environment.
"""

from __future__ import annotations

from lispeval.evaluation.sequence import eval_sequence
from lispeval.types.cons import Cons, term_to_list
from lispeval.types.environment import Environment
from lispeval.types.errors import LispBadBindingsShape, LispTooFewArguments
from lispeval.types.term import Term, check_type


def parse_bindings(bindings_term: Term) -> list[tuple[Term, Term]]:
    """Split a let bindings list into (name, value-expression) pairs."""
    items = term_to_list(bindings_term)
    if items and isinstance(items[0], Cons):
        pairs = []
        for item in items:
            pair = term_to_list(item) if isinstance(item, Cons) else []
            if len(pair) != 2:
                raise LispBadBindingsShape(bindings_term.print())
            pairs.append((pair[0], pair[1]))
        return pairs

    if len(items) % 2 != 0:
        raise LispBadBindingsShape(bindings_term.print())
    return [(items[i], items[i + 1]) for i in range(0, len(items), 2)]


def let_form(args: list[Term], env: Environment) -> Term:
    if not args:
        raise LispTooFewArguments("let")

    bindings: dict[str, Term] = {}
    for name, value_expr in parse_bindings(args[0]):
        check_type(name, "symbol")
        bindings[name.id] = value_expr.eval(env)

    new_env = Environment(outer=env)
    new_env.update(bindings)
    return eval_sequence(args, new_env, 1)
