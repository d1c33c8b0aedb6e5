from lispeval.evaluation.sequence import eval_sequence
from lispeval.types.environment import Environment
from lispeval.types.term import Term


def do_form(args: list[Term], env: Environment) -> Term:
    return eval_sequence(args, env)
