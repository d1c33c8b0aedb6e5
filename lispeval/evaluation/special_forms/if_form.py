from lispeval.evaluation.sequence import eval_sequence
from lispeval.types.environment import Environment
from lispeval.types.errors import LispTooFewArguments
from lispeval.types.nil import Nil
from lispeval.types.term import Term, check_num_args


def if_form(args: list[Term], env: Environment) -> Term:
    check_num_args("if", 3, args)
    # Lisp truthiness: anything not Nil is true
    if args[0].eval(env) is Nil:
        return args[2].eval(env)
    return args[1].eval(env)


def when_form(args: list[Term], env: Environment) -> Term:
    if not args:
        raise LispTooFewArguments("when")
    if args[0].eval(env) is Nil:
        return Nil
    return eval_sequence(args, env, 1)
