from lispeval.types.environment import Environment
from lispeval.types.term import Term, check_num_args, check_type


def set_form(args: list[Term], env: Environment) -> Term:
    check_num_args("set!", 2, args)
    var_sym, val_expr = args
    check_type(var_sym, "symbol")
    value = val_expr.eval(env)
    env.set(var_sym.id, value)
    return value
