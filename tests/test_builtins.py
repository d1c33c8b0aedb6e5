import pytest

from lispeval.builtin.env_builtin import new_global_environment
from lispeval.types.errors import LispArityError, LispError, LispTooFewArguments, LispTypeError
from lispeval.types.function import Builtin
from lispeval.types.nil import Nil
from lispeval.types.symbol import Symbol
from lispeval.types.term import Number

T = Symbol("t")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", Number(0)),
        ("(+ 1 2 3)", Number(6)),
        ("(- 5)", Number(-5)),
        ("(- 10 1 2)", Number(7)),
        ("(*)", Number(1)),
        ("(* 2 3 4)", Number(24)),
        ("(/ 8 2)", Number(4)),
        ("(/ 1 2)", Number(0.5)),
        ("(/ 4)", Number(0.25)),
        ("(= 1 1 1)", T),
        ("(= 1 2)", Nil),
        ("(< 1 2 3)", T),
        ("(< 1 3 2)", Nil),
        ("(>= 3 3 1)", T),
        ("(car '(1 2))", Number(1)),
        ("(cdr '(1))", Nil),
        ("(car nil)", Nil),
        ("(null? nil)", T),
        ("(null? '(1))", Nil),
        ("(pair? '(1))", T),
        ("(symbol? 'a)", T),
        ("(number? 1)", T),
        ("(function? car)", T),
        ("(function? 'car)", Nil),
        ("(eq? 'a 'a)", T),
        ("(eq? '(1) '(1))", Nil),
        ("(equal? '(1 (2)) '(1 (2)))", T),
        ("(not nil)", T),
        ("(not 0)", Nil),
        ("t", T),
    ],
)
def test_builtin_results(run, source, expected):
    assert run(source) == expected


def test_cons_and_list(run):
    assert run("(cons 1 2)").print() == "(1 . 2)"
    assert run("(list 1 (list 2) 3)").print() == "(1 (2) 3)"
    assert run("(list)") is Nil


def test_type_errors(run):
    with pytest.raises(LispTypeError):
        run("(+ 1 'a)")
    with pytest.raises(LispTypeError):
        run("(car 5)")
    with pytest.raises(LispTypeError):
        run("(< 1 nil)")


def test_count_errors(run):
    with pytest.raises(LispArityError):
        run("(cons 1)")
    with pytest.raises(LispTooFewArguments):
        run("(-)")
    with pytest.raises(LispTooFewArguments):
        run("(<)")


def test_division_by_zero(run):
    with pytest.raises(LispError, match="division by zero"):
        run("(/ 1 0)")


def test_python_exceptions_become_lisp_errors():
    def explode(args):
        return 1 / 0

    with pytest.raises(LispError, match="division by zero"):
        Builtin("explode", explode).run([])


def test_global_environments_are_independent():
    a = new_global_environment()
    b = new_global_environment()
    a.define("only-here", Number(1))
    assert "only-here" not in b.vars
    assert a.lookup("car") is not b.lookup("car")


def test_python_type_errors_become_plain_lisp_errors():
    def bad_operand(args):
        return 1 + "x"

    with pytest.raises(LispError, match="invalid operand to bad") as exc:
        Builtin("bad", bad_operand).run([])
    assert not isinstance(exc.value, LispTypeError)
    assert isinstance(exc.value.__cause__, TypeError)
