import pytest
from hypothesis import given, strategies as st

from lispeval.types.cons import Cons, form1, list_to_term, term_to_list
from lispeval.types.environment import Environment
from lispeval.types.errors import LispAlreadyEvaluated, LispTypeError, LispUndefinedVariable
from lispeval.types.function import Builtin, Closure
from lispeval.types.nil import Nil
from lispeval.types.symbol import Symbol
from lispeval.types.term import Number, check_num_args, check_type
from lispeval.types.errors import LispArityError


numbers = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6),
    st.floats(allow_nan=False, allow_infinity=False),
).map(Number)


@given(numbers)
def test_number_eval_is_idempotent(n):
    env = Environment()
    assert n.eval(env) is n
    assert n.eval(env).eval(env) == n.eval(env)


def test_nil_eval_is_idempotent():
    env = Environment()
    assert Nil.eval(env) is Nil
    assert Nil.eval(env).eval(env) is Nil


def test_nil_is_falsey_and_prints_nil():
    assert not Nil
    assert Nil.print() == "nil"
    assert Nil.type == "nil"


def test_symbol_lookup_and_undefined():
    env = Environment()
    env.define("x", Number(3))
    assert Symbol("x").eval(env) == Number(3)
    with pytest.raises(LispUndefinedVariable) as exc:
        Symbol("y").eval(env)
    assert exc.value.name == "y"


def test_symbol_equality_is_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != Symbol("abd")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))


@pytest.mark.parametrize(
    "term,expected",
    [
        (Number(3), "3"),
        (Number(2.0), "2"),
        (Number(2.5), "2.5"),
        (Symbol("foo"), "foo"),
        (list_to_term([Symbol("a"), Number(1)]), "(a 1)"),
        (Cons(Symbol("a"), Symbol("b")), "(a . b)"),
        (list_to_term([Symbol("a"), Symbol("b")], Number(3)), "(a b . 3)"),
        (list_to_term([list_to_term([Number(1)]), Nil]), "((1) nil)"),
        (Builtin("+", lambda args: Nil), "<function +>"),
    ],
)
def test_print(term, expected):
    assert term.print() == expected


def test_term_to_list_round_trip():
    items = [Number(1), Symbol("b"), Nil]
    assert term_to_list(list_to_term(items)) == items
    assert term_to_list(Nil) == []


def test_term_to_list_rejects_dotted_list():
    with pytest.raises(LispTypeError) as exc:
        term_to_list(Cons(Number(1), Number(2)))
    assert exc.value.expected == "list"
    assert exc.value.actual == "number"


def test_cons_structural_equality():
    a = list_to_term([Number(1), list_to_term([Symbol("x")])])
    b = list_to_term([Number(1), list_to_term([Symbol("x")])])
    assert a == b
    assert a is not b
    assert a != list_to_term([Number(1)])
    assert Cons(Number(1), Number(2)) != Cons(Number(1), Nil)


def test_form1_builds_two_element_form():
    assert form1("quote", Symbol("x")) == list_to_term([Symbol("quote"), Symbol("x")])


def test_function_cannot_be_evaluated_again():
    fn = Closure("f", [], None, [], Environment())
    with pytest.raises(LispAlreadyEvaluated) as exc:
        fn.eval(Environment())
    assert "<function f>" in str(exc.value)


def test_check_helpers():
    check_type(Symbol("x"), "symbol")
    with pytest.raises(LispTypeError):
        check_type(Number(1), "symbol")
    with pytest.raises(LispArityError) as exc:
        check_num_args("if", 3, [Nil])
    assert (exc.value.name, exc.value.expected, exc.value.actual) == ("if", 3, 1)


def test_closure_describe():
    fn = Closure("f", ["a"], "rest", [Symbol("a")], Environment())
    assert fn.describe() == "(lambda (a . rest) a)"
    variadic = Closure("g", [], "args", [], Environment())
    assert variadic.describe() == "(lambda args)"
