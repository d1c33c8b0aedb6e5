import pytest

from lispeval.evaluation.special_forms.lambda_form import make_closure
from lispeval.reader.parser import read
from lispeval.runtime_context import using_context
from lispeval.types.macro_environment import MacroEnvironment


def parsed(source):
    return read(source)[0]


@pytest.fixture
def macro_env(context):
    """The context's macro table, with `swap` and `wrap` transformers."""
    macros = context.macros
    env = context.global_env
    # (swap a b) -> (b a)
    macros.define_macro("swap", make_closure("swap", parsed("(a b)"), [parsed("(list b a)")], env))
    # (wrap x) -> (list x)
    macros.define_macro("wrap", make_closure("wrap", parsed("(x)"), [parsed("`(list ,x)")], env))
    # (twice-wrap x) -> (wrap (wrap x))
    macros.define_macro(
        "twice-wrap", make_closure("twice-wrap", parsed("(x)"), [parsed("`(wrap (wrap ,x))")], env)
    )
    with using_context(context):
        yield macros


def test_non_macro_form_unchanged(macro_env):
    form = parsed("(+ 1 2)")
    assert macro_env.expand_1(form) is form
    assert macro_env.macro_expand_all(form) == form


def test_expand_1_runs_transformer_once(macro_env):
    assert macro_env.expand_1(parsed("(swap 1 f)")) == parsed("(f 1)")
    assert macro_env.expand_1(parsed("(twice-wrap y)")) == parsed("(wrap (wrap y))")


def test_macro_expand_head_reaches_fixed_point(macro_env):
    # Only the head is expanded; the nested (wrap 1) stays as written
    assert macro_env.macro_expand_head(parsed("(swap (wrap 1) wrap)")) == parsed("(list (wrap 1))")


def test_macro_expand_all_recurses_into_subforms(macro_env):
    result = macro_env.macro_expand_all(parsed("(do (twice-wrap 1) (f (wrap 2)))"))
    assert result == parsed("(do (list (list 1)) (f (list 2)))")


def test_macro_expand_all_handles_dotted_tail(macro_env):
    result = macro_env.macro_expand_all(parsed("(a (wrap 1) . b)"))
    assert result == parsed("(a (list 1) . b)")


def test_quote_templates_not_expanded(macro_env):
    quoted = parsed("'(wrap (twice-wrap 1))")
    assert macro_env.macro_expand_all(quoted) is quoted


def test_expansion_is_idempotent(macro_env):
    once = macro_env.macro_expand_all(parsed("(f (twice-wrap 3) '(wrap 4))"))
    twice = macro_env.macro_expand_all(once)
    assert once == twice


def test_fresh_registry_is_empty():
    macros = MacroEnvironment()
    assert not macros.is_macro("anything")
    form = parsed("(anything 1)")
    assert macros.macro_expand_all(form) == form


@pytest.mark.parametrize(
    "source,expected",
    [
        # Only code that is unquoted back to level 0 is expanded
        ("`(wrap ,(wrap 1))", "`(wrap ,(list 1))"),
        ("`(a . ,(wrap 1))", "`(a . ,(list 1))"),
        ("`(a `(b ,(wrap 1)))", "`(a `(b ,(wrap 1)))"),
        ("`(a `(b ,,(wrap 1)))", "`(a `(b ,,(list 1)))"),
        ("`(a '(b ,(wrap 1)))", "`(a '(b ,(list 1)))"),
    ],
)
def test_quasiquote_templates_expand_by_level(macro_env, source, expected):
    assert macro_env.macro_expand_all(parsed(source)) == parsed(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(lambda (wrap) (wrap 1))", "(lambda (wrap) (list 1))"),
        ("(lambda (swap . wrap) wrap)", "(lambda (swap . wrap) wrap)"),
        ("(define (wrap x) (wrap x))", "(define (wrap x) (list x))"),
        ("(define wrap (wrap 1))", "(define wrap (list 1))"),
        ("(defmacro (wrap x) (wrap x))", "(defmacro (wrap x) (list x))"),
        ("(let ((wrap 1)) wrap)", "(let ((wrap 1)) wrap)"),
        ("(let ((a (wrap 1)) (swap 2)) (wrap a))", "(let ((a (list 1)) (swap 2)) (list a))"),
        ("(let (wrap (wrap 2)) wrap)", "(let (wrap (list 2)) wrap)"),
    ],
)
def test_binding_positions_are_not_expanded(macro_env, source, expected):
    assert macro_env.macro_expand_all(parsed(source)) == parsed(expected)
