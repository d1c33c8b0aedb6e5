"""Registry of special forms for the evaluator.

Maps reserved names to handler functions `handler(args, env) -> Term`. The
evaluator consults this table by the exact text of a form's head symbol,
before any environment lookup, so these names cannot be rebound as values.
"""

from lispeval.evaluation.special_forms.if_form import if_form, when_form
from lispeval.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form
from lispeval.evaluation.special_forms.let_form import let_form
from lispeval.evaluation.special_forms.progn_form import do_form
from lispeval.evaluation.special_forms.lambda_form import lambda_form
from lispeval.evaluation.special_forms.define_form import define_form
from lispeval.evaluation.special_forms.defmacro_form import defmacro_form
from lispeval.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    "if": if_form,
    "when": when_form,
    "quote": quote_form,
    "quasiquote": quasiquote_form,
    "unquote": unquote_form,
    "let": let_form,
    "do": do_form,
    "lambda": lambda_form,
    "define": define_form,
    "defmacro": defmacro_form,
    "set!": set_form,
}
