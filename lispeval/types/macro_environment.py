from __future__ import annotations

import logging
from typing import Callable

from lispeval.types.cons import Cons, form1, term_to_list
from lispeval.types.function import Closure
from lispeval.types.nil import Nil
from lispeval.types.symbol import Symbol
from lispeval.types.term import Term

logger = logging.getLogger(__name__)

# Forms whose first argument names things and is kept as written
_BINDING_HEADS = ("lambda", "define", "defmacro")


class MacroEnvironment:
    """
    Macro registry mapping macro names to Closure transformers, plus the
    expansion pass run before evaluation.

    Features:
    - Head-position macro expansion to a fixed point
    - Recursive expansion of nested forms, including dotted tails
    - quote templates left untouched; quasiquote templates walked by level
    - parameter lists and let binding names never treated as calls
    """

    def __init__(self):
        self.macros: dict[str, Closure] = {}

    def define_macro(self, name: str, transformer: Closure) -> None:
        self.macros[name] = transformer
        logger.debug("registered macro %s", name)

    def is_macro(self, name: str) -> bool:
        return name in self.macros

    # Single-step head expansion
    def expand_1(self, form: Term) -> Term:
        """Expand only the head-position macro if present.

        The transformer runs on the raw, unevaluated argument terms; the
        expansion it returns is not evaluated here.
        """
        if isinstance(form, Cons) and isinstance(form.car, Symbol):
            transformer = self.macros.get(form.car.id)
            if transformer is not None:
                # Lazy import to avoid circular imports
                from lispeval.evaluation.apply import apply
                return apply(transformer, term_to_list(form.cdr), form)
        return form  # Not a macro call, unchanged

    # Fixed-point head expansion
    def macro_expand_head(self, form: Term) -> Term:
        cur = form
        while True:
            nxt = self.expand_1(cur)
            if nxt is cur:
                return cur
            cur = nxt

    # Full expansion
    def macro_expand_all(self, form: Term) -> Term:
        expanded = self.macro_expand_head(form)
        if not isinstance(expanded, Cons):
            return expanded

        head = expanded.car
        if isinstance(head, Symbol):
            if head.id == "quote":
                return expanded
            if head.id == "quasiquote":
                return self._expand_template(expanded, 0)
            if head.id in _BINDING_HEADS:
                return self._expand_after_first(expanded)
            if head.id == "let":
                return self._expand_let(expanded)
        return _map_chain(expanded, lambda _, item: self.macro_expand_all(item))

    def _expand_after_first(self, form: Cons) -> Term:
        # (head first . rest): first is a name or parameter list
        if not isinstance(form.cdr, Cons):
            return form
        first = form.cdr
        rest = _map_chain(first.cdr, lambda _, item: self.macro_expand_all(item))
        return Cons(form.car, Cons(first.car, rest))

    def _expand_let(self, form: Cons) -> Term:
        if not isinstance(form.cdr, Cons):
            return form
        bindings = form.cdr.car
        if isinstance(bindings, Cons) and isinstance(bindings.car, Cons):
            # ((name value) ...)
            bindings = _map_chain(bindings, lambda _, pair: self._expand_binding_pair(pair))
        else:
            # (name value ...): values sit at odd positions
            bindings = _map_chain(
                bindings, lambda i, item: self.macro_expand_all(item) if i % 2 else item
            )
        body = _map_chain(form.cdr.cdr, lambda _, item: self.macro_expand_all(item))
        return Cons(form.car, Cons(bindings, body))

    def _expand_binding_pair(self, pair: Term) -> Term:
        if not isinstance(pair, Cons):
            return pair
        return Cons(pair.car, _map_chain(pair.cdr, lambda _, item: self.macro_expand_all(item)))

    def _expand_template(self, term: Term, level: int) -> Term:
        """Walk a quasiquote template, expanding only what will be evaluated.

        Levels are counted as the quasiquote evaluator counts them: the
        argument of an unquote that returns to level 0 is ordinary code.
        """
        if isinstance(term, Cons) and isinstance(term.car, Symbol):
            marker = term.car.id
            if (
                marker in ("quasiquote", "unquote")
                and isinstance(term.cdr, Cons)
                and term.cdr.cdr is Nil
            ):
                arg = term.cdr.car
                if marker == "quasiquote":
                    return form1("quasiquote", self._expand_template(arg, level + 1))
                if level == 1:
                    return form1("unquote", self.macro_expand_all(arg))
                if level > 1:
                    return form1("unquote", self._expand_template(arg, level - 1))
        if isinstance(term, Cons):
            return Cons(self._expand_template(term.car, level), self._expand_template(term.cdr, level))
        return term


def _map_chain(term: Term, fn: Callable[[int, Term], Term]) -> Term:
    """Rebuild a cons chain applying fn(index, item) to each element.

    A dotted tail atom, or anything that is not a Cons, is kept as is.
    """
    items: list[Term] = []
    while isinstance(term, Cons):
        items.append(fn(len(items), term.car))
        term = term.cdr
    result = term
    for item in reversed(items):
        result = Cons(item, result)
    return result
