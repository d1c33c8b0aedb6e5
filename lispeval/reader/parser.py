"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Terms:

    - nil, () -> Nil
    - lists -> chains of Cons ending in Nil
    - dotted lists (a b . c) -> chains of Cons ending in c
    - integers, floats -> Number
    - everything else -> Symbol
    - 'x `x ,x -> (quote x) (quasiquote x) (unquote x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispeval.types.cons import Cons, list_to_term
from lispeval.types.errors import LispSyntaxError
from lispeval.types.nil import Nil
from lispeval.types.symbol import Symbol
from lispeval.types.term import Number, Term


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>[\'`])"  # ' and `
    r"|(?P<unquote>,)"  # ,
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s()\'`,;]+)"  # fallback: atoms
    r")",
    re.DOTALL,
)

QUOTE_FORMS: dict[str, str] = {
    "'": "quote",
    "`": "quasiquote",
    ",": "unquote",
}

INT_RE = re.compile(r"[+-]?\d+$")
FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples. Comments are skipped."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                if nm != "comment":
                    yield nm, m.group(nm)
                break


def parse_atom(text: str) -> Term:
    # Special case for nil
    if text.lower() == "nil":
        return Nil
    # Numbers
    if INT_RE.match(text):
        return Number(int(text))
    if FLOAT_RE.match(text):
        return Number(float(text))
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Term]:
        """Return the next complete term, or None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val)

        # Quote forms
        if tok_type in ("quote", "unquote"):
            expr = self.parse_expr()
            if expr is None:
                raise LispSyntaxError(f"Expected expression after {tok_val!r}")
            return Cons(Symbol(QUOTE_FORMS[tok_val]), Cons(expr, Nil))

        if tok_type == "lparen":
            return self.parse_list()

        raise LispSyntaxError(f"Unexpected {tok_val!r}")

    def parse_list(self) -> Term:
        items: list[Term] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise LispSyntaxError("Unexpected end of input inside list")
            if tok_type == "rparen":
                self.advance()
                return list_to_term(items)
            if tok_type == "symbol" and tok_val == ".":
                self.advance()
                if not items:
                    raise LispSyntaxError("Dotted pair needs a head")
                tail = self.parse_expr()
                if tail is None:
                    raise LispSyntaxError("Unexpected end of input after '.'")
                tok_type, tok_val = self.advance()
                if tok_type != "rparen":
                    raise LispSyntaxError("Expected ')' after dotted tail")
                return list_to_term(items, tail)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Term]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> list[Term]:
    """Read every term in `source`."""
    return list(TokenStream(lex(source)).parse_all())
