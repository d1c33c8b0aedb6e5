from __future__ import annotations

import logging
from typing import Literal, Optional

from lispeval.evaluation.execution import evaluate
from lispeval.reader.parser import lex, TokenStream
from lispeval.runtime_context import ExecutionContext
from lispeval.types.environment import Environment
from lispeval.types.nil import Nil
from lispeval.types.term import Term

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates lispeval source text.
    Owns one ExecutionContext, so its global environment, macros and stack
    trace are independent of every other Interpreter.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        max_depth: Optional[int] = None,
    ):
        self.context = ExecutionContext(max_depth=max_depth)
        self.env: Environment = self.context.global_env

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from lispeval.modules.prelude_loader import load_prelude
            try:
                load_prelude(self)
            except FileNotFoundError as exc:
                # Be permissive: no prelude found -> proceed
                logger.warning("%s", exc)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_term(self, term: Term, env: Optional[Environment] = None) -> Term:
        """Expand and evaluate one already-read term."""
        return evaluate(term, env if env is not None else self.env, self.context)

    def eval_prelude(self, code: str) -> None:
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            self.eval_term(expr)

    def eval(self, code: str) -> Term | list[Term]:
        """Evaluate every term in `code`.

        Returns Nil for empty input, the value for a single term, or the list
        of values for several.
        """
        stream = TokenStream(lex(code))
        results: list[Term] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_term(expr))
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
