"""Top-level driver: macro expansion, then evaluation, with backtraces.

Both phases run through run_with_stack_trace(). If a phase fails, the frames
still on the context's stack trace are drained into the error, innermost
call first, and the same error is re-raised to the caller.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from lispeval.runtime_context import ExecutionContext, get_current_context, using_context
from lispeval.types.environment import Environment
from lispeval.types.errors import LispError, LispRecursionLimitExceeded
from lispeval.types.term import Term

logger = logging.getLogger(__name__)

# Typical Python frames used by one nested application
_FRAMES_PER_CALL = 16
# Never raise the interpreter-wide limit past this; deeper runs end in a
# RecursionError, reported as LispRecursionLimitExceeded
RECURSION_LIMIT_CAP = 200_000


def _ensure_recursion_headroom(max_depth: int) -> None:
    needed = min(max_depth * _FRAMES_PER_CALL + 1000, RECURSION_LIMIT_CAP)
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


def _drain_trace(ctx: ExecutionContext, error: LispError) -> None:
    while ctx.stack_trace:
        error.add_frame(ctx.stack_trace.pop())


def run_with_stack_trace(ctx: ExecutionContext, step: Callable[..., Term], *args) -> Term:
    """Run one phase; on failure decorate the error with the pending frames."""
    try:
        result = step(*args)
    except LispError as err:
        _drain_trace(ctx, err)
        logger.debug("evaluation failed: %s", err.message)
        raise
    except RecursionError as exc:
        err = LispRecursionLimitExceeded()
        _drain_trace(ctx, err)
        logger.debug("native recursion limit hit with %d frames", len(err.backtrace))
        raise err from exc
    except Exception:
        ctx.clear_trace()
        raise
    ctx.clear_trace()
    return result


def evaluate(term: Term, env: Environment, context: Optional[ExecutionContext] = None) -> Term:
    """Macro-expand `term` and evaluate the expansion in `env`.

    Uses `context` when given, otherwise the currently active one.
    """
    ctx = context if context is not None else get_current_context()
    _ensure_recursion_headroom(ctx.max_depth)
    with using_context(ctx):
        expanded = run_with_stack_trace(ctx, ctx.macros.macro_expand_all, term)
        return run_with_stack_trace(ctx, expanded.eval, env)
