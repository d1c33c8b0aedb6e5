"""Application engine for lispeval.

Every call of a Function value, from ordinary application or from macro
expansion, goes through apply() so the active context's stack trace records
the call site while the body runs.
"""

from __future__ import annotations

from lispeval.runtime_context import get_current_context
from lispeval.types.errors import LispRecursionLimitExceeded
from lispeval.types.function import Function
from lispeval.types.term import Term


def apply(fn: Function, args: list[Term], call_form: Term) -> Term:
    """Run `fn` on already-evaluated `args`, tracing `call_form`.

    On normal return the frame is popped. On error it is left in place for the
    execution harness to drain into the backtrace.
    """
    ctx = get_current_context()
    if len(ctx.stack_trace) >= ctx.max_depth:
        raise LispRecursionLimitExceeded(ctx.max_depth)
    ctx.stack_trace.append(call_form.print())
    result = fn.run(args)
    ctx.stack_trace.pop()
    return result
