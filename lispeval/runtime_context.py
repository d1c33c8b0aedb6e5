"""Per-evaluator mutable state.

An ExecutionContext carries the diagnostic stack trace, the macro registry, the
call-depth limit and the global environment. The harness activates a context
for the duration of an evaluation; code running underneath reaches it through
get_current_context(). When nothing is active, a lazily created process-wide
default context is used.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator, Optional

from lispeval.config import get_max_depth
from lispeval.types.environment import Environment

if TYPE_CHECKING:
    from lispeval.types.macro_environment import MacroEnvironment


class ExecutionContext:
    __slots__ = ("global_env", "macros", "stack_trace", "max_depth")

    def __init__(
        self,
        global_env: Optional[Environment] = None,
        macros: Optional[MacroEnvironment] = None,
        max_depth: Optional[int] = None,
    ):
        # Lazy imports to avoid circular imports
        if global_env is None:
            from lispeval.builtin.env_builtin import new_global_environment
            global_env = new_global_environment()
        if macros is None:
            from lispeval.types.macro_environment import MacroEnvironment
            macros = MacroEnvironment()
        self.global_env: Environment = global_env
        self.macros: MacroEnvironment = macros
        self.stack_trace: list[str] = []
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def clear_trace(self) -> None:
        self.stack_trace.clear()


_default_context: Optional[ExecutionContext] = None
_current_context: ContextVar[Optional[ExecutionContext]] = ContextVar(
    "lispeval_context", default=None
)


def default_context() -> ExecutionContext:
    """Return the process-wide context, creating it on first use."""
    global _default_context
    if _default_context is None:
        _default_context = ExecutionContext()
    return _default_context


def get_current_context() -> ExecutionContext:
    ctx = _current_context.get()
    return ctx if ctx is not None else default_context()


@contextmanager
def using_context(ctx: ExecutionContext) -> Iterator[ExecutionContext]:
    """Make `ctx` the active context for the enclosed block."""
    token = _current_context.set(ctx)
    try:
        yield ctx
    finally:
        _current_context.reset(token)
