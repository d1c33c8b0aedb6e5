from __future__ import annotations


class LispError(Exception):
    """Base class for all evaluator errors.

    `backtrace` holds the call-site descriptions collected by the execution
    harness, innermost call first.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message: str = message
        self.backtrace: list[str] = []

    def add_frame(self, description: str) -> None:
        self.backtrace.append(description)

    def __str__(self) -> str:
        lines = [self.message]
        lines.extend(f"in {frame}" for frame in self.backtrace)
        return "\n".join(lines)


class LispUndefinedVariable(LispError):
    """Raised when a symbol has no binding anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(f"undefined variable: {name}")
        self.name = name


class LispTypeError(LispError):
    """Raised when a term is not of the expected kind"""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class LispArityError(LispError):
    """Raised when a form or function gets the wrong number of arguments"""

    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(
            f"wrong number of arguments to {name}: expected {expected}, got {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class LispTooFewArguments(LispError):
    """Raised when a form or variadic function gets fewer arguments than it needs"""

    def __init__(self, name: str):
        super().__init__(f"too few arguments to {name}")
        self.name = name


class LispUnsupportedMacroForm(LispError):
    """Raised for (defmacro name ...), only (defmacro (name ...) ...) is supported"""

    def __init__(self, name: str = ""):
        super().__init__("symbol macros are not supported" + (f": {name}" if name else ""))
        self.name = name


class LispUnquoteWithoutQuasiquote(LispError):
    """Raised when unquote appears outside any quasiquote"""

    def __init__(self):
        super().__init__("unquote without quasiquote")


class LispAlreadyEvaluated(LispError):
    """Raised when a function value is handed back to the evaluator as code"""

    def __init__(self, printed: str):
        super().__init__(f"trying to evaluate {printed} again")


class LispBadBindingsShape(LispError):
    """Raised when a let bindings list is malformed"""

    def __init__(self, printed: str):
        super().__init__(f"bad bindings format: {printed}")


class LispRecursionLimitExceeded(LispError):
    """Raised when nested application exceeds the configured depth"""

    def __init__(self, limit: int | None = None):
        detail = f" ({limit} frames)" if limit is not None else ""
        super().__init__(f"recursion limit exceeded{detail}")
        self.limit = limit


class LispSyntaxError(LispError):
    """Raised by the reader on malformed source text"""
