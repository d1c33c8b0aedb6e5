"""Function values: native builtins and user-defined closures."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Optional

from lispeval.evaluation.sequence import eval_sequence
from lispeval.types.bind import bind_arguments
from lispeval.types.environment import Environment
from lispeval.types.errors import LispAlreadyEvaluated, LispError
from lispeval.types.term import Term


class Function(Term):
    """A callable term. Terminal: evaluating it again is an error."""

    __slots__ = ("name",)

    type = "function"

    def __init__(self, name: str):
        self.name = name

    def run(self, args: list[Term]) -> Term:
        raise NotImplementedError

    def eval(self, env) -> Term:
        raise LispAlreadyEvaluated(self.print())

    def __str__(self) -> str:
        return f"<function {self.name}>"


class Builtin(Function):
    """A function implemented by a Python routine taking the evaluated args."""

    __slots__ = ("routine",)

    def __init__(self, name: str, routine: Callable[[list[Term]], Term]):
        super().__init__(name)
        self.routine = routine

    def run(self, args: list[Term]) -> Term:
        try:
            return self.routine(args)
        except LispError:
            raise
        except ZeroDivisionError as exc:
            raise LispError(f"{self.name}: division by zero") from exc
        except ArithmeticError as exc:
            raise LispError(f"{self.name}: {exc}") from exc
        except TypeError as exc:
            raise LispError(f"invalid operand to {self.name}: {exc}") from exc


class Closure(Function):
    """A user-defined function with formal parameters, body, and closure env."""

    __slots__ = ("params", "rest", "body", "env")

    def __init__(
        self,
        name: str,
        params: list[str],
        rest: Optional[str],
        body: list[Term],
        env: Environment,
    ):
        super().__init__(name)
        self.params: list[str] = params
        self.rest: Optional[str] = rest
        self.body: list[Term] = body
        self.env: Environment = env

    def run(self, args: list[Term]) -> Term:
        call_env = bind_arguments(self.name, self.params, self.rest, args, self.env)
        return eval_sequence(self.body, call_env)

    def describe(self) -> str:
        """Lisp-style lambda text, for debugging."""
        with StringIO() as buffer:
            buffer.write("(lambda ")
            if not self.params and self.rest is not None:
                buffer.write(self.rest)
            else:
                buffer.write("(")
                buffer.write(" ".join(self.params))
                if self.rest is not None:
                    buffer.write(f" . {self.rest}")
                buffer.write(")")
            for term in self.body:
                buffer.write(" ")
                buffer.write(str(term))
            buffer.write(")")
            return buffer.getvalue()
