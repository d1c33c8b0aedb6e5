"""Runtime environment for lispeval.

The Environment stores bindings of names to evaluated terms and supports nested
scopes via an `outer` link. Frames are shared by reference: a closure keeps its
defining frame (and therefore every ancestor) alive for as long as it exists.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispeval.types.errors import LispUndefinedVariable, LispTypeError
from lispeval.types.term import Term


class Environment:
    """Hierarchical mapping from names to terms."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Term] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Term) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding.

        Raises LispTypeError if `name` is not a string.
        """
        if not isinstance(name, str):
            raise LispTypeError("name", type(name).__name__)
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: str, value: Term) -> None:
        """Overwrite the nearest existing binding for `name`.

        Raises LispUndefinedVariable if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LispUndefinedVariable(name)
        env.vars[name] = value

    def lookup(self, name: str) -> Term:
        """Look up the value bound to `name`, innermost frame first.

        Raises LispUndefinedVariable if not found.
        """
        env = self.find(name)
        if env is None:
            raise LispUndefinedVariable(name)
        return env.vars[name]

    def root(self) -> Environment:
        """Return the topmost (global) environment of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[str, Term]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
