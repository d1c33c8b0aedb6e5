# Core data model for lispeval.
# Code and data share one representation: every value is a Term (Number, Symbol,
# Nil, Cons or Function) from lispeval.types. Lists are chains of Cons cells
# terminated by Nil; dotted lists end in any other non-Cons term.
#
# Public entry points:
# - lispeval.evaluation.execution.evaluate: expand then evaluate one term.
# - lispeval.builtin.env_builtin.new_global_environment: fresh root environment.
# - lispeval.interpreter.Interpreter: read/evaluate source text.

__version__ = "0.1.0"
