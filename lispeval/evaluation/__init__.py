"""Evaluator core: term dispatch, application, special forms and the harness."""
