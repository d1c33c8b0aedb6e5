"""Builtin function library installed into global environments."""
