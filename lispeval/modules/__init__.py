"""Loading of bundled Lisp source."""
