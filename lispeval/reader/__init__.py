"""Reader: source text to terms."""
