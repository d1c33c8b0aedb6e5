"""Term model, environments, errors and the macro registry."""
