"""Foundation layer: configuration, core tool abstractions, errors, registry."""
