"""Foundation layer: errors, configuration, tool base classes, registry and test doubles."""
