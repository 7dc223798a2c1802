"""fluentgen: fluent validator generation from JSON rule definitions."""

__version__ = "0.1.0"
