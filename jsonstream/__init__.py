"""Buffered JSON writing with exact number and string formatting, encoders for
optionals and sequences, and struct field-name resolution."""

__version__ = "0.1.0"

__all__ = [
    "bindings",
    "containers",
    "escape",
    "fields",
    "lookup",
    "numbers",
    "stream",
]