"""A printf-style formatter with its own flag, width and precision rules, plus helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "core", "integers", "lines", "modifiers", "numconv", "padding", "state", "strings"]