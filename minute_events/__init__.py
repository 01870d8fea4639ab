"""Minute-level event counting and count-endpoint polling."""

__version__ = "0.1.0"
