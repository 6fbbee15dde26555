"""Fractal viewer navigation, XPM parsing and small text utilities."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "ctype",
    "lines",
    "lists",
    "memory",
    "numbers",
    "output",
    "search",
    "strings",
    "view",
    "words",
    "xpm",
]