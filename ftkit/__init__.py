"""Character, string, memory, number, line-reading and printf-style helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "strings",
    "memory",
    "output",
    "linereader",
    "printf_spec",
    "printf",
]