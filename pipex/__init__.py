"""Run two commands joined by a pipe between an input file and an output file,
with small string, number, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "linereader",
    "memory",
    "numbers",
    "output",
    "pipeline",
    "printf",
    "strings",
]