from .text import format, load, parse, save

__all__ = [
    "parse",
    "format",
    "load",
    "save",
]
