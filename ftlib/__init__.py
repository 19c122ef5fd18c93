"""Character, number, memory and string helpers, a linked list, a line reader and a minimal printf."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "memory",
    "search",
    "strings",
    "output",
    "printf",
    "linkedlist",
    "linereader",
]