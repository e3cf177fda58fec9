"""Sort distinct integers with two stacks and a fixed set of stack operations."""

__version__ = "1.0.0"

__all__ = [
    "chars",
    "cli",
    "linkedlist",
    "memory",
    "output",
    "parsing",
    "sort",
    "stacks",
    "strings",
    "transform",
]