"""Two-stack integer sorting that emits the sequence of stack operations."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "numbers",
    "output",
    "linkedlist",
    "stacks",
    "moves",
    "sorter",
    "cli",
]