"""Solutions to classic algorithm and data-structure exercises, one module per topic."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "dynamic",
    "heaps",
    "linkedlist",
    "numbers",
    "searching",
    "stacks",
    "strings",
    "trees",
    "word_search",
]