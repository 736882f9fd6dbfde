"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graphs",
    "linked_list",
    "ordering",
    "rpn",
    "searching",
    "strings",
    "structures",
    "tree",
]