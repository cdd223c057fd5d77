"""Classic recursion, searching, sorting, backtracking and container exercises."""

__version__ = "0.1.0"
__all__ = [
    "recursion",
    "mathematics",
    "searching",
    "sorting",
    "backtracking",
    "containers",
]