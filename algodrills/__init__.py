"""Solutions to classic algorithm exercises, grouped by technique."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "binary_search",
    "linked_list",
    "sliding_window",
    "stacks",
    "two_pointers",
]