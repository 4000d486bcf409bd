"""Compact implementations of classic algorithms and data structures."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bplus_tree",
    "conversions",
    "graphs",
    "linked_lists",
    "strings",
    "trees",
]