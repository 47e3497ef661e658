"""Lazy iterator adaptors: chunking, grouping maps, k-way merge, intersperse and more."""

__version__ = "0.1.0"

__all__ = [
    "chunking",
    "free",
    "group_map",
    "grouping_map",
    "intersperse",
    "k_smallest",
    "kmerge",
    "lazy_buffer",
]