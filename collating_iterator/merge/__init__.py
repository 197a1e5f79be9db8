"""Merge module - Tools for merging multiple sorted text files."""

from .keys import field_key, get_key, numeric_key, surt_key
from .merge_sorted_files import get_all_files, iter_lines, merge_sorted_files

__all__ = [
    "merge_sorted_files",
    "get_all_files",
    "iter_lines",
    "get_key",
    "field_key",
    "numeric_key",
    "surt_key",
]
