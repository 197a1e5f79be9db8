"""
Collating Iterator

A Python package for lazily merging sorted sequences.
Provides a heap-based k-way merge iterator with a stable tie-break, alternative
merge strategies, and tools for merging sorted text files.

Modules:
    core: Merge engines (heap, linear scan, loser tree)
    merge: Tools for merging multiple sorted text files
    bench: Test data generation and strategy benchmarks
    utils: Shared utilities
"""

__version__ = "1.0.0"

from .core.collating import CollatingIterator, collate
from .core.strategies import make_merger
from .merge.merge_sorted_files import get_all_files, merge_sorted_files

__all__ = [
    "CollatingIterator",
    "collate",
    "make_merger",
    "merge_sorted_files",
    "get_all_files",
    "__version__",
]
