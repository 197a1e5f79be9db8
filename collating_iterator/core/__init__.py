"""Core module - lazy k-way merge engines over sorted iterables."""

from .collating import CollatingIterator, collate
from .linear_scan import LinearScanIterator
from .loser_tree import LoserTreeIterator
from .slot import Slot
from .strategies import STRATEGIES, make_merger

__all__ = [
    "CollatingIterator",
    "collate",
    "LinearScanIterator",
    "LoserTreeIterator",
    "Slot",
    "STRATEGIES",
    "make_merger",
]
