"""
Linear scan merge - naive k-way merge baseline.

Keeps the current head of every source in a plain list and scans all of them
on each pull. O(N k) time, but no tree bookkeeping at all, which makes it
competitive when k is very small. Same ordering and tie-break as
CollatingIterator.
"""

from typing import Any, Iterable, List, Optional

from .slot import KeyFunc, Slot, close_source, open_sources


class LinearScanIterator:
    """k-way merge that finds the minimum head by scanning every source."""

    def __init__(self, sources: Iterable[Iterable[Any]], key: KeyFunc = None):
        self._key = key
        self._heads: List[Optional[Slot]] = open_sources(sources, key)
        self._remaining = sum(1 for slot in self._heads if slot is not None)

    def __iter__(self):
        return self

    def _min_position(self) -> int:
        best = -1
        for position, slot in enumerate(self._heads):
            if slot is None:
                continue
            # Strict comparison keeps the earliest source on ties
            if best < 0 or slot < self._heads[best]:
                best = position
        return best

    def __next__(self) -> Any:
        if not self._remaining:
            raise StopIteration

        position = self._min_position()
        slot = self._heads[position]
        element = slot.element
        if not slot.refill(self._key):
            self._heads[position] = None
            self._remaining -= 1
        return element

    def has_next(self) -> bool:
        return self._remaining > 0

    __bool__ = has_next

    def peek(self) -> Any:
        if not self._remaining:
            raise StopIteration
        return self._heads[self._min_position()].element

    @property
    def active_sources(self) -> int:
        return self._remaining

    def close(self) -> None:
        heads, self._heads = self._heads, []
        self._remaining = 0
        for slot in heads:
            if slot is not None:
                close_source(slot.source)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
