"""
Collating Iterator - lazy k-way merge of sorted sources using a min-heap

Merges k individually sorted iterables into one sorted stream without
materializing any of them. At any time the heap holds exactly one slot per
source that still has elements; each pull pops the smallest slot, refills it
from its own source and sifts it back in.

Usage Examples:
    >>> list(CollatingIterator([[1, 3, 5], [2, 4, 6]]))
    [1, 2, 3, 4, 5, 6]

    >>> merged = CollatingIterator.of(iter("adg"), iter("beh"), iter("cfi"))
    >>> "".join(merged)
    'abcdefghi'

    # Merge by a derived key (same convention as sorted())
    >>> list(collate(["b", "C"], ["A", "d"], key=str.lower))
    ['A', 'b', 'C', 'd']

Ordering:
    - Elements compare with ``<`` (or their ``key(element)`` does)
    - Equal elements from different sources come out in source order:
      the source listed first at construction time wins every tie
    - Within one source, equal elements keep that source's own order

Requirements:
    - Every source must already yield elements in non-decreasing order.
      This is not checked; unsorted sources silently give unsorted output.

Performance:
    - Time Complexity: O(N log k) where N is total elements, k is number of sources
    - Space Complexity: O(k) for the heap
"""

import heapq
from typing import Any, Iterable, List

from .slot import KeyFunc, Slot, close_source, open_sources


class CollatingIterator:
    """
    Iterator over the sorted union of several sorted sources.

    The iterator owns its sources: they are consumed destructively and must not
    be read by anybody else while the merge is running. It is not restartable.
    """

    def __init__(self, sources: Iterable[Iterable[Any]], key: KeyFunc = None):
        """
        Seed the heap with the first element of every source.

        Args:
            sources: Ordered collection of sorted iterables. Their order defines
                tie-break priority. Empty sources are dropped silently.
            key: Optional function computing the comparison key of an element

        Raises:
            TypeError: If one of the sources is not iterable
        """
        self._key = key
        self._heap: List[Slot] = [slot for slot in open_sources(sources, key) if slot is not None]
        heapq.heapify(self._heap)

    @classmethod
    def of(cls, *sources: Iterable[Any], key: KeyFunc = None) -> "CollatingIterator":
        """Build a merger from sources passed as positional arguments."""
        return cls(sources, key=key)

    @classmethod
    def from_iterables(cls, sources: Iterable[Iterable[Any]], key: KeyFunc = None) -> "CollatingIterator":
        """Build a merger from a collection of sources."""
        return cls(sources, key=key)

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        """
        Produce the smallest element not yet emitted.

        Advances exactly one source by exactly one element. A failure raised by
        that source propagates unchanged; the merger should not be reused after it.

        Raises:
            StopIteration: When every source is exhausted
        """
        heap = self._heap
        if not heap:
            raise StopIteration

        slot = heap[0]
        element = slot.element
        if slot.refill(self._key):
            # Slot at the root now holds a larger element: sift it down
            heapq.heapreplace(heap, slot)
        else:
            heapq.heappop(heap)
        return element

    def has_next(self) -> bool:
        """Return True while at least one source still has elements."""
        return bool(self._heap)

    __bool__ = has_next

    def peek(self) -> Any:
        """
        Return the next element without consuming it.

        Raises:
            StopIteration: When every source is exhausted
        """
        if not self._heap:
            raise StopIteration
        return self._heap[0].element

    @property
    def active_sources(self) -> int:
        """Number of sources still in flight."""
        return len(self._heap)

    def close(self) -> None:
        """Release every source still held, closing those that support it."""
        heap, self._heap = self._heap, []
        for slot in heap:
            close_source(slot.source)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def collate(*sources: Iterable[Any], key: KeyFunc = None) -> CollatingIterator:
    """
    Merge sorted iterables lazily.

    Args:
        *sources: Sorted iterables, in tie-break priority order
        key: Optional key function

    Returns:
        CollatingIterator: Lazy iterator over the merged elements
    """
    return CollatingIterator(sources, key=key)
