"""
Loser tree merge - k-way merge using a tournament tree of losers.

The k sources are the leaves of an implicit binary tree stored in an array:
leaf ``i`` lives at node ``k + i`` and node ``n`` has parent ``n // 2``. Every
internal node ``1 .. k - 1`` remembers the source that LOST the match played
there; node 0 holds the overall winner. After the winner is emitted and its
source refilled, only the matches on the path from its leaf to the root are
replayed, so each pull costs about log2(k) comparisons against stored losers
and never looks at siblings.

Exhausted sources stay in the tree as sentinels that lose every match.

Performance:
    - Time Complexity: O(N log k)
    - Space Complexity: O(k)
"""

from typing import Any, Iterable, List, Optional

from .slot import KeyFunc, Slot, close_source, open_sources


class LoserTreeIterator:
    """k-way merge driven by a loser tournament tree."""

    def __init__(self, sources: Iterable[Iterable[Any]], key: KeyFunc = None):
        self._key = key
        self._heads: List[Optional[Slot]] = open_sources(sources, key)
        self._k = len(self._heads)
        self._tree: List[int] = [0] * max(self._k, 1)
        self._remaining = sum(1 for slot in self._heads if slot is not None)
        if self._k:
            self._build()

    def _beats(self, a: int, b: int) -> bool:
        """True when source ``a`` wins a match against source ``b``."""
        head_a = self._heads[a]
        head_b = self._heads[b]
        if head_a is None:
            return head_b is None and a < b
        if head_b is None:
            return True
        return head_a < head_b

    def _build(self) -> None:
        k = self._k
        winners = [0] * (2 * k)
        for i in range(k):
            winners[k + i] = i
        for node in range(k - 1, 0, -1):
            left = winners[2 * node]
            right = winners[2 * node + 1]
            if self._beats(left, right):
                winners[node], self._tree[node] = left, right
            else:
                winners[node], self._tree[node] = right, left
        self._tree[0] = winners[1] if k > 1 else 0

    def _replay(self, source: int) -> None:
        winner = source
        node = (self._k + source) // 2
        while node >= 1:
            if self._beats(self._tree[node], winner):
                self._tree[node], winner = winner, self._tree[node]
            node //= 2
        self._tree[0] = winner

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        if not self._remaining:
            raise StopIteration

        source = self._tree[0]
        slot = self._heads[source]
        element = slot.element
        if not slot.refill(self._key):
            self._heads[source] = None
            self._remaining -= 1
        self._replay(source)
        return element

    def has_next(self) -> bool:
        return self._remaining > 0

    __bool__ = has_next

    def peek(self) -> Any:
        if not self._remaining:
            raise StopIteration
        return self._heads[self._tree[0]].element

    @property
    def active_sources(self) -> int:
        return self._remaining

    def close(self) -> None:
        heads, self._heads = self._heads, [None] * self._k
        self._remaining = 0
        for slot in heads:
            if slot is not None:
                close_source(slot.source)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
