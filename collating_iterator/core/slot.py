"""
Slot - buffered head of one sorted source.

A slot holds the element most recently pulled from a source, the sort key of
that element, the source iterator itself and the position the source had in
the list given to the merger. Slots order by (sort key, index), so two slots
never compare equal and the earlier source always wins a tie.

Only ``<`` is ever used on sort keys.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional

KeyFunc = Optional[Callable[[Any], Any]]

_EXHAUSTED = object()


class Slot:
    """Current head of a source plus its bookkeeping."""

    __slots__ = ("element", "sort_key", "source", "index")

    def __init__(self, element: Any, sort_key: Any, source: Iterator, index: int):
        self.element = element
        self.sort_key = sort_key
        self.source = source
        self.index = index

    def __lt__(self, other: "Slot") -> bool:
        if self.sort_key < other.sort_key:
            return True
        if other.sort_key < self.sort_key:
            return False
        return self.index < other.index

    def __repr__(self):
        return f"Slot(element={self.element!r}, index={self.index})"

    def refill(self, key: KeyFunc = None) -> bool:
        """
        Pull the next element of the source into this slot.

        Args:
            key: Optional key function applied to the new element

        Returns:
            bool: False when the source is exhausted (slot left untouched)

        Note:
            Any exception raised by the source or by the key function
            propagates; the slot keeps its previous element in that case.
        """
        element = next(self.source, _EXHAUSTED)
        if element is _EXHAUSTED:
            return False
        sort_key = key(element) if key is not None else element
        self.element = element
        self.sort_key = sort_key
        return True


def open_sources(sources: Iterable[Iterable[Any]], key: KeyFunc = None) -> List[Optional[Slot]]:
    """
    Pull the first element of every source, in input order.

    Args:
        sources: Ordered collection of sorted iterables
        key: Optional key function

    Returns:
        list: One entry per source, a Slot or None when the source was empty

    Raises:
        TypeError: If a source is not iterable
    """
    slots = []
    for index, source in enumerate(sources):
        try:
            iterator = iter(source)
        except TypeError as e:
            raise TypeError(f"source at index {index} is not iterable: {source!r}") from e

        element = next(iterator, _EXHAUSTED)
        if element is _EXHAUSTED:
            slots.append(None)
            continue
        sort_key = key(element) if key is not None else element
        slots.append(Slot(element, sort_key, iterator, index))
    return slots


def close_source(source: Iterator) -> None:
    """Close a source if it knows how to (generators, file objects)."""
    close = getattr(source, "close", None)
    if close is not None:
        close()
