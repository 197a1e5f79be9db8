"""
Registry of merge strategies.

All strategies share the same contract: sorted sources in, one sorted stream
out, earlier sources win ties, empty source lists are valid.
"""

from typing import Any, Iterable

from .collating import CollatingIterator
from .linear_scan import LinearScanIterator
from .loser_tree import LoserTreeIterator
from .slot import KeyFunc

STRATEGIES = {
    "heap": CollatingIterator,
    "linear": LinearScanIterator,
    "loser": LoserTreeIterator,
}


def make_merger(sources: Iterable[Iterable[Any]], strategy: str = "heap", key: KeyFunc = None):
    """
    Build a merger using the named strategy.

    Args:
        sources: Ordered collection of sorted iterables
        strategy: One of "heap", "linear" or "loser" (default: "heap")
        key: Optional key function

    Returns:
        Iterator over the merged elements

    Raises:
        ValueError: If the strategy name is unknown
    """
    try:
        merger_class = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown merge strategy: {strategy!r} (expected one of {', '.join(sorted(STRATEGIES))})"
        ) from None
    return merger_class(sources, key=key)
