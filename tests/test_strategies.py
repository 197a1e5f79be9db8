#!/usr/bin/env python3
"""
test_strategies.py - Test suite for the merge strategy registry
================================================================

Checks that every registered strategy is reachable by name and that all of
them agree on the same inputs, including ties and empty sources.
"""

import itertools

import pytest

from collating_iterator import make_merger as exported_make_merger
from collating_iterator.bench.datagen import generate
from collating_iterator.core import (
    STRATEGIES,
    CollatingIterator,
    LinearScanIterator,
    LoserTreeIterator,
    make_merger,
)


class TestRegistry:
    """Strategy lookup by name."""

    def test_registered_names(self):
        assert STRATEGIES == {
            "heap": CollatingIterator,
            "linear": LinearScanIterator,
            "loser": LoserTreeIterator,
        }

    def test_default_is_heap(self):
        assert isinstance(make_merger([[1]]), CollatingIterator)

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_make_by_name(self, name):
        merged = make_merger([[1, 3], [2]], strategy=name)
        assert isinstance(merged, STRATEGIES[name])
        assert list(merged) == [1, 2, 3]

    def test_key_is_forwarded(self):
        merged = make_merger([["b", "D"], ["C"]], strategy="loser", key=str.lower)
        assert list(merged) == ["b", "C", "D"]

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown merge strategy"):
            make_merger([[1]], strategy="bubble")

    def test_package_export(self):
        assert exported_make_merger is make_merger


class TestStrategiesAgree:
    """All strategies produce identical output."""

    @pytest.mark.parametrize("k", [1, 2, 3, 5, 8, 13, 64])
    def test_same_output_on_random_data(self, k):
        data = generate(k, 500, "power_law", "random", seed=k)
        outputs = [list(make_merger(data, strategy=name)) for name in STRATEGIES]
        assert outputs[0] == sorted(itertools.chain(*data))
        assert all(output == outputs[0] for output in outputs)

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_same_tie_break(self, name):
        sources = [[(1, i), (2, i)] for i in range(9)]
        merged = list(make_merger(sources, strategy=name, key=lambda item: item[0]))
        assert [tag for _, tag in merged] == list(range(9)) + list(range(9))

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_sparse_sources(self, name):
        sources = [[], [4], [], [], [1, 2], [], [3], []]
        assert list(make_merger(sources, strategy=name)) == [1, 2, 3, 4]
