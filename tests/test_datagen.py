#!/usr/bin/env python3
"""
test_datagen.py - Test suite for benchmark data generation
==========================================================

Tests element distributions, value patterns and argument validation of the
generator used by the benchmarks and by the merge property tests.
"""

import unittest

from collating_iterator.bench.datagen import (
    DISTRIBUTIONS,
    PATTERNS,
    VALUE_RANGE,
    distribute,
    generate,
    to_iterators,
)


class TestDistribute(unittest.TestCase):
    def test_uniform(self):
        self.assertEqual(distribute(3, 10, "uniform"), [4, 3, 3])

    def test_skewed(self):
        self.assertEqual(distribute(3, 100, "skewed"), [80, 10, 10])
        self.assertEqual(distribute(1, 100, "skewed"), [100])

    def test_power_law(self):
        counts = distribute(4, 1000, "power_law")
        self.assertEqual(sum(counts), 1000)
        self.assertGreater(counts[0], counts[1])
        self.assertGreater(counts[1], counts[2])

    def test_single_dominant(self):
        self.assertEqual(distribute(4, 1000, "single_dominant"), [990, 10, 0, 0])
        self.assertEqual(distribute(1, 50, "single_dominant"), [50])

    def test_case_insensitive(self):
        self.assertEqual(distribute(2, 4, "UNIFORM"), [2, 2])

    def test_every_distribution_preserves_total(self):
        for distribution in DISTRIBUTIONS:
            for k in (1, 2, 5, 33):
                with self.subTest(distribution=distribution, k=k):
                    self.assertEqual(sum(distribute(k, 997, distribution)), 997)

    def test_unknown_distribution(self):
        with self.assertRaises(ValueError):
            distribute(2, 10, "gaussian")


class TestGenerate(unittest.TestCase):
    def test_sequential_values(self):
        self.assertEqual(generate(3, 7, "uniform", "sequential"), [[0, 3, 6], [1, 4], [2, 5]])

    def test_alternating_matches_sequential(self):
        self.assertEqual(
            generate(4, 20, "uniform", "alternating"),
            generate(4, 20, "uniform", "sequential"),
        )

    def test_random_sources_sorted_and_in_range(self):
        data = generate(5, 500, "uniform", "random", seed=1)
        for values in data:
            self.assertEqual(values, sorted(values))
            self.assertTrue(all(0 <= value < VALUE_RANGE for value in values))

    def test_clustered_ranges_do_not_overlap(self):
        data = generate(4, 400, "uniform", "clustered", seed=2)
        for left, right in zip(data, data[1:]):
            self.assertLess(left[-1], right[0])

    def test_seed_is_reproducible(self):
        self.assertEqual(generate(3, 100, seed=7), generate(3, 100, seed=7))

    def test_every_combination_is_sorted(self):
        for distribution in DISTRIBUTIONS:
            for pattern in PATTERNS:
                data = generate(6, 120, distribution, pattern, seed=0)
                with self.subTest(distribution=distribution, pattern=pattern):
                    self.assertEqual(len(data), 6)
                    self.assertEqual(sum(map(len, data)), 120)
                    self.assertTrue(all(values == sorted(values) for values in data))

    def test_zero_elements(self):
        self.assertEqual(generate(3, 0), [[], [], []])

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            generate(0, 10)
        with self.assertRaises(ValueError):
            generate(2, -1)
        with self.assertRaises(ValueError):
            generate(2, 10, pattern="zigzag")

    def test_to_iterators_are_fresh(self):
        data = [[1, 2], [3]]
        first = to_iterators(data)
        self.assertEqual([list(it) for it in first], [[1, 2], [3]])
        second = to_iterators(data)
        self.assertEqual([list(it) for it in second], [[1, 2], [3]])


if __name__ == "__main__":
    unittest.main()
