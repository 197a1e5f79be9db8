"""Bench module - Test data generation and strategy benchmarks."""

from .datagen import generate, to_iterators

__all__ = ["generate", "to_iterators"]
