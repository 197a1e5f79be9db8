"""
Test data generator for k-way merge benchmarks.

Builds k sorted integer lists whose sizes follow a distribution and whose
values follow a pattern:

Distributions (how many elements each source gets):
    uniform          n / k each, remainder spread over the first sources
    skewed           first source 80%, the rest share 20%
    power_law        source i gets n / ((i + 1) * H_k), last takes the remainder
    single_dominant  first source 99%, second the rest, others empty

Patterns (which values each source holds):
    random       random values in [0, VALUE_RANGE), sorted per source
    sequential   source i holds i, i + k, i + 2k, ...
    alternating  same values as sequential (maximises comparisons)
    clustered    source i draws from the i-th of k consecutive value ranges
"""

import random
from typing import Iterator, List, Optional

VALUE_RANGE = 1000000

DISTRIBUTIONS = ("uniform", "skewed", "power_law", "single_dominant")
PATTERNS = ("random", "sequential", "alternating", "clustered")


def distribute(k: int, n: int, distribution: str) -> List[int]:
    """Return the number of elements each of the k sources receives."""
    distribution = distribution.lower()
    counts = [0] * k

    if distribution == "uniform":
        base, remainder = divmod(n, k)
        for i in range(k):
            counts[i] = base + (1 if i < remainder else 0)

    elif distribution == "skewed":
        if k == 1:
            counts[0] = n
        else:
            counts[0] = int(n * 0.8)
            base, remainder = divmod(n - counts[0], k - 1)
            for i in range(1, k):
                counts[i] = base + (1 if i - 1 < remainder else 0)

    elif distribution == "power_law":
        harmonic = sum(1.0 / (i + 1) for i in range(k))
        for i in range(k - 1):
            counts[i] = int(n / ((i + 1) * harmonic))
        counts[k - 1] = n - sum(counts[: k - 1])

    elif distribution == "single_dominant":
        if k == 1:
            counts[0] = n
        else:
            counts[0] = int(n * 0.99)
            counts[1] = n - counts[0]

    else:
        raise ValueError(f"Unknown distribution: {distribution}")

    return counts


def _values(rng: random.Random, k: int, counts: List[int], pattern: str) -> List[List[int]]:
    pattern = pattern.lower()

    if pattern == "random":
        return [sorted(rng.randrange(VALUE_RANGE) for _ in range(count)) for count in counts]

    if pattern in ("sequential", "alternating"):
        return [[i + j * k for j in range(count)] for i, count in enumerate(counts)]

    if pattern == "clustered":
        range_size = VALUE_RANGE // k
        result = []
        for i, count in enumerate(counts):
            start = i * range_size
            end = VALUE_RANGE if i == k - 1 else (i + 1) * range_size
            result.append(sorted(rng.randrange(start, end) for _ in range(count)))
        return result

    raise ValueError(f"Unknown pattern: {pattern}")


def generate(
    k: int, n: int, distribution: str = "uniform", pattern: str = "random", seed: Optional[int] = None
) -> List[List[int]]:
    """
    Generate k sorted lists holding n integers in total.

    Args:
        k: Number of sources (must be positive)
        n: Total number of elements (must be non-negative)
        distribution: How elements are spread over sources
        pattern: How values are produced
        seed: Seed for reproducible random patterns (optional)

    Returns:
        list: One sorted list per source

    Raises:
        ValueError: For invalid k or n, or unknown distribution/pattern
    """
    if k <= 0:
        raise ValueError("k must be positive")
    if n < 0:
        raise ValueError("n must be non-negative")

    rng = random.Random(seed)
    counts = distribute(k, n, distribution)
    return _values(rng, k, counts, pattern)


def to_iterators(data: List[List[int]]) -> List[Iterator[int]]:
    """Fresh iterators over generated lists, so the same data can be merged again."""
    return [iter(values) for values in data]
