#!/usr/bin/env python3
"""
collating-benchmark - Compare k-way merge strategies

Times the heap, linear scan and loser tree mergers on the same generated data
for several values of k, and prints nanoseconds per full merge.

COMMAND-LINE USAGE
==================

    # Default run: k = 3, 10, 50 with N = 10000 uniform random elements
    collating-benchmark

    # Custom sizes and data shape
    collating-benchmark -k 2 -k 8 -k 128 -n 50000 --distribution skewed --pattern clustered

    # Fewer iterations for a quick look
    collating-benchmark --warmup 5 --iterations 20

    # Show that all strategies produce the same output on a small example
    collating-benchmark --compare

Expected trends: linear scan is competitive for tiny k; heap and loser tree
win once k grows past about 10.
"""

import sys
import time
from argparse import ArgumentParser
from typing import Dict, List

from collating_iterator.bench.datagen import DISTRIBUTIONS, PATTERNS, generate, to_iterators
from collating_iterator.core.strategies import STRATEGIES, make_merger
from collating_iterator.utils import log_progress

DEFAULT_K_VALUES = [3, 10, 50]
DEFAULT_N = 10000
DEFAULT_WARMUP = 10
DEFAULT_ITERATIONS = 100


def run_merge(data: List[List[int]], strategy: str) -> int:
    """
    Merge the data once with the given strategy and return the element count.

    Raises:
        RuntimeError: If the merge does not emit exactly one element per input element
    """
    count = 0
    for _ in make_merger(to_iterators(data), strategy=strategy):
        count += 1

    expected = sum(len(values) for values in data)
    if count != expected:
        raise RuntimeError(f"Count mismatch for {strategy}: got {count}, expected {expected}")
    return count


def time_strategy(data: List[List[int]], strategy: str, warmup: int, iterations: int) -> int:
    """Return the mean duration of one merge in nanoseconds."""
    for _ in range(warmup):
        run_merge(data, strategy)

    total = 0
    for _ in range(iterations):
        start = time.perf_counter_ns()
        run_merge(data, strategy)
        total += time.perf_counter_ns() - start
    return total // max(iterations, 1)


def run_benchmark(
    k_values: List[int],
    n: int,
    distribution: str = "uniform",
    pattern: str = "random",
    warmup: int = DEFAULT_WARMUP,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int = 0,
    verbose: bool = False,
) -> Dict[int, Dict[str, int]]:
    """
    Time every strategy for every k.

    Returns:
        dict: {k: {strategy: ns_per_merge}}
    """
    results = {}
    for k in k_values:
        log_progress(f"[BENCH] k={k}: generating {n} elements ({distribution}/{pattern})", verbose)
        data = generate(k, n, distribution, pattern, seed=seed)
        results[k] = {}
        for strategy in STRATEGIES:
            results[k][strategy] = time_strategy(data, strategy, warmup, iterations)
            log_progress(f"[BENCH] k={k} {strategy}: {results[k][strategy]} ns/op", verbose)
    return results


def format_results(results: Dict[int, Dict[str, int]]) -> str:
    """Render benchmark results as a plain text table."""
    lines = []
    for k, timings in results.items():
        lines.append(f"--- k={k} ---")
        linear = timings.get("linear")
        for strategy, ns in timings.items():
            row = f"  {strategy:<8} {ns:>14,d} ns/op"
            if linear and strategy != "linear" and ns:
                row += f"  ({linear / ns:.2f}x vs linear)"
            lines.append(row)
    return "\n".join(lines)


def compare_outputs(data: List[List[int]]) -> Dict[str, List[int]]:
    """Merge the same data with every strategy."""
    return {strategy: list(make_merger(to_iterators(data), strategy=strategy)) for strategy in STRATEGIES}


def main(argv=None):
    parser = ArgumentParser(description="Benchmark k-way merge strategies on generated data")
    parser.add_argument(
        "-k",
        dest="k_values",
        type=int,
        action="append",
        metavar="K",
        help=f"Number of sources (repeatable, default: {' '.join(map(str, DEFAULT_K_VALUES))})",
    )
    parser.add_argument("-n", type=int, default=DEFAULT_N, help=f"Total elements (default: {DEFAULT_N})")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument("--pattern", choices=PATTERNS, default="random")
    parser.add_argument("--warmup", type=int, default=DEFAULT_WARMUP, help="Warmup merges per strategy")
    parser.add_argument(
        "--iterations", type=int, default=DEFAULT_ITERATIONS, help="Measured merges per strategy"
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument(
        "--compare", action="store_true", help="Print every strategy's output on a small example and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    if args.compare:
        data = [[1, 4, 7, 10], [2, 5, 8, 11], [3, 6, 9, 12]]
        for i, values in enumerate(data):
            print(f"Source {i}: {values}")
        outputs = compare_outputs(data)
        for strategy, merged in outputs.items():
            print(f"{strategy:<8} {merged}")
        if len({tuple(merged) for merged in outputs.values()}) != 1:
            print("Error: strategies disagree", file=sys.stderr)
            sys.exit(1)
        return

    k_values = args.k_values or DEFAULT_K_VALUES
    if any(k <= 0 for k in k_values) or args.n < 0:
        print("Error: k must be positive and n non-negative", file=sys.stderr)
        sys.exit(1)

    try:
        results = run_benchmark(
            k_values,
            args.n,
            distribution=args.distribution,
            pattern=args.pattern,
            warmup=args.warmup,
            iterations=args.iterations,
            seed=args.seed,
            verbose=args.verbose,
        )
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)

    print(f"N={args.n} distribution={args.distribution} pattern={args.pattern}")
    print(format_results(results))


if __name__ == "__main__":
    main()
