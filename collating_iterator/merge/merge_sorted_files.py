#!/usr/bin/env python3
"""
Merge Sorted Files - Lazy k-way merge of sorted text files

Merges multiple sorted text files into a single sorted output using
CollatingIterator. Every input file is read line by line through a generator,
so only one line per file is held in memory at once.

Usage Examples:
    # Merge two sorted files to output file
    collating-merge output.txt file1.txt file2.txt

    # Merge all files from directories (recursively), skipping temporaries
    collating-merge merged.txt /data/shards --exclude '*.tmp' -v

    # Files sorted numerically by their first column
    collating-merge --key numeric merged.tsv part-*.tsv

    # URL lists sorted by SURT form
    collating-merge --key surt merged.txt urls-a.txt urls-b.txt

    # Output to stdout (use '-' as output filename) and pipe
    collating-merge - sorted*.txt | gzip > merged.txt.gz

Requirements:
    - All input files must be sorted by the selected key
    - Input files should use the same encoding (default: UTF-8)

Ordering:
    - Lines with equal keys keep the order of the input files on the command
      line (or of the directory walk)

Performance:
    - Time Complexity: O(N log k) where N is total lines, k is number of files
    - Space Complexity: O(k)
"""

import argparse
import fnmatch
import os
import sys
from typing import Callable, Iterator, List, Optional

from collating_iterator.core.collating import CollatingIterator
from collating_iterator.merge.keys import get_key
from collating_iterator.utils import log_progress

DEFAULT_BUFFER_SIZE = 1024 * 1024


def should_exclude(filename, exclude_patterns):
    """
    Check if a filename matches any exclusion pattern.

    Args:
        filename: Name of the file to check (only the basename is matched)
        exclude_patterns: List of glob-style patterns to match against

    Returns:
        tuple: (should_exclude: bool, matched_pattern: str or None)
    """
    if not exclude_patterns:
        return False, None

    basename = os.path.basename(filename)
    for pattern in exclude_patterns:
        if fnmatch.fnmatch(basename, pattern):
            return True, pattern
    return False, None


def get_all_files(paths, exclude_patterns=None, verbose=False):
    """
    Collect files from the given paths, recursing into directories.

    Args:
        paths: List of file paths or directory paths
        exclude_patterns: Glob-style patterns for files to skip (optional)
        verbose: Whether to log discovery to stderr (optional)

    Yields:
        str: Path to each file kept, in the order given (directories walked
        with sorted entries so the merge priority is reproducible)
    """
    included = 0
    excluded = 0

    for path in paths:
        if os.path.isfile(path):
            candidates = [path]
        elif os.path.isdir(path):
            log_progress(f"[DISCOVER] Scanning directory: {path}", verbose)
            candidates = []
            for root, dirs, files in os.walk(path):
                dirs.sort()
                candidates.extend(os.path.join(root, f) for f in sorted(files))
        else:
            log_progress(f"[SKIP] Not a file or directory: {path}", verbose)
            continue

        for candidate in candidates:
            matched, pattern = should_exclude(candidate, exclude_patterns)
            if matched:
                excluded += 1
                log_progress(f"[EXCLUDE] {os.path.basename(candidate)} (matches: {pattern})", verbose)
            else:
                included += 1
                log_progress(f"[INCLUDE] {os.path.basename(candidate)}", verbose)
                yield candidate

    if included or excluded:
        log_progress(f"[SUMMARY] {included} included, {excluded} excluded", verbose)


def iter_lines(path: str, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """
    Yield the lines of a file, closing it once exhausted or closed early.

    A missing trailing newline is added so merged lines never run together.
    """
    with open(path, "r", encoding="utf-8", buffering=buffer_size) as fh:
        for line in fh:
            if not line.endswith("\n"):
                line += "\n"
            yield line


def _write_merged(merged: CollatingIterator, out) -> int:
    lines_written = 0
    for line in merged:
        out.write(line)
        lines_written += 1
    return lines_written


def merge_sorted_files(
    files: List[str],
    output_file: str,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    key: Optional[Callable[[str], object]] = None,
    verbose: bool = False,
) -> int:
    """
    Merge multiple sorted files into a single sorted output file.

    Args:
        files: Paths to sorted input files, in tie-break priority order
        output_file: Path where the merged output will be written, or '-' for stdout
        buffer_size: Buffer size in bytes for file I/O (default: 1MB)
        key: Optional key function the files are sorted by
        verbose: Whether to log progress to stderr (optional)

    Returns:
        int: Number of lines written
    """
    log_progress(f"[MERGE] Starting merge of {len(files)} files...", verbose)

    with CollatingIterator((iter_lines(f, buffer_size) for f in files), key=key) as merged:
        log_progress(f"[MERGE] {merged.active_sources} non-empty inputs", verbose)
        if output_file == "-":
            lines_written = _write_merged(merged, sys.stdout)
            sys.stdout.flush()
        else:
            with open(output_file, "w", encoding="utf-8", buffering=buffer_size) as out:
                lines_written = _write_merged(merged, out)

    log_progress(f"[MERGE] Complete: {lines_written} lines written", verbose)
    return lines_written


def main(argv=None):
    """Main entry point for command-line usage."""
    parser = argparse.ArgumentParser(
        description="Merge N sorted text files or directories into one, lazily.",
        epilog="Examples:\n"
        "  collating-merge output.txt file1.txt file2.txt\n"
        "  collating-merge output.txt /data/shards/ --exclude '*.tmp' -v\n"
        "  collating-merge --key surt - urls-*.txt | gzip > merged.txt.gz",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("output", help="Output file name (use '-' for stdout)")
    parser.add_argument("paths", nargs="+", help="List of sorted input files or directories")
    parser.add_argument(
        "-k",
        "--key",
        default="line",
        help="Key the inputs are sorted by: line, numeric, surt or field:N (default: line)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        dest="exclude_patterns",
        metavar="PATTERN",
        help="Exclude files matching glob pattern (can be used multiple times)",
    )
    parser.add_argument(
        "--buffer-size",
        type=int,
        default=DEFAULT_BUFFER_SIZE,
        help=f"I/O buffer size in bytes (default: {DEFAULT_BUFFER_SIZE})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output to stderr (progress, exclusions, statistics)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all stderr output (overrides --verbose)",
    )
    args = parser.parse_args(argv)

    verbose = args.verbose and not args.quiet

    try:
        key = get_key(args.key)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    files = list(get_all_files(args.paths, args.exclude_patterns, verbose))
    if not files:
        log_progress("[ERROR] No files to merge after applying exclusions", verbose=not args.quiet)
        sys.exit(1)

    try:
        merge_sorted_files(files, args.output, buffer_size=args.buffer_size, key=key, verbose=verbose)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
