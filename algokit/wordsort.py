"""Sorting a word list with several threads.

Words are split into nearly equal chunks, each chunk is sorted in its own
thread, and the sorted chunks are merged into one list.
"""

from __future__ import annotations

import argparse
import heapq
import random
import sys
import time
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

PATH_TO_DICT = "/usr/share/dict/words"
MAX_STRINGS = 100000
NUM_OF_THREADS = 2
THREAD_COUNTS = (1, 2, 4, 8)
_PREVIEW = 10


def load_words(path: str = PATH_TO_DICT, limit: int = MAX_STRINGS) -> list[str]:
    """Read up to ``limit`` non-empty lines of the file at ``path``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    words: list[str] = []
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            if len(words) >= limit:
                break
            word = line.rstrip("\r\n")
            if word:
                words.append(word)
    return words


def shuffle_words(words: Iterable[str], seed: Optional[int] = None) -> list[str]:
    """Return the words in a random order; the same seed gives the same order."""
    result = list(words)
    random.Random(seed).shuffle(result)
    return result


def _chunk_bounds(size: int, parts: int) -> Iterator[tuple[int, int]]:
    portion, remainder = divmod(size, parts)
    start = 0
    for index in range(parts):
        end = start + portion + (1 if index < remainder else 0)
        yield start, end
        start = end


def _check_threads(num_threads: int) -> None:
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")


def _radix_sort_chunk(words: Sequence[str]) -> list[str]:
    result = list(words)
    if not result:
        return result
    width = max(len(word) for word in result)
    for position in range(width - 1, -1, -1):
        buckets: defaultdict[int, list[str]] = defaultdict(list)
        for word in result:
            key = ord(word[position]) + 1 if position < len(word) else 0
            buckets[key].append(word)
        result = [word for key in sorted(buckets) for word in buckets[key]]
    return result


def _sort_in_chunks(words: Sequence[str], num_threads: int, sorter) -> list[str]:
    _check_threads(num_threads)
    items = list(words)
    chunks = [items[start:end] for start, end in _chunk_bounds(len(items), num_threads)]
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        sorted_chunks = list(pool.map(sorter, chunks))
    return list(heapq.merge(*sorted_chunks))


def counting_sort_words(
    words: Iterable[str], num_threads: int = NUM_OF_THREADS
) -> list[str]:
    """Lower-case the words and sort them with per-character counting passes."""
    lowered = [word.lower() for word in words]
    return _sort_in_chunks(lowered, num_threads, _radix_sort_chunk)


def parallel_sort(words: Iterable[str], num_threads: int = NUM_OF_THREADS) -> list[str]:
    """Sort the words by sorting chunks in threads and merging the results."""
    return _sort_in_chunks(list(words), num_threads, sorted)


def _print_words(words: Sequence[str], count: int = _PREVIEW) -> None:
    for word in words[:count]:
        print(word)
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load, shuffle and sort a dictionary with different thread counts."""
    parser = argparse.ArgumentParser(description="Time a multi-threaded word sort.")
    parser.add_argument("--dict", dest="path", default=PATH_TO_DICT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        words = load_words(args.path)
    except OSError as exc:
        print(f"cannot load dictionary: {exc}", file=sys.stderr)
        return 1
    print(f"Loaded {len(words)} words from dictionary.")

    print("First 10 words before shuffling:")
    _print_words(words)

    words = shuffle_words(words, args.seed)
    print("First 10 words after shuffling:")
    _print_words(words)

    for num_threads in THREAD_COUNTS:
        began = time.perf_counter()
        ordered = parallel_sort(words, num_threads)
        elapsed = time.perf_counter() - began
        print(f"Time taken with {num_threads} threads: {elapsed:f} seconds")
        print("First 10 words after sorting:")
        _print_words(ordered)
    return 0


if __name__ == "__main__":
    sys.exit(main())