"""Sorting and searching routines over sequences of integers.

Every sort returns a new list and leaves its input untouched. The searches
return the index of the target, or -1 when it is absent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

Compare = Callable[[Any, Any], int]

_BASE = 10


def _require_non_negative(values: Sequence[int], algorithm: str) -> None:
    if any(value < 0 for value in values):
        raise ValueError(f"{algorithm} supports non-negative integers only")


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(values)
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(result) - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
    return result


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(values)
    size = len(result)
    for i in range(size):
        min_idx = min(range(i, size), key=result.__getitem__)
        if min_idx != i:
            result[i], result[min_idx] = result[min_idx], result[i]
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def unstable_counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return items
    _require_non_negative(items, "counting sort")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _stable_digit_pass(values: list[int], digit: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(_BASE)]
    for value in values:
        buckets[(value // digit) % _BASE].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    result = list(values)
    _require_non_negative(result, "radix sort")
    max_value = max(result, default=0)
    digit = 1
    while max_value // digit > 0:
        result = _stable_digit_pass(result, digit)
        digit *= _BASE
    return result


def iter_binary_search(values: Sequence[int], target: int) -> int:
    """Find ``target`` in ascending ``values`` with a loop; -1 if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def recurs_binary_search(values: Sequence[int], target: int) -> int:
    """Find ``target`` in ascending ``values`` recursively; -1 if absent."""

    def search(offset: int, size: int) -> int:
        if size == 0:
            return -1
        mid = size // 2
        probe = values[offset + mid]
        if probe == target:
            return offset + mid
        if probe > target:
            return search(offset, mid)
        return search(offset + mid + 1, size - mid - 1)

    return search(0, len(values))


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable recursive merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[Any], compare: Compare) -> list[Any]:
    """Quick sort with a middle pivot, ordered by a three-way ``compare``."""
    items = list(values)

    def partition(low: int, high: int) -> int:
        middle = low + (high - low) // 2
        items[middle], items[high] = items[high], items[middle]
        pivot = items[high]
        i, j = low, high - 1
        while i <= j:
            while i <= j and compare(items[i], pivot) < 0:
                i += 1
            while i <= j and compare(items[j], pivot) > 0:
                j -= 1
            if i <= j:
                if i < j:
                    items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        items[i], items[high] = items[high], items[i]
        return i

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        split = partition(low, high)
        if low < split:
            sort(low, split - 1)
        if split < high:
            sort(split + 1, high)

    if len(items) >= 2:
        sort(0, len(items) - 1)
    return items