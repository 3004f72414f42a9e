import random

import pytest

from algokit.sorts import (
    bubble_sort,
    insertion_sort,
    iter_binary_search,
    merge_sort,
    quick_sort,
    radix_sort,
    recurs_binary_search,
    selection_sort,
    unstable_counting_sort,
)


def int_compare(lhs, rhs):
    return lhs - rhs


def is_sorted(values):
    return all(a <= b for a, b in zip(values, values[1:]))


def run_simple_sorts(data):
    return [
        bubble_sort(data),
        selection_sort(data),
        insertion_sort(data),
        unstable_counting_sort(data),
        radix_sort(data),
        merge_sort(data),
    ]


def test_sorts_source_case():
    results = [
        bubble_sort([5, 3, 4, 1, 2]),
        selection_sort([5, 3, 4, 1, 2]),
        insertion_sort([5, 3, 4, 1, 2]),
        unstable_counting_sort([5, 3, 4, 1, 2]),
        radix_sort([5, 3, 4, 1, 2]),
        merge_sort([5, 3, 4, 1, 2]),
    ]
    for result in results:
        assert is_sorted(result)
        assert result == [1, 2, 3, 4, 5]


def test_radix_sort_source_case():
    result = radix_sort([170, 45, 75, 90, 802])
    assert is_sorted(result)
    assert result == [45, 75, 90, 170, 802]


def test_iter_binary_search_source_case():
    arr = [1, 2, 3, 4, 5]
    result = iter_binary_search(arr, 3)
    assert result != -1
    assert arr[result] == 3


def test_recurs_binary_search_source_case():
    arr = [1, 2, 3, 4, 5]
    result = recurs_binary_search(arr, 3)
    assert result != -1
    assert arr[result] == 3


def test_quick_sort_source_case():
    arr = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
    expected = [1, 1, 2, 3, 3, 4, 5, 5, 5, 6, 9]
    assert quick_sort(arr, int_compare) == expected


def test_sorts_match_builtin_on_random_data():
    rng = random.Random(1234)
    data = [rng.randrange(0, 10000) for _ in range(300)]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert unstable_counting_sort(data) == expected
    assert radix_sort(data) == expected
    assert merge_sort(data) == expected


def test_sorts_do_not_mutate_input():
    data = [9, 2, 7, 2, 0]
    results = run_simple_sorts(data)
    assert data == [9, 2, 7, 2, 0]
    for result in results:
        assert result == [0, 2, 2, 7, 9]


def test_sorts_handle_empty_and_single():
    assert bubble_sort([]) == []
    assert selection_sort([]) == []
    assert insertion_sort([]) == []
    assert unstable_counting_sort([]) == []
    assert radix_sort([]) == []
    assert merge_sort([]) == []
    assert bubble_sort([42]) == [42]
    assert selection_sort([42]) == [42]
    assert insertion_sort([42]) == [42]
    assert unstable_counting_sort([42]) == [42]
    assert radix_sort([42]) == [42]
    assert merge_sort([42]) == [42]


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort, insertion_sort, merge_sort])
def test_comparison_sorts_handle_negatives(sort):
    data = [12, 1, 30, -6, 10, -20, 50, 0, 90, 4]
    assert sort(data) == [-20, -6, 0, 1, 4, 10, 12, 30, 50, 90]


@pytest.mark.parametrize("sort", [unstable_counting_sort, radix_sort])
def test_digit_sorts_reject_negatives(sort):
    with pytest.raises(ValueError):
        sort([3, -1, 2])


def test_quick_sort_random_matches_builtin():
    rng = random.Random(99)
    data = [rng.randrange(-5000, 5000) for _ in range(1000)]
    assert quick_sort(data, int_compare) == sorted(data)


def test_quick_sort_reverse_compare_sorts_descending():
    data = [4, 8, 1, 8, 3]
    assert quick_sort(data, lambda a, b: b - a) == [8, 8, 4, 3, 1]


def test_quick_sort_small_inputs():
    assert quick_sort([], int_compare) == []
    assert quick_sort([7], int_compare) == [7]
    assert quick_sort([2, 1], int_compare) == [1, 2]


@pytest.mark.parametrize("search", [iter_binary_search, recurs_binary_search])
def test_search_finds_every_element(search):
    arr = [-20, -6, 0, 1, 4, 10, 12, 30, 50, 90]
    for index, value in enumerate(arr):
        assert search(arr, value) == index


@pytest.mark.parametrize("search", [iter_binary_search, recurs_binary_search])
def test_search_missing_returns_minus_one(search):
    arr = [1, 2, 3, 4, 5]
    assert search(arr, 0) == -1
    assert search(arr, 6) == -1
    assert search([], 3) == -1