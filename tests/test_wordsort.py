import pytest

from algokit.wordsort import (
    counting_sort_words,
    load_words,
    main,
    parallel_sort,
    shuffle_words,
)

WORDS = ["pear", "Apple", "fig", "banana", "kiwi", "apple", "date", "Cherry", "a", "ab"]


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "words"
    path.write_text("zebra\n\nalpha\nmango\n\nkiwi\n", encoding="utf-8")
    return path


def test_load_words_skips_empty_lines(dictionary):
    assert load_words(str(dictionary)) == ["zebra", "alpha", "mango", "kiwi"]


def test_load_words_respects_limit(dictionary):
    assert load_words(str(dictionary), 2) == ["zebra", "alpha"]


def test_load_words_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_words(str(tmp_path / "absent"))


def test_shuffle_keeps_every_word():
    shuffled = shuffle_words(WORDS, seed=7)
    assert sorted(shuffled) == sorted(WORDS)
    assert len(shuffled) == len(WORDS)


def test_shuffle_is_repeatable_with_seed():
    first = shuffle_words(WORDS, seed=3)
    second = shuffle_words(WORDS, seed=3)
    assert sorted(first) == sorted(WORDS)
    assert first == second


@pytest.mark.parametrize("num_threads", [1, 2, 3, 4, 8, 16])
def test_parallel_sort_orders_words(num_threads):
    assert parallel_sort(WORDS, num_threads) == sorted(WORDS)


@pytest.mark.parametrize("num_threads", [1, 2, 4, 8])
def test_counting_sort_lowercases_and_orders(num_threads):
    result = counting_sort_words(WORDS, num_threads)
    assert result == sorted(word.lower() for word in WORDS)


def test_counting_sort_prefix_comes_first():
    assert counting_sort_words(["ab", "a", "abc"], 2) == ["a", "ab", "abc"]


def test_sorts_leave_input_untouched():
    words = list(WORDS)
    counting_sort_words(words)
    parallel_sort(words)
    assert words == WORDS


def test_empty_input_sorts_to_empty():
    assert parallel_sort([], 4) == []
    assert counting_sort_words([], 4) == []


@pytest.mark.parametrize("sorter", [parallel_sort, counting_sort_words])
def test_invalid_thread_count(sorter):
    with pytest.raises(ValueError):
        sorter(WORDS, 0)


def test_main_reports_loaded_words(dictionary, capsys):
    assert main(["--dict", str(dictionary), "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Loaded 4 words from dictionary." in out
    assert out.count("First 10 words after sorting:") == 4


def test_main_missing_dictionary(tmp_path, capsys):
    assert main(["--dict", str(tmp_path / "absent")]) == 1
    assert "cannot load dictionary" in capsys.readouterr().err