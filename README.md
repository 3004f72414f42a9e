# algokit

Classic sorting and searching algorithms, some recursive exercises, a word
sorter that works across threads, and a watchdog that keeps a partner process
alive by exchanging heartbeat signals.

## Installation

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

### `algokit.sorts`

Every sort takes an iterable and returns a new list. The input is left as it is.

- `bubble_sort`, `selection_sort`, `insertion_sort` and `merge_sort` sort
  integers in ascending order. `merge_sort` is stable.
- `unstable_counting_sort` and `radix_sort` accept non-negative integers only.
  They raise `ValueError` if any value is negative.
- `quick_sort(values, compare)` sorts any items with a three-way `compare`
  function. The function returns a negative number, zero or a positive number.
- `iter_binary_search(values, target)` and `recurs_binary_search(values, target)`
  search a sorted sequence. They return the index of `target`, or `-1` if it
  is not there.

```python
from algokit.sorts import quick_sort, iter_binary_search

values = quick_sort([3, 1, 4, 1, 5, 9, 2, 6], lambda a, b: a - b)
print(values)                         # [1, 1, 2, 3, 4, 5, 6, 9]
print(iter_binary_search(values, 5))  # 5
```

### `algokit.recursion`

- `fibonacci(index)` returns 1 for any index below 2.
- `Node` is a linked-list node with the fields `data` and `next`.
  `flip_list(first)` reverses a chain of nodes and returns the new head.
- String helpers:
  - `str_len` returns the length of a string.
  - `str_cmp` returns `True` when two strings are equal.
  - `str_cat(dst, src)` returns the two strings joined.
  - `str_str(haystack, needle)` returns the part of `haystack` that starts at
    the first occurrence of `needle`, or `None` if `needle` does not occur.
- `sort_stack(stack)` sorts a list used as a stack in place, with the largest
  item on top. `insert_sorted(stack, value)` pushes one value into a stack that
  is already sorted.

### `algokit.wordsort`

- `load_words(path, limit)` reads up to `limit` non-empty lines. The defaults
  are `/usr/share/dict/words` and 100000 lines.
- `shuffle_words(words, seed)` returns the words in random order. The same
  seed gives the same order.
- `parallel_sort(words, num_threads)` splits the words into nearly equal
  chunks, sorts each chunk in its own thread and merges the results.
- `counting_sort_words(words, num_threads)` does the same, but first lowers the
  case of every word and sorts each chunk with per-character counting passes.

A `num_threads` below 1 raises `ValueError`.

### `algokit.watchdog`

`Watchdog(threshold, interval, argv)` watches a partner process.

- `start()` does the following:
  - publishes the settings in the environment (`WD_THRESHOLD`, `WD_INTERVAL`,
    `WD_CLIENT_PID`, `WD_RUNNING`, `WD_PROCESS_TYPE`);
  - installs handlers for `SIGUSR1` and `SIGUSR2`;
  - starts a background thread.
- Which process is watched depends on `argv`:
  - If `argv` has more than two entries, `argv[1:]` is started as the partner
    process, and its PID is stored in `WD_PID`.
  - Otherwise `WD_PID` holds the current process's own PID.
- At each interval the thread sends `SIGUSR1` to the process named by `WD_PID`
  (`send_signal`) and counts it.
- Each `SIGUSR1` received resets the count (`reset_counter`).
- When the count reaches the threshold, `check_threshold` starts `argv[0]`
  again.
- A `SIGUSR2`, or a call to `request_stop()`, asks the thread to finish.
- `stop()` joins the thread, restores the previous signal handlers and removes
  the settings (`clear_environment`).

Failures raise `WatchdogError`. Its `code` attribute holds a negative failure
code, for example `SET_ENV_FAILURE` when `stop()` is called while `WD_PID` is
not set.

`start()` installs signal handlers, so it must be called from the main thread.

### `algokit.watchdog_process`

This is the partner program. `read_settings(environ)` returns
`(threshold, interval)` from `WD_THRESHOLD` and `WD_INTERVAL`. If either is
missing or not a positive integer, it raises `WatchdogError`.

`main()` runs its own `Watchdog` until it is asked to stop, then returns the
status code.

## Commands

Time a threaded sort of a word list with 1, 2, 4 and 8 threads:

```
algokit-wordsort [--dict PATH] [--seed N]
```

Run the watchdog partner process. It needs `WD_THRESHOLD` and `WD_INTERVAL`
set in its environment:

```
WD_THRESHOLD=3 WD_INTERVAL=1 algokit-watchdog
```

## Limitations

- The watchdog relies on `SIGUSR1` and `SIGUSR2`, so it works on POSIX systems
  only.
- Diagnostics go to the standard `logging` module. No log file of its own is
  written.
- Processes are restarted from `argv[0]` alone, without the other arguments.

## Tests

```
pytest
```