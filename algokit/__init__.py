"""Sorting, searching and recursion algorithms, a threaded word sorter and a heartbeat process watchdog."""

__version__ = "0.1.0"
__all__ = ["sorts", "recursion", "watchdog", "watchdog_process", "wordsort"]