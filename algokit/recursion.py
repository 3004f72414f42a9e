"""Recursive exercises: Fibonacci, string helpers, list reversal, stack sort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A singly linked list node."""

    data: Any
    next: Optional["Node"] = None


def fibonacci(index: int) -> int:
    """Return the Fibonacci element at ``index``; indices below 2 give 1."""
    if index < 2:
        return 1
    return fibonacci(index - 1) + fibonacci(index - 2)


def flip_list(first: Optional[Node]) -> Optional[Node]:
    """Reverse a linked list recursively and return its new head."""
    if first is None or first.next is None:
        return first
    head = flip_list(first.next)
    first.next.next = first
    first.next = None
    return head


def str_len(text: str) -> int:
    """Count the characters of ``text`` recursively."""
    if not text:
        return 0
    return 1 + str_len(text[1:])


def str_cmp(first: str, second: str) -> bool:
    """Tell whether two strings are equal, comparing one character at a time."""
    if not first or not second:
        return first == second
    if first[0] != second[0]:
        return False
    return str_cmp(first[1:], second[1:])


def _copy(src: str) -> str:
    if not src:
        return ""
    return src[0] + _copy(src[1:])


def str_cat(dst: str, src: str) -> str:
    """Return ``dst`` with ``src`` appended."""
    return dst + _copy(src)


def str_str(haystack: str, needle: str) -> Optional[str]:
    """Return the tail of ``haystack`` starting at the first ``needle``, or None."""
    if haystack.startswith(needle):
        return haystack
    if len(haystack) <= len(needle):
        return None
    return str_str(haystack[1:], needle)


def insert_sorted(stack: list[Any], value: Any) -> list[Any]:
    """Push ``value`` into a stack kept ascending from bottom to top."""
    if not stack or stack[-1] <= value:
        stack.append(value)
        return stack
    top = stack.pop()
    insert_sorted(stack, value)
    stack.append(top)
    return stack


def sort_stack(stack: list[Any]) -> list[Any]:
    """Sort a stack in place so the largest element ends on top."""
    if stack:
        top = stack.pop()
        sort_stack(stack)
        insert_sorted(stack, top)
    return stack