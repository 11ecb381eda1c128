"""Sequence editor - slice and reorder word lists.

Every operation returns a new list and leaves its input untouched. Python
slicing silently truncates, so each operation checks its minimum length first
and raises SequenceTooShortError instead.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from .errors import SequenceTooShortError

T = TypeVar("T")


def _require(operation: str, seq: Sequence[T], minimum: int) -> None:
    if len(seq) < minimum:
        raise SequenceTooShortError(operation, minimum, len(seq))


def first_two(seq: Sequence[T]) -> list[T]:
    """Return the first two elements in their original order."""
    _require("first_two", seq, 2)
    return list(seq[0:2])


def last_two(seq: Sequence[T]) -> list[T]:
    """Return the last two elements in their original order."""
    _require("last_two", seq, 2)
    return list(seq[len(seq) - 2 :])


def rotate_first_two_to_end(seq: Sequence[T]) -> list[T]:
    """Move the first two elements to the end.

    Example:
        rotate_first_two_to_end(["a", "b", "c"])  # ["c", "a", "b"]
    """
    _require("rotate_first_two_to_end", seq, 2)
    items: list[T] = list(seq[2:])
    items.extend(seq[0:2])
    return items


def insert_before_last(seq: Sequence[T], element: T) -> list[T]:
    """Insert ``element`` immediately before the last element.

    Example:
        insert_before_last(["a", "b"], "c")  # ["a", "c", "b"]
    """
    _require("insert_before_last", seq, 1)
    items: list[T] = list(seq[0 : len(seq) - 1])
    items.append(element)
    items.append(seq[-1])
    return items


__all__ = [
    "first_two",
    "last_two",
    "rotate_first_two_to_end",
    "insert_before_last",
]
