from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Literal, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], Literal[-1, 0, 1]]


def compare(a: Any, b: Any) -> Literal[-1, 0, 1]:
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def bsearch(seq: Sequence[T], value: Any, cmp: Comparator = compare) -> int:
    """
    Binary search over ``seq``, which must be ascending under ``cmp``.

    ``cmp`` is always called as ``cmp(value, element)``, so ``value`` may be
    of a different type than the elements (a probe).

    Returns the index of a matching element, or the negated insertion index
    when there is none.  A result of ``0`` is ambiguous between "found at 0"
    and "insert at 0"; callers treat it as found.
    """
    if not isinstance(seq, Sequence) or isinstance(seq, (str, bytes)):
        raise TypeError(
            f"bsearch() needs a sequence to search; got {type(seq).__name__}."
        )
    if not seq:
        raise ValueError("bsearch() needs a non-empty sequence.")

    low, high = 0, len(seq) - 1
    while low <= high:
        mid = (low + high) // 2
        c = cmp(value, seq[mid])
        if c == -1:
            high = mid - 1
        elif c == 1:
            low = mid + 1
        elif c == 0:
            return mid
        else:
            raise ValueError(
                f"Comparator must return -1, 0 or 1; got {c!r}."
            )
    return -low


def sort_with(items: Iterable[T], cmp: Comparator = compare) -> list[T]:
    return sorted(items, key=cmp_to_key(cmp))
