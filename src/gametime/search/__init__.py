"""
gametime.search
~~~~~~~~~~~~~~~

Ordering helpers driven by an explicit three-way comparator.

A comparator takes two values and returns -1, 0 or 1.  Values never need to
carry their own comparison method; the comparator is always passed in.

Basic usage::

    from gametime.search import bsearch, sort_with

    bsearch([10, 20, 30], 20)     # → 1
    bsearch([10, 20, 30], 25)     # → -2   (insert at index 2)

Public API
----------
bsearch    Binary search returning the index or the negated insertion point.
compare    Natural three-way comparison using ``<`` and ``==``.
sort_with  Sort a copy of an iterable with a three-way comparator.
"""

from __future__ import annotations

from gametime.search.search import Comparator, bsearch, compare, sort_with

__all__ = [
    "Comparator",
    "bsearch",
    "compare",
    "sort_with",
]
