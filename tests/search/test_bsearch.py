"""
tests/search/test_bsearch.py

Covers:
  - Exact matches (first, middle, last)
  - Negated insertion points for missing values
  - Custom comparators and probe values of another type
  - Invalid input
  - sort_with
"""

import pytest

from gametime.search import bsearch, compare, sort_with


@pytest.fixture
def tens():
    return [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]


class TestFound:

    def test_middle(self, tens):
        assert bsearch(tens, 50) == 4

    def test_first(self, tens):
        assert bsearch(tens, 10) == 0

    def test_last(self, tens):
        assert bsearch(tens, 100) == 9

    def test_every_element(self, tens):
        for i, v in enumerate(tens):
            assert bsearch(tens, v, compare) == i

    def test_single_element(self):
        assert bsearch([7], 7) == 0


class TestInsertionPoint:

    def test_between(self, tens):
        assert bsearch(tens, 55) == -5

    def test_past_end(self, tens):
        assert bsearch(tens, 105) == -10

    def test_before_start_is_zero(self, tens):
        assert bsearch(tens, 5) == 0


class TestComparators:

    def test_extent_by_start(self):
        months = [
            {"start": 0, "name": "Jan", "length": 31},
            {"start": 31, "name": "Feb", "length": 28},
            {"start": 59, "name": "Mar", "length": 31},
        ]

        def by_start(a, b):
            return compare(a["start"], b["start"])

        assert bsearch(months, {"start": 31, "name": "", "length": 0}, by_start) == 1

    def test_descending_comparator(self):
        def descending(a, b):
            return compare(b, a)

        assert bsearch([9, 7, 5, 3], 5, descending) == 2

    def test_invalid_comparator_result(self, tens):
        with pytest.raises(ValueError):
            bsearch(tens, 50, lambda a, b: 2)


class TestInvalidInput:

    def test_empty(self):
        with pytest.raises(ValueError):
            bsearch([], 1)

    @pytest.mark.parametrize("seq", [None, {1, 2, 3}, "abc", 12])
    def test_not_a_sequence(self, seq):
        with pytest.raises(TypeError):
            bsearch(seq, 1)


class TestSortWith:

    def test_sort_records(self):
        records = [{"start": 59}, {"start": 0}, {"start": 31}]
        ordered = sort_with(records, lambda a, b: compare(a["start"], b["start"]))
        assert [r["start"] for r in ordered] == [0, 31, 59]

    def test_does_not_mutate(self):
        values = [3, 1, 2]
        assert sort_with(values) == [1, 2, 3]
        assert values == [3, 1, 2]
