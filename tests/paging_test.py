# tests/paging_test.py
from __future__ import annotations

import pytest

from src.queries import InvalidArgumentError, QueryConfig, QueryHelper, page_count, paging


def identity(x):
    return x


# ───────────────────────── basic windows ───────────────────────── #

def test_third_page_of_250():
    assert list(paging(range(1, 251), identity, count_on_page=100, page_number=3)) == list(range(201, 251))


def test_page_past_the_end_is_empty():
    assert list(paging(range(1, 251), identity, count_on_page=100, page_number=4)) == []
    assert list(paging([], identity)) == []


def test_defaults_are_first_page_of_100():
    assert list(paging(range(500, 0, -1), identity)) == list(range(1, 101))


def test_filter_applies_before_sorting_and_skipping():
    evens = paging(range(50, 0, -1), identity, filter=lambda x: x % 2 == 0, count_on_page=5, page_number=2)
    assert list(evens) == [12, 14, 16, 18, 20]


def test_sort_is_stable_on_equal_keys():
    rows = [("b", 1), ("a", 2), ("b", 3), ("a", 4), ("c", 5)]
    page = paging(rows, ordering=lambda r: r[0], count_on_page=10)
    assert list(page) == [("a", 2), ("a", 4), ("b", 1), ("b", 3), ("c", 5)]


@pytest.mark.parametrize("size", [1, 3, 7, 10, 11])
def test_pages_concatenate_to_the_sorted_sequence(size):
    data = [17, 3, 9, 3, 12, 1, 8, 20, 5, 14]
    expected = sorted(x for x in data if x != 12)
    pages = []
    for n in range(1, page_count(len(expected), size) + 2):
        page = list(paging(data, identity, filter=lambda x: x != 12, count_on_page=size, page_number=n))
        assert len(page) <= size
        pages.extend(page)
    assert pages == expected


def test_input_is_not_mutated():
    data = [3, 1, 2]
    list(paging(data, identity))
    assert data == [3, 1, 2]


# ───────────────────────── argument validation ───────────────────────── #

@pytest.mark.parametrize("kwargs", [
    {"count_on_page": 0},
    {"count_on_page": -5},
    {"page_number": 0},
    {"page_number": -1},
    {"count_on_page": 2.5},
    {"page_number": True},
    {"count_on_page": None},
])
def test_invalid_paging_arguments_raise_eagerly(kwargs):
    # raised at call time, not on first iteration
    with pytest.raises(InvalidArgumentError):
        paging([1, 2, 3], identity, **kwargs)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        paging([1], identity, page_number=0)


def test_page_count():
    assert page_count(0, 100) == 0
    assert page_count(1, 100) == 1
    assert page_count(250, 100) == 3
    assert page_count(300, 100) == 3
    with pytest.raises(InvalidArgumentError):
        page_count(10, 0)
    with pytest.raises(InvalidArgumentError):
        page_count(-1, 10)


# ───────────────────────── QueryHelper.paging ───────────────────────── #

def test_helper_paging_uses_configured_page_size():
    q = QueryHelper(QueryConfig(default_page_size=4))
    assert list(q.paging(range(10), identity)) == [0, 1, 2, 3]
    assert list(q.paging(range(10), identity, page_number=3)) == [8, 9]
    assert list(q.paging(range(10), identity, count_on_page=6, page_number=2)) == [6, 7, 8, 9]


def test_helper_paging_default_is_100():
    q = QueryHelper()
    assert len(list(q.paging(range(1000), identity))) == 100
    with pytest.raises(InvalidArgumentError):
        q.paging(range(10), identity, page_number=0)
