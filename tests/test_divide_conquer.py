import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.divide_conquer import array_sum, binary_search, find_max

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=200)


@given(int_lists)
def test_find_max_agrees_with_builtin(values):
    assert find_max(values) == max(values)


def test_find_max_single_element():
    assert find_max([42]) == 42


def test_find_max_empty_raises():
    with pytest.raises(ValueError):
        find_max([])


def test_binary_search_known_position():
    assert binary_search([1, 3, 5, 7, 9], 7) == 3


def test_binary_search_missing_returns_none():
    assert binary_search([1, 3, 5, 7, 9], 4) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@given(int_lists, st.integers(min_value=-1000, max_value=1000))
def test_binary_search_invariant(values, target):
    ordered = sorted(values)
    index = binary_search(ordered, target)
    if target in ordered:
        assert ordered[index] == target
    else:
        assert index is None


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_array_sum_agrees_with_builtin(values):
    assert array_sum(values) == sum(values)


def test_array_sum_empty_is_zero():
    assert array_sum([]) == 0