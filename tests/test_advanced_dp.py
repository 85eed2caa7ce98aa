import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.advanced_dp import (
    EditOperation,
    edit_distance,
    edit_script,
    matrix_chain_cost,
    matrix_chain_parenthesization,
    optimal_bst_cost,
)

words = st.text(alphabet="abcde", max_size=12)


def test_edit_distance_classic_example():
    assert edit_distance("kitten", "sitting") == 3


def test_edit_distance_against_empty():
    assert edit_distance("", "abc") == 3
    assert edit_distance("abcd", "") == 4
    assert edit_distance("", "") == 0


@given(words, words)
def test_edit_distance_properties(a, b):
    d = edit_distance(a, b)
    assert d == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))
    assert (d == 0) == (a == b)


@given(words, words)
def test_edit_script_rebuilds_both_strings(a, b):
    steps = edit_script(a, b)
    source = "".join(s for op, s, _ in steps if op is not EditOperation.INSERT)
    target = "".join(t for op, _, t in steps if op is not EditOperation.DELETE)
    assert source == a
    assert target == b
    changes = sum(1 for op, _, _ in steps if op is not EditOperation.MATCH)
    assert changes == edit_distance(a, b)


def test_edit_script_of_equal_strings_is_all_matches():
    steps = edit_script("abc", "abc")
    assert [op for op, _, _ in steps] == [EditOperation.MATCH] * 3


def test_edit_script_single_replace():
    assert edit_script("a", "b") == [(EditOperation.REPLACE, "a", "b")]


def test_matrix_chain_textbook_example():
    assert matrix_chain_cost([10, 30, 5, 60]) == 4500
    assert matrix_chain_parenthesization([10, 30, 5, 60]) == "((A1A2)A3)"


def test_matrix_chain_single_matrix():
    assert matrix_chain_cost([4, 7]) == 0
    assert matrix_chain_parenthesization([4, 7]) == "A1"


@given(st.integers(1, 50), st.integers(1, 50), st.integers(1, 50))
def test_matrix_chain_two_matrices(p, q, r):
    assert matrix_chain_cost([p, q, r]) == p * q * r
    assert matrix_chain_parenthesization([p, q, r]) == "(A1A2)"


@given(st.lists(st.integers(1, 30), min_size=2, max_size=8))
def test_matrix_chain_names_every_matrix_in_order(dims):
    text = matrix_chain_parenthesization(dims)
    names = text.replace("(", " ").replace(")", " ").replace("A", " A").split()
    assert names == [f"A{i}" for i in range(1, len(dims))]
    assert text.count("(") == text.count(")") == len(dims) - 2


@given(st.lists(st.integers(1, 30), min_size=4, max_size=8))
def test_matrix_chain_no_worse_than_left_to_right(dims):
    left_to_right = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, len(dims) - 1))
    assert matrix_chain_cost(dims) <= left_to_right


def test_matrix_chain_rejects_bad_input():
    with pytest.raises(ValueError):
        matrix_chain_cost([5])
    with pytest.raises(ValueError):
        matrix_chain_cost([3, 0, 2])


def test_optimal_bst_textbook_example():
    assert optimal_bst_cost([34, 8, 50]) == pytest.approx(142)


def test_optimal_bst_trivial_cases():
    assert optimal_bst_cost([]) == 0
    assert optimal_bst_cost([12]) == 12


@given(st.lists(st.integers(0, 100), min_size=1, max_size=9))
def test_optimal_bst_bounds(freqs):
    cost = optimal_bst_cost(freqs)
    total = sum(freqs)
    assert total <= cost + 1e-9
    assert cost <= total * len(freqs) + 1e-9


def test_optimal_bst_rejects_negative_frequency():
    with pytest.raises(ValueError):
        optimal_bst_cost([1, -2])