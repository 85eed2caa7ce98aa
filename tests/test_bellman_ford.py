import math

import pytest
from hypothesis import given, strategies as st

from algolab.bellman_ford import BellmanFordResult, NegativeCycleError, bellman_ford

EDGES = [(0, 1, 4), (0, 2, 5), (1, 2, -3), (2, 3, 2)]


def test_negative_edge_distances():
    result = bellman_ford(4, EDGES, 0)
    assert result.distances == (0, 4, 1, 3)


def test_paths_match_distances():
    result = bellman_ford(4, EDGES, 0)
    weights = {(u, v): w for u, v, w in EDGES}
    for vertex in range(4):
        path = result.path_to(vertex)
        assert path[0] == 0 and path[-1] == vertex
        assert sum(weights[a, b] for a, b in zip(path, path[1:])) == result.distances[vertex]


def test_source_path_is_itself():
    result = bellman_ford(3, [(0, 1, 1)], 0)
    assert result.path_to(0) == [0]


def test_unreachable_vertex():
    result = bellman_ford(3, [(0, 1, 1)], 0)
    assert result.distances[2] == math.inf
    assert result.predecessors[2] is None
    assert result.path_to(2) == []


def test_negative_cycle_raises():
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)], 0)


def test_unreachable_negative_cycle_is_ignored():
    result = bellman_ford(4, [(0, 1, 1), (2, 3, -2), (3, 2, 1)], 0)
    assert result.distances[:2] == (0, 1)
    assert result.distances[2] == math.inf


def test_bad_source():
    with pytest.raises(ValueError):
        bellman_ford(2, [], 2)


def test_trace_reports_relaxations():
    lines = []
    bellman_ford(3, [(0, 1, 2), (1, 2, 3)], 0, trace=lines.append)
    assert lines[0] == "Iteration 1:"
    assert "Relaxed edge 0->1: dist[1] = 2" in lines


@given(
    st.integers(min_value=1, max_value=6).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(
                st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 30)),
                max_size=15,
            ),
        )
    )
)
def test_no_edge_can_improve_result(data):
    n, edges = data
    result = bellman_ford(n, edges, 0)
    assert isinstance(result, BellmanFordResult)
    assert result.distances[0] == 0
    for u, v, w in edges:
        assert result.distances[v] <= result.distances[u] + w