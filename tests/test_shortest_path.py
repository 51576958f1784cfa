import io
import math

import pytest
from hypothesis import given, strategies as st

from algokit.shortest_path import (
    NegativeCycleError,
    WeightedGraph,
    bellman_ford,
    dijkstra,
    johnson,
    main,
)


def _graph(n, edges):
    g = WeightedGraph(n)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def test_negative_edge_small_example():
    g = _graph(3, [(1, 2, -2), (2, 3, 3), (1, 3, 4)])
    assert bellman_ford(g, 1)[3] == 1
    assert johnson(g)[1][3] == 1


def test_source_is_zero_and_unreachable_is_inf():
    g = _graph(3, [(1, 2, 5)])
    dist = dijkstra(g, 1)
    assert dist[1] == 0
    assert dist[2] == 5
    assert dist[3] == math.inf
    assert bellman_ford(g, 2)[1] == math.inf


def test_negative_cycle_detected():
    g = _graph(2, [(1, 2, 1), (2, 1, -3)])
    with pytest.raises(NegativeCycleError):
        bellman_ford(g, 1)
    with pytest.raises(NegativeCycleError):
        johnson(g)


def test_bad_vertices_rejected():
    g = WeightedGraph(2)
    with pytest.raises(ValueError):
        g.add_edge(1, 3, 1)
    with pytest.raises(ValueError):
        dijkstra(g, 0)


_nonneg_edges = st.lists(
    st.tuples(
        st.integers(min_value=1, max_value=6),
        st.integers(min_value=1, max_value=6),
        st.integers(min_value=0, max_value=20),
    ),
    max_size=25,
)


@given(_nonneg_edges, st.integers(min_value=1, max_value=6))
def test_dijkstra_agrees_with_bellman_ford(edges, source):
    g = _graph(6, edges)
    assert dijkstra(g, source) == bellman_ford(g, source)


@given(_nonneg_edges, st.integers(min_value=1, max_value=6))
def test_triangle_inequality(edges, source):
    g = _graph(6, edges)
    dist = dijkstra(g, source)
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w


@given(
    st.lists(
        st.tuples(
            st.integers(min_value=1, max_value=5),
            st.integers(min_value=1, max_value=5),
            st.integers(min_value=-10, max_value=10),
        ),
        max_size=20,
    )
)
def test_johnson_matches_bellman_ford_on_dags(raw):
    edges = [(u, v, w) for u, v, w in raw if u < v]
    g = _graph(5, edges)
    table = johnson(g)
    for u in range(1, 6):
        assert table[u] == bellman_ford(g, u)


def test_main_all_pairs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 5\n7 0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["0 5", "7 0"]


def test_main_single(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1 1\n1 2 4\n"))
    assert main(["--single"]) == 0
    assert capsys.readouterr().out.split() == ["0", "4", "inf"]


def test_main_negative_cycle(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 1\n-3 0\n"))
    assert main([]) == 1
    assert "negative cycle" in capsys.readouterr().err