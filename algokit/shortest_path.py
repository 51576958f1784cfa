"""Single-source and all-pairs shortest paths on directed weighted graphs."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Sequence

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest paths undefined."""


class WeightedGraph:
    """Directed graph on vertices ``1..n`` with weighted edges."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self.n = n
        self.edge_count = 0
        self._adj: list[list[tuple[int, float]]] = [[] for _ in range(n + 1)]

    def _check(self, u: int) -> None:
        if not 1 <= u <= self.n:
            raise ValueError(f"vertex {u} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int, w: float) -> None:
        """Add a directed edge ``u -> v`` of weight ``w``."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, w))
        self.edge_count += 1


def bellman_ford(graph: WeightedGraph, source: int) -> dict[int, float]:
    """Distances from ``source``; unreachable vertices get ``inf``.

    Raises NegativeCycleError when a negative cycle is reachable from ``source``.
    """
    graph._check(source)
    dist = [INF] * (graph.n + 1)
    dist[source] = 0
    for _ in range(graph.n - 1):
        changed = False
        for u in range(1, graph.n + 1):
            du = dist[u]
            for v, w in graph._adj[u]:
                if dist[v] > du + w:
                    dist[v] = du + w
                    changed = True
        if not changed:
            break
    for u in range(1, graph.n + 1):
        for v, w in graph._adj[u]:
            if dist[v] > dist[u] + w:
                raise NegativeCycleError("graph contains a negative cycle")
    return {v: dist[v] for v in range(1, graph.n + 1)}


def dijkstra(graph: WeightedGraph, source: int) -> dict[int, float]:
    """Distances from ``source`` for non-negative weights; unreachable get ``inf``."""
    graph._check(source)
    dist = [INF] * (graph.n + 1)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in graph._adj[u]:
            if dist[v] > d + w:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return {v: dist[v] for v in range(1, graph.n + 1)}


def johnson(graph: WeightedGraph) -> dict[int, dict[int, float]]:
    """All-pairs distances as ``{u: {v: dist}}``; negative edges are allowed.

    Raises NegativeCycleError when the graph has a negative cycle.
    """
    n = graph.n
    extended = WeightedGraph(n + 1)
    for u in range(1, n + 1):
        for v, w in graph._adj[u]:
            extended.add_edge(u, v, w)
    for v in range(1, n + 1):
        extended.add_edge(n + 1, v, 0)
    h = bellman_ford(extended, n + 1)

    reweighted = WeightedGraph(n)
    for u in range(1, n + 1):
        for v, w in graph._adj[u]:
            reweighted.add_edge(u, v, w + h[u] - h[v])

    result: dict[int, dict[int, float]] = {}
    for u in range(1, n + 1):
        row = dijkstra(reweighted, u)
        result[u] = {v: d + h[v] - h[u] for v, d in row.items()}
    return result


def _format(value: float) -> str:
    return "inf" if value == INF else str(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its shortest distances.

    By default reads ``n`` and an ``n`` by ``n`` weight matrix and prints all
    pairs; with ``--single`` reads ``n m s`` and ``m`` undirected edges.
    """
    parser = argparse.ArgumentParser(description="Shortest path distances.")
    parser.add_argument(
        "--single", action="store_true",
        help="single-source distances over an undirected edge list",
    )
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        if args.single:
            n, m, s = (int(next(tokens)) for _ in range(3))
            graph = WeightedGraph(n)
            for _ in range(m):
                u, v, w = int(next(tokens)), int(next(tokens)), int(next(tokens))
                graph.add_edge(u, v, w)
                graph.add_edge(v, u, w)
            dist = bellman_ford(graph, s)
            print(" ".join(_format(d) for d in dist.values()))
        else:
            n = int(next(tokens))
            graph = WeightedGraph(n)
            for i in range(1, n + 1):
                for j in range(1, n + 1):
                    graph.add_edge(i, j, int(next(tokens)))
            for row in johnson(graph).values():
                print(" ".join(_format(d) for d in row.values()))
    except StopIteration:
        raise SystemExit("unexpected end of input") from None
    except NegativeCycleError as exc:
        print(exc, file=sys.stderr)
        return 1
    except ValueError as exc:
        raise SystemExit(f"invalid input: {exc}") from exc
    return 0