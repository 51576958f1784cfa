"""Eulerian trails in undirected multigraphs."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Sequence


class MultiGraph:
    """Undirected multigraph on vertices ``1..n``; loops and parallel edges allowed."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a graph needs at least one vertex")
        self.n = n
        self.edge_count = 0
        self._adj: list[Counter[int]] = [Counter() for _ in range(n + 1)]
        self._degree = [0] * (n + 1)

    def _check(self, u: int) -> None:
        if not 1 <= u <= self.n:
            raise ValueError(f"vertex {u} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u][v] += 1
        self._adj[v][u] += 1
        self._degree[u] += 1
        self._degree[v] += 1
        self.edge_count += 1

    def remove_edge(self, u: int, v: int) -> bool:
        """Remove one edge between ``u`` and ``v``; return whether one existed."""
        self._check(u)
        self._check(v)
        if self._adj[u][v] == 0:
            return False
        _discard(self._adj, self._degree, u, v)
        self.edge_count -= 1
        return True

    def degree(self, u: int) -> int:
        """Number of edge ends at ``u``; a loop counts twice."""
        self._check(u)
        return self._degree[u]


def _discard(adj: list[Counter[int]], degree: list[int], u: int, v: int) -> None:
    for a, b in ((u, v), (v, u)):
        adj[a][b] -= 1
        if adj[a][b] == 0:
            del adj[a][b]
        degree[a] -= 1


def find_euler_path(graph: MultiGraph) -> list[int] | None:
    """Return an Eulerian trail as a vertex list, or ``None`` if there is none.

    Connectivity is judged from vertex 1. The graph itself is left unchanged.
    """
    n = graph.n
    adj = [Counter(c) for c in graph._adj]
    degree = list(graph._degree)

    visited = {1}
    stack = [1]
    while stack:
        u = stack.pop()
        for v in adj[u]:
            if v not in visited:
                visited.add(v)
                stack.append(v)
    if any(degree[v] > 0 and v not in visited for v in range(1, n + 1)):
        return None

    odd = [v for v in range(1, n + 1) if degree[v] % 2]
    if len(odd) not in (0, 2):
        return None
    start = odd[0] if odd else 1

    path: list[int] = []
    trail = [start]
    while trail:
        u = trail[-1]
        if degree[u]:
            v = min(adj[u])
            _discard(adj, degree, u, v)
            trail.append(v)
        else:
            path.append(trail.pop())
    return path


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print an Eulerian trail for each."""
    tokens = iter(sys.stdin.read().split())
    try:
        cases = int(next(tokens))
        for _ in range(cases):
            n, m = int(next(tokens)), int(next(tokens))
            graph = MultiGraph(n)
            for _ in range(m):
                graph.add_edge(int(next(tokens)), int(next(tokens)))
            path = find_euler_path(graph)
            if path is None:
                print("No")
            else:
                print("Yes")
                print(len(path))
                print(" ".join(map(str, path)))
    except StopIteration:
        raise SystemExit("unexpected end of input") from None
    except ValueError as exc:
        raise SystemExit(f"invalid input: {exc}") from exc
    return 0