"""Maximum bipartite matching by augmenting paths."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class BipartiteGraph:
    """Bipartite graph with left vertices ``1..n_left`` and right ``1..n_right``."""

    def __init__(self, n_left: int, n_right: int) -> None:
        if n_left < 0 or n_right < 0:
            raise ValueError("vertex counts must not be negative")
        self.n_left = n_left
        self.n_right = n_right
        self.edge_count = 0
        self._adj: list[list[int]] = [[] for _ in range(n_left + 1)]

    def add_edge(self, left: int, right: int) -> None:
        """Join left vertex ``left`` to right vertex ``right``; repeats are allowed."""
        if not 1 <= left <= self.n_left:
            raise ValueError(f"left vertex {left} is outside 1..{self.n_left}")
        if not 1 <= right <= self.n_right:
            raise ValueError(f"right vertex {right} is outside 1..{self.n_right}")
        self._adj[left].append(right)
        self.edge_count += 1


def _augment(
    adj: list[list[int]],
    match_left: dict[int, int],
    match_right: dict[int, int],
    root: int,
) -> bool:
    visited: set[int] = set()
    stack = [(root, iter(adj[root]))]
    via: list[int] = []
    while stack:
        _, edges = stack[-1]
        for v in edges:
            if v not in visited:
                visited.add(v)
                break
        else:
            stack.pop()
            if via:
                via.pop()
            continue
        via.append(v)
        owner = match_right.get(v)
        if owner is None:
            for (u, _), w in zip(stack, via):
                match_left[u] = w
                match_right[w] = u
            return True
        stack.append((owner, iter(adj[owner])))
    return False


def max_matching(graph: BipartiteGraph) -> dict[int, int]:
    """Return a maximum matching as ``{left: right}`` ordered by left vertex."""
    match_left: dict[int, int] = {}
    match_right: dict[int, int] = {}
    for u in range(1, graph.n_left + 1):
        _augment(graph._adj, match_left, match_right, u)
    return dict(sorted(match_left.items()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print a maximum matching for each."""
    tokens = iter(sys.stdin.read().split())
    try:
        cases = int(next(tokens))
        for _ in range(cases):
            n_left, n_right, e = (int(next(tokens)) for _ in range(3))
            graph = BipartiteGraph(n_left, n_right)
            for _ in range(e):
                graph.add_edge(int(next(tokens)), int(next(tokens)))
            matching = max_matching(graph)
            print(len(matching))
            # Right vertices are numbered after the left ones in the output.
            for left, right in matching.items():
                print(f"{left} {n_left + right}")
    except StopIteration:
        raise SystemExit("unexpected end of input") from None
    except ValueError as exc:
        raise SystemExit(f"invalid input: {exc}") from exc
    return 0