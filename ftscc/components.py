"""Strongly connected components and their update after edge changes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from .ftrs import FtrsIndex


def kosaraju(adj: Sequence[Sequence[int]]) -> set[frozenset[int]]:
    """Return the strongly connected components of a graph."""
    n = len(adj)
    visited = [False] * n
    finish: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                finish.append(u)

    reversed_adj: list[list[int]] = [[] for _ in range(n)]
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            reversed_adj[v].append(u)

    visited = [False] * n
    components: set[frozenset[int]] = set()
    for root in reversed(finish):
        if visited[root]:
            continue
        visited[root] = True
        component = {root}
        stack = [root]
        while stack:
            u = stack.pop()
            for v in reversed_adj[u]:
                if not visited[v]:
                    visited[v] = True
                    component.add(v)
                    stack.append(v)
        components.add(frozenset(component))
    return components


def compute_h(
    index: FtrsIndex,
    sources: Iterable[int],
    inserted: Iterable[tuple[int, int]],
) -> list[list[int]]:
    """Union of the forward and reverse k-FTRS of ``sources`` plus inserted edges.

    An edge is kept as many times as it occurs in the single FTRS holding it
    most often. Edges come out ordered by tail and head, inserted edges last.
    """
    multiplicity: Counter[tuple[int, int]] = Counter()
    for v in set(sources):
        forward = Counter(
            (i, j) for i, heads in enumerate(index.forward[v]) for j in heads
        )
        backward = Counter(
            (j, i) for i, heads in enumerate(index.reverse[v]) for j in heads
        )
        for counts in (forward, backward):
            for edge, count in counts.items():
                multiplicity[edge] = max(multiplicity[edge], count)

    h: list[list[int]] = [[] for _ in range(index.n)]
    for (u, v), count in sorted(multiplicity.items()):
        h[u].extend([v] * count)
    for u, v in inserted:
        h[u].append(v)
    return h


def update_sccs(
    c1: Iterable[Iterable[int]],
    c2: Iterable[Iterable[int]],
    sources: Iterable[int],
) -> set[frozenset[int]]:
    """Merge components: those of ``c2`` around ``sources`` replace what they cover in ``c1``."""
    remaining = {frozenset(component) for component in c1}
    replacements = [frozenset(component) for component in c2]
    result: set[frozenset[int]] = set()
    for v in set(sources):
        around = next((c for c in replacements if v in c), None)
        if not around:
            continue
        remaining = {b for b in remaining if not b <= around}
        result.add(around)
    result.update(remaining)
    return result