"""Plain adjacency-list helpers: edge removal, reachability, subgraphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from contextlib import suppress
from typing import Union

Adjacency = Union[Sequence[Sequence[int]], Mapping[int, Sequence[int]]]


def _neighbours(adj: Adjacency, u: int) -> Sequence[int]:
    if isinstance(adj, Mapping):
        return adj.get(u, ())
    return adj[u]


def remove_failed_edges(
    adj: Sequence[Sequence[int]],
    failed: Iterable[tuple[int, int]],
    reverse: bool = False,
) -> list[list[int]]:
    """Return a copy of ``adj`` with one occurrence of each failed edge removed.

    With ``reverse`` the graph is taken to be reversed, so a failed edge
    ``(u, v)`` is removed as ``v -> u``. A failed edge whose tail ``u`` has no
    outgoing edges in ``adj`` is skipped.
    """
    result = [list(neighbours) for neighbours in adj]
    for u, v in failed:
        if not adj[u]:
            continue
        if reverse:
            u, v = v, u
        with suppress(ValueError):
            result[u].remove(v)
    return result


def reachable_from(start: int, adj: Adjacency) -> set[int]:
    """Return every vertex reachable from ``start``, ``start`` included."""
    seen = {start}
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in _neighbours(adj, u):
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return seen


def is_reachable(x: int, y: int, adj: Adjacency) -> bool:
    """Tell whether ``y`` is reached from ``x`` along at least one edge."""
    seen = {x}
    queue = deque([x])
    while queue:
        u = queue.popleft()
        for v in _neighbours(adj, u):
            if v == y:
                return True
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return False


def induced_subgraph(adj: Adjacency, vertices: Iterable[int]) -> dict[int, list[int]]:
    """Return the subgraph induced by ``vertices``.

    Only vertices with at least one edge inside the subgraph appear as keys.
    """
    members = set(vertices)
    result: dict[int, list[int]] = {}
    for u in sorted(members):
        inside = [v for v in _neighbours(adj, u) if v in members]
        if inside:
            result[u] = inside
    return result


def transpose(adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the graph with every edge reversed."""
    result: list[list[int]] = [[] for _ in adj]
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            result[v].append(u)
    return result


def format_adj(adj: Adjacency) -> str:
    """Render an adjacency list one vertex per line as ``u: v1 v2 ...``."""
    items = adj.items() if isinstance(adj, Mapping) else enumerate(adj)
    return "\n".join(
        f"{u}: {' '.join(map(str, neighbours))}".rstrip() for u, neighbours in items
    )