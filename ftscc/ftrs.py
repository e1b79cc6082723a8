"""Unit-capacity flow graphs and k-fault-tolerant reachability subgraphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class _Edge:
    v: int
    rev: int
    active: bool


class FlowGraph:
    """Directed graph with a unit-capacity residual network beside it."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must not be negative, got {n}")
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.incoming: list[list[int]] = [[] for _ in range(n)]
        self._residual: list[list[_Edge]] = [[] for _ in range(n)]
        self._flow: list[list[_Edge]] | None = None

    def _check(self, *vertices: int) -> None:
        for w in vertices:
            if not 0 <= w < self.n:
                raise ValueError(f"vertex {w} out of range 0..{self.n - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u -> v`` to the graph and its residual network."""
        self._check(u, v)
        self.adj[u].append(v)
        self._residual[u].append(_Edge(v, len(self._residual[v]), True))
        self._residual[v].append(_Edge(u, len(self._residual[u]) - 1, False))
        self.incoming[v].append(u)

    def _require_flow(self) -> list[list[_Edge]]:
        if self._flow is None:
            raise RuntimeError("max_flow has not been run on this graph")
        return self._flow

    def _augmenting_path(self, sources: Iterable[int], t: int) -> list[_Edge] | None:
        flow = self._require_flow()
        parent = [-1] * self.n
        via: list[_Edge | None] = [None] * self.n
        queue: deque[int] = deque()
        for s in sorted(set(sources)):
            queue.append(s)
            parent[s] = -2
        while queue:
            u = queue.popleft()
            for edge in flow[u]:
                if parent[edge.v] == -1 and edge.active:
                    parent[edge.v] = u
                    via[edge.v] = edge
                    if edge.v == t:
                        path = []
                        w = t
                        while parent[w] != -2:
                            path.append(via[w])
                            w = parent[w]
                        return path
                    queue.append(edge.v)
        return None

    def max_flow(self, sources: Iterable[int], t: int) -> int:
        """Compute a maximum unit flow from ``sources`` to ``t``.

        The residual network left behind is used by :meth:`reachable_to`
        and :meth:`flow_edges_to`.
        """
        sources = set(sources)
        self._check(t, *sources)
        self._flow = [
            [_Edge(e.v, e.rev, e.active) for e in edges] for edges in self._residual
        ]
        value = 0
        while (path := self._augmenting_path(sources, t)) is not None:
            for edge in path:
                edge.active = False
                self._flow[edge.v][edge.rev].active = True
            value += 1
        return value

    def reachable_to(self, t: int) -> set[int]:
        """Return the vertices found from ``t`` along exhausted residual edges."""
        flow = self._require_flow()
        found = {t}
        queue = deque([t])
        while queue:
            u = queue.popleft()
            for edge in flow[u]:
                if edge.v not in found and not edge.active:
                    found.add(edge.v)
                    queue.append(edge.v)
        return found

    def flow_edges_to(self, t: int) -> set[int]:
        """Return the tails of edges into ``t`` that carry flow."""
        flow = self._require_flow()
        return {
            u
            for u in self.incoming[t]
            if any(edge.v == t and not edge.active for edge in flow[u])
        }

    def kftrs_t(self, s: int, t: int, k: int) -> FlowGraph:
        """Return a copy keeping only the edges into ``t`` needed for ``k`` faults."""
        self._check(s, t)
        sources = {s}
        for _ in range(k):
            self.max_flow(sources, t)
            near_t = self.reachable_to(t)
            far = set(range(self.n)) - near_t
            sources = far | {
                v for u in far for v in self.adj[u] if v != t and v in near_t
            }

        self.max_flow(sources, t)
        sparse = FlowGraph(self.n)
        for u, neighbours in enumerate(self.adj):
            for v in neighbours:
                if v != t:
                    sparse.add_edge(u, v)
        for u in sorted(self.flow_edges_to(t)):
            sparse.add_edge(u, t)
        return sparse

    def format(self) -> str:
        """Render the graph one vertex per line as ``u----> v1 v2 ...``."""
        return "\n".join(
            f"{u}----> {' '.join(map(str, neighbours))}".rstrip()
            for u, neighbours in enumerate(self.adj)
        )


@dataclass(frozen=True)
class FtrsIndex:
    """k-FTRS of every vertex, in the graph and in its reverse."""

    n: int
    k: int
    forward: dict[int, list[list[int]]]
    reverse: dict[int, list[list[int]]]


def _ftrs_of(graph: FlowGraph, s: int, k: int) -> list[list[int]]:
    current = graph
    for t in range(graph.n):
        current = current.kftrs_t(s, t, k)
    return [list(neighbours) for neighbours in current.adj]


def build_ftrs(n: int, edges: Iterable[tuple[int, int]], k: int) -> FtrsIndex:
    """Build the forward and reverse k-FTRS of every vertex of a graph."""
    graph = FlowGraph(n)
    reversed_graph = FlowGraph(n)
    for u, v in edges:
        graph.add_edge(u, v)
        reversed_graph.add_edge(v, u)
    return FtrsIndex(
        n=n,
        k=k,
        forward={s: _ftrs_of(graph, s, k) for s in range(n)},
        reverse={s: _ftrs_of(reversed_graph, s, k) for s in range(n)},
    )