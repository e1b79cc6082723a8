"""Heavy path decomposition of a depth-first search tree of a directed graph."""

from __future__ import annotations

from collections.abc import Sequence


class HeavyPathDecomposition:
    """Depth-first tree from vertex 0, split into heavy paths.

    ``paths`` maps a depth to the heavy paths whose first vertex lies at that
    depth, with depths in increasing order. ``tree_adj`` holds only the tree
    edges. Vertices not reachable from 0 take no part.
    """

    def __init__(self, adj: Sequence[Sequence[int]]) -> None:
        self.adj = [list(neighbours) for neighbours in adj]
        n = len(self.adj)
        self.tree_adj: list[list[int]] = [[] for _ in range(n)]
        self.depth = [0] * n
        self.size = [0] * n
        self.heavy = [-1] * n
        self.paths: dict[int, list[list[int]]] = {}
        if n:
            self._build_tree(0)
            self._decompose(0)

    def _build_tree(self, root: int) -> None:
        visited = [False] * len(self.adj)
        best = [0] * len(self.adj)
        visited[root] = True
        self.size[root] = 1
        stack = [(root, iter(self.adj[root]))]
        while stack:
            u, children = stack[-1]
            for v in children:
                if not visited[v]:
                    visited[v] = True
                    self.size[v] = 1
                    self.tree_adj[u].append(v)
                    self.depth[v] = self.depth[u] + 1
                    stack.append((v, iter(self.adj[v])))
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    self.size[parent] += self.size[u]
                    if self.size[u] > best[parent]:
                        best[parent] = self.size[u]
                        self.heavy[parent] = u

    def _decompose(self, root: int) -> None:
        found: dict[int, list[list[int]]] = {}

        def emit(path: list[int]) -> None:
            if path:
                found.setdefault(self.depth[path[0]], []).append(path)

        root_path: list[int] = []
        tasks: list[tuple[str, int, list[int]]] = [
            ("emit", -1, root_path),
            ("visit", root, root_path),
        ]
        while tasks:
            kind, u, path = tasks.pop()
            if kind == "emit":
                emit(path)
                continue
            path.append(u)
            heavy = self.heavy[u]
            for v in reversed(self.tree_adj[u]):
                if v != heavy:
                    new_path: list[int] = []
                    tasks.append(("emit", -1, new_path))
                    tasks.append(("visit", v, new_path))
            if heavy != -1:
                tasks.append(("visit", heavy, path))
        self.paths = {d: found[d] for d in sorted(found)}