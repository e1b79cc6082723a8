"""Strongly connected components of a graph after a set of edge failures."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from contextlib import suppress

from .ftrs import FtrsIndex, build_ftrs
from .graphs import induced_subgraph, reachable_from
from .hpd import HeavyPathDecomposition
from .reader import read_problem


def _without_failed(
    adj: Sequence[Sequence[int]],
    failed: Iterable[tuple[int, int]],
    reverse: bool,
) -> list[list[int]]:
    result = [list(neighbours) for neighbours in adj]
    for u, v in failed:
        if reverse:
            u, v = v, u
        with suppress(ValueError):
            result[u].remove(v)
    return result


class FailureAnalyzer:
    """Answers reachability and component questions in ``G \\ F`` from a k-FTRS index."""

    def __init__(self, index: FtrsIndex, failed: Iterable[tuple[int, int]]) -> None:
        self.index = index
        self.failed = list(failed)
        for u, v in self.failed:
            for w in (u, v):
                if not 0 <= w < index.n:
                    raise ValueError(
                        f"failed edge ({u}, {v}) has vertex out of range 0..{index.n - 1}"
                    )
        self._failed_set = set(self.failed)

    def reach(
        self, x: int, vertices: Iterable[int], reverse: bool = False
    ) -> set[int]:
        """Vertices of ``vertices`` reached from ``x`` inside them after the failures.

        ``x`` itself belongs to the result exactly when it is one of ``vertices``.
        """
        members = set(vertices)
        ftrs = (self.index.reverse if reverse else self.index.forward)[x]
        sub = induced_subgraph(_without_failed(ftrs, self.failed, False), members)
        found = reachable_from(x, sub) - {x}
        if x in members:
            found.add(x)
        return found

    def _search(
        self,
        i: int,
        j: int,
        vertices: set[int],
        info: list[int],
        path: Sequence[int],
        reverse: bool,
    ) -> None:
        if not vertices or i > j:
            return
        if i + 1 == j:
            if reverse:
                near, hit, miss = path[i], i, j
            else:
                near, hit, miss = path[j], j, i
            reached = self.reach(near, vertices, reverse)
            for x in reached:
                info[x] = hit
            for u in vertices - reached:
                info[u] = miss
            return
        if i == j:
            for v in vertices:
                info[v] = i
            return
        mid = (i + j + 1) // 2
        reached = self.reach(path[mid], vertices, reverse)
        rest = vertices - reached
        if reverse:
            self._search(mid + 1, j, rest, info, path, reverse)
            self._search(i, mid, reached, info, path, reverse)
        else:
            self._search(i, mid - 1, rest, info, path, reverse)
            self._search(mid, j, reached, info, path, reverse)

    def _check_path(self, path: Sequence[int]) -> list[int]:
        path = list(path)
        if not path:
            raise ValueError("path must not be empty")
        return path

    def exit_indices(self, path: Sequence[int], vertices: Iterable[int]) -> list[int]:
        """For each vertex, the last path index it reaches inside ``vertices``; -1 if none."""
        path = self._check_path(path)
        members = set(vertices)
        t = len(path)
        first = induced_subgraph(
            _without_failed(self.index.forward[path[0]], self.failed, False), members
        )
        last = induced_subgraph(
            _without_failed(self.index.forward[path[-1]], self.failed, False), members
        )
        from_last = reachable_from(path[-1], last)
        from_first = reachable_from(path[0], first)
        info = [-1] * self.index.n
        for v in from_last:
            info[v] = t - 1
        self._search(0, t - 2, from_first - from_last, info, path, False)
        return info

    def entry_indices(self, path: Sequence[int], vertices: Iterable[int]) -> list[int]:
        """For each vertex, the first path index reaching it inside ``vertices``; -1 if none."""
        path = self._check_path(path)
        members = set(vertices)
        t = len(path)
        first = induced_subgraph(
            _without_failed(self.index.reverse[path[0]], self.failed, True), members
        )
        last = induced_subgraph(
            _without_failed(self.index.reverse[path[-1]], self.failed, True), members
        )
        to_last = reachable_from(path[-1], last)
        to_first = reachable_from(path[0], first)
        info = [-1] * self.index.n
        for v in to_first:
            info[v] = 0
        self._search(1, t - 1, to_last - to_first, info, path, True)
        return info

    def path_sccs(
        self, path: Sequence[int], vertices: Iterable[int]
    ) -> list[frozenset[int]]:
        """Components inside ``vertices`` after the failures that meet ``path``."""
        members = set(vertices)
        exits = self.exit_indices(path, members)
        entries = self.entry_indices(path, members)
        groups: dict[tuple[int, int], list[int]] = {}
        for v, (entry, exit_) in enumerate(zip(entries, exits)):
            if entry != -1 and entry <= exit_:
                groups.setdefault((entry, exit_), []).append(v)
        return [frozenset(groups[key]) for key in sorted(groups)]

    def sccs(self, adj: Sequence[Sequence[int]]) -> set[frozenset[int]]:
        """Components after the failures, found along heavy paths of a DFS tree of ``adj``."""
        hpd = HeavyPathDecomposition(adj)
        found: set[frozenset[int]] = set()
        covered: set[int] = set()
        for heavy_paths in hpd.paths.values():
            for heavy in heavy_paths:
                subpaths: list[list[int]] = [[heavy[0]]]
                for prev, cur in zip(heavy, heavy[1:]):
                    if (prev, cur) in self._failed_set:
                        subpaths.append([cur])
                    else:
                        subpaths[-1].append(cur)
                for sub in subpaths:
                    subtree = reachable_from(sub[0], hpd.tree_adj)
                    for component in self.path_sccs(sub, subtree):
                        if component.isdisjoint(covered):
                            found.add(component)
                            covered |= component
        return found


def sccs_after_failures(
    n: int,
    edges: Iterable[tuple[int, int]],
    k: int,
    failed: Iterable[tuple[int, int]],
) -> set[frozenset[int]]:
    """Strongly connected components of a graph once ``failed`` edges are gone."""
    edges = list(edges)
    index = build_ftrs(n, edges, k)
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
    return FailureAnalyzer(index, failed).sccs(adj)


def format_components(components: Iterable[Iterable[int]]) -> str:
    """Render components numbered from 1 as ``i: { u v ... }``, in sorted order."""
    ordered = sorted(sorted(component) for component in components)
    return "\n".join(
        f"{i}: {{ {''.join(f'{u} ' for u in component)}}}"
        for i, component in enumerate(ordered, start=1)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Strongly connected components after edge failures."
    )
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    try:
        problem = read_problem(text)
        components = sccs_after_failures(
            problem.n, problem.edges, problem.k, problem.failed
        )
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print("SCCs after given failed edges in graph G:")
    listing = format_components(components)
    if listing:
        print(listing)
    return 0