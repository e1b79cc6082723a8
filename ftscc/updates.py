"""Strongly connected components after edge failures and edge insertions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from .components import compute_h, kosaraju, update_sccs
from .failures import FailureAnalyzer, format_components
from .ftrs import build_ftrs
from .graphs import remove_failed_edges
from .reader import read_problem


def _checked_pairs(
    pairs: Iterable[tuple[int, int]], n: int, what: str
) -> list[tuple[int, int]]:
    result = []
    for u, v in pairs:
        for w in (u, v):
            if not 0 <= w < n:
                raise ValueError(
                    f"{what} ({u}, {v}) has vertex out of range 0..{n - 1}"
                )
        result.append((u, v))
    return result


def sccs_after_updates(
    n: int,
    edges: Iterable[tuple[int, int]],
    k: int,
    failed: Iterable[tuple[int, int]],
    inserted: Iterable[tuple[int, int]],
) -> set[frozenset[int]]:
    """Strongly connected components once ``failed`` edges go and ``inserted`` edges come.

    Components after the failures alone are merged with the components of the
    k-FTRS of the inserted edges' endpoints, taken with the inserted edges and
    without the failed ones.
    """
    edges = _checked_pairs(edges, n, "edge")
    failed = _checked_pairs(failed, n, "failed edge")
    inserted = _checked_pairs(inserted, n, "inserted edge")

    index = build_ftrs(n, edges, k)
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
    after_failures = FailureAnalyzer(index, failed).sccs(adj)

    endpoints = {w for edge in inserted for w in edge}
    h = remove_failed_edges(compute_h(index, endpoints, inserted), failed)
    around_insertions = kosaraju(h)
    return update_sccs(after_failures, around_insertions, endpoints)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Strongly connected components after edge failures and insertions."
    )
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    try:
        problem = read_problem(text, with_insertions=True)
        components = sccs_after_updates(
            problem.n, problem.edges, problem.k, problem.failed, problem.inserted
        )
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print("SSCs after updating edges of Graph G:")
    listing = format_components(components)
    if listing:
        print(listing)
    return 0