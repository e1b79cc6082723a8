"""Pairwise strong-connectivity queries after edge failures and insertions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from .components import compute_h
from .ftrs import FtrsIndex, build_ftrs
from .graphs import is_reachable, reachable_from, remove_failed_edges, transpose
from .reader import read_problem


class PairwiseOracle:
    """Tells whether two vertices are strongly connected after the updates."""

    def __init__(
        self,
        index: FtrsIndex,
        failed: Iterable[tuple[int, int]],
        inserted: Iterable[tuple[int, int]],
    ) -> None:
        self.index = index
        self.failed = list(failed)
        self.inserted = list(inserted)
        for u, v in self.failed + self.inserted:
            self._check(u, v)
        self.endpoints = {w for edge in self.inserted for w in edge}
        h = compute_h(index, {v for _, v in self.inserted}, self.inserted)
        self.h_minus_f = remove_failed_edges(h, self.failed)
        self._h_reversed = transpose(self.h_minus_f)

    def _check(self, *vertices: int) -> None:
        for w in vertices:
            if not 0 <= w < self.index.n:
                raise ValueError(f"vertex {w} out of range 0..{self.index.n - 1}")

    def _via_inserted(self, reach_out: set[int], reach_in: set[int]) -> bool:
        return any(u in reach_out and v in reach_in for u, v in self.inserted)

    def strongly_connected(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` reach each other after the updates."""
        self._check(x, y)
        if x in self.endpoints or y in self.endpoints:
            return is_reachable(x, y, self.h_minus_f) and is_reachable(
                y, x, self.h_minus_f
            )

        ftrs_x = remove_failed_edges(self.index.forward[x], self.failed)
        ftrs_y = remove_failed_edges(self.index.forward[y], self.failed)
        x_to_y = is_reachable(x, y, ftrs_x)
        y_to_x = is_reachable(y, x, ftrs_y)
        if x_to_y and y_to_x:
            return True

        if not x_to_y:
            x_to_y = self._via_inserted(
                reachable_from(x, ftrs_x), reachable_from(y, self._h_reversed)
            )
        if not y_to_x:
            y_to_x = self._via_inserted(
                reachable_from(y, ftrs_y), reachable_from(x, self._h_reversed)
            )
        return x_to_y and y_to_x


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Answer strong-connectivity queries after edge updates."
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
        index = build_ftrs(problem.n, problem.edges, problem.k)
        oracle = PairwiseOracle(index, problem.failed, problem.inserted)
        answers = [
            (x, y, oracle.strongly_connected(x, y)) for x, y in problem.queries
        ]
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for x, y, connected in answers:
        verdict = "are" if connected else "are NOT"
        print(f"{x} and {y} {verdict} strongly connected after updates.")
    return 0