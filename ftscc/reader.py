"""Reading a graph, its edge updates and queries from whitespace-separated text."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class Problem:
    """A graph with a fault budget, failed and inserted edges and vertex queries."""

    n: int
    k: int
    edges: list[tuple[int, int]]
    failed: list[tuple[int, int]] = field(default_factory=list)
    inserted: list[tuple[int, int]] = field(default_factory=list)
    queries: list[tuple[int, int]] = field(default_factory=list)

    @property
    def m(self) -> int:
        return len(self.edges)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._items = deque(text.split())

    def __bool__(self) -> bool:
        return bool(self._items)

    def integer(self, what: str) -> int:
        if not self._items:
            raise ValueError(f"unexpected end of input while reading {what}")
        token = self._items.popleft()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer for {what}, got {token!r}") from None

    def count(self, what: str) -> int:
        value = self.integer(what)
        if value < 0:
            raise ValueError(f"{what} must not be negative, got {value}")
        return value

    def pairs(self, how_many: int, n: int, what: str) -> list[tuple[int, int]]:
        result = []
        for _ in range(how_many):
            u = self.vertex(n, what)
            v = self.vertex(n, what)
            result.append((u, v))
        return result

    def vertex(self, n: int, what: str) -> int:
        value = self.integer(what)
        if not 0 <= value < n:
            raise ValueError(f"vertex {value} in {what} out of range 0..{n - 1}")
        return value


def read_problem(text: str, with_insertions: bool = False) -> Problem:
    """Parse ``n m k``, the edges, the failed edges and, optionally, insertions.

    Any tokens left afterwards are read as a query count followed by pairs.
    """
    tokens = _Tokens(text)
    n = tokens.count("vertex count")
    m = tokens.count("edge count")
    k = tokens.integer("fault budget")
    edges = tokens.pairs(m, n, "edges")
    failed = tokens.pairs(tokens.count("failed edge count"), n, "failed edges")
    inserted = []
    if with_insertions:
        inserted = tokens.pairs(
            tokens.count("inserted edge count"), n, "inserted edges"
        )
    queries = []
    if tokens:
        queries = tokens.pairs(tokens.count("query count"), n, "queries")
        if tokens:
            raise ValueError("unexpected tokens after the queries")
    return Problem(
        n=n, k=k, edges=edges, failed=failed, inserted=inserted, queries=queries
    )