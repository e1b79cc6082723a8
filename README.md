# ftscc

Strongly connected components of a directed graph after edge failures and
edge insertions, and pairwise strong-connectivity queries.

For every vertex the package first builds a *k-fault-tolerant reachability
subgraph* (k-FTRS) of the graph and of its reverse, using repeated
unit-capacity max-flow computations. Those sparse subgraphs are then used to
answer questions about the graph once some edges have failed and others have
been added:

- the strongly connected components after edge failures, found along the
  heavy paths of a DFS tree rooted at vertex 0;
- the strongly connected components after failures and insertions;
- whether two given vertices are strongly connected after the updates.

Vertices are numbered `0 .. n-1`. Out-of-range vertices raise `ValueError`.

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no runtime dependencies.

## Library use

```python
from ftscc.failures import sccs_after_failures
from ftscc.updates import sccs_after_updates

edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 2)]

# Components after the edge 2 -> 0 fails, with fault budget k = 1.
print(sccs_after_failures(4, edges, 1, [(2, 0)]))

# Components after 2 -> 0 fails and 3 -> 0 is inserted.
print(sccs_after_updates(4, edges, 1, [(2, 0)], [(3, 0)]))
```

Both return a `set` of `frozenset`s of vertices.

Pairwise queries for a fixed set of updates go through an index built once:

```python
from ftscc.ftrs import build_ftrs
from ftscc.queries import PairwiseOracle

index = build_ftrs(4, edges, 1)
oracle = PairwiseOracle(index, failed=[(2, 0)], inserted=[(3, 0)])
print(oracle.strongly_connected(0, 3))
```

The building blocks are public too:

- `ftscc.ftrs`: `FlowGraph` (unit-capacity max flow, `kftrs_t`),
  `FtrsIndex` and `build_ftrs`;
- `ftscc.failures`: `FailureAnalyzer` (`reach`, `exit_indices`,
  `entry_indices`, `path_sccs`, `sccs`) and `format_components`;
- `ftscc.hpd`: `HeavyPathDecomposition`;
- `ftscc.components`: `kosaraju`, `compute_h` and `update_sccs`;
- `ftscc.graphs`: `remove_failed_edges`, `reachable_from`, `is_reachable`,
  `induced_subgraph`, `transpose` and `format_adj`;
- `ftscc.reader`: `read_problem` and the `Problem` it returns.

## Command-line use

Each command reads whitespace-separated integers from the file named as its
only argument, or from standard input when none is given:

```
n m k
u1 v1          (m edges)
...
f
a1 b1          (f failed edges)
...
```

followed, for `ftscc-updates` and `ftscc-queries`, by

```
i
c1 d1          (i inserted edges)
...
```

and then, for `ftscc-queries`, by the number of queries and the vertex pairs.

```
ftscc-failures input.txt    # SCCs after the failed edges
ftscc-updates  input.txt    # SCCs after failures and insertions
ftscc-queries  input.txt    # are x and y strongly connected after the updates?
```

`ftscc-failures` and `ftscc-updates` print a heading line and then the
components, one per line as `1: { 0 1 2 }`, in sorted order. `ftscc-queries`
prints one line per query, such as
`0 and 3 are strongly connected after updates.` or
`0 and 3 are NOT strongly connected after updates.`

Malformed input is reported on standard error as `error: ...` with exit
status 1.

## Limitations

- The failure analysis walks a DFS tree from vertex 0; vertices that vertex 0
  does not reach appear in no component it reports.
- The number of failed edges is not checked against the fault budget `k`;
  answers are meant for at most `k` failures.
- Building the index runs a max-flow computation for every pair of vertices,
  so it is meant for small graphs.

## Running the tests

```
pip install .[test]
pytest
```