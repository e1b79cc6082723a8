import pytest

from ftscc.components import compute_h, kosaraju, update_sccs
from ftscc.ftrs import FtrsIndex, build_ftrs
from ftscc.graphs import reachable_from

GRAPHS = [
    [[1], [2], [0, 3], []],
    [[1], [0], [3], [2], [0, 2]],
    [[], [], []],
    [[1, 2], [2], [3], [1, 4], [4]],
    [[1], [2], [3], [4], [0]],
]


def test_kosaraju_cycle_and_tail():
    assert kosaraju([[1], [2], [0, 3], []]) == {
        frozenset({0, 1, 2}),
        frozenset({3}),
    }


def test_kosaraju_partitions_vertices():
    for adj in GRAPHS:
        components = kosaraju(adj)
        vertices = sorted(u for c in components for u in c)
        assert vertices == list(range(len(adj)))


def test_kosaraju_components_are_mutually_reachable_and_maximal():
    for adj in GRAPHS:
        components = kosaraju(adj)
        reach = [reachable_from(u, adj) for u in range(len(adj))]
        for c in components:
            for u in c:
                for v in range(len(adj)):
                    together = v in reach[u] and u in reach[v]
                    assert together == (v in c)


def test_kosaraju_empty_graph():
    assert kosaraju([]) == set()


def test_kosaraju_deep_cycle():
    n = 4000
    adj = [[(i + 1) % n] for i in range(n)]
    assert kosaraju(adj) == {frozenset(range(n))}


def _index(forward, reverse):
    return FtrsIndex(n=3, k=1, forward=forward, reverse=reverse)


def test_compute_h_without_sources_keeps_only_inserted():
    index = _index({0: [[1], [], []]}, {0: [[], [], []]})
    assert compute_h(index, [], [(2, 0), (1, 2)]) == [[], [2], [0]]


def test_compute_h_takes_maximum_multiplicity():
    index = _index(
        {0: [[1, 1], [], []], 1: [[1], [2], []]},
        {0: [[], [], []], 1: [[], [], []]},
    )
    h = compute_h(index, [0, 1], [])
    assert h[0] == [1, 1]
    assert h[1] == [2]
    assert h[2] == []


def test_compute_h_reverse_edges_are_flipped():
    index = _index({0: [[], [], []]}, {0: [[], [0], []]})
    assert compute_h(index, [0], [(0, 2)]) == [[1, 2], [], []]


def test_compute_h_covers_ftrs_of_sources():
    edges = [(0, 1), (1, 2), (2, 0), (1, 0)]
    index = build_ftrs(3, edges, 1)
    h = compute_h(index, [1], [])
    for i, heads in enumerate(index.forward[1]):
        for j in heads:
            assert j in h[i]
    for i, heads in enumerate(index.reverse[1]):
        for j in heads:
            assert i in h[j]


def test_compute_h_unknown_source_raises():
    index = _index({0: [[], [], []]}, {0: [[], [], []]})
    with pytest.raises(KeyError):
        compute_h(index, [2], [])


def test_update_sccs_merges_covered_components():
    c1 = {frozenset({0}), frozenset({1}), frozenset({2}), frozenset({3})}
    c2 = {frozenset({0, 1}), frozenset({2}), frozenset({3})}
    assert update_sccs(c1, c2, [0]) == {
        frozenset({0, 1}),
        frozenset({2}),
        frozenset({3}),
    }


def test_update_sccs_source_outside_c2_changes_nothing():
    c1 = [{0, 1}, {2}]
    result = update_sccs(c1, [{0}], [5])
    assert result == {frozenset({0, 1}), frozenset({2})}


def test_update_sccs_does_not_mutate_inputs():
    c1 = {frozenset({0}), frozenset({1})}
    c2 = {frozenset({0, 1})}
    update_sccs(c1, c2, [1])
    assert c1 == {frozenset({0}), frozenset({1})}
    assert c2 == {frozenset({0, 1})}


def test_update_sccs_result_is_partition_when_inputs_are():
    c1 = [{0}, {1}, {2, 3}, {4}]
    c2 = [{0, 1, 2, 3}, {4}]
    result = update_sccs(c1, c2, [2])
    vertices = sorted(u for c in result for u in c)
    assert vertices == [0, 1, 2, 3, 4]
    assert frozenset({0, 1, 2, 3}) in result