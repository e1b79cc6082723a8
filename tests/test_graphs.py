from ftscc.graphs import (
    format_adj,
    induced_subgraph,
    is_reachable,
    reachable_from,
    remove_failed_edges,
    transpose,
)


def _edges(adj):
    return sorted((u, v) for u, nb in enumerate(adj) for v in nb)


def test_remove_failed_edges_drops_one_occurrence():
    adj = [[1, 1, 2], [2], []]
    result = remove_failed_edges(adj, [(0, 1)])
    assert result[0].count(1) == adj[0].count(1) - 1
    assert 2 in result[0]
    assert result[1:] == adj[1:]
    assert adj == [[1, 1, 2], [2], []]


def test_remove_failed_edges_ignores_missing_edge():
    adj = [[1], [2], [0]]
    assert remove_failed_edges(adj, [(0, 2)]) == adj


def test_remove_failed_edges_reverse():
    adj = [[2], [0], []]
    result = remove_failed_edges(adj, [(0, 1)], reverse=True)
    assert 0 not in result[1]
    assert result[0] == adj[0]


def test_remove_failed_edges_reverse_skips_when_tail_empty():
    adj = [[], [0], []]
    assert remove_failed_edges(adj, [(0, 1)], reverse=True) == adj


def test_reachable_from_is_closed_and_contains_start():
    adj = [[1], [2], [], [0]]
    found = reachable_from(0, adj)
    assert 0 in found
    assert 3 not in found
    for u in found:
        assert set(adj[u]) <= found


def test_reachable_from_mapping():
    adj = {0: [1], 1: [0]}
    assert reachable_from(0, adj) == {0, 1}
    assert reachable_from(5, adj) == {5}


def test_is_reachable_requires_an_edge_for_self():
    assert not is_reachable(0, 0, [[1], []])
    assert is_reachable(0, 0, [[1], [0]])


def test_is_reachable_directed():
    adj = [[1], [2], []]
    assert is_reachable(0, 2, adj)
    assert not is_reachable(2, 0, adj)


def test_induced_subgraph_keeps_inside_edges_only():
    adj = [[1, 2], [2, 3], [0], [1]]
    members = {0, 1, 2}
    sub = induced_subgraph(adj, members)
    assert set(sub) <= members
    for u, nb in sub.items():
        assert nb
        assert set(nb) <= members
        assert all(v in adj[u] for v in nb)
    assert 3 not in sub


def test_transpose_reverses_every_edge():
    adj = [[1, 2], [2], [0, 0]]
    rev = transpose(adj)
    assert _edges(rev) == sorted((v, u) for u, v in _edges(adj))
    assert _edges(transpose(rev)) == _edges(adj)


def test_format_adj():
    assert format_adj([[1, 2], []]) == "0: 1 2\n1:"
    assert format_adj({3: [4]}) == "3: 4"