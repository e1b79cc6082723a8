import pytest

from ftscc.reader import Problem, read_problem

SAMPLE = """
4 3 1
0 1
1 2
2 3
1
1 2
"""


def test_read_failures_only():
    problem = read_problem(SAMPLE)
    assert problem.n == 4
    assert problem.k == 1
    assert problem.edges == [(0, 1), (1, 2), (2, 3)]
    assert problem.m == len(problem.edges)
    assert problem.failed == [(1, 2)]
    assert problem.inserted == []
    assert problem.queries == []


def test_read_with_insertions():
    problem = read_problem(SAMPLE + "2\n3 0\n2 1\n", with_insertions=True)
    assert problem.failed == [(1, 2)]
    assert problem.inserted == [(3, 0), (2, 1)]


def test_read_queries_after_updates():
    text = SAMPLE + "1 3 0\n2 0 3 1 2\n"
    problem = read_problem(text, with_insertions=True)
    assert problem.inserted == [(3, 0)]
    assert problem.queries == [(0, 3), (1, 2)]


def test_problem_defaults():
    problem = Problem(n=2, k=0, edges=[(0, 1)])
    assert problem.failed == [] and problem.inserted == [] and problem.queries == []
    assert problem.m == 1


def test_truncated_input():
    with pytest.raises(ValueError, match="end of input"):
        read_problem("3 2 1 0 1")


def test_missing_insertion_count():
    with pytest.raises(ValueError, match="end of input"):
        read_problem(SAMPLE, with_insertions=True)


def test_non_integer_token():
    with pytest.raises(ValueError, match="integer"):
        read_problem("3 x 1")


def test_vertex_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        read_problem("2 1 0 0 5 0")


def test_negative_count():
    with pytest.raises(ValueError, match="negative"):
        read_problem("-1 0 0 0")


def test_trailing_tokens_rejected():
    with pytest.raises(ValueError, match="unexpected tokens"):
        read_problem(SAMPLE + "1 0 1 7")