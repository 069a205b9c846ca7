import pytest
from hypothesis import given, strategies as st

from olimpiadi.basics import factorial
from olimpiadi.dp import (
    MOD,
    count_matchings,
    lottery_count,
    lottery_count_incremental,
    lottery_count_prefix,
    triangle_max_path,
    triangle_max_path_naive,
)

triangles = st.integers(0, 7).flatmap(
    lambda n: st.tuples(
        *[st.lists(st.integers(-50, 50), min_size=i + 1, max_size=i + 1) for i in range(n)]
    )
).map(list)


@given(triangles)
def test_triangle_variants_agree(rows):
    assert triangle_max_path(rows) == triangle_max_path_naive(rows)


@given(triangles)
def test_triangle_at_least_left_edge(rows):
    assert triangle_max_path(rows) >= sum(row[0] for row in rows)


@given(st.integers(-100, 100))
def test_triangle_single_row(x):
    assert triangle_max_path([[x]]) == x
    assert triangle_max_path_naive([[x]]) == x


def test_triangle_empty_and_bad_shape():
    assert triangle_max_path([]) == 0
    with pytest.raises(ValueError):
        triangle_max_path([[1], [2]])
    with pytest.raises(ValueError):
        triangle_max_path_naive([[1, 2]])


@given(st.integers(0, 5), st.integers(0, 40))
def test_lottery_variants_agree(n, m):
    expected = lottery_count(n, m)
    assert lottery_count_prefix(n, m) == expected
    assert lottery_count_incremental(n, m) == expected


@given(st.integers(1, 500))
def test_lottery_single_draw(m):
    assert lottery_count(1, m) == m
    assert lottery_count_prefix(1, m) == m


def test_lottery_no_draws():
    assert lottery_count(0, 10) == 0
    assert lottery_count_incremental(3, 0) == 0


@given(st.integers(1, 4), st.integers(1, 40))
def test_lottery_monotone_in_m(n, m):
    assert lottery_count(n, m) <= lottery_count(n, m + 1)


def test_lottery_large_is_reduced():
    assert 0 <= lottery_count_prefix(4, 10**5) < MOD


@pytest.mark.parametrize("n", range(0, 7))
def test_matchings_identity_and_full(n):
    identity = [[int(i == j) for j in range(n)] for i in range(n)]
    full = [[1] * n for _ in range(n)]
    assert count_matchings(identity) == 1
    assert count_matchings(full) == factorial(n)


def test_matchings_none_allowed():
    assert count_matchings([[0, 0], [0, 0]]) == 0


@given(st.integers(1, 5).flatmap(
    lambda n: st.lists(st.lists(st.integers(0, 1), min_size=n, max_size=n), min_size=n, max_size=n)
))
def test_matchings_transpose_invariant(good):
    transposed = [list(column) for column in zip(*good)]
    assert count_matchings(good) == count_matchings(transposed)


def test_matchings_non_square():
    with pytest.raises(ValueError):
        count_matchings([[1, 0]])