import pytest
from hypothesis import given, strategies as st

from olimpiadi.basics import (
    FIB_MEMO_LIMIT,
    MOD,
    factorial,
    fibonacci,
    fibonacci_mod,
    frog_cost,
    hateville,
    hateville_recursive,
    last_zero_index,
    sum_values,
    tilings,
    window_fits,
    window_fits_slow,
)

ints = st.integers(-1000, 1000)
nonneg_lists = st.lists(st.integers(0, 100), min_size=1, max_size=30)


@given(st.lists(ints), st.lists(ints))
def test_sum_values_is_additive(a, b):
    assert sum_values(a + b) == sum_values(a) + sum_values(b)


def test_sum_values_empty_and_iterator():
    assert sum_values([]) == 0
    assert sum_values(iter([4])) == 4


@given(st.integers(0, 50), st.integers(0, 50))
def test_last_zero_index(zeros, ones):
    assert last_zero_index([0] * zeros + [1] * ones) == zeros - 1


@given(nonneg_lists)
def test_window_full_width_threshold(values):
    total = sum(values)
    assert window_fits(values, len(values), total)
    assert not window_fits(values, len(values), total - 1)


@given(nonneg_lists, st.integers(0, 30), st.integers(0, 3000))
def test_window_fits_monotone_in_limit(values, width, limit):
    assert window_fits(values, width, limit) <= window_fits(values, width, limit + 1)


@given(nonneg_lists, st.integers(0, 30), st.integers(0, 3000))
def test_fast_check_implies_slow_check(values, width, limit):
    assert window_fits(values, width, limit) <= window_fits_slow(values, width, limit)


def test_slow_check_skips_last_window():
    assert window_fits_slow([0, 0, 5], 1, 0) is True
    assert window_fits([0, 0, 5], 1, 0) is False


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        window_fits([1, 2], -1, 5)
    with pytest.raises(ValueError):
        window_fits_slow([1, 2], -1, 5)


def test_factorial_base_and_value():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120


@given(st.integers(2, 60))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_fibonacci_base():
    assert fibonacci(0) == 1
    assert fibonacci(1) == 1


@given(st.integers(2, 200))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@given(st.integers(0, 300))
def test_fibonacci_mod_matches(n):
    assert fibonacci_mod(n) == fibonacci(n) % MOD


def test_fibonacci_mod_limits():
    with pytest.raises(ValueError):
        fibonacci_mod(-1)
    with pytest.raises(ValueError):
        fibonacci_mod(FIB_MEMO_LIMIT)


@given(ints, ints)
def test_frog_small_cases(a, b):
    assert frog_cost([a]) == 0
    assert frog_cost([a, b]) == abs(a - b)


def test_frog_prefers_double_jump():
    assert frog_cost([10, 30, 10]) == 0


@given(st.lists(ints, min_size=1, max_size=40))
def test_frog_bounds(heights):
    step_by_step = sum(abs(x - y) for x, y in zip(heights, heights[1:]))
    assert 0 <= frog_cost(heights) <= step_by_step


@given(st.lists(ints, max_size=40))
def test_hateville_variants_agree(values):
    assert hateville_recursive(values) == hateville(values)


@given(st.integers(0, 100), st.integers(0, 100))
def test_hateville_pair(a, b):
    assert hateville([a, b]) == max(a, b)
    assert hateville_recursive([a, b]) == max(a, b)


@given(st.lists(ints, min_size=1, max_size=40))
def test_hateville_at_least_best_single(values):
    assert hateville(values) >= max(0, max(values))


def test_hateville_empty_and_negative():
    assert hateville([]) == 0
    assert hateville_recursive([-3, -4]) == 0


@pytest.mark.parametrize("n", range(0, 14))
def test_tilings_count_is_fibonacci(n):
    found = list(tilings(n))
    assert len(found) == fibonacci(n)
    assert len(set(found)) == len(found)
    assert all(t.count("[O]") + 2 * t.count("[OOOO]") == n for t in found)


def test_tilings_edges():
    assert list(tilings(0)) == [""]
    assert list(tilings(-1)) == []
    assert next(tilings(4)) == "[O]" * 4