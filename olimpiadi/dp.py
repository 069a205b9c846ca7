"""Dynamic programming on grids, counting sequences and bitmasks."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

MOD = 10**9 + 7


def _check_triangle(rows: Sequence[Sequence[int]]) -> None:
    for index, row in enumerate(rows):
        if len(row) != index + 1:
            raise ValueError(f"row {index} must have {index + 1} values, got {len(row)}")


def triangle_max_path_naive(rows: Sequence[Sequence[int]]) -> int:
    """Maximum top-to-bottom path sum in a triangle, by plain recursion."""
    _check_triangle(rows)

    def best(i: int, j: int) -> int:
        if i == len(rows):
            return 0
        return rows[i][j] + max(best(i + 1, j), best(i + 1, j + 1))

    return best(0, 0)


def triangle_max_path(rows: Sequence[Sequence[int]]) -> int:
    """Maximum top-to-bottom path sum in a triangle, each state computed once."""
    _check_triangle(rows)
    best = [0] * (len(rows) + 1)
    for row in reversed(rows):
        best = [value + max(best[j], best[j + 1]) for j, value in enumerate(row)]
    return best[0]


def _first_row(m: int) -> list[int]:
    return [0] + [1] * m


def lottery_count(n: int, m: int) -> int:
    """Count sequences of n values in 1..m where each value is at least double the previous."""
    if n < 1 or m < 1:
        return 0
    ways = _first_row(m)
    for _ in range(n - 1):
        ways = [0] + [sum(ways[1:j // 2 + 1]) % MOD for j in range(1, m + 1)]
    return sum(ways[1:]) % MOD


def lottery_count_prefix(n: int, m: int) -> int:
    """Same count as lottery_count, using prefix sums of the previous row."""
    if n < 1 or m < 1:
        return 0
    ways = _first_row(m)
    for _ in range(n - 1):
        prefix = [total % MOD for total in accumulate(ways)]
        ways = [0] + [prefix[j // 2] for j in range(1, m + 1)]
    return sum(ways[1:]) % MOD


def lottery_count_incremental(n: int, m: int) -> int:
    """Same count as lottery_count, extending each entry from the one before it."""
    if n < 1 or m < 1:
        return 0
    ways = _first_row(m)
    for _ in range(n - 1):
        current = [0]
        for j in range(1, m + 1):
            added = sum(ways[(j - 1) // 2 + 1:j // 2 + 1])
            current.append((current[-1] + added) % MOD)
        ways = current
    return sum(ways[1:]) % MOD


def count_matchings(good: Sequence[Sequence[int]]) -> int:
    """Number of perfect matchings item -> slot allowed by ``good``, modulo 10**9 + 7."""
    n = len(good)
    if any(len(row) != n for row in good):
        raise ValueError("compatibility matrix must be square")
    ways = [0] * (1 << n)
    ways[0] = 1
    for mask in range(1, 1 << n):
        slot = bin(mask).count("1") - 1
        ways[mask] = sum(
            ways[mask ^ (1 << item)]
            for item in range(n)
            if mask >> item & 1 and good[item][slot]
        ) % MOD
    return ways[-1]