"""Introductory techniques: linear scans, binary search, recursion and simple DP."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import cache

MOD = 10**9 + 7
FIB_MEMO_LIMIT = 10**6


def sum_values(values: Iterable[int]) -> int:
    """Sum the values in a single linear pass."""
    total = 0
    for value in values:
        total += value
    return total


def last_zero_index(values: Sequence[int]) -> int:
    """Index of the last falsy item in a sequence of falsy items followed by truthy ones.

    Returns -1 when the sequence starts with a truthy item (or is empty).
    """
    low, high = -1, len(values)  # values[low] is zero, values[high] is not
    while high - low > 1:
        mid = (low + high) // 2
        if not values[mid]:
            low = mid
        else:
            high = mid
    return low


def _check_width(width: int) -> None:
    if width < 0:
        raise ValueError(f"window width must be non-negative, got {width}")


def window_fits(values: Sequence[int], width: int, limit: int) -> bool:
    """True when every window of ``width`` consecutive values sums to at most ``limit``."""
    _check_width(width)
    current = sum(values[:width])
    best = current
    for entering, leaving in zip(values[width:], values):
        current += entering - leaving
        best = max(best, current)
    return best <= limit


def window_fits_slow(values: Sequence[int], width: int, limit: int) -> bool:
    """Quadratic check of the windows starting before ``len(values) - width``."""
    _check_width(width)
    return all(
        sum(values[start:start + width]) <= limit
        for start in range(len(values) - width)
    )


def factorial(n: int) -> int:
    """Return n!, taking every n <= 1 as 1."""
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Fibonacci number with fibonacci(0) == fibonacci(1) == 1."""
    current, following = 1, 1
    for _ in range(max(n, 0)):
        current, following = following, current + following
    return current


def fibonacci_mod(n: int) -> int:
    """fibonacci(n) modulo 10**9 + 7, for 0 <= n < FIB_MEMO_LIMIT."""
    if not 0 <= n < FIB_MEMO_LIMIT:
        raise ValueError(f"n must lie in [0, {FIB_MEMO_LIMIT}), got {n}")
    current, following = 1, 1
    for _ in range(n):
        current, following = following, (current + following) % MOD
    return current


def frog_cost(heights: Sequence[int]) -> int:
    """Minimum total cost for a frog jumping one or two stones at a time to the last stone.

    A jump costs the absolute height difference between the two stones.
    """
    if len(heights) <= 1:
        return 0
    reversed_heights = list(reversed(heights))
    near, far = 0, 0  # cost from the next stone and from the one after it
    next_height, after_height = reversed_heights[0], None
    for height in reversed_heights[1:]:
        cost = near + abs(height - next_height)
        if after_height is not None:
            cost = min(cost, far + abs(height - after_height))
        far, near = near, cost
        after_height, next_height = next_height, height
    return near


def hateville_recursive(values: Sequence[int]) -> int:
    """Best total of values taken with no two adjacent, by memoised recursion."""

    @cache
    def best(last: int) -> int:
        if last < 0:
            return 0
        return max(values[last] + best(last - 2), best(last - 1))

    return best(len(values) - 1)


def hateville(values: Iterable[int]) -> int:
    """Best total of values taken with no two adjacent, in a single pass."""
    take, leave = 0, 0
    for value in values:
        take, leave = leave + value, max(take, leave)
    return max(take, leave)


def _tilings_from(n: int, prefix: str) -> Iterator[str]:
    if n < 0:
        return
    if n == 0:
        yield prefix
        return
    yield from _tilings_from(n - 1, prefix + "[O]")
    yield from _tilings_from(n - 2, prefix + "[OOOO]")


def tilings(n: int) -> Iterator[str]:
    """Yield every tiling of a strip of length ``n`` with 1-wide and 2-wide tiles."""
    return _tilings_from(n, "")