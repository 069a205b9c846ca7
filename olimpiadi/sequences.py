"""Sweeps over sequences, binomial coefficients and polynomial string hashing."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence

MOD = 10**9 + 7
HASH_BASE = 241


class ReachMap:
    """Positions with earliest arrival times, under a global shift of all positions.

    Only entries not dominated by a further position with an earlier or equal time
    are kept, so times grow strictly with position.
    """

    def __init__(self) -> None:
        self._offset = 0
        self._keys: list[int] = []
        self._times: list[int] = []

    def insert(self, position: int, time: int) -> None:
        """Record that ``position`` is reached at ``time``."""
        key = position + self._offset
        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._times[index] <= time:
            return
        if index < len(self._keys) and self._keys[index] == key:
            self._times[index] = time
        else:
            self._keys.insert(index, key)
            self._times.insert(index, time)
        start = index
        while start > 0 and self._times[start - 1] >= time:
            start -= 1
        del self._keys[start:index]
        del self._times[start:index]

    def decrease(self, delta: int) -> None:
        """Shift every stored position down by ``delta``."""
        self._offset += delta

    def get_time(self, limit: int) -> int | None:
        """Earliest time among positions at least ``limit``, or None if there is none."""
        index = bisect_left(self._keys, limit + self._offset)
        return self._times[index] if index < len(self._times) else None


def _next_time(start: int, period: int, time: int) -> int:
    if time < start:
        return start
    return start + period * (1 + (time - start) // period)


def antennas(distance: int, stations: Sequence[tuple[int, int, int, int]]) -> int:
    """Earliest time the last station transmits, or -1 if the signal never gets there.

    Each station is ``(need, power, start, period)``; consecutive stations are
    ``distance`` apart.
    """
    if not stations:
        raise ValueError("at least one station is required")
    _, first_power, first_start, _ = stations[0]
    reach = ReachMap()
    reach.insert(first_power, first_start)
    for need, power, start, period in stations[1:-1]:
        reach.decrease(distance)
        time = reach.get_time(need)
        if time is not None:
            reach.insert(power, _next_time(start, period, time))
    reach.decrease(distance)
    need, _, start, period = stations[-1]
    time = reach.get_time(need)
    return -1 if time is None else _next_time(start, period, time)


def count_subarrays_at_most_k_distinct(values: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays holding at most ``k`` distinct values."""
    frequency: Counter[int] = Counter()
    distinct = 0
    left = 0
    total = 0
    for right, value in enumerate(values):
        frequency[value] += 1
        if frequency[value] == 1:
            distinct += 1
        while distinct > k:
            dropped = values[left]
            frequency[dropped] -= 1
            if frequency[dropped] == 0:
                distinct -= 1
            left += 1
        total += right - left + 1
    return total


class Combinatorics:
    """Binomial coefficients modulo 10**9 + 7 from precomputed factorials."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.limit = limit
        self._fact = [1]
        for i in range(1, limit + 1):
            self._fact.append(self._fact[-1] * i % MOD)
        self._inv_fact = [pow(f, MOD - 2, MOD) for f in self._fact]

    def binom(self, n: int, k: int) -> int:
        """C(n, k) modulo 10**9 + 7; zero when k lies outside 0..n."""
        if k < 0 or k > n:
            return 0
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the precomputed limit {self.limit}")
        return self._fact[n] * self._inv_fact[k] % MOD * self._inv_fact[n - k] % MOD


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def polynomial_hash(text: str | bytes) -> int:
    """Polynomial rolling hash with base 241 modulo 10**9 + 7.

    Text is hashed as UTF-8 bytes taken as signed 8-bit values.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    result = 0
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        result = _truncated_mod(result * HASH_BASE + signed, MOD)
    return result