"""Segment trees for point updates, range sums, range additions and maximum subarray sums."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def _power_of_two_at_least(size: int) -> int:
    n = 1
    while n < size:
        n <<= 1
    return n


def _check_position(pos: int, size: int) -> None:
    if not 0 <= pos < size:
        raise IndexError(f"position {pos} out of range for size {size}")


def _check_range(left: int, right: int, size: int) -> bool:
    """Validate an inclusive range; False when it is empty."""
    if left > right:
        return False
    _check_position(left, size)
    _check_position(right, size)
    return True


class SumSegmentTree:
    """Point assignment and inclusive range sums over a fixed-length sequence."""

    def __init__(self, values: Sequence[int]) -> None:
        self._size = len(values)
        self._n = _power_of_two_at_least(self._size)
        self._tree = [0] * (2 * self._n)
        self._tree[self._n:self._n + self._size] = list(values)
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._size

    def update(self, pos: int, value: int) -> None:
        """Set the value at ``pos``, walking from the leaf up to the root."""
        _check_position(pos, self._size)
        tree = self._tree
        pos += self._n
        tree[pos] = value
        while pos > 1:
            tree[pos >> 1] = tree[pos] + tree[pos ^ 1]
            pos >>= 1

    def update_recursive(self, pos: int, value: int) -> None:
        """Set the value at ``pos``, descending from the root."""
        _check_position(pos, self._size)
        self._assign(1, 0, self._n - 1, pos, value)

    def _assign(self, node: int, tl: int, tr: int, pos: int, value: int) -> None:
        if tl == tr:
            self._tree[node] = value
            return
        tm = (tl + tr) // 2
        if pos <= tm:
            self._assign(2 * node, tl, tm, pos, value)
        else:
            self._assign(2 * node + 1, tm + 1, tr, pos, value)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def query(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left`` to ``right`` inclusive."""
        if not _check_range(left, right, self._size):
            return 0
        return self._sum(1, 0, self._n - 1, left, right)

    def _sum(self, node: int, tl: int, tr: int, left: int, right: int) -> int:
        if right < tl or tr < left:
            return 0
        if left <= tl and tr <= right:
            return self._tree[node]
        tm = (tl + tr) // 2
        return (
            self._sum(2 * node, tl, tm, left, right)
            + self._sum(2 * node + 1, tm + 1, tr, left, right)
        )


@dataclass(frozen=True)
class SubarrayInfo:
    """Summary of a segment for maximum subarray sum queries."""

    total: int
    best_prefix: int
    best_suffix: int
    best_subarray: int


def leaf_info(value: int) -> SubarrayInfo:
    """Summary of a segment holding the single value ``value``."""
    return SubarrayInfo(value, value, value, value)


def merge_subarrays(a: SubarrayInfo, b: SubarrayInfo) -> SubarrayInfo:
    """Summary of segment ``a`` followed by segment ``b``."""
    return SubarrayInfo(
        total=a.total + b.total,
        best_prefix=max(a.best_prefix, a.total + b.best_prefix),
        best_suffix=max(b.best_suffix, b.total + a.best_suffix),
        best_subarray=max(a.best_subarray, b.best_subarray, a.best_suffix + b.best_prefix),
    )


class LazySegmentTree:
    """Range additions and inclusive range sums with lazy propagation, starting at zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._size = size
        capacity = 4 * max(size, 1)
        self._sums = [0] * capacity
        self._pending = [0] * capacity

    def __len__(self) -> int:
        return self._size

    def _push(self, node: int, tl: int, tr: int) -> None:
        pending = self._pending[node]
        if not pending:
            return
        self._sums[node] += pending * (tr - tl + 1)
        if tl != tr:
            self._pending[2 * node] += pending
            self._pending[2 * node + 1] += pending
        self._pending[node] = 0

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every position from ``left`` to ``right`` inclusive."""
        if _check_range(left, right, self._size):
            self._add(1, 0, self._size - 1, left, right, delta)

    def _add(self, node: int, tl: int, tr: int, left: int, right: int, delta: int) -> None:
        self._push(node, tl, tr)
        if right < tl or tr < left:
            return
        if left <= tl and tr <= right:
            self._pending[node] += delta
            self._push(node, tl, tr)
            return
        tm = (tl + tr) // 2
        self._add(2 * node, tl, tm, left, right, delta)
        self._add(2 * node + 1, tm + 1, tr, left, right, delta)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def query(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left`` to ``right`` inclusive."""
        if not _check_range(left, right, self._size):
            return 0
        return self._query(1, 0, self._size - 1, left, right)

    def _query(self, node: int, tl: int, tr: int, left: int, right: int) -> int:
        self._push(node, tl, tr)
        if right < tl or tr < left:
            return 0
        if left <= tl and tr <= right:
            return self._sums[node]
        tm = (tl + tr) // 2
        return (
            self._query(2 * node, tl, tm, left, right)
            + self._query(2 * node + 1, tm + 1, tr, left, right)
        )


class RangeAddTree:
    """Range additions with point queries; each node stores what was added to its whole range."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._size = size
        self._n = _power_of_two_at_least(size)
        self._tree = [0] * (2 * self._n)

    def __len__(self) -> int:
        return self._size

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every position from ``left`` to ``right`` inclusive."""
        if _check_range(left, right, self._size):
            self._add(1, 0, self._n - 1, left, right, delta)

    def _add(self, node: int, tl: int, tr: int, left: int, right: int, delta: int) -> None:
        if right < tl or tr < left:
            return
        if left <= tl and tr <= right:
            self._tree[node] += delta
            return
        tm = (tl + tr) // 2
        self._add(2 * node, tl, tm, left, right, delta)
        self._add(2 * node + 1, tm + 1, tr, left, right, delta)

    def point_value(self, pos: int) -> int:
        """Value at ``pos``, summing the additions from the leaf up to the root."""
        _check_position(pos, self._size)
        total = 0
        pos += self._n
        while pos > 0:
            total += self._tree[pos]
            pos >>= 1
        return total

    def point_value_recursive(self, pos: int) -> int:
        """Value at ``pos``, summing the additions from the root down to the leaf."""
        _check_position(pos, self._size)
        total = 0
        node, tl, tr = 1, 0, self._n - 1
        while True:
            total += self._tree[node]
            if tl == tr:
                return total
            tm = (tl + tr) // 2
            if pos <= tm:
                node, tr = 2 * node, tm
            else:
                node, tl = 2 * node + 1, tm + 1