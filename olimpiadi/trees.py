"""Rooted-tree techniques: subtree set merging, binary lifting and lowest common ancestors."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_LOG = 31


def _preorder(adj: Sequence[Sequence[int]], root: int) -> tuple[list[int], list[int]]:
    parent = [-1] * len(adj)
    order: list[int] = []
    stack = [root]
    while stack:
        v = stack.pop()
        order.append(v)
        for u in adj[v]:
            if u != parent[v]:
                parent[u] = v
                stack.append(u)
    return order, parent


def distinct_colors_below(
    adj: Sequence[Sequence[int]],
    colors: Sequence[int],
    root: int = 0,
) -> list[int]:
    """For each node, the number of distinct colours among its proper descendants."""
    order, parent = _preorder(adj, root)
    subtree: list[set[int] | None] = [None] * len(adj)
    result = [0] * len(adj)
    for v in reversed(order):
        merged: set[int] = set()
        for u in adj[v]:
            if u == parent[v]:
                continue
            child = subtree[u]
            subtree[u] = None
            if len(child) > len(merged):
                merged, child = child, merged
            merged |= child
        result[v] = len(merged)
        merged.add(colors[v])
        subtree[v] = merged
    return result


class BinaryLifting:
    """Jump tables over a functional graph: ``parents[v]`` is the successor of ``v``."""

    def __init__(self, parents: Sequence[int], log: int = DEFAULT_LOG) -> None:
        n = len(parents)
        if log < 1:
            raise ValueError(f"log must be positive, got {log}")
        for node, parent in enumerate(parents):
            if not 0 <= parent < n:
                raise ValueError(f"parent {parent} of node {node} is out of range")
        self._log = log
        table = [list(parents)]
        for _ in range(1, log):
            previous = table[-1]
            table.append([previous[p] for p in previous])
        self._up = table

    def lift(self, node: int, k: int) -> int:
        """Node reached from ``node`` after ``k`` steps."""
        if k < 0 or k >> self._log:
            raise ValueError(f"k must lie in [0, 2**{self._log}), got {k}")
        for level, row in enumerate(self._up):
            if k >> level & 1:
                node = row[node]
        return node


class LowestCommonAncestor(BinaryLifting):
    """Lowest common ancestor queries on a rooted forest.

    A root is given as its own parent, or as a negative or None parent.
    """

    def __init__(self, parents: Sequence[int | None]) -> None:
        n = len(parents)
        normalized = [
            node if parent is None or parent < 0 else parent
            for node, parent in enumerate(parents)
        ]
        for node, parent in enumerate(normalized):
            if parent >= n:
                raise ValueError(f"parent {parent} of node {node} is out of range")
        self._depth = self._depths(normalized)
        super().__init__(normalized, max(1, n.bit_length()))

    @staticmethod
    def _depths(parents: list[int]) -> list[int]:
        n = len(parents)
        depths = [-1] * n
        for start in range(n):
            chain: list[int] = []
            node = start
            while depths[node] < 0:
                if parents[node] == node:
                    depths[node] = 0
                    break
                chain.append(node)
                if len(chain) > n:
                    raise ValueError("parent links contain a cycle")
                node = parents[node]
            level = depths[node]
            for member in reversed(chain):
                level += 1
                depths[member] = level
        return depths

    def depth(self, node: int) -> int:
        """Distance of ``node`` from its root."""
        return self._depth[node]

    def lca(self, a: int, b: int) -> int:
        """Deepest node that is an ancestor of both ``a`` and ``b``."""
        if self._depth[a] > self._depth[b]:
            a, b = b, a
        b = self.lift(b, self._depth[b] - self._depth[a])
        if a == b:
            return a
        for row in reversed(self._up):
            if row[a] != row[b]:
                a, b = row[a], row[b]
        if self._up[0][a] != self._up[0][b]:
            raise ValueError("nodes lie in different trees")
        return self._up[0][a]