"""Graph searches, shortest paths, union-find and a few contest problems on graphs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from heapq import heapify, heappop, heappush
from itertools import cycle, islice

PATROL_PERIOD = 420
_NEG_INF = -(10**15)

Edge = tuple[int, int]


def _undirected(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _preorder(adj: Sequence[Sequence[int]], root: int) -> tuple[list[int], list[int]]:
    """Nodes of a tree in DFS preorder, together with each node's parent (-1 for root)."""
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


def bfs_order(adj: Sequence[Sequence[int]], start: int) -> list[int]:
    """Nodes reachable from ``start`` in breadth-first visiting order."""
    visited = [False] * len(adj)
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        queue.extend(adj[node])
    return order


def count_components(n: int, edges: Iterable[Edge]) -> int:
    """Number of connected components of an undirected graph on nodes 0..n-1."""
    adj = _undirected(n, edges)
    seen = [False] * n
    components = 0
    for source in range(n):
        if seen[source]:
            continue
        components += 1
        seen[source] = True
        stack = [source]
        while stack:
            v = stack.pop()
            for u in adj[v]:
                if not seen[u]:
                    seen[u] = True
                    stack.append(u)
    return components


WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


def dijkstra(adj: WeightedAdjacency, source: int, target: int) -> int | None:
    """Shortest distance, fixing each node's distance the first time it is popped.

    ``adj[v]`` lists ``(node, weight)`` pairs. Returns None when ``target`` is unreachable.
    """
    settled: dict[int, int] = {}
    heap = [(0, source)]
    while heap:
        d, v = heappop(heap)
        if v in settled:
            continue
        settled[v] = d
        if v == target:
            return d
        for node, weight in adj[v]:
            if node not in settled:
                heappush(heap, (d + weight, node))
    return None


def dijkstra_lazy(adj: WeightedAdjacency, source: int, target: int) -> int | None:
    """Shortest distance, relaxing edges and skipping stale heap entries."""
    dist = [math.inf] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, v = heappop(heap)
        if d != dist[v]:
            continue
        for node, weight in adj[v]:
            if d + weight < dist[node]:
                dist[node] = d + weight
                heappush(heap, (d + weight, node))
    result = dist[target]
    return None if result == math.inf else int(result)


class DisjointSet:
    """Union-find over 0..n-1, optionally with path compression."""

    def __init__(self, n: int, path_compression: bool = True) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self.path_compression = path_compression

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, v: int) -> int:
        """Representative of the set holding ``v``."""
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        if self.path_compression:
            while self._parent[v] != root:
                following = self._parent[v]
                self._parent[v] = root
                v = following
        return root

    def merge(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; False if they were already one set."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        self._parent[b] = a
        return True


def count_paths(adj: Sequence[Sequence[int]]) -> int:
    """Number of directed paths from node 0 to the last node of a DAG."""
    if not adj:
        raise ValueError("graph has no nodes")
    target = len(adj) - 1
    ways: dict[int, int] = {target: 1}
    if target == 0:
        return 1
    active = {0}
    stack = [(0, iter(adj[0]))]
    while stack:
        v, neighbours = stack[-1]
        for u in neighbours:
            if u in ways:
                continue
            if u in active:
                raise ValueError("graph has a cycle reachable from node 0")
            active.add(u)
            stack.append((u, iter(adj[u])))
            break
        else:
            stack.pop()
            active.discard(v)
            ways[v] = sum(ways[u] for u in adj[v])
    return ways[0]


def eulerian_path(n: int, edges: Sequence[Edge], start: int | None = None) -> list[int]:
    """Walk using every undirected edge once, beginning at ``start``.

    Without ``start`` the walk begins at an odd-degree node if there is one.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for index, (a, b) in enumerate(edges):
        adj[a].append((b, index))
        adj[b].append((a, index))
    if start is None:
        odd = [v for v in range(n) if len(adj[v]) % 2]
        start = odd[0] if odd else next((v for v in range(n) if adj[v]), 0)
    used = [False] * len(edges)
    pending = [iter(neighbours) for neighbours in adj]
    stack = [start]
    path: list[int] = []
    while stack:
        v = stack[-1]
        for u, index in pending[v]:
            if not used[index]:
                used[index] = True
                stack.append(u)
                break
        else:
            path.append(stack.pop())
    path.reverse()
    return path


def travel_plan(
    n: int,
    roads: Sequence[Edge],
    lengths: Sequence[int],
    exits: Iterable[int],
) -> int | None:
    """Guaranteed escape time from node 0 when the best corridor out of each room may be blocked.

    Returns None when no escape can be guaranteed.
    """
    if len(roads) != len(lengths):
        raise ValueError("every road needs exactly one length")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for (a, b), length in zip(roads, lengths):
        adj[a].append((b, length))
        adj[b].append((a, length))
    best: list[list[float]] = [[math.inf, math.inf] for _ in range(n)]
    heap = []
    for room in exits:
        best[room] = [0, 0]
        heap.append((0, room))
    heapify(heap)
    done = [False] * n
    while heap:
        _, v = heappop(heap)
        if done[v]:
            continue
        done[v] = True
        via = best[v][1]
        for u, weight in adj[v]:
            candidate = via + weight
            if best[u][0] >= candidate:
                best[u] = [candidate, best[u][0]]
                heappush(heap, (best[u][1], u))
            elif best[u][1] > candidate:
                best[u][1] = candidate
                heappush(heap, (candidate, u))
    answer = best[0][1]
    return None if answer == math.inf else int(answer)


def cannons(targets: Sequence[int]) -> int:
    """Fewest steps from cell 0 to the last cell.

    Stepping to a neighbouring cell costs one; firing the cannon of cell ``v`` to
    ``targets[v]`` is free.
    """
    n = len(targets)
    if n == 0:
        raise ValueError("at least one cell is required")
    dist = [math.inf] * n
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        d, v = heappop(heap)
        if d > dist[v]:
            continue
        landing = targets[v]
        if dist[landing] > d:
            dist[landing] = d
            heappush(heap, (d, landing))
        for u in (v - 1, v + 1):
            if 0 <= u < n and dist[u] > d + 1:
                dist[u] = d + 1
                heappush(heap, (d + 1, u))
    return int(dist[n - 1])


def patrol(
    n: int,
    edges: Iterable[Edge],
    routes: Iterable[Sequence[int]],
) -> int | None:
    """Fewest moves from node 0 to node n-1 while never sharing a node with a guard.

    Each route is a guard's cyclic list of positions, one per time step. Waiting in
    place is allowed. Returns None if the last node cannot be reached.
    """
    adj = _undirected(n, edges)
    for v, neighbours in enumerate(adj):
        neighbours.append(v)
    free = [[True] * PATROL_PERIOD for _ in range(n)]
    for route in routes:
        if not route:
            raise ValueError("a guard route must hold at least one position")
        for time, node in enumerate(islice(cycle(route), PATROL_PERIOD)):
            free[node][time] = False
    if not free[0][0]:
        raise ValueError("a guard starts on node 0")
    dist = [[math.inf] * PATROL_PERIOD for _ in range(n)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        v, time = queue.popleft()
        following = (time + 1) % PATROL_PERIOD
        step = dist[v][time] + 1
        for u in adj[v]:
            if not free[u][following]:
                continue
            if u == n - 1:
                return int(step)
            if dist[u][following] > step:
                dist[u][following] = step
                queue.append((u, following))
    return None


def xmastree(n: int, edges: Sequence[Edge], values: Sequence[int]) -> int:
    """Best total of lit node values reachable on the tree, all nodes starting lit."""
    if n < 1:
        raise ValueError("the tree needs at least one node")
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edges)}")
    if len(values) != n:
        raise ValueError(f"expected {n} values, got {len(values)}")
    adj = _undirected(n, edges)
    order, parent = _preorder(adj, 0)
    lit = [0] * n
    dark = [0] * n
    for v in reversed(order):
        if v != 0 and len(adj[v]) == 1:
            lit[v] = values[v]
            continue
        total = 0
        parity = 0
        delta = _NEG_INF
        for u in adj[v]:
            if u == parent[v]:
                continue
            high = max(lit[u], dark[u])
            low = min(lit[u], dark[u])
            total += high
            parity ^= high == dark[u]
            delta = max(delta, low - high)
        lit[v] = total + values[v] + (delta if parity else 0)
        dark[v] = total + (0 if parity else delta)
    return max(lit[0], dark[0])