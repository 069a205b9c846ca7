# olimpiadi

A collection of classic algorithms from informatics olympiad training, written as plain Python
functions and small classes. It depends on nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

- `olimpiadi.basics`: first examples.
  - `sum_values`: sum in one linear pass.
  - `last_zero_index`: binary search for the last falsy item in a sequence of falsy items
    followed by truthy ones (-1 if there is none).
  - `window_fits` / `window_fits_slow`: whether windows of a given width sum to at most a
    limit, with a sliding window or by summing each window. A negative width raises
    `ValueError`.
  - `factorial`, `fibonacci` (with `fibonacci(0) == fibonacci(1) == 1`) and `fibonacci_mod`
    (modulo 10^9+7, for `0 <= n < 10**6`).
  - `frog_cost`: cheapest way to the last stone jumping one or two stones at a time.
  - `hateville` / `hateville_recursive`: best total taking no two adjacent values.
  - `tilings`: a generator of every tiling of a strip with `[O]` and `[OOOO]` tiles.
- `olimpiadi.dp`:
  - `triangle_max_path_naive` / `triangle_max_path`: maximum top-to-bottom path in a number
    triangle (rows of the wrong length raise `ValueError`).
  - `lottery_count`, `lottery_count_prefix`, `lottery_count_incremental`: three ways to count
    sequences of `n` values in `1..m`, each at least double the previous, modulo 10^9+7.
  - `count_matchings`: perfect matchings allowed by a square 0/1 matrix, over subsets with a
    bitmask, modulo 10^9+7.
- `olimpiadi.sequences`:
  - `antennas` with its helper `ReachMap` (`insert`, `decrease`, `get_time`).
  - `count_subarrays_at_most_k_distinct`: two-pointer count of subarrays.
  - `Combinatorics(limit)` with `binom(n, k)` modulo 10^9+7 from precomputed factorials.
  - `polynomial_hash`: base-241 hash modulo 10^9+7 of a string (as UTF-8) or bytes.
- `olimpiadi.graphs`:
  - `bfs_order`, `count_components`.
  - `dijkstra` and `dijkstra_lazy` over `(node, weight)` adjacency lists; both return `None`
    for an unreachable target.
  - `DisjointSet(n, path_compression=True)` with `find` and `merge` (`merge` returns `False`
    when the two nodes were already joined).
  - `count_paths` in a DAG from node 0 to the last node, `eulerian_path`.
  - The olympiad tasks `travel_plan`, `cannons`, `patrol` and `xmastree`.
- `olimpiadi.trees`:
  - `distinct_colors_below`: distinct colours among each node's descendants.
  - `BinaryLifting(parents, log=31)` with `lift(node, k)`.
  - `LowestCommonAncestor(parents)` with `depth` and `lca`; roots are given as their own
    parent, a negative parent or `None`.
- `olimpiadi.segment_tree`:
  - `SumSegmentTree`: point assignment (`update`, `update_recursive`) and range sums (`query`).
  - `SubarrayInfo`, `leaf_info`, `merge_subarrays`: the merge step for maximum subarray sums.
  - `LazySegmentTree`: range add with range sum.
  - `RangeAddTree`: range add with point query (`point_value`, `point_value_recursive`).

## Example

```python
from olimpiadi.basics import hateville
from olimpiadi.segment_tree import SumSegmentTree

print(hateville([3, 1, 4, 1, 5]))  # 12

tree = SumSegmentTree([1, 2, 3, 4])
tree.update(2, 10)
print(tree.query(1, 3))  # 2 + 10 + 4 = 16
```

Positions are 0-based and ranges passed to the segment trees are inclusive at both ends.
Positions outside a tree raise `IndexError`; an empty range (`left > right`) sums to 0.

## What it does not do

The package is a library only: it has no command-line program and does not read problem
input from files or standard input. Parse the input yourself and pass Python lists to the
functions.