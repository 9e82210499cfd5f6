# algokit

A compact collection of classic algorithms and data structures, written as
plain Python with no dependencies beyond the standard library.

## What is inside

| Module                  | Contents                                                                          |
|-------------------------|-----------------------------------------------------------------------------------|
| `algokit.sampledata`    | `sorted_data`, `reverse_data`, `random_data`, `format_array`, and a CPU `Timer` context manager |
| `algokit.maxsum`        | Maximum subarray sum: `max_sum` (brute force), `fast_max_sum` (divide and conquer), `fastest_max_sum` (linear scan) |
| `algokit.linked_list`   | Circular `SinglyLinkedList` (front insertion, in-place `reverse`) and `DoublyLinkedList` (`add`, `add_tail`, reverse iteration) |
| `algokit.search`        | `linear_search`, `move_to_front_search`, `binary_search`                          |
| `algokit.sorting`       | In-place selection, insertion, bubble (with optional comparator), quicksort variants and merge sort |
| `algokit.rbtree`        | `RBTree`: red-black tree with insert, search, erase, node replacement, ordered iteration and `render` |
| `algokit.bst`           | `BinarySearchTree` with insert, search, in-order walk, `balance` and `render`     |
| `algokit.dynamic`       | 0-1 `knapsack` with chosen items, `place_chips`, `lcs_length` and `lcs`           |
| `algokit.greedy`        | `max_meetings`, `fractional_knapsack`, `make_change`, `max_pay`                   |
| `algokit.graph`         | `Graph` with `dfs`, `bfs`, `bfs_tree` and fewest-edge `shortest_path`             |
| `algokit.heap`          | `BinaryHeap`: a max-heap priority queue, or a min-heap with `min_heap=True`, with an optional key function |
| `algokit.mst`           | `prim`, `kruskal`, `DisjointSet` and `parse_edges` for `"AB 10"` style input      |
| `algokit.shortest_path` | `dijkstra`, `path_to` and `SubwayMap` route finding                               |

All sorting functions sort a list in place and return `None`, like `list.sort`.
The quicksort variants are `quick_sort` (last element as pivot),
`random_pivot_quick_sort`, `hybrid_quick_sort` (random pivot, insertion sort for
ranges of 200 or fewer) and `median_of_three_quick_sort`; `insertion_sort_shift`
is an insertion sort that moves runs as slices.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Maximum subarray sum, three ways:

```python
from algokit.maxsum import max_sum, fast_max_sum, fastest_max_sum

values = [1, 4, -9, 2, 8, -1, 9, 3]
assert max_sum(values) == fast_max_sum(values) == fastest_max_sum(values) == 21
```

Sorting in place:

```python
from algokit.sorting import merge_sort

data = [1, 3, 5, 7, 9, 8, 6, 4, 2]
merge_sort(data)
data  # [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

Longest common subsequence:

```python
from algokit.dynamic import lcs_length, lcs

lcs_length("ABCBDAB", "BDCABA")   # 4
lcs("ABCBDAB", "BDCABA")          # one common subsequence of that length
```

A red-black tree:

```python
from algokit.rbtree import RBTree

tree = RBTree(range(1, 9))
5 in tree          # True
list(tree)         # [1, 2, 3, 4, 5, 6, 7, 8]
tree.erase(5)
print(tree.render())   # black nodes as [k], red nodes as <k>
```

Minimum spanning tree from text:

```python
from algokit.mst import parse_edges, kruskal

count, edges = parse_edges("3 3\nAB 1\nBC 2\nAC 5")
tree, cost = kruskal(count, edges)   # cost == 3
```

## Command-line tools

`algokit-maxsum` fills an array with random values below 100, negating those at
indices divisible by 3, and prints the result and the CPU time of each
maximum-sum algorithm. `--size` sets the number of values (default 100000) and
`--seed` fixes the random seed.

```
algokit-maxsum --size 2000 --seed 1
```

`algokit-subway` takes a map file as its argument. The file holds the station
and link counts, one directed link per line as `a b time` (station indices),
then the station names. The command then reads queries of the form
`start end` from standard input, one per line, and prints the travel time and
the stations along the quickest route. It stops with an error message for an
unknown station, an unreachable destination or a malformed query.

```
echo "아현 삼각지" | algokit-subway map.txt
```

## What it does not do

The tree and list views (`render`) and `format_array` return strings; nothing
in the package clears the screen, waits for a key press or draws anything
interactively. Apart from the two commands above, everything is a library to
call from Python.