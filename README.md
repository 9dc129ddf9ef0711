# algoworks

A collection of classic algorithms and data structures written in plain
Python, with no third-party dependencies. Each module solves one family of
problems and also offers one or more `solve_*` functions that take the whole
problem input as text and return the answer as text, so the same code serves
both as a library and as a solver.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algoworks.search` | `exponential_search`, `peak_in_range` and `find_peak` for the peak of a strictly rising then strictly falling sequence; `insertion_position`, the index of a value in a sorted sequence or where it would be inserted |
| `algoworks.ringdeque` | `RingDeque`, a deque on a circular buffer that doubles when full (`push_front`, `push_back`, `pop_front`, `pop_back`, `front`, `back`; empty pops raise `IndexError`); `is_stack_anagram` |
| `algoworks.boxes` | `Box` with `normalized()`, a stable `insertion_sort`, and `nesting_order` for ordering boxes from smallest to largest |
| `algoworks.kmerge` | `Heap` ordered by a custom `less` function (`push`, `pop`, `peek`); `merge_sorted` for merging K sorted arrays |
| `algoworks.contemporaries` | `Event`, `event_less`, `merge_sort`, `life_events`, `max_overlap` and `max_contemporaries`: the largest group of people aged at least 18 and under 80 at the same moment |
| `algoworks.selection` | `partition` and `kth_statistic` (quickselect with a random pivot); `percentiles` for the 10th percentile, the median and the 90th percentile |
| `algoworks.msdsort` | `msd_sort`: stable MSD radix sort of strings by character code, shorter prefixes first |
| `algoworks.hashtable` | `string_hash`, a 64-bit polynomial hash of UTF-8 bytes; `OpenAddressingSet`, a string set with double hashing and lazy deletion (`add`, `discard`, `in`, `len`) |
| `algoworks.bst` | `BinarySearchTree` with iterative `preorder` and `preorder_string`; `LeftDuplicateTree` with `all_values_equal` and `min_depth` |
| `algoworks.avl` | `AvlTree` with order statistics: `position`, `at`, `remove_at`, as well as `add`, `remove` and `in` |
| `algoworks.graphs` | the abstract `Graph` and four layouts: `ListGraph`, `MatrixGraph`, `SetGraph`, `ArcGraph`; `Graph.from_graph` copies between them |
| `algoworks.paths` | `WeightedGraph` and `Edge`; `count_shortest_paths` (breadth-first search) and `shortest_distance` (Dijkstra) |
| `algoworks.cli` | `main`, the entry point of the `algoworks` command |

## Examples

Find the peak of a sequence that first strictly rises and then strictly
falls:

```python
from algoworks.search import find_peak

find_peak([1, 3, 5, 7, 9, 8, 6, 4, 2])   # 4
```

Build a graph in one layout and copy it into another:

```python
from algoworks.graphs import ListGraph, MatrixGraph

graph = ListGraph(4)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.add_edge(2, 0)

matrix = MatrixGraph.from_graph(graph)
matrix.next_vertices(0)   # [1]
matrix.prev_vertices(0)   # [2]
```

Merge sorted arrays with a heap:

```python
from algoworks.kmerge import merge_sorted

merge_sorted([[1, 4, 7], [2, 5, 8], [3, 6, 9]])   # [1, 2, ..., 9]
```

## Command line

```
algoworks [TASK] < input
```

The `algoworks` command reads a task's input from standard input and prints
its answer. Without a task it runs `dijkstra`. On malformed input it prints
`algoworks: <reason>` to standard error and exits with status 1.

| Task | Input | Output |
| --- | --- | --- |
| `dijkstra` | `N M`, then `M` edges `u v w`, then `s t` (undirected, weighted) | shortest distance, or `-1` |
| `path-count` | `V N`, then `N` edges `a b`, then `u w` (undirected) | number of shortest paths |
| `peak` | `n`, then `n` numbers | index of the peak |
| `insertion` | `n`, `n` sorted numbers, `k` | index of `k` or its insertion point |
| `deque` | `n`, then `n` commands `c v` (1 push front, 2 pop front, 3 push back, 4 pop back; an empty pop gives -1) | `YES` if every pop matched, else `NO` |
| `stack-anagram` | two words | `YES` or `NO` |
| `boxes` | `n`, then `n` boxes of three dimensions | box numbers from smallest to largest |
| `merge` | `K`, then `K` arrays as a size and its elements | the merged array |
| `contemporaries` | `K`, then `K` lives as birth and death dates `d m y d m y` | maximum number of contemporaries |
| `percentiles` | `n`, then `n` numbers | 10th percentile, median, 90th percentile, one per line |
| `msd` | whitespace-separated words | the words sorted, one per line |
| `hash` | commands `+ key`, `- key`, `? key` | `OK` or `FAIL` per command |
| `preorder` | `N`, then `N` numbers | the search tree in pre-order |
| `all-equal` | numbers | `1` if all are equal, else `0` |
| `min-depth` | numbers | minimum depth of the search tree built from them |
| `soldiers` | `N`, then `N` commands: `1 h` adds height `h`, `2 p` removes position `p` | the position of each added height, tallest first |

```
$ printf '3 3\n0 1 1\n1 2 1\n0 2 3\n0 2\n' | algoworks
2
$ printf '9\n1 3 5 7 9 8 6 4 2\n' | algoworks peak
4
```