# dsakit

A small collection of well-known algorithm solutions as plain Python
functions, with no third-party dependencies.

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

### `dsakit.greedy`

- `least_interval(tasks, n)`: the minimum number of CPU intervals needed to
  run a list of tasks labelled `"A"` to `"Z"` when equal tasks must be at
  least `n` intervals apart. Any other label raises `ValueError`; an empty
  task list takes 0 intervals.

```python
from dsakit.greedy import least_interval

least_interval(["A", "A", "A", "B", "B", "B"], 2)  # 8
```

### `dsakit.backtracking`

- `solve_n_queens(n)`: every placement of `n` non-attacking queens on an
  `n x n` board, each as a list of row strings of `"Q"` and `"."`. A negative
  `n` raises `ValueError`.
- `is_palindrome(s)` and `palindrome_partitions(s)`: every way to split a
  string into palindromic pieces.
- `find_paths(maze)`: all routes (as strings of `U`, `D`, `L`, `R`) through a
  square 0/1 maze from the top-left to the bottom-right cell, never visiting
  a cell twice. Cells holding 0 are walls.
- `word_break(s, words)`: whether a string can be split into dictionary words.
- `word_exists(board, word)`: whether a word can be traced through
  horizontally or vertically adjacent cells of a character grid without
  reusing a cell.

```python
from dsakit.backtracking import palindrome_partitions, word_break

palindrome_partitions("aab")  # [["a", "a", "b"], ["aa", "b"]]
word_break("leetcode", ["leet", "code"])  # True
```

### `dsakit.trees`

A `TreeNode` dataclass (`val`, `left`, `right`), `build_tree(values)` to
build a tree from a level-order list (with `None` for missing children), and:

- `max_depth(root)`: nodes on the longest root-to-leaf path.
- `is_balanced(root)`: whether no node's subtree heights differ by more
  than one.
- `diameter(root)`: nodes on the longest path between any two nodes.
- `max_path_sum(root)`: the largest sum along any non-empty path; raises
  `ValueError` for an empty tree.
- `max_leaf_path_sum(root)`: the largest sum along a path joining two leaves
  through a node with two children; raises `ValueError` if there is no such
  node.
- `width_of_binary_tree(root)`: the widest level, counting the gaps between
  its end nodes.
- `path_to_node(root, target)`: values from the root to the first node
  holding `target` (pre-order, left first), or an empty list.
- `root_to_leaf_paths(root)`: the values along every root-to-leaf path.
- `zigzag_level_order(root)`: level values, alternating direction.

```python
from dsakit.trees import build_tree, zigzag_level_order

root = build_tree([3, 9, 20, None, None, 15, 7])
zigzag_level_order(root)  # [[3], [20, 9], [15, 7]]
```

### `dsakit.shortest_paths`

- `network_delay_time(times, n, k)`: Dijkstra over directed weighted edges
  `(source, target, time)` on nodes 1 to `n`; the time for a signal from `k`
  to reach every node, or -1 if some node is never reached. A `k` outside
  1 to `n` raises `ValueError`.
- `minimum_effort_path(heights)`: the least possible largest height step on
  a route from the top-left to the bottom-right cell.
- `shortest_path_binary_matrix(grid)`: the cell count of the shortest
  8-directional path over 0 cells across a square grid, or -1.
- `dag_shortest_distances(adj)`: unit-weight distances from node 0 in a DAG
  given as adjacency lists; unreachable nodes get `None`.
- `minimum_multiplications(factors, start, end)`: fewest multiplications
  (mod 100000) to get from `start` to `end`, or -1.

### `dsakit.topological`

- `can_finish(num_courses, prerequisites)` and
  `find_order(num_courses, prerequisites)`: each pair `(a, b)` means course
  `b` comes before `a`; `find_order` returns an empty list when no order
  exists.
- `has_cycle(adj)`: whether a directed graph has a cycle.
- `eventual_safe_nodes(graph)`: in ascending order, the nodes from which
  every path ends at a terminal node.
- `topological_sort(adj)`: a topological order found by depth-first search.

## Command-line tools

Two commands are installed with the package.

`dsakit-partition` takes a word as its first argument, or reads it from
standard input, and prints each palindromic partition on its own line:

```
echo aab | dsakit-partition
dsakit-partition aab
```

`dsakit-toposort` reads a node count and an edge count, followed by that many
`u v` edge pairs (nodes numbered from 0), from the file named by its first
argument or from standard input, and prints a topological order of the nodes:

```
printf '4 3\n0 1\n1 2\n2 3\n' | dsakit-toposort
```