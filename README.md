# pathkit

Pathfinding, maximum-flow and directed-graph algorithms in plain Python. The
package has no third-party dependencies.

Graphs are described by callables instead of a fixed data structure. A
`successors` function takes a node and returns its neighbours. For weighted
searches it returns `(neighbour, cost)` pairs instead. A node can be any
hashable value.

## Installation

```
pip install pathkit
```

To run the test suite:

```
pip install "pathkit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `pathkit.grid` | `Grid`, a rectangular grid of vertices with optional diagonal links |
| `pathkit.edmonds_karp` | maximum flow and minimum cut: `edmonds_karp`, `edmonds_karp_dense`, `edmonds_karp_sparse`, `EKFlows`, `EdmondsKarp`, `DenseCapacity`, `SparseCapacity` |
| `pathkit.fringe` | shortest path with fringe search: `fringe` |
| `pathkit.idastar` | shortest path with IDA*: `idastar` |
| `pathkit.iddfs` | shortest path with iterative deepening depth-first search: `iddfs` |
| `pathkit.strongly_connected_components` | `strongly_connected_components`, `strongly_connected_components_from`, `strongly_connected_component` |
| `pathkit.topological_sort` | `topological_sort`, `topological_sort_into_groups`, `CycleError`, `CyclicGroupsError` |
| `pathkit.yen` | k shortest paths with Yen's algorithm: `yen` |

## Examples

### Shortest knight path

```python
from pathkit.idastar import idastar

GOAL = (4, 6)

def moves(pos):
    x, y = pos
    jumps = [(1, 2), (1, -2), (-1, 2), (-1, -2), (2, 1), (2, -1), (-2, 1), (-2, -1)]
    return [((x + dx, y + dy), 1) for dx, dy in jumps]

path, cost = idastar(
    (1, 1),
    moves,
    lambda p: (abs(p[0] - GOAL[0]) + abs(p[1] - GOAL[1])) // 3,
    lambda p: p == GOAL,
)
assert cost == 4
```

`fringe` takes the same arguments. Both functions return a `(path, cost)`
tuple. The path includes the start node and the end node. Both functions return
`None` when no accepted node can be reached. For unweighted graphs,
`iddfs(start, successors, success)` returns only the path, or `None`.

### k shortest paths

```python
from pathkit.yen import yen

graph = {
    "c": [("d", 3), ("e", 2)],
    "d": [("f", 4)],
    "e": [("d", 1), ("f", 2), ("g", 3)],
    "f": [("g", 2), ("h", 1)],
    "g": [("h", 2)],
    "h": [],
}
paths = yen("c", graph.__getitem__, lambda n: n == "h", 3)
# [(['c', 'e', 'f', 'h'], 5), (['c', 'e', 'g', 'h'], 7), (['c', 'd', 'f', 'h'], 8)]
```

Edge costs must be positive. The paths are returned cheapest first. If fewer
than `k` paths exist, `yen` returns only those. A `k` below 1 raises
`ValueError`.

### Maximum flow and minimum cut

```python
from pathkit.edmonds_karp import edmonds_karp_dense

flows, total, cut = edmonds_karp_dense(
    ["s", "a", "t"], "s", "t",
    [(("s", "a"), 3), (("a", "t"), 2)],
)
assert total == 2
```

The result is an `EKFlows` named tuple with three fields:

- `flows`: the positive flows, as `((from, to), amount)` items
- `total`: the total flow
- `cut`: the edges of a minimum cut

A source, sink or edge endpoint that is missing from `vertices` raises
`ValueError`. `edmonds_karp(..., backend=SparseCapacity)` selects the storage
explicitly. `edmonds_karp_dense` and `edmonds_karp_sparse` are shortcuts for the
two backends.

For graphs that change over time, use `DenseCapacity` or `SparseCapacity`
directly. These classes work on nodes numbered `0..size`. They can be built
with `DenseCapacity(size, source, sink)`, with `from_matrix` (a list of rows)
or with `from_vec` (a flat square list). Call `set_capacity` to change a
capacity and then call `augment()` again. The flow found so far is kept. When a
capacity is lowered below its current flow, the excess flow is cancelled.
`omit_details()` makes `augment()` return only the total.

### Topological order

```python
from pathkit.topological_sort import topological_sort, CycleError

def succ(n):
    return [n + 1, n + 2] if n <= 7 else ([9] if n == 8 else [])

assert topological_sort([5, 1], succ) == [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

If the graph has a cycle, `topological_sort` raises `CycleError`. Its `node`
attribute holds a node from the cycle. `topological_sort_into_groups` splits
the nodes into groups of nodes that do not depend on each other, and the list
of nodes passed to it must be exhaustive. If it meets a cycle, it raises
`CyclicGroupsError`, which has two attributes:

- `groups`: the groups built so far
- `remaining`: the nodes that could not be placed

Both exception classes are subclasses of `ValueError`.

### Strongly connected components

```python
from pathkit.strongly_connected_components import strongly_connected_component

def succ(n):
    return {7: [8, 9], 8: [7, 9]}.get(n, [7])

assert sorted(strongly_connected_component(8, succ)) == [7, 8, 9]
```

### Grids

```python
from pathkit.grid import Grid

g = Grid(3, 4)
g.add_borders()
print(g)
# ###
# #.#
# #.#
# ###
```

Coordinates are written `(x, y)`, where `x` is the column and `y` is the row.
`(0, 0)` is the top-left corner. A `Grid` supports the following:

- adding and removing vertices with `add_vertex`, `remove_vertex`,
  `add_borders`, `remove_borders`, `clear`, `fill` and `invert`
- resizing with `resize`
- diagonal mode, turned on and off with `enable_diagonal_mode()` and
  `disable_diagonal_mode()`
- `neighbours`, `has_edge`, `edges`, `distance` and `constrain`
- flood fills with `bfs_reachable(start, predicate)` and
  `dfs_reachable(start, predicate)`
- iteration over the vertices, membership tests with `in`, and equality
- building a grid with `Grid.from_vertices`, `Grid.from_coordinates` or
  `Grid.from_bool_rows`

`distance` gives the Manhattan distance, or the Chebyshev distance when
diagonal mode is on. `render(alternate=True)` draws the grid with `▓` and `░`
instead of `#` and `.`. `render(reverse=True)` draws the rows from the bottom up.

## What is not included

The package does not offer general-purpose A*, Dijkstra or breadth-first
shortest-path functions. `Grid` has no shortest-path method of its own.
Combine `Grid.neighbours` with `fringe`, `idastar` or `iddfs` instead. There is
no matrix type: capacity matrices are given as plain lists. The package is a
library only and installs no command-line tool.