# graphkit

A small graph library for Python 3.10 and later. It has no dependencies. It
provides three graph types that share a common set of traversal and analysis
operations:

- `graphkit.unweighted.UnweightedGraph`: undirected, unweighted graph
- `graphkit.directed.DirectedGraph`: directed, unweighted graph with
  topological sorting
- `graphkit.weighted.WeightedGraph`: undirected graph with non-negative
  integer weights and Dijkstra shortest paths

Nodes are plain strings. A node exists once it has appeared at either end of
an edge. Parallel edges are allowed. `remove_edge` removes one matching edge
and does nothing when there is none.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Shared operations

Every graph type derives from `graphkit.common.BaseGraph`, which provides
these operations:

- `neighbors(node)`: the adjacent nodes in insertion order. The result is
  empty for an unknown node.
- `nodes()`: every node.
- `has_edge(u, v)`: whether `v` is a neighbour of `u`.
- `bfs(start)` and `dfs(start)`: the nodes reachable from `start`, in
  breadth-first order or in depth-first preorder.
- `is_connected()`: whether every node is reachable from the first node.
  An empty graph counts as connected.
- `connected_components()`: the nodes grouped by breadth-first reachability.
- `shortest_path(start, end)`: a path with the fewest edges, or `None` when
  there is none.

## Usage

```python
from graphkit.unweighted import UnweightedGraph

g = UnweightedGraph()
g.add_edge("A", "B")
g.add_edge("A", "C")
g.add_edge("B", "D")
g.add_edge("E", "F")

g.has_edge("A", "B")            # True
g.neighbors("A")                # ['B', 'C']
g.bfs("A")                      # ['A', 'B', 'C', 'D']
g.dfs("A")                      # ['A', 'B', 'D', 'C']
g.is_connected()                # False
g.shortest_path("A", "D")       # ['A', 'B', 'D']
g.shortest_path("A", "F")       # None: no path
g.connected_components()        # [['A', 'B', 'C', 'D'], ['E', 'F']]
g.has_cycle()                   # False

g.remove_edge("A", "B")
print(g)                        # one "node: neighbour neighbour ..." line per node
```

`DirectedGraph` detects directed cycles. It also offers a topological sort,
which raises `ValueError` when the graph has a cycle:

```python
from graphkit.directed import DirectedGraph

d = DirectedGraph()
d.add_edge("A", "B")
d.add_edge("B", "C")
d.topological_sort()            # ['A', 'B', 'C']

d.add_edge("C", "A")
d.has_cycle()                   # True
d.topological_sort()            # raises ValueError
```

`WeightedGraph` keeps the weight of each edge. `add_edge` raises `ValueError`
for a negative weight and leaves the graph unchanged. `dijkstra(start, end)`
returns a `graphkit.common.DijkstraResult` with `path` and `cost`. When `end`
cannot be reached, the path holds only `start` and the cost is 0:

```python
from graphkit.weighted import WeightedGraph

w = WeightedGraph()
w.add_edge("A", "B", 4)
w.add_edge("A", "C", 1)
w.add_edge("C", "B", 2)

w.weighted_neighbors("A")       # [WeightedEdge(to='B', weight=4), WeightedEdge(to='C', weight=1)]
result = w.dijkstra("A", "B")
result.path                     # ['A', 'C', 'B']
result.cost                     # 3
print(w)                        # lines such as "A: B(4) C(1) "
```

## Demo

The following command prints a walkthrough of the undirected and directed
graph operations on two small example graphs:

```
graphkit-demo
```

The same walkthrough runs with `python -m graphkit.cli`. Its labels are in
Portuguese. Booleans print as `true`/`false`, and lists print in brackets
separated by spaces. A missing path prints as `[]`.

## What it does not do

- There is no weighted directed graph type.
- There are no all-pairs shortest paths and no minimum spanning tree.
- There are no negative edge weights.
- Graphs are not read from or saved to files. They exist only in memory.
- The demo command takes no input. It always prints the same two examples.

## Running the tests

```
pytest
```