# craphs

A small library for undirected graphs: building them by hand or loading
them from GEXF files, walking them breadth-first or depth-first, recovering
paths, finding connected components, and measuring each vertex's
eccentricity and closeness centrality.

Vertices are the integers `0 .. V-1`. Edges are undirected, and adding an
edge that already exists has no effect.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
craphs LesMiserables.gexf
```

loads an undirected GEXF graph and prints the normalized closeness
centrality of every vertex, one line per vertex with four decimal places.
Without an argument it reads `../LesMiserables.gexf`. If the file cannot be
read or is not an undirected GEXF graph, the error is printed to standard
error and the command exits with status 1.

## Building a graph

```python
from craphs.graph import Graph

g = Graph(6)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(1, 3)
g.add_edge(3, 4)

g.vertex_count         # 6
g.edge_count           # 4
g.is_connected(1, 0)   # True
g.degree(0)            # 2
g.adj(0)               # (2, 1) - most recently added neighbour first
g.max_degree()         # 2
g.average_degree()     # 2E / V
print(g)               # counts, max and average degree, then the edge list
```

A vertex outside `0 .. V-1` raises `VertexError` (a subclass of
`IndexError`); `check_vertex(v)` performs that check on its own.

`Graph.from_gexf(path)` reads a GEXF document. The node count comes from
the `count` attribute of `<nodes>`, and each `<edge>` contributes its
integer `source` and `target`. Only graphs whose `defaultedgetype` is
`undirected` are accepted; anything else, a missing element, or a file that
cannot be parsed raises `GraphFormatError` (a subclass of `ValueError`).

## Searching and paths

`BreadthFirstSearch` and `DepthFirstSearch` (in `craphs.search`) walk the
graph from a start vertex and report every newly reached vertex to a
`Visitor` through `receive(v, w, dist)`: `w` is the reached vertex, `v` the
vertex it was reached from (`None` for the start), and `dist` its distance.
Breadth-first search reports the number of edges from the start;
depth-first search reports the start with 0 and every other vertex with
the depth of the vertex it was reached from. `clear()` is called on the
visitor at the start of each run. After a run, `has_path_to(v)` and
`is_marked(v)` tell whether `v` was reached.

`Paths` (in `craphs.paths`) is a visitor that remembers how each vertex was
reached; it uses breadth-first search unless given another search class:

```python
from craphs.paths import Paths
from craphs.search import BreadthFirstSearch

paths = Paths(g, BreadthFirstSearch)
paths.run(0)
paths.has_path_to(4)   # True
paths.path_to(4)       # [0, 1, 3, 4]
paths.path_to(5)       # [] - not reachable from 0
```

With breadth-first search the paths are shortest paths. Printing a `Paths`
object lists the predecessor of every vertex (`-` where there is none).

## Connected components

```python
from craphs.components import ConnectedComponents

cc = ConnectedComponents(g)
cc.count               # 2 - {0, 1, 2, 3, 4} and {5}
cc.connected(2, 4)     # True
cc.component_id(5)     # 1
```

Components are numbered from 0 in the order of their lowest vertex.

## Eccentricity and closeness centrality

```python
from craphs.metrics import ClosenessCentrality, Eccentricity

ecc = Eccentricity(g)
ecc.get(0)             # greatest distance from 0 to a reachable vertex

closeness = ClosenessCentrality(g)
closeness.get(0)         # 1 / (sum of distances from 0 to reachable vertices)
closeness.normalized(0)  # the same, multiplied by V - 1
```

Both are computed for every vertex when the object is created, with a
breadth-first search from each one; only reachable vertices count. A vertex
that reaches no other vertex has a closeness of 0. Printing either object
lists the value of every vertex. The summed distance of each vertex is
logged at debug level on the `craphs.metrics` logger.

## What it does not do

Graphs are undirected and unweighted only, and held in memory. GEXF files
can be read but not written, and node labels and attributes in them are
ignored.