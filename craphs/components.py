"""Connected components of an undirected graph."""

from __future__ import annotations

from typing import Optional

from craphs.graph import Graph
from craphs.search import DepthFirstSearch, Visitor

__all__ = ["ConnectedComponents"]


class ConnectedComponents(Visitor):
    """Labels every vertex with the index of its connected component."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._count = 0
        self._ids: list[Optional[int]] = [None] * graph.vertex_count
        dfs = DepthFirstSearch(graph)
        for start, label in enumerate(self._ids):
            if label is None:
                dfs.run(self, start)
                self._count += 1

    @property
    def count(self) -> int:
        """Number of connected components."""
        return self._count

    def component_id(self, v: int) -> int:
        """Index of the component holding v."""
        self.graph.check_vertex(v)
        return self._ids[v]

    def connected(self, v: int, w: int) -> bool:
        """Whether v and w lie in the same component."""
        return self.component_id(v) == self.component_id(w)

    def receive(self, v: Optional[int], w: int, dist: int) -> None:
        self._ids[w] = self._count

    def __str__(self) -> str:
        body = "".join(f"{v}: {label}\n" for v, label in enumerate(self._ids))
        return f"CC(count={self._count})\nVertex: Id\n{body}"