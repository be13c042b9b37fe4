"""Graph traversals that report every reached vertex to a visitor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import ClassVar, Iterator, Mapping, Optional

from craphs.graph import Graph

__all__ = ["Visitor", "Search", "BreadthFirstSearch", "DepthFirstSearch"]


class Visitor(ABC):
    """Receives the vertices a search reaches.

    Subclasses list their per-run attributes and starting values in
    ``_run_state``; ``clear`` restores them before every search run.
    The values should be immutable, since they are shared between runs.
    """

    _run_state: ClassVar[Mapping[str, object]] = {}

    def clear(self) -> None:
        """Restore the per-run attributes; called at the start of every search run."""
        for name, value in self._run_state.items():
            setattr(self, name, value)

    @abstractmethod
    def receive(self, v: Optional[int], w: int, dist: int) -> None:
        """Called when w is reached from v (None for the start vertex)."""


class Search(ABC):
    """A traversal over a graph that remembers which vertices it reached."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._marked = [False] * graph.vertex_count

    def _begin(self, visitor: Visitor, s: int) -> None:
        self.graph.check_vertex(s)
        self._marked = [False] * self.graph.vertex_count
        visitor.clear()

    @abstractmethod
    def run(self, visitor: Visitor, s: int) -> None:
        """Traverse from s, reporting reached vertices to visitor."""

    def has_path_to(self, v: int) -> bool:
        """Whether the last run reached v."""
        return self.is_marked(v)

    def is_marked(self, v: int) -> bool:
        """Whether v has been marked by the last run."""
        self.graph.check_vertex(v)
        return self._marked[v]


class BreadthFirstSearch(Search):
    """Breadth-first traversal; dist is the number of edges from the start."""

    def run(self, visitor: Visitor, s: int) -> None:
        self._begin(visitor, s)
        distances: dict[int, int] = {}
        queue: deque[int] = deque()

        def visit(v: Optional[int], w: int, dist: int) -> None:
            visitor.receive(v, w, dist)
            self._marked[w] = True
            distances[w] = dist
            queue.append(w)

        visit(None, s, 0)
        while queue:
            v = queue.popleft()
            for w in self.graph.adj(v):
                if not self._marked[w]:
                    visit(v, w, distances[v] + 1)


class DepthFirstSearch(Search):
    """Depth-first traversal.

    The start vertex is reported with dist 0; every other vertex w reached
    from v is reported with the depth of v.
    """

    def run(self, visitor: Visitor, s: int) -> None:
        self._begin(visitor, s)
        visitor.receive(None, s, 0)

        self._marked[s] = True
        stack: list[tuple[int, int, Iterator[int]]] = [(s, 0, iter(self.graph.adj(s)))]
        while stack:
            v, dist, neighbours = stack[-1]
            for w in neighbours:
                if not self._marked[w]:
                    visitor.receive(v, w, dist)
                    self._marked[w] = True
                    stack.append((w, dist + 1, iter(self.graph.adj(w))))
                    break
            else:
                stack.pop()