"""Paths from a start vertex, recorded while a search runs."""

from __future__ import annotations

from typing import Optional

from craphs.graph import Graph
from craphs.search import BreadthFirstSearch, Search, Visitor

__all__ = ["Paths"]


class Paths(Visitor):
    """Records, for every reached vertex, the vertex it was reached from."""

    def __init__(self, graph: Graph, search_cls: type[Search] = BreadthFirstSearch) -> None:
        self.graph = graph
        self._searcher = search_cls(graph)
        self._edge_to: list[Optional[int]] = [None] * graph.vertex_count
        self._start: Optional[int] = None

    def run(self, start: int) -> None:
        """Search from start, replacing any previously recorded paths."""
        self.graph.check_vertex(start)
        self._start = start
        self._edge_to = [None] * self.graph.vertex_count
        self._searcher.run(self, start)

    def receive(self, v: Optional[int], w: int, dist: int) -> None:
        self._edge_to[w] = v

    def has_path_to(self, v: int) -> bool:
        """Whether the last run reached v."""
        return self._searcher.has_path_to(v)

    def path_to(self, v: int) -> list[int]:
        """Vertices from the start to v, or an empty list if v was not reached."""
        self.graph.check_vertex(v)
        if not self._searcher.has_path_to(v):
            return []
        path = []
        x: Optional[int] = v
        while x != self._start:
            path.append(x)
            x = self._edge_to[x]
        path.append(self._start)
        path.reverse()
        return path

    def __str__(self) -> str:
        lines = ["Vertex -> EdgeTo"]
        lines.extend(
            f"{i} -> {'-' if e is None else e}" for i, e in enumerate(self._edge_to)
        )
        return "\n".join(lines) + "\n"