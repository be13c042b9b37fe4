"""Per-vertex distance measures: closeness centrality and eccentricity."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, TypeVar

from craphs.graph import Graph
from craphs.search import BreadthFirstSearch, Visitor

__all__ = ["ClosenessCentrality", "Eccentricity"]

_log = logging.getLogger(__name__)

_T = TypeVar("_T")


class _VertexMeasure(Visitor, Generic[_T]):
    """A value per vertex, computed from one breadth-first run started at it."""

    def _compute(self, graph: Graph) -> None:
        self.graph = graph
        bfs = BreadthFirstSearch(graph)
        self._values: list[_T] = []
        for v in range(graph.vertex_count):
            bfs.run(self, v)
            self._values.append(self._result(v))

    def _result(self, v: int) -> _T:
        raise NotImplementedError

    def _value(self, v: int) -> _T:
        self.graph.check_vertex(v)
        return self._values[v]

    def _render(self, title: str, shown: Callable[[int], str]) -> str:
        rows = "".join(f"Vertex {v}: {shown(v)}\n" for v in range(len(self._values)))
        return f"{title}\n{rows}"


class ClosenessCentrality(_VertexMeasure[float]):
    """Closeness centrality: the inverse of the summed distances to reachable vertices.

    A vertex that reaches no other vertex has closeness 0.0.
    """

    _run_state = {"_current_distance": 0}

    def __init__(self, graph: Graph) -> None:
        self._compute(graph)

    def receive(self, v: Optional[int], w: int, dist: int) -> None:
        self._current_distance += dist

    def _result(self, v: int) -> float:
        total = self._current_distance
        _log.debug("Current distance for %d: %d", v, total)
        return 1.0 / total if total != 0 else 0.0

    def get(self, v: int) -> float:
        """Closeness of vertex v."""
        return self._value(v)

    def normalized(self, v: int) -> float:
        """Closeness of v scaled by V-1."""
        return self.get(v) * (self.graph.vertex_count - 1)

    def __str__(self) -> str:
        return self._render(
            "Closeness Centrality of the graph (normalized):",
            lambda v: f"{self.normalized(v):.4f}",
        )


class Eccentricity(_VertexMeasure[int]):
    """Eccentricity: the greatest distance from a vertex to any vertex it reaches."""

    _run_state = {"_current_max": 0}

    def __init__(self, graph: Graph) -> None:
        self._compute(graph)

    def receive(self, v: Optional[int], w: int, dist: int) -> None:
        self._current_max = max(self._current_max, dist)

    def _result(self, v: int) -> int:
        return self._current_max

    def get(self, v: int) -> int:
        """Eccentricity of vertex v."""
        return self._value(v)

    def __str__(self) -> str:
        return self._render("Eccentricity of the graph:", lambda v: str(self.get(v)))