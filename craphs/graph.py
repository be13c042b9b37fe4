"""Undirected graphs stored as adjacency lists, with GEXF loading."""

from __future__ import annotations

import math
import os
import re
import xml.etree.ElementTree as ET
from collections import deque
from collections.abc import Iterator
from typing import Union

__all__ = ["VertexError", "GraphFormatError", "Graph"]

_DEC_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"\s*0[xX]([0-9a-fA-F]+)")


class VertexError(IndexError):
    """Raised when a vertex index lies outside the graph."""


class GraphFormatError(ValueError):
    """Raised when a graph file cannot be read or is not supported."""


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local_name(child.tag) == name)


def _first_child(element: ET.Element, name: str) -> ET.Element:
    child = next(_children(element, name), None)
    if child is None:
        raise GraphFormatError(f"missing <{name}> element")
    return child


def _int_attribute(element: ET.Element, name: str) -> int:
    """Read the leading integer of an attribute, 0 when absent or unreadable."""
    raw = element.get(name)
    if raw is None:
        return 0
    match = _HEX_RE.match(raw)
    if match:
        return int(match.group(1), 16)
    match = _DEC_RE.match(raw)
    if match:
        return int(match.group(1))
    return 0


class Graph:
    """An undirected graph on vertices 0..vertices-1 without parallel edges."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self._vertices = vertices
        self._edges = 0
        self._adj: list[deque[int]] = [deque() for _ in range(vertices)]

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self._vertices

    @property
    def edge_count(self) -> int:
        """Number of distinct edges."""
        return self._edges

    def check_vertex(self, v: int) -> None:
        """Raise VertexError unless v is a vertex of this graph."""
        if not isinstance(v, int) or isinstance(v, bool) or not 0 <= v < self._vertices:
            raise VertexError(f"Vertex {v} out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Join v and w; an edge that already exists is ignored."""
        if self.is_connected(v, w):
            return
        self._adj[v].appendleft(w)
        self._adj[w].appendleft(v)
        self._edges += 1

    def is_connected(self, v: int, w: int) -> bool:
        """Whether an edge joins v and w."""
        self.check_vertex(v)
        self.check_vertex(w)
        return w in self._adj[v] or v in self._adj[w]

    def adj(self, v: int) -> tuple[int, ...]:
        """Neighbours of v, most recently added first."""
        self.check_vertex(v)
        return tuple(self._adj[v])

    def degree(self, v: int) -> int:
        """Number of entries in v's adjacency list."""
        self.check_vertex(v)
        return len(self._adj[v])

    def max_degree(self) -> int:
        """Largest degree of any vertex, 0 for an empty graph."""
        return max((len(neighbours) for neighbours in self._adj), default=0)

    def average_degree(self) -> float:
        """Mean degree, 2E/V (NaN for a graph with no vertices)."""
        if self._vertices == 0:
            return math.nan
        return 2.0 * self._edges / self._vertices

    @classmethod
    def from_gexf(cls, path: Union[str, "os.PathLike[str]"]) -> "Graph":
        """Load an undirected graph from a GEXF file."""
        if path is None:
            raise GraphFormatError("filename is null")
        try:
            root = ET.parse(path).getroot()
        except (ET.ParseError, OSError) as exc:
            raise GraphFormatError(
                f"failed to load XML file: {os.fspath(path)} -> {exc}"
            ) from exc

        if _local_name(root.tag) != "gexf":
            raise GraphFormatError("missing <gexf> element")
        graph_element = _first_child(root, "graph")
        if graph_element.get("defaultedgetype") != "undirected":
            raise GraphFormatError("Only undirected graphs are supported")

        count = _int_attribute(_first_child(graph_element, "nodes"), "count")
        if count < 0:
            raise GraphFormatError(f"invalid node count {count}")
        graph = cls(count)

        for edge in _children(_first_child(graph_element, "edges"), "edge"):
            graph.add_edge(_int_attribute(edge, "source"), _int_attribute(edge, "target"))
        return graph

    def __str__(self) -> str:
        lines = [
            f"Graph(V={self._vertices}, E={self._edges})",
            f"Max degree: {self.max_degree()}",
            f"Average degree: {self.average_degree():g}",
        ]
        lines.extend(
            f"{v}-{w}" for v, neighbours in enumerate(self._adj) for w in neighbours
        )
        return "\n".join(lines) + "\n"