"""Undirected graphs with GEXF loading, searches, paths, components and distance measures."""

__version__ = "0.1.0"

__all__ = ["graph", "search", "paths", "components", "metrics", "cli"]