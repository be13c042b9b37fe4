"""Command line entry point: closeness centrality of a GEXF graph."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from craphs.graph import GraphFormatError, Graph
from craphs.metrics import ClosenessCentrality

__all__ = ["main"]

DEFAULT_GRAPH = "../LesMiserables.gexf"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a GEXF graph and print the normalized closeness of every vertex."""
    parser = argparse.ArgumentParser(
        prog="craphs",
        description="Print the normalized closeness centrality of an undirected GEXF graph.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_GRAPH,
        help=f"GEXF file to read (default: {DEFAULT_GRAPH})",
    )
    args = parser.parse_args(argv)

    try:
        graph = Graph.from_gexf(args.path)
    except GraphFormatError as exc:
        print(f"craphs: {exc}", file=sys.stderr)
        return 1

    print(ClosenessCentrality(graph))
    return 0


if __name__ == "__main__":
    sys.exit(main())