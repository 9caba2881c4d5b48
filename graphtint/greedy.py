"""Greedy graph colouring in vertex order."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping
from itertools import count

from graphtint.graph import Graph, GraphFormatError, format_coloring, read_graph


def greedy_coloring(graph: Graph) -> dict[int, int]:
    """Give each vertex, in order 1..n, the smallest colour from 1 unused by coloured neighbours."""
    coloring: dict[int, int] = {}
    for vertex in graph.vertices():
        used = {coloring[nb] for nb in graph.neighbors(vertex) if nb in coloring}
        coloring[vertex] = next(c for c in count(1) if c not in used)
    return coloring


def format_report(graph: Graph, coloring: Mapping[int, int]) -> str:
    """Render the colouring followed by the vertex and colour counts."""
    colors_used = max(coloring.values(), default=0)
    return (
        format_coloring(coloring)
        + "\n"
        + f"Liczba wierzchołków: {graph.n}, liczba kolorów: {colors_used}\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Colour the graph on standard input and print the report."""
    parser = argparse.ArgumentParser(
        description="Greedily colour the graph read from stdin."
    )
    parser.parse_args(argv)
    try:
        graph = read_graph(sys.stdin)
    except GraphFormatError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(format_report(graph, greedy_coloring(graph)))
    return 0