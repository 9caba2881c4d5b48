"""Undirected graphs on vertices 1..n and their plain-text format."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TextIO


class GraphFormatError(ValueError):
    """Raised when graph text cannot be understood."""


class Graph:
    """Undirected multigraph on vertices 1..n kept as adjacency lists."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must not be negative, got {n}")
        self.n = n
        self._adjacency: list[list[int]] = [[] for _ in range(n + 1)]

    def _require_vertex(self, vertex: int) -> None:
        if not 1 <= vertex <= self.n:
            raise ValueError(f"vertex {vertex} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect u and v; repeated edges and loops are kept as given."""
        self._require_vertex(u)
        self._require_vertex(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of a vertex in insertion order."""
        self._require_vertex(vertex)
        return list(self._adjacency[vertex])

    def vertices(self) -> range:
        """Return the vertices 1..n."""
        return range(1, self.n + 1)

    def __repr__(self) -> str:
        return f"Graph(n={self.n})"


def parse_graph(text: str) -> Graph:
    """Build a graph from a vertex count followed by whitespace-separated edge pairs.

    Reading of edges stops at the first token that is not an integer, and a
    trailing unpaired number is ignored.
    """
    tokens = text.split()
    if not tokens:
        raise GraphFormatError("missing vertex count")
    try:
        n = int(tokens[0])
    except ValueError:
        raise GraphFormatError(f"invalid vertex count: {tokens[0]!r}") from None

    values: list[int] = []
    for token in tokens[1:]:
        try:
            values.append(int(token))
        except ValueError:
            break

    try:
        graph = Graph(n)
        for u, v in zip(values[::2], values[1::2]):
            graph.add_edge(u, v)
    except ValueError as error:
        raise GraphFormatError(str(error)) from None
    return graph


def read_graph(stream: TextIO) -> Graph:
    """Read a graph from a text stream."""
    return parse_graph(stream.read())


def format_coloring(coloring: Mapping[int, int]) -> str:
    """Render one line per vertex, in vertex order."""
    return "".join(
        f"Wierzchołek: {vertex}, kolor: {color}\n"
        for vertex, color in sorted(coloring.items())
    )