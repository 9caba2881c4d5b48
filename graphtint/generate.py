"""Random graph generation."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from itertools import combinations

DEFAULT_DENSITY = 0.4


def generate_edges(
    n: int, density: float, rng: random.Random
) -> Iterator[tuple[int, int]]:
    """Yield each pair i < j of vertices 1..n with probability `density`, in lexicographic order."""
    for i, j in combinations(range(1, n + 1), 2):
        if rng.random() < density:
            yield i, j


def format_graph(n: int, edges: Iterable[tuple[int, int]]) -> str:
    """Render a vertex count line followed by one "u v" line per edge."""
    return f"{n}\n" + "".join(f"{u} {v}\n" for u, v in edges)


def main(argv: list[str] | None = None) -> int:
    """Read a vertex count from standard input and print a random graph."""
    parser = argparse.ArgumentParser(
        description="Print a random graph with the vertex count read from stdin."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    try:
        n = int(tokens[0])
    except (IndexError, ValueError):
        print("Podaj liczbę wierzchołków!", file=sys.stderr)
        return 1
    rng = random.Random()
    sys.stdout.write(format_graph(n, generate_edges(n, DEFAULT_DENSITY, rng)))
    return 0