"""Tabu search colouring and colour-count minimisation."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Mapping
from dataclasses import dataclass, replace

from graphtint.graph import Graph, GraphFormatError, format_coloring, read_graph

FAILURE_MESSAGE = "Nie udało się znaleźć poprawnego kolorowania bez konfliktów."


@dataclass(frozen=True)
class TabuSettings:
    """Limits and parameters of one tabu search run."""

    tenure: int = 8
    max_iterations: int = 10_000
    max_time: float = 180.0
    no_improvement_limit: int = 10_000


@dataclass
class TabuResult:
    """Outcome of a search: the colouring reached and how it was reached."""

    coloring: dict[int, int]
    num_colors: int
    conflicts: int
    iterations: int

    @property
    def solved(self) -> bool:
        """True when no edge joins two vertices of the same colour."""
        return self.conflicts == 0


def count_conflicts(graph: Graph, coloring: Mapping[int, int]) -> int:
    """Count edges u < v whose ends share a colour; loops are not counted."""
    return sum(
        1
        for u in graph.vertices()
        for v in graph.neighbors(u)
        if u < v and coloring[u] == coloring[v]
    )


def conflicting_vertices(graph: Graph, coloring: Mapping[int, int]) -> list[int]:
    """Return, in vertex order, the vertices with a neighbour of the same colour."""
    return [
        u
        for u in graph.vertices()
        if any(coloring[v] == coloring[u] for v in graph.neighbors(u))
    ]


def tabu_search(
    graph: Graph,
    coloring: Mapping[int, int],
    num_colors: int,
    settings: TabuSettings | None = None,
    rng: random.Random | None = None,
    base: int = 1,
) -> TabuResult:
    """Recolour conflicting vertices with colours base..base+num_colors-1 until no conflicts remain or a limit is hit."""
    settings = settings or TabuSettings()
    rng = rng or random.Random()
    missing = [v for v in graph.vertices() if v not in coloring]
    if missing:
        raise ValueError(f"coloring has no colour for vertices {missing}")

    deadline = time.monotonic() + settings.max_time
    current = {v: coloring[v] for v in graph.vertices()}
    palette = range(base, base + num_colors)
    tabu: dict[tuple[int, int], int] = {}

    conflicts = count_conflicts(graph, current)
    best_conflicts = conflicts
    iteration = 0
    stale = 0

    while (
        conflicts > 0
        and iteration < settings.max_iterations
        and time.monotonic() < deadline
        and stale < settings.no_improvement_limit
    ):
        candidates = conflicting_vertices(graph, current)
        if not candidates:
            break
        vertex = rng.choice(candidates)
        old = current[vertex]
        neighbor_colors = [current[nb] for nb in graph.neighbors(vertex)]

        best_delta: float = math.inf
        choice = old
        for color in palette:
            if color == old:
                continue
            delta = neighbor_colors.count(color) - neighbor_colors.count(old)
            is_tabu = tabu.get((vertex, color), 0) > iteration
            if (not is_tabu and delta < best_delta) or (
                is_tabu and conflicts + delta < best_conflicts
            ):
                best_delta = delta
                choice = color

        current[vertex] = choice
        tabu[(vertex, old)] = iteration + settings.tenure
        new_conflicts = count_conflicts(graph, current)
        stale = 0 if new_conflicts < conflicts else stale + 1
        conflicts = new_conflicts
        best_conflicts = min(best_conflicts, conflicts)
        iteration += 1

    return TabuResult(current, num_colors, conflicts, iteration)


def minimize_colors(
    graph: Graph,
    settings: TabuSettings | None = None,
    rng: random.Random | None = None,
) -> TabuResult | None:
    """Search conflict-free colourings with ever fewer colours, starting from n.

    Every vertex starts with colour 0; a round with k colours searches over
    1..k and only vertices whose colour exceeds k are recoloured at random.
    Returns the last conflict-free result, or None if there is none.
    """
    settings = settings or TabuSettings()
    rng = rng or random.Random()
    deadline = time.monotonic() + settings.max_time
    coloring = {v: 0 for v in graph.vertices()}
    best: TabuResult | None = None
    palette_size = graph.n

    while palette_size >= 1:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        coloring = {
            v: rng.randrange(palette_size) + 1 if c > palette_size else c
            for v, c in coloring.items()
        }
        result = tabu_search(
            graph, coloring, palette_size, replace(settings, max_time=remaining), rng, 1
        )
        if not result.solved:
            break
        best = result
        coloring = result.coloring
        palette_size -= 1
    return best


def main(argv: list[str] | None = None) -> int:
    """Colour the graph on standard input with as few colours as the search finds."""
    parser = argparse.ArgumentParser(
        description="Colour the graph read from stdin using tabu search."
    )
    parser.parse_args(argv)
    try:
        graph = read_graph(sys.stdin)
    except GraphFormatError as error:
        print(error, file=sys.stderr)
        return 1
    result = minimize_colors(graph)
    if result is None:
        sys.stdout.write(FAILURE_MESSAGE + "\n")
        return 0
    sys.stdout.write(
        format_coloring(result.coloring)
        + f"Liczba wierzchołków: {graph.n}, liczba kolorów: {result.num_colors + 1}\n"
    )
    return 0