"""Show the colouring stages from n distinct colours down to a minimised colouring."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from graphtint.graph import Graph, GraphFormatError, format_coloring, read_graph
from graphtint.tabu import (
    FAILURE_MESSAGE,
    TabuResult,
    TabuSettings,
    count_conflicts,
    tabu_search,
)

FIRST_PALETTE = 5
SECOND_PALETTE = 4


@dataclass
class Stage:
    """A titled snapshot of a colouring."""

    title: str
    coloring: dict[int, int]


def _recolor(
    coloring: Mapping[int, int], palette_size: int, rng: random.Random
) -> dict[int, int]:
    """Replace every colour outside 0..palette_size-1 with a random one inside it."""
    return {
        v: rng.randrange(palette_size) if c >= palette_size else c
        for v, c in coloring.items()
    }


def _final_coloring(
    graph: Graph, start: Mapping[int, int], settings: TabuSettings, rng: random.Random
) -> TabuResult:
    deadline = time.monotonic() + settings.max_time
    zeros = {v: 0 for v in graph.vertices()}
    best = TabuResult(zeros, graph.n, count_conflicts(graph, zeros), 0)
    current = dict(start)
    palette_size = graph.n
    while palette_size >= 1:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        current = _recolor(current, palette_size, rng)
        result = tabu_search(
            graph, current, palette_size, replace(settings, max_time=remaining), rng, 0
        )
        if not result.solved:
            break
        best = result
        current = result.coloring
        palette_size -= 1
    return best


def run_stages(
    graph: Graph,
    rng: random.Random | None = None,
    settings: TabuSettings | None = None,
) -> tuple[list[Stage], TabuResult]:
    """Compute the four intermediate stages and the final minimised colouring (colours from 0)."""
    rng = rng or random.Random()
    settings = settings or TabuSettings()

    initial = {v: v - 1 for v in graph.vertices()}
    five = tabu_search(
        graph, _recolor(initial, FIRST_PALETTE, rng), FIRST_PALETTE, settings, rng, 0
    ).coloring
    reduced = _recolor(five, SECOND_PALETTE, rng)
    four = tabu_search(graph, reduced, SECOND_PALETTE, settings, rng, 0).coloring

    stages = [
        Stage(
            f"=== Stan 1: Pierwotne przypisanie {graph.n} kolorów (0-indexowane) ===",
            initial,
        ),
        Stage("=== Stan 2: Przypisanie 5 kolorów po usunięciu błędów ===", five),
        Stage(
            "=== Stan 3: Redukcja do 4 kolorów (zmiana tylko niedozwolonych) ===",
            reduced,
        ),
        Stage("=== Stan 4: Przypisanie 4 kolorów już bez błędów ===", four),
    ]
    final = _final_coloring(graph, initial, settings, rng)
    return stages, final


def format_stages(
    graph: Graph, stages: Sequence[Stage], final: TabuResult | None
) -> str:
    """Render every stage followed by the final colouring and its colour count."""
    parts = [f"{stage.title}\n{format_coloring(stage.coloring)}\n" for stage in stages]
    if final is None:
        parts.append(FAILURE_MESSAGE + "\n")
    else:
        parts.append(
            "=== Stan 5: Docelowe pokolorowanie ===\n"
            + format_coloring(final.coloring)
            + f"Liczba wierzchołków: {graph.n}, liczba kolorów: {final.num_colors}\n"
        )
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Print the colouring stages for the graph on standard input."""
    parser = argparse.ArgumentParser(
        description="Print the colouring stages for the graph read from stdin."
    )
    parser.parse_args(argv)
    try:
        graph = read_graph(sys.stdin)
    except GraphFormatError as error:
        print(error, file=sys.stderr)
        return 1
    stages, final = run_stages(graph)
    sys.stdout.write(format_stages(graph, stages, final))
    return 0