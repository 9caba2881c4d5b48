import io
import random

import pytest

from graphtint.graph import parse_graph
from graphtint.tabu import (
    TabuResult,
    TabuSettings,
    conflicting_vertices,
    count_conflicts,
    main,
    minimize_colors,
    tabu_search,
)

FAST = TabuSettings(max_iterations=500, no_improvement_limit=500, max_time=10.0)


def _is_proper(graph, coloring):
    return all(
        coloring[u] != coloring[v]
        for u in graph.vertices()
        for v in graph.neighbors(u)
        if u != v
    )


def test_count_conflicts_triangle_same_color():
    graph = parse_graph("3 1 2 2 3 1 3")
    assert count_conflicts(graph, {1: 0, 2: 0, 3: 0}) == 3


def test_count_conflicts_ignores_loops():
    graph = parse_graph("1 1 1")
    assert count_conflicts(graph, {1: 0}) == 0


def test_count_conflicts_counts_repeated_edges():
    graph = parse_graph("2 1 2 1 2")
    assert count_conflicts(graph, {1: 5, 2: 5}) == 2
    assert count_conflicts(graph, {1: 5, 2: 6}) == 0


def test_conflicting_vertices_includes_loop_vertex():
    graph = parse_graph("3 1 1 2 3")
    assert conflicting_vertices(graph, {1: 0, 2: 0, 3: 1}) == [1]
    assert conflicting_vertices(graph, {1: 0, 2: 1, 3: 1}) == [1, 2, 3]


def test_tabu_search_solves_triangle_with_three_colors():
    graph = parse_graph("3 1 2 2 3 1 3")
    result = tabu_search(graph, {1: 1, 2: 1, 3: 1}, 3, FAST, random.Random(1))
    assert result.solved
    assert _is_proper(graph, result.coloring)
    assert set(result.coloring.values()) <= {1, 2, 3}


def test_tabu_search_path_two_colors_with_base_zero():
    graph = parse_graph("4 1 2 2 3 3 4")
    result = tabu_search(graph, {v: 0 for v in range(1, 5)}, 2, FAST, random.Random(7), 0)
    assert result.solved
    assert set(result.coloring.values()) <= {0, 1}
    assert result.conflicts == count_conflicts(graph, result.coloring)


def test_tabu_search_stops_at_iteration_limit():
    graph = parse_graph("3 1 2 2 3 1 3")
    start = {1: 1, 2: 1, 3: 1}
    result = tabu_search(graph, start, 3, TabuSettings(max_iterations=0), random.Random(0))
    assert result.iterations == 0
    assert result.coloring == start


def test_tabu_search_does_not_modify_input():
    graph = parse_graph("3 1 2 2 3 1 3")
    start = {1: 1, 2: 1, 3: 1}
    tabu_search(graph, start, 3, FAST, random.Random(3))
    assert start == {1: 1, 2: 1, 3: 1}


def test_tabu_search_unsolvable_reports_conflicts():
    graph = parse_graph("3 1 2 2 3 1 3")
    result = tabu_search(graph, {1: 1, 2: 1, 3: 1}, 2, FAST, random.Random(5))
    assert not result.solved
    assert result.conflicts == count_conflicts(graph, result.coloring)
    assert result.iterations <= FAST.max_iterations


def test_tabu_search_requires_every_vertex():
    graph = parse_graph("3 1 2")
    with pytest.raises(ValueError):
        tabu_search(graph, {1: 1, 2: 1}, 2, FAST, random.Random(0))


def test_tabu_result_solved_property():
    assert TabuResult({1: 1}, 1, 0, 0).solved
    assert not TabuResult({1: 1}, 1, 2, 0).solved


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_minimize_colors_gives_proper_coloring(seed):
    graph = parse_graph("5 1 2 2 3 3 4 4 5 5 1 1 3")
    result = minimize_colors(graph, FAST, random.Random(seed))
    assert result is not None
    assert result.solved
    assert _is_proper(graph, result.coloring)
    assert 1 <= result.num_colors <= graph.n
    assert all(0 <= c <= result.num_colors for c in result.coloring.values())


def test_minimize_colors_empty_graph_has_no_result():
    assert minimize_colors(parse_graph("0"), FAST, random.Random(0)) is None


def test_main_prints_coloring(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n2 3\n1 3\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    colors = [int(line.rsplit(" ", 1)[1]) for line in lines[:3]]
    assert len(set(colors)) == 3
    assert lines[3].startswith("Liczba wierzchołków: 3, liczba kolorów: ")


def test_main_reports_failure_for_empty_graph(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "Nie udało się znaleźć poprawnego kolorowania bez konfliktów.\n"
    )


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc"))
    assert main([]) == 1
    assert capsys.readouterr().err