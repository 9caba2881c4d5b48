# graphtint

Tools for colouring the vertices of an undirected graph so that no two
adjacent vertices share a colour.

## Input format

The colouring commands read a graph from standard input. The first value is
the number of vertices `n`. It is followed by edges, each given as two vertex
numbers from `1` to `n`, separated by whitespace (usually one edge per line):

```
4
1 2
2 3
3 4
4 1
```

Reading of edges stops at the first value that is not an integer, and a
trailing unpaired number is ignored. A missing or invalid vertex count, or an
edge naming a vertex outside `1..n`, is reported on standard error and the
command exits with status 1.

## Commands

| Command | What it does |
| --- | --- |
| `graphtint-generate` | Reads `n` from standard input and writes a random graph on `n` vertices in the format above. Each pair `i < j` becomes an edge with probability 0.4. |
| `graphtint-dimacs` | Converts a DIMACS file on standard input: the vertex count is taken from the first `p` line, each `e u v` line becomes `u v`, and all other lines are skipped. |
| `graphtint-greedy` | Colours vertices 1..n in order, giving each the smallest colour (from 1) not used by an already coloured neighbour, then prints the number of vertices and the highest colour used. |
| `graphtint-tabu` | Runs tabu search with colours from 1, starting with `n` colours and lowering the count by one after every conflict-free result, until a round fails or 180 seconds pass. The count printed at the end is one more than the palette size of the last conflict-free round. If no round succeeds, a failure message is printed. |
| `graphtint-stages` | Works with colours from 0 and prints five stages: every vertex in its own colour, repair with 5 colours, reduction to 4 colours (only out-of-range colours are changed at random), repair with 4 colours, and the final minimisation with its colour count. |

Each tabu search round stops when no conflicts remain, after 10,000
iterations, after 10,000 iterations without improvement, or when its time
runs out.

A typical pipeline:

```
echo 50 | graphtint-generate > graph.txt
graphtint-greedy < graph.txt
graphtint-tabu < graph.txt

graphtint-dimacs < myciel3.col | graphtint-tabu
```

## Library use

```python
import random

from graphtint.graph import parse_graph
from graphtint.greedy import greedy_coloring, format_report
from graphtint.tabu import TabuSettings, count_conflicts, minimize_colors

graph = parse_graph("4\n1 2\n2 3\n3 4\n4 1\n")

coloring = greedy_coloring(graph)
print(format_report(graph, coloring))

result = minimize_colors(graph, TabuSettings(max_time=5.0), random.Random(1))
if result is not None:
    print(result.num_colors, count_conflicts(graph, result.coloring))
```

The modules:

- `graphtint.graph` — `Graph` (`add_edge`, `neighbors`, `vertices`),
  `parse_graph`, `read_graph`, `format_coloring` and `GraphFormatError`.
- `graphtint.dimacs` — `convert_dimacs`, a generator over output lines.
- `graphtint.greedy` — `greedy_coloring` and `format_report`.
- `graphtint.generate` — `generate_edges` (takes the density and a
  `random.Random`) and `format_graph`.
- `graphtint.tabu` — `TabuSettings` (`tenure`, `max_iterations`, `max_time`,
  `no_improvement_limit`), `TabuResult` (`coloring`, `num_colors`,
  `conflicts`, `iterations`, `solved`), `count_conflicts`,
  `conflicting_vertices`, `tabu_search` and `minimize_colors`.
- `graphtint.stages` — `Stage`, `run_stages` and `format_stages`.

## Limitations

The commands take no options: the edge density, the search limits and the
random seed are fixed, and the seed is not reproducible from the command
line. Use the library functions to set them.

## Tests

Install the test dependencies with `pip install graphtint[test]` and run
`pytest`.