# socialgraph

Structural analysis of undirected social networks stored as gzipped,
space-delimited edge lists (one `u v` pair per line, non-negative integer
node IDs).

It reports:

- the average shortest-path length, estimated by breadth-first search from
  the first (up to) five nodes of the graph;
- a 2-approximation of the densest subgraph (edges per node), found by
  repeatedly peeling off a node of lowest remaining degree;
- the 1-hop degree distribution and a power-law exponent fitted to it by
  weighted least squares of log(count) against log(degree);
- the distribution of the number of nodes exactly two hops away;
- the ten nodes with the highest closeness centrality and the ten with the
  highest betweenness centrality (Brandes' algorithm).

## Installation

```
pip install .
```

The package has no runtime dependencies beyond the standard library.

## Command line

```
socialgraph [PATH]
```

`PATH` is the gzipped edge list to analyse; it defaults to
`data/facebook_combined.txt.gz` relative to the current directory. Each
analysis is printed under its own section header, and the average
shortest-path and densest-subgraph steps also print how long they took.

If the file cannot be read or a line is malformed, the command prints
`Error: ...` to standard error and exits with status 1.

## Library use

```python
from socialgraph.loader import load_facebook_graph
from socialgraph.analysis import (
    average_shortest_path,
    betweenness_centrality,
    closeness_centrality,
    degree_distribution,
    densest_subgraph_peel,
    two_hop_distribution,
)
from socialgraph.stats import mle_power_law_exponent

graph = load_facebook_graph("data/facebook_combined.txt.gz")
print(graph.node_count(), graph.edge_count())

print(average_shortest_path(graph))   # NaN if no pair is reachable

dense = densest_subgraph_peel(graph)  # a SubgraphResult
print(dense.density, len(dense.nodes))

degrees = degree_distribution(graph)  # {degree: number of nodes}
print(mle_power_law_exponent(degrees, 1))

closeness = closeness_centrality(graph)
top = sorted(closeness.items(), key=lambda item: item[1], reverse=True)[:10]
```

`load_facebook_graph` raises `OSError` when the file cannot be read and
`ValueError` on lines that do not hold two non-negative integer IDs.

`mle_power_law_exponent(degree_counts, k_min)` uses only degrees of at least
`k_min` with non-zero counts, and returns `0.0` when there is too little data
for a fit.

Graphs can also be built by hand:

```python
from socialgraph.graph import Graph

graph = Graph()
a = graph.add_node(0)
b = graph.add_node(1)
graph.add_edge(a, b)
print(list(graph.neighbors(a)), graph.payload(b))
```

`add_node` returns an integer index; `add_edge`, `neighbors` and `payload`
take such indices and raise `IndexError` for unknown ones. Parallel edges are
kept. The analysis functions report results keyed by the node payloads, which
for a loaded graph are the original node IDs.

`socialgraph.utils` holds the two small helpers the command uses:
`measure_time(label, func)` runs `func`, prints the elapsed time and returns
its result, and `print_section(title)` prints a section header.

## Tests

```
pip install ".[test]"
pytest
```