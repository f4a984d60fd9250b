"""Command line entry: load an edge list, run the analyses and print results."""

from __future__ import annotations

import argparse
import sys

from socialgraph import analysis
from socialgraph.loader import load_facebook_graph
from socialgraph.stats import mle_power_law_exponent
from socialgraph.utils import measure_time, print_section

DEFAULT_PATH = "data/facebook_combined.txt.gz"
_TOP = 10


def _print_top(scores: dict) -> None:
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    for node, score in ranked[:_TOP]:
        print(f"  node {node:>4} → {score:.4f}")
    print()


def main(argv: list[str] | None = None) -> int:
    """Run every analysis on the edge list and print a report."""
    parser = argparse.ArgumentParser(
        prog="socialgraph", description="Analyse a gzipped social-network edge list."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="gzipped edge list")
    args = parser.parse_args(argv)

    print_section("Loading Graph")
    try:
        graph = load_facebook_graph(args.path)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Graph loaded: {graph.node_count()} nodes, {graph.edge_count()} edges\n")

    print_section("Average Shortest-Path")
    avg = measure_time("BFS sampling", lambda: analysis.average_shortest_path(graph))
    print(f"Average shortest-path length ≈ {avg:.3f}\n")

    print_section("Densest Subgraph (2-approx)")
    ds = measure_time("Peeling algorithm", lambda: analysis.densest_subgraph_peel(graph))
    print(f"Density = {ds.density:.3f} with {len(ds.nodes)} nodes\n")

    print_section("1-Hop Degree Distribution")
    one_hop = analysis.degree_distribution(graph)
    for deg, cnt in sorted(one_hop.items()):
        print(f"  degree {deg:>3} → {cnt:>5} nodes")
    print()

    print_section("Power-Law Fit (1-Hop Degrees)")
    alpha_hat = mle_power_law_exponent(one_hop, 1)
    print(f"Estimated power-law exponent α ≈ {alpha_hat:.3f}\n")

    print_section("2-Hop Neighbor Distribution")
    two_hop = analysis.two_hop_distribution(graph)
    for h2, cnt in sorted(two_hop.items()):
        print(f"  {h2:>3} two-hop neighbors → {cnt:>5} nodes")
    print()

    print_section("Closeness Centrality (top 10)")
    _print_top(analysis.closeness_centrality(graph))

    print_section("Betweenness Centrality (top 10)")
    _print_top(analysis.betweenness_centrality(graph))

    return 0


if __name__ == "__main__":
    sys.exit(main())