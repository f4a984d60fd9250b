"""Graph metrics: shortest paths, degree histograms, densest subgraph and centralities."""

from __future__ import annotations

import heapq
import math
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any

from socialgraph.graph import Graph

_SAMPLE_SIZE = 5


def _bfs_distances(graph: Graph, start: int) -> dict[int, int]:
    """Hop distances from ``start`` to every node reachable from it."""
    dist = {start: 0}
    queue = deque([start])
    while queue:
        u = queue.popleft()
        du = dist[u]
        for v in graph.neighbors(u):
            if v not in dist:
                dist[v] = du + 1
                queue.append(v)
    return dist


def average_shortest_path(graph: Graph) -> float:
    """Average hop distance over reachable pairs, seeded from the first few nodes.

    Breadth-first search runs from up to five start nodes; every non-zero
    distance found is averaged. Returns NaN when no pair is reachable.
    """
    total_dist = 0
    total_pairs = 0
    for start in graph.node_indices()[:_SAMPLE_SIZE]:
        for d in _bfs_distances(graph, start).values():
            if d > 0:
                total_dist += d
                total_pairs += 1
    if total_pairs == 0:
        return math.nan
    return total_dist / total_pairs


@dataclass
class SubgraphResult:
    """Outcome of the peeling search for a dense subgraph."""

    nodes: list[Any] = field(default_factory=list)
    density: float = 0.0


def densest_subgraph_peel(graph: Graph) -> SubgraphResult:
    """2-approximation of the maximum-density subgraph by peeling.

    Repeatedly records the density |E|/|V| of the remaining nodes and removes
    a node of minimum remaining degree, keeping the densest state seen.
    """
    remaining = set(graph.node_indices())
    degree = {u: sum(1 for _ in graph.neighbors(u)) for u in remaining}
    degree_sum = sum(degree.values())
    heap = [(d, u) for u, d in degree.items()]
    heapq.heapify(heap)

    removal_order: list[int] = []
    best_density = 0.0
    best_removed = None

    while remaining:
        density = (degree_sum // 2) / len(remaining)
        if density > best_density:
            best_density = density
            best_removed = len(removal_order)

        while True:
            d, u = heapq.heappop(heap)
            if u in remaining and degree[u] == d:
                break

        remaining.remove(u)
        removal_order.append(u)
        degree_sum -= degree[u]
        for v in graph.neighbors(u):
            if v != u and v in remaining:
                degree[v] -= 1
                degree_sum -= 1
                heapq.heappush(heap, (degree[v], v))

    if best_removed is None:
        return SubgraphResult()
    peeled = set(removal_order[:best_removed])
    nodes = [graph.payload(u) for u in graph.node_indices() if u not in peeled]
    return SubgraphResult(nodes=nodes, density=best_density)


def degree_distribution(graph: Graph) -> dict[int, int]:
    """Map each degree to the number of nodes having it."""
    return dict(Counter(sum(1 for _ in graph.neighbors(u)) for u in graph.node_indices()))


def two_hop_distribution(graph: Graph) -> dict[int, int]:
    """Map each count of nodes exactly two hops away to how many nodes have it."""
    histogram: Counter[int] = Counter()
    for start in graph.node_indices():
        first = set(graph.neighbors(start))
        first.discard(start)
        second = {
            w
            for v in first
            for w in graph.neighbors(v)
            if w != start and w not in first
        }
        histogram[len(second)] += 1
    return dict(histogram)


def closeness_centrality(graph: Graph) -> dict[Any, float]:
    """Closeness (N-1)/sum of distances for each node, keyed by payload."""
    n = graph.node_count()
    closeness: dict[Any, float] = {}
    for u in graph.node_indices():
        sum_d = sum(_bfs_distances(graph, u).values())
        closeness[graph.payload(u)] = (n - 1) / sum_d if sum_d > 0 else 0.0
    return closeness


def betweenness_centrality(graph: Graph) -> dict[Any, float]:
    """Betweenness of each node by Brandes' algorithm, keyed by payload."""
    nodes = graph.node_indices()
    cb = {u: 0.0 for u in nodes}

    for s in nodes:
        stack: list[int] = []
        pred: dict[int, list[int]] = {v: [] for v in nodes}
        sigma = {v: 0.0 for v in nodes}
        dist = {v: -1 for v in nodes}
        sigma[s] = 1.0
        dist[s] = 0
        queue = deque([s])

        while queue:
            v = queue.popleft()
            stack.append(v)
            dv = dist[v]
            for w in graph.neighbors(v):
                if dist[w] < 0:
                    dist[w] = dv + 1
                    queue.append(w)
                if dist[w] == dv + 1:
                    sigma[w] += sigma[v]
                    pred[w].append(v)

        delta = {v: 0.0 for v in nodes}
        while stack:
            w = stack.pop()
            for v in pred[w]:
                delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
            if w != s:
                cb[w] += delta[w]

    return {graph.payload(u): value for u, value in cb.items()}