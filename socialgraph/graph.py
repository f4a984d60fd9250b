"""A small undirected graph whose nodes carry a payload value."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Graph:
    """Undirected multigraph with nodes addressed by dense integer indices.

    Each node holds a payload (for example its original identifier). Parallel
    edges are kept; a self-loop makes a node its own neighbour once.
    """

    def __init__(self) -> None:
        self._payloads: list[Any] = []
        self._adjacency: list[list[int]] = []
        self._edge_count = 0

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._payloads):
            raise IndexError(f"node index {index} out of range")

    def add_node(self, payload: Any) -> int:
        """Add a node carrying ``payload`` and return its index."""
        self._payloads.append(payload)
        self._adjacency.append([])
        return len(self._payloads) - 1

    def add_edge(self, a: int, b: int) -> None:
        """Connect the nodes at indices ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        self._adjacency[a].append(b)
        if a != b:
            self._adjacency[b].append(a)
        self._edge_count += 1

    def neighbors(self, index: int) -> Iterator[int]:
        """Iterate over the indices adjacent to ``index``."""
        self._check(index)
        return iter(self._adjacency[index])

    def node_indices(self) -> range:
        """All node indices, in insertion order."""
        return range(len(self._payloads))

    def node_count(self) -> int:
        return len(self._payloads)

    def edge_count(self) -> int:
        return self._edge_count

    def payload(self, index: int) -> Any:
        """Return the payload stored on the node at ``index``."""
        self._check(index)
        return self._payloads[index]

    def __getitem__(self, index: int) -> Any:
        return self.payload(index)