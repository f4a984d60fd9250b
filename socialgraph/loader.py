"""Loading of gzipped, space-separated edge lists into a graph."""

from __future__ import annotations

import csv
import gzip
import os
import re

from socialgraph.graph import Graph

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_id(field: str, line_no: int) -> int:
    if not _UNSIGNED.fullmatch(field):
        raise ValueError(f"line {line_no}: invalid node id {field!r}")
    return int(field)


def load_facebook_graph(path: str | os.PathLike[str]) -> Graph:
    """Read a gzipped edge list (``u v`` per line) into an undirected graph.

    Each distinct identifier becomes one node whose payload is that
    identifier; every line adds one edge. Raises ``OSError`` when the file
    cannot be read and ``ValueError`` on malformed lines.
    """
    graph = Graph()
    node_map: dict[int, int] = {}
    width = None

    def index_of(node_id: int) -> int:
        if node_id not in node_map:
            node_map[node_id] = graph.add_node(node_id)
        return node_map[node_id]

    with gzip.open(path, "rt", newline="") as handle:
        reader = csv.reader(handle, delimiter=" ")
        for row in reader:
            if not row:
                continue
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise ValueError(
                    f"line {reader.line_num}: expected {width} fields, found {len(row)}"
                )
            if len(row) < 2:
                raise ValueError(f"line {reader.line_num}: expected two node ids")
            u = _parse_id(row[0], reader.line_num)
            v = _parse_id(row[1], reader.line_num)
            graph.add_edge(index_of(u), index_of(v))

    return graph