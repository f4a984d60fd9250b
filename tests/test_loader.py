import gzip

import pytest

from socialgraph.loader import load_facebook_graph


def write_gz(path, text):
    with gzip.open(path, "wt") as handle:
        handle.write(text)
    return path


def test_loads_nodes_and_edges(tmp_path):
    path = write_gz(tmp_path / "edges.txt.gz", "0 1\n0 2\n1 2\n2 7\n")
    g = load_facebook_graph(str(path))
    assert g.node_count() == 4
    assert g.edge_count() == 4
    payloads = [g.payload(i) for i in g.node_indices()]
    assert payloads == [0, 1, 2, 7]


def test_edges_are_undirected(tmp_path):
    path = write_gz(tmp_path / "edges.txt.gz", "5 9\n")
    g = load_facebook_graph(path)
    assert list(g.neighbors(0)) == [1]
    assert list(g.neighbors(1)) == [0]


def test_repeated_ids_share_a_node(tmp_path):
    path = write_gz(tmp_path / "edges.txt.gz", "3 4\n4 3\n3 5\n")
    g = load_facebook_graph(path)
    assert g.node_count() == 3
    assert g.edge_count() == 3
    assert sorted(g.payload(i) for i in g.neighbors(0)) == [4, 4, 5]


def test_blank_lines_are_skipped(tmp_path):
    path = write_gz(tmp_path / "edges.txt.gz", "1 2\n\n2 3\n")
    g = load_facebook_graph(path)
    assert g.edge_count() == 2


def test_non_numeric_id_raises(tmp_path):
    path = write_gz(tmp_path / "edges.txt.gz", "1 x\n")
    with pytest.raises(ValueError):
        load_facebook_graph(path)


def test_negative_id_raises(tmp_path):
    path = write_gz(tmp_path / "edges.txt.gz", "-1 2\n")
    with pytest.raises(ValueError):
        load_facebook_graph(path)


def test_uneven_rows_raise(tmp_path):
    path = write_gz(tmp_path / "edges.txt.gz", "1 2\n3 4 5\n")
    with pytest.raises(ValueError):
        load_facebook_graph(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_facebook_graph(tmp_path / "absent.txt.gz")