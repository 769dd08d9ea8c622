import pytest

from pathalg.graph import Graph, build_labels, sparse_to_dense
from pathalg.path import Path


def test_build_labels_numbers_from_one():
    assert build_labels(3, "v") == ["v1", "v2", "v3"]
    assert build_labels(0, "e") == []


def test_default_labels():
    graph = Graph([[1, 1], [0, 1]])
    assert [v.label for v in graph.vertices] == build_labels(2, "v")
    assert [e.label for e in graph.edges] == build_labels(3, "e")


def test_edges_match_adjacency_counts():
    matrix = [[1, 1, 0], [0, 1, 1], [0, 0, 1]]
    edge_labels = ["edge1", "edge2", "edge3", "edge4", "edge5"]
    graph = Graph(matrix, ["vertex1", "vertex2", "vertex3"], edge_labels)
    assert len(graph.edges) == sum(map(sum, matrix))
    assert [e.label for e in graph.edges] == edge_labels
    for start, row in enumerate(matrix):
        for end, count in enumerate(row):
            found = [
                e for e in graph.edges
                if graph.start_vertex(e.edge_id) == start and graph.end_vertex(e.edge_id) == end
            ]
            assert len(found) == count
    starts = [graph.start_vertex(e.edge_id) for e in graph.edges]
    assert starts == sorted(starts)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        Graph([[1, 0], [1]])


def test_edge_label_count_mismatch_rejected():
    with pytest.raises(ValueError):
        Graph([[3]], ["v"], ["x", "y"])


def test_vertex_label_count_mismatch_rejected():
    with pytest.raises(ValueError):
        Graph([[1]], ["a", "b"], ["x"])


def test_sparse_to_dense():
    assert sparse_to_dense([[(1, 2)], []]) == [[0, 2], [0, 0]]


def test_from_sparse_matches_dense():
    sparse = [[(1, 1)], [(0, 1), (2, 1)], [(1, 1)]]
    labels = ["a", "d", "b", "c"]
    from_sparse = Graph.from_sparse(sparse, ["v1", "v2", "v3"], labels)
    dense = Graph([[0, 1, 0], [1, 0, 1], [0, 1, 0]], ["v1", "v2", "v3"], labels)
    assert from_sparse.edges == dense.edges
    assert from_sparse.vertices == dense.vertices


def test_path_label_joins_edges():
    graph = Graph([[3]], ["v"], ["x", "y", "z"])
    assert graph.path_label(Path(0, 0, (0, 1))) == "x*y"
    assert graph.path_label(Path(0, 0, (2,))) == "z"


def test_path_label_of_vertex_uses_vertex_label():
    graph = Graph([[3]], ["v"], ["x", "y", "z"])
    assert graph.path_label(Path.vertex(0)) == "v"


def test_edge_id_string_delegates_to_path():
    graph = Graph([[3]], ["v"], ["x", "y", "z"])
    path = Path(0, 0, (0, 2, 1))
    assert graph.edge_id_string(path) == path.edge_id_string()
    assert graph.edge_id_string(Path.vertex(0)) == "[0]"