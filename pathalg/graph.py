"""Quivers built from adjacency matrices, with labelled vertices and edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pathalg.path import Path


@dataclass(frozen=True)
class Vertex:
    vertex_id: int
    label: str


@dataclass(frozen=True)
class Edge:
    edge_id: int
    label: str
    start_vertex: int
    end_vertex: int


def build_labels(count: int, base_name: str) -> list[str]:
    """Labels ``base_name1`` up to ``base_name<count>``."""
    return [f"{base_name}{index}" for index in range(1, count + 1)]


def sparse_to_dense(sparse_matrix: Sequence[Sequence[tuple[int, int]]]) -> list[list[int]]:
    """Turn rows of ``(column, count)`` pairs into a square dense matrix."""
    size = len(sparse_matrix)
    dense = [[0] * size for _ in range(size)]
    for row, entries in zip(dense, sparse_matrix):
        for column, count in entries:
            row[column] = count
    return dense


class Graph:
    """A directed multigraph given by an adjacency matrix of edge counts.

    Edges are numbered row by row: all edges from vertex 0 (to vertex 0,
    then 1, ...), then those from vertex 1, and so on.
    """

    def __init__(
        self,
        adjacency: Sequence[Sequence[int]],
        vertex_labels: Sequence[str] | None = None,
        edge_labels: Sequence[str] | None = None,
    ) -> None:
        matrix = [list(row) for row in adjacency]
        size = len(matrix)
        if any(len(row) != size for row in matrix):
            raise ValueError("adjacency matrix must be square")
        edge_count = sum(sum(row) for row in matrix)

        vertex_labels = list(vertex_labels) if vertex_labels is not None else build_labels(size, "v")
        edge_labels = list(edge_labels) if edge_labels is not None else build_labels(edge_count, "e")
        if len(vertex_labels) != size:
            raise ValueError(f"expected {size} vertex labels, got {len(vertex_labels)}")
        if len(edge_labels) != edge_count:
            raise ValueError(f"expected {edge_count} edge labels, got {len(edge_labels)}")

        self.vertices: list[Vertex] = [Vertex(i, label) for i, label in enumerate(vertex_labels)]
        self.edges: list[Edge] = []
        for start, row in enumerate(matrix):
            for end, count in enumerate(row):
                for _ in range(count):
                    edge_id = len(self.edges)
                    self.edges.append(Edge(edge_id, edge_labels[edge_id], start, end))

    @classmethod
    def from_sparse(
        cls,
        sparse_matrix: Sequence[Sequence[tuple[int, int]]],
        vertex_labels: Sequence[str] | None = None,
        edge_labels: Sequence[str] | None = None,
    ) -> Graph:
        return cls(sparse_to_dense(sparse_matrix), vertex_labels, edge_labels)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={len(self.edges)})"

    def start_vertex(self, edge_id: int) -> int:
        return self.edges[edge_id].start_vertex

    def end_vertex(self, edge_id: int) -> int:
        return self.edges[edge_id].end_vertex

    def path_label(self, path: Path) -> str:
        """Edge labels joined by "*"; a trivial path shows its vertex label."""
        if path.edges:
            return "*".join(self.edges[edge].label for edge in path.edges)
        if path.is_zero:
            return "0"
        return self.vertices[path.start_vertex].label

    def edge_id_string(self, path: Path) -> str:
        return path.edge_id_string()