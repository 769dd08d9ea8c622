"""Admissible orders on paths: weighted, then length-lexicographic."""

from __future__ import annotations

from typing import Sequence

from pathalg.path import Compare, Path


class PathOrder:
    """Compares paths by weight vector (if given), then length, then edges.

    Among paths of equal length, an earlier edge (smaller id, or smaller
    rank in ``edge_order`` when given) makes a path larger.
    """

    def __init__(
        self,
        edge_weights: Sequence[Sequence[int]] | None = None,
        edge_order: Sequence[int] | None = None,
    ) -> None:
        self.edge_order = list(edge_order or [])
        if edge_weights is None:
            self.edge_weights: list[list[int]] = []
            self.weight_length = 0
            self.has_weights = False
            return
        weights = [list(weight) for weight in edge_weights]
        if not weights:
            raise ValueError("edge weights must not be empty")
        self.weight_length = len(weights[0])
        self.edge_weights = [(w + [0] * self.weight_length)[: self.weight_length] for w in weights]
        self.has_weights = True

    def path_weight(self, path: Path) -> list[int]:
        """Componentwise sum of the weights of the path's edges."""
        weight = [0] * self.weight_length
        if not self.has_weights:
            return weight
        for edge in path.edges:
            weight = [total + part for total, part in zip(weight, self.edge_weights[edge])]
        return weight

    def compare(self, first: Path, second: Path) -> Compare:
        if first.path_id != -1 and first.path_id == second.path_id:
            return Compare.EQ
        if self.has_weights:
            first_weight = self.path_weight(first)
            second_weight = self.path_weight(second)
            if first_weight > second_weight:
                return Compare.GT
            if first_weight < second_weight:
                return Compare.LT
        return self._length_lex(first, second)

    def _rank(self, edge: int) -> int:
        return self.edge_order[edge] if self.edge_order else edge

    def _length_lex(self, first: Path, second: Path) -> Compare:
        if len(first) > len(second):
            return Compare.GT
        if len(first) < len(second):
            return Compare.LT
        for a, b in zip(first.edges, second.edges):
            rank_a, rank_b = self._rank(a), self._rank(b)
            if rank_a < rank_b:
                return Compare.GT
            if rank_a > rank_b:
                return Compare.LT
        return Compare.EQ