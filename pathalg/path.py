"""Paths in a quiver, stored as sequences of edge ids."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Sequence


class Compare(Enum):
    """Result of comparing two paths in a path order."""

    EQ = "eq"
    LT = "lt"
    GT = "gt"


@dataclass(eq=False)
class Path:
    """A path between two vertices.

    ``path_id`` is -1 while the path is not yet known to a path table.
    Two paths are equal when both have known ids and the ids agree, or
    otherwise when their edges agree (trivial paths compare start vertices).
    """

    start_vertex: int
    end_vertex: int
    edges: tuple[int, ...] = ()
    is_zero: bool = False
    is_vertex: bool = False
    path_id: int = -1

    def __post_init__(self) -> None:
        self.edges = tuple(self.edges)

    @classmethod
    def vertex(cls, vertex_id: int) -> Path:
        """The trivial path sitting at a vertex."""
        return cls(vertex_id, vertex_id, (), is_vertex=True)

    @classmethod
    def zero(cls) -> Path:
        """The zero path, always id 0 in a path table."""
        return cls(-1, -1, (), is_zero=True, path_id=0)

    @classmethod
    def concat(cls, first: Path, second: Path) -> Path:
        return cls(first.start_vertex, second.end_vertex, first.edges + second.edges)

    def slice(self, start: int, stop: int | None, start_vertex: int, end_vertex: int) -> Path:
        """Edges ``start:stop`` as a new path; a ``stop`` of 0 or None means to the end."""
        return Path(
            start_vertex,
            end_vertex,
            self.edges[start : (stop or None)],
            is_zero=self.is_zero,
            is_vertex=self.is_vertex,
        )

    def with_id(self, path_id: int) -> Path:
        return replace(self, path_id=path_id)

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[int]:
        return iter(self.edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        if self.path_id != -1 and other.path_id != -1:
            return self.path_id == other.path_id
        if len(self.edges) != len(other.edges):
            return False
        if not self.edges:
            return self.start_vertex == other.start_vertex
        return self.edges == other.edges

    def __hash__(self) -> int:
        if not self.edges:
            return hash(("vertex", self.start_vertex))
        return hash(self.edges)

    def edge_id_string(self) -> str:
        """Edge ids joined by ", "; a vertex shows as "[v]", zero as ""."""
        if self.is_zero:
            return ""
        if self.is_vertex:
            return f"[{self.start_vertex}]"
        return ", ".join(str(edge) for edge in self.edges)

    def find_subword(self, sub: Path | Sequence[int]) -> int:
        """Position of the first occurrence of ``sub`` in this path, or -1."""
        needle = tuple(sub)
        size = len(needle)
        for position in range(len(self.edges) - size + 1):
            if self.edges[position : position + size] == needle:
                return position
        return -1

    def find_any_subword(self, subs: Iterable[Path | Sequence[int]]) -> tuple[int, int]:
        """Return ``(i, j)`` where word ``j`` of ``subs`` occurs at position ``i``.

        Positions are scanned first; ``(-1, -1)`` if nothing occurs.
        """
        needles = [tuple(sub) for sub in subs]
        for position in range(len(self.edges)):
            for index, needle in enumerate(needles):
                if needle and self.edges[position : position + len(needle)] == needle:
                    return position, index
        return -1, -1

    def find_overlap(self, prefix: Path | Sequence[int]) -> int:
        """First position from which the rest of this path begins ``prefix``, or -1."""
        other = tuple(prefix)
        for position in range(len(self.edges)):
            tail = self.edges[position:]
            if len(tail) <= len(other) and other[: len(tail)] == tail:
                return position
        return -1