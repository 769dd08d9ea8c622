"""Elements of a path algebra: ordered lists of coefficient/path terms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Term:
    coeff: int
    path_id: int


@dataclass
class PAElement:
    """A linear combination of paths, terms kept from largest path down."""

    terms: list[Term] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.terms = list(self.terms)

    @classmethod
    def from_paths(cls, path_ids: Sequence[int], coeffs: Sequence[int]) -> PAElement:
        """Pair path ids with coefficients; mismatched lengths give zero."""
        if len(path_ids) != len(coeffs):
            return cls()
        return cls([Term(coeff, path_id) for path_id, coeff in zip(path_ids, coeffs)])

    @classmethod
    def monomial(cls, path_id: int, coeff: int = 1) -> PAElement:
        return cls([Term(coeff, path_id)])

    def slice(self, start: int, stop: int | None = 0) -> PAElement:
        """Terms ``start:stop``; a ``stop`` of 0 or None means to the end."""
        return PAElement(self.terms[start : (stop or None)])

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def lead_path_id(self) -> int:
        """Path id of the leading term, 0 for the zero element."""
        return self.terms[0].path_id if self.terms else 0

    def lead_term(self) -> Term:
        """The leading term, or ``Term(0, -1)`` for the zero element."""
        return self.terms[0] if self.terms else Term(0, -1)

    @staticmethod
    def collect(terms: Iterable[Term]) -> PAElement:
        return PAElement(list(terms))