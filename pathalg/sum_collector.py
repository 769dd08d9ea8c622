"""Heap-based accumulation of many path-algebra elements into one sum."""

from __future__ import annotations

import heapq
from typing import Iterable

from pathalg.element import PAElement, Term
from pathalg.field import Field
from pathalg.path import Compare
from pathalg.path_order import PathOrder
from pathalg.path_table import PathTable


class _Entry:
    """Heap entry ordered so that the largest path comes out first."""

    __slots__ = ("term", "_collector")

    def __init__(self, term: Term, collector: SumCollector) -> None:
        self.term = term
        self._collector = collector

    def __lt__(self, other: _Entry) -> bool:
        table = self._collector.table
        result = self._collector.order.compare(
            table[self.term.path_id], table[other.term.path_id]
        )
        return result is Compare.GT


class SumCollector:
    """Collects terms in a priority queue and sums them on demand."""

    def __init__(self, table: PathTable, order: PathOrder, field: Field) -> None:
        self.table = table
        self.order = order
        self.field = field
        self._heap: list[_Entry] = []

    def _push(self, term: Term) -> None:
        heapq.heappush(self._heap, _Entry(term, self))

    def add(self, element: PAElement) -> None:
        for term in element:
            self._push(term)

    def add_all(self, elements: Iterable[PAElement]) -> None:
        for element in elements:
            self.add(element)

    def subtract(self, element: PAElement) -> None:
        for term in element:
            self._push(Term(self.field.negate(term.coeff), term.path_id))

    def _lead_term(self) -> Term:
        """Pop and sum the terms of the largest path with nonzero total."""
        coeff, path_id = 0, 0
        while self._heap and coeff == 0:
            path_id = self._heap[0].term.path_id
            while self._heap and self._heap[0].term.path_id == path_id:
                coeff = self.field.add(coeff, heapq.heappop(self._heap).term.coeff)
            if coeff == 0:
                path_id = 0
        return Term(coeff, path_id)

    def value(self) -> PAElement:
        """Empty the queue and return the collected sum."""
        terms: list[Term] = []
        while self._heap:
            term = self._lead_term()
            if term.coeff != 0:
                terms.append(term)
        return PAElement(terms)