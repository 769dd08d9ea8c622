"""Arithmetic in the path algebra of a quiver over a prime field."""

from __future__ import annotations

from typing import Iterable, Union

from pathalg.element import PAElement, Term
from pathalg.field import Field
from pathalg.graph import Graph
from pathalg.path import Compare, Path
from pathalg.path_order import PathOrder
from pathalg.path_table import PathTable
from pathalg.sum_collector import SumCollector

PathLike = Union[Path, int]


class PathAlgebra:
    """The path algebra of ``graph`` over ``field``, ordered by ``order``.

    Paths are interned in a path table; elements refer to paths by id and
    keep their terms sorted from the largest path down.
    """

    def __init__(self, graph: Graph, field: Field, order: PathOrder | None = None) -> None:
        self.graph = graph
        self.field = field
        self.order = order if order is not None else PathOrder()
        self.table = PathTable()

    def __repr__(self) -> str:
        return f"PathAlgebra({self.graph!r}, {self.field!r})"

    def _resolve(self, path: PathLike) -> Path:
        return self.table[path] if isinstance(path, int) else path

    def path(self, path_id: int) -> Path:
        """The path stored under ``path_id``."""
        return self.table[path_id]

    def add_to_path_table(self, path: Path) -> int:
        """Store ``path`` under a fresh id and return it."""
        return self.table.add(path)

    def multiply_paths(self, first: PathLike, second: PathLike) -> int:
        """Id of the product of two paths; 0 when they do not compose."""
        left = self._resolve(first)
        right = self._resolve(second)
        if left.is_vertex:
            if left.end_vertex == right.start_vertex:
                return self.table.find_or_add(right)
            return 0
        if right.is_vertex:
            if left.end_vertex == right.start_vertex:
                return self.table.find_or_add(left)
            return 0
        if left.start_vertex != -1 and right.start_vertex != -1 and left.end_vertex == right.start_vertex:
            return self.table.find_or_add(Path.concat(left, right))
        return 0

    def one(self) -> PAElement:
        """The identity: the sum of all trivial vertex paths."""
        ids = []
        for vertex in self.graph.vertices:
            trivial = Path.vertex(vertex.vertex_id)
            ids.append(self.multiply_paths(trivial, trivial))
        return PAElement.from_paths(ids, [1] * len(ids))

    def _merge(self, f: PAElement, g: PAElement, negate_g: bool) -> PAElement:
        combine = self.field.subtract if negate_g else self.field.add
        f_terms, g_terms = f.terms, g.terms
        result: list[Term] = []
        i = j = 0

        def g_term(term: Term) -> Term:
            if negate_g:
                return Term(self.field.negate(term.coeff), term.path_id)
            return term

        while i < len(f_terms) and j < len(g_terms):
            ft, gt = f_terms[i], g_terms[j]
            comparison = self.order.compare(self.table[ft.path_id], self.table[gt.path_id])
            if comparison is Compare.GT:
                result.append(ft)
                i += 1
            elif comparison is Compare.LT:
                result.append(g_term(gt))
                j += 1
            else:
                coeff = combine(ft.coeff, gt.coeff)
                if coeff != 0:
                    result.append(Term(coeff, ft.path_id))
                i += 1
                j += 1
        result.extend(f_terms[i:])
        result.extend(g_term(term) for term in g_terms[j:])
        return PAElement(result)

    def add(self, f: PAElement, g: PAElement) -> PAElement:
        return self._merge(f, g, negate_g=False)

    def subtract(self, f: PAElement, g: PAElement) -> PAElement:
        return self._merge(f, g, negate_g=True)

    def sum(self, elements: Iterable[PAElement]) -> PAElement:
        """Sum of the elements, folded in one at a time."""
        total = PAElement()
        for element in elements:
            total = self.add(element, total)
        return total

    def negate(self, f: PAElement) -> PAElement:
        return PAElement([Term(self.field.negate(t.coeff), t.path_id) for t in f])

    def left_multiply(self, path: PathLike, f: PAElement, coeff: int = 1) -> PAElement:
        """The product ``coeff * path * f``."""
        terms = []
        for term in f:
            product = self.multiply_paths(path, term.path_id)
            if product == 0:
                continue
            terms.append(Term(self.field.multiply(coeff, term.coeff), product))
        return PAElement(terms)

    def right_multiply(self, f: PAElement, path: PathLike, coeff: int = 1) -> PAElement:
        """The product ``f * coeff * path``."""
        terms = []
        for term in f:
            product = self.multiply_paths(term.path_id, path)
            if product == 0:
                continue
            terms.append(Term(self.field.multiply(coeff, term.coeff), product))
        return PAElement(terms)

    def _partial_products(self, f: PAElement, g: PAElement) -> list[PAElement]:
        if len(f) < len(g):
            return [self.left_multiply(t.path_id, g, t.coeff) for t in f]
        return [self.right_multiply(f, t.path_id, t.coeff) for t in g]

    def multiply(self, f: PAElement, g: PAElement) -> PAElement:
        return self.sum(self._partial_products(f, g))

    def multiply_sc(self, f: PAElement, g: PAElement) -> PAElement:
        """Multiply, summing the partial products with a heap."""
        collector = SumCollector(self.table, self.order, self.field)
        collector.add_all(self._partial_products(f, g))
        return collector.value()

    @staticmethod
    def _check_exponent(n: int) -> None:
        if n < 0:
            raise ValueError(f"exponent must be non-negative, got {n}")

    def power(self, f: PAElement, n: int) -> PAElement:
        """``f`` to the ``n``-th power by repeated multiplication."""
        self._check_exponent(n)
        if n == 0:
            return self.one()
        result = f
        for _ in range(n - 1):
            result = self.multiply(result, f)
        return result

    def power_sc(self, f: PAElement, n: int) -> PAElement:
        """As ``power``, multiplying with heap-based summation."""
        self._check_exponent(n)
        if n == 0:
            return self.one()
        result = f
        for _ in range(n - 1):
            result = self.multiply_sc(result, f)
        return result

    def power_by_squaring(self, f: PAElement, n: int) -> PAElement:
        """``f`` to the ``n``-th power by repeated squaring."""
        self._check_exponent(n)
        result = self.one()
        square = f
        while True:
            if n & 1:
                result = self.multiply(result, square)
            n >>= 1
            if n == 0:
                return result
            square = self.multiply(square, square)

    def make_monic(self, f: PAElement) -> PAElement:
        """Scale ``f`` so that its leading coefficient is 1."""
        if not f.terms:
            return PAElement()
        inverse = self.field.invert(f.terms[0].coeff)
        return PAElement([Term(self.field.multiply(t.coeff, inverse), t.path_id) for t in f])

    def format_by_label(self, f: PAElement) -> str:
        if not f.terms:
            return "0"
        return " + ".join(
            f"{t.coeff}*{self.graph.path_label(self.table[t.path_id])}" for t in f
        )

    def format_by_path_id(self, f: PAElement) -> str:
        if not f.terms:
            return "0"
        parts = []
        for t in f:
            path = self.table[t.path_id]
            left, right = ("{", "}") if path.is_vertex else ("[", "]")
            parts.append(f"{t.coeff}*{left}{self.graph.edge_id_string(path)}{right}")
        return " + ".join(parts)

    def format_path_table(self) -> str:
        """One line per stored path, showing its edge ids."""
        return "\n".join(path.edge_id_string() for path in self.table)