"""Division and Buchberger's algorithm for two-sided ideals of a path algebra."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Iterable, Sequence

from pathalg.algebra import PathAlgebra
from pathalg.element import PAElement, Term
from pathalg.path import Path


@dataclass(frozen=True)
class OverlapInfo:
    """An overlap of the leading paths of two elements.

    The leading path of element ``right_index`` starts at position
    ``overlap_location`` of the leading path of element ``left_index``;
    ``lcm_size`` is the length of the joined word and ``overlap_size`` the
    number of edges the two leading paths share.
    """

    left_index: int
    right_index: int
    overlap_location: int
    lcm_size: int
    overlap_size: int

    def sort_key(self) -> tuple[int, int, int, int]:
        """Overlaps are processed smallest key first."""
        return (self.lcm_size, self.left_index, self.right_index, self.overlap_location)


def is_subword(algebra: PathAlgebra, sub_id: int, word_id: int) -> int:
    """First position where path ``sub_id`` occurs inside path ``word_id``, or -1.

    Only occurrences followed by at least one more edge of the word count.
    """
    sub = algebra.path(sub_id).edges
    word = algebra.path(word_id).edges
    if not sub:
        return -1
    for position in range(len(word)):
        if len(word) - position <= len(sub):
            break
        if word[position : position + len(sub)] == sub:
            return position
    return -1


def find_any_subword(algebra: PathAlgebra, sub_ids: Iterable[int], word_id: int) -> tuple[int, int]:
    """Return ``(i, j)`` where path ``sub_ids[j]`` occurs at position ``i`` of ``word_id``.

    Positions are scanned first, then candidates; ``(-1, -1)`` if none occurs.
    """
    word = algebra.path(word_id)
    return word.find_any_subword(algebra.path(sub_id) for sub_id in sub_ids)


def find_overlaps(algebra: PathAlgebra, prefix_id: int, suffix_id: int) -> list[int]:
    """Positions ``i >= 1`` where a proper tail of ``prefix_id`` begins ``suffix_id``.

    The suffix path must stick out beyond the end of the prefix path.
    """
    prefix = algebra.path(prefix_id).edges
    suffix = algebra.path(suffix_id).edges
    locations = []
    for position in range(1, len(prefix)):
        tail = prefix[position:]
        if len(tail) < len(suffix) and suffix[: len(tail)] == tail:
            locations.append(position)
    return locations


def two_sided_multiply(
    algebra: PathAlgebra,
    prefix: Sequence[int],
    coeff: int,
    f: PAElement,
    suffix: Sequence[int],
    start_vertex: int,
    end_vertex: int,
) -> PAElement:
    """The product ``coeff * prefix * f * suffix``, trusting that the paths compose."""
    prefix = tuple(prefix)
    suffix = tuple(suffix)
    terms = []
    for term in f:
        main = algebra.path(term.path_id)
        joined = Path(start_vertex, end_vertex, prefix + main.edges + suffix)
        path_id = algebra.table.find_or_add(joined)
        if path_id == 0:
            continue
        terms.append(Term(algebra.field.multiply(coeff, term.coeff), path_id))
    return PAElement(terms)


def _check_divisors(divisors: Sequence[PAElement]) -> None:
    for index, divisor in enumerate(divisors):
        if not divisor.terms:
            raise ValueError(f"divisor {index} is zero")
        if divisor.terms[0].coeff != 1:
            raise ValueError(f"divisor {index} is not monic")


def divide(algebra: PathAlgebra, divisors: Sequence[PAElement], dividend: PAElement) -> PAElement:
    """Remainder of ``dividend`` on division by monic ``divisors``."""
    _check_divisors(divisors)
    lead_ids = [divisor.lead_path_id() for divisor in divisors]
    current = dividend
    remainder: list[Term] = []
    while current.terms:
        lead = current.lead_term()
        position, index = find_any_subword(algebra, lead_ids, lead.path_id)
        if index == -1:
            remainder.append(lead)
            current = current.slice(1)
            continue
        lead_path = algebra.path(lead.path_id)
        found = algebra.path(lead_ids[index])
        prefix = lead_path.edges[:position]
        suffix = lead_path.edges[position + len(found) :]
        product = two_sided_multiply(
            algebra,
            prefix,
            lead.coeff,
            divisors[index],
            suffix,
            lead_path.start_vertex,
            lead_path.end_vertex,
        )
        current = algebra.subtract(current, product)
    return PAElement(remainder)


def process_overlaps(
    algebra: PathAlgebra, elements: Sequence[PAElement], left_index: int, right_index: int
) -> list[OverlapInfo]:
    """All overlaps of the leading path of one element with that of another."""
    left, right = elements[left_index], elements[right_index]
    if not left.terms or not right.terms:
        raise ValueError("cannot form overlaps with the zero element")
    first_id = left.lead_path_id()
    second_id = right.lead_path_id()
    first_len = len(algebra.path(first_id))
    second_len = len(algebra.path(second_id))
    return [
        OverlapInfo(left_index, right_index, location, second_len + location, first_len - location)
        for location in find_overlaps(algebra, first_id, second_id)
    ]


def divide_overlap(algebra: PathAlgebra, divisors: Sequence[PAElement], overlap: OverlapInfo) -> PAElement:
    """Reduce the S-polynomial of an overlap by ``divisors``."""
    left = divisors[overlap.left_index]
    right = divisors[overlap.right_index]
    left_lead = algebra.path(left.lead_path_id())
    right_lead = algebra.path(right.lead_path_id())

    right_factor = right_lead.slice(overlap.overlap_size, 0, left_lead.end_vertex, right_lead.end_vertex)
    left_factor = left_lead.slice(0, overlap.overlap_location, left_lead.start_vertex, right_lead.start_vertex)

    left_poly = algebra.right_multiply(left, right_factor)
    right_poly = algebra.left_multiply(left_factor, right)
    return divide(algebra, divisors, algebra.subtract(left_poly, right_poly))


def buchberger(
    algebra: PathAlgebra,
    generators: Sequence[PAElement],
    maximum_size: int,
    maximum_degree: int = 0,
) -> list[PAElement]:
    """Extend ``generators`` towards a Gröbner basis of the ideal they generate.

    Stops once the basis holds ``maximum_size`` elements (0 means no limit)
    or every overlap reduces to zero. ``maximum_degree`` is accepted but
    places no bound on the search.
    """
    basis = list(generators)
    if any(not element.terms for element in basis):
        raise ValueError("generators must be nonzero")

    counter = itertools.count()
    queue: list[tuple[tuple[int, int, int, int], int, OverlapInfo]] = []

    def push(overlaps: Iterable[OverlapInfo]) -> None:
        for overlap in overlaps:
            heapq.heappush(queue, (overlap.sort_key(), next(counter), overlap))

    for left in range(len(basis)):
        for right in range(len(basis)):
            push(process_overlaps(algebra, basis, left, right))

    while queue and (maximum_size == 0 or len(basis) < maximum_size):
        _, _, overlap = heapq.heappop(queue)
        remainder = divide_overlap(algebra, basis, overlap)
        if not remainder.terms:
            continue
        new_index = len(basis)
        basis.append(algebra.make_monic(remainder))
        for index in range(new_index):
            push(process_overlaps(algebra, basis, index, new_index))
            push(process_overlaps(algebra, basis, new_index, index))
        push(process_overlaps(algebra, basis, new_index, new_index))

    return basis