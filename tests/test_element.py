from pathalg.element import PAElement, Term


def test_from_paths_pairs_in_order():
    element = PAElement.from_paths([4, 5, 6], [1, 3, 7])
    assert element.terms == [Term(1, 4), Term(3, 5), Term(7, 6)]


def test_from_paths_mismatch_gives_zero():
    element = PAElement.from_paths([4, 5], [1])
    assert len(element) == 0


def test_monomial_defaults_to_one():
    assert PAElement.monomial(9) == PAElement([Term(1, 9)])
    assert PAElement.monomial(9, 2).terms == [Term(2, 9)]


def test_lead_of_zero_element():
    zero = PAElement()
    assert zero.lead_path_id() == 0
    assert zero.lead_term() == Term(0, -1)


def test_lead_of_nonzero_element():
    element = PAElement.from_paths([8, 3], [5, 6])
    assert element.lead_path_id() == 8
    assert element.lead_term() == Term(5, 8)


def test_slice_to_end_and_bounded():
    element = PAElement.from_paths([1, 2, 3, 4], [1, 1, 1, 1])
    assert [t.path_id for t in element.slice(1)] == [2, 3, 4]
    assert [t.path_id for t in element.slice(1, 3)] == [2, 3]
    assert element.slice(0) == element


def test_equality_depends_on_order_and_coeffs():
    a = PAElement.from_paths([1, 2], [1, 1])
    assert a == PAElement.from_paths([1, 2], [1, 1])
    assert a != PAElement.from_paths([2, 1], [1, 1])
    assert a != PAElement.from_paths([1, 2], [1, 2])


def test_iteration_and_length():
    element = PAElement.from_paths([7, 8], [2, 3])
    assert list(element) == element.terms
    assert len(element) == 2


def test_terms_copied_on_construction():
    terms = [Term(1, 2)]
    element = PAElement(terms)
    terms.append(Term(1, 3))
    assert len(element) == 1