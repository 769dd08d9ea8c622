import pytest

from pathalg.cli import main, path_graph_basis, sklyanin_basis
from pathalg.field import Field
from pathalg.groebner import find_any_subword


def _formatted(algebra, basis):
    return [algebra.format_by_label(element) for element in basis]


def test_sklyanin_generators_come_first():
    algebra, basis = sklyanin_basis((0, 1, 2), 5)
    assert algebra.format_by_label(basis[0]) == "1*x*x + 3*y*z + 7*z*y"
    assert len(basis) <= 5


def test_sklyanin_size_limit_equal_to_generators_adds_nothing():
    _, basis = sklyanin_basis((0, 1, 2), 3)
    assert len(basis) == 3


def test_sklyanin_new_elements_are_monic_and_reduced():
    algebra, basis = sklyanin_basis((0, 1, 2), 8)
    assert len(basis) > 3
    for k in range(3, len(basis)):
        element = basis[k]
        assert element.lead_term().coeff == 1
        leads = [b.lead_path_id() for b in basis[:k]]
        assert find_any_subword(algebra, leads, element.lead_path_id()) == (-1, -1)


def test_default_order_matches_identity_edge_order():
    first_algebra, first = sklyanin_basis((0, 1, 2), 6)
    second_algebra, second = sklyanin_basis(None, 6)
    assert _formatted(first_algebra, first) == _formatted(second_algebra, second)


def test_path_graph_basis_invariants():
    algebra, basis = path_graph_basis(20)
    assert 2 <= len(basis) <= 20
    lead = algebra.path(basis[0].lead_path_id())
    assert algebra.graph.path_label(lead) == "c*d*a*b"
    for k in range(2, len(basis)):
        assert basis[k].lead_term().coeff == 1
        leads = [b.lead_path_id() for b in basis[:k]]
        assert find_any_subword(algebra, leads, basis[k].lead_path_id()) == (-1, -1)


def test_main_path_graph_prints_basis(capsys):
    assert main(["path-graph"]) == 0
    out = capsys.readouterr().out.splitlines()
    algebra, basis = path_graph_basis(20)
    assert out == _formatted(algebra, basis)


def test_main_sklyanin_prints_header_and_basis(capsys):
    assert main(["sklyanin", "--max-size", "4"]) == 0
    out = capsys.readouterr().out.splitlines()
    algebra, basis = sklyanin_basis((0, 1, 2), 4)
    assert out[:2] == ["", "Generating sklyGens"]
    assert out[2:] == _formatted(algebra, basis)


def test_main_demo_output(capsys):
    assert main(["demo", "--max-size", "4", "--exponent", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Field element a: 10" in lines
    assert f"a to the power 15 in field: {Field(101).power(10, 15)}" in lines
    assert "one: 1*v0" in lines
    assert "Exponent: 3" in lines
    assert "edge1*edge2*edge3*edge4*edge5" in lines


def test_main_rejects_unknown_example():
    with pytest.raises(SystemExit):
        main(["bogus"])


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["sklyanin", "--max-size", "-1"])