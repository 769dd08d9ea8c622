import pytest

from pathalg.field import Field


@pytest.fixture
def gf101():
    return Field(101)


def test_add_wraps(gf101):
    assert gf101.add(100, 1) == 0
    assert gf101.add(50, 60) == (50 + 60) % 101


def test_negate_is_additive_inverse(gf101):
    for a in range(101):
        assert gf101.add(a, gf101.negate(a)) == 0


def test_negate_zero_is_zero(gf101):
    assert gf101.negate(0) == 0


def test_subtract_matches_add_negate(gf101):
    for a in (0, 1, 10, 55, 100):
        for b in (0, 4, 10, 99):
            assert gf101.subtract(a, b) == gf101.add(a, gf101.negate(b))


def test_invert_every_nonzero(gf101):
    for a in range(1, 101):
        assert gf101.multiply(a, gf101.invert(a)) == 1


def test_divide_undoes_multiply(gf101):
    for a in (1, 10, 77):
        for b in (4, 9, 100):
            assert gf101.divide(gf101.multiply(a, b), b) == a


def test_invert_zero_raises(gf101):
    with pytest.raises(ZeroDivisionError):
        gf101.invert(0)


def test_divide_by_zero_raises(gf101):
    with pytest.raises(ZeroDivisionError):
        gf101.divide(5, 0)


def test_characteristic_two_invert_is_identity():
    field = Field(2)
    assert field.invert(1) == 1


def test_power_matches_builtin_for_nonzero(gf101):
    for a in (1, 2, 10, 100):
        for e in (0, 1, 15, 100, 250):
            assert gf101.power(a, e) == pow(a, e, 101)


def test_power_fermat(gf101):
    for a in range(1, 101):
        assert gf101.power(a, 100) == 1


def test_power_of_zero(gf101):
    assert gf101.power(0, 0) == 1
    assert gf101.power(0, 3) == 0


def test_negative_exponent_rejected(gf101):
    with pytest.raises(ValueError):
        gf101.power(3, -1)


def test_bad_characteristic_rejected():
    with pytest.raises(ValueError):
        Field(1)