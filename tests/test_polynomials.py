import pytest
from hypothesis import given, settings as hsettings, strategies as st

from vsskit.backend import init_group
from vsskit.enums import System
from vsskit.errors import InterpolationError, PolynomialError
from vsskit.polynomials import FieldPolynomial, interpolate, random_polynomial

ED = init_group(System.ED25519)
ORDER = ED.order

coeff_lists = st.lists(st.integers(min_value=0, max_value=ORDER - 1), max_size=6)


def test_trailing_zeros_trimmed():
    poly = FieldPolynomial([1, 2, 0, 0], 7)
    assert poly.coeffs == (1, 2)
    assert poly.degree == 1
    assert FieldPolynomial([0, 0], 7).degree == float("-inf")
    assert FieldPolynomial([7, 14], 7).is_zero()


def test_order_must_exceed_one():
    with pytest.raises(PolynomialError, match="Order must be > 1"):
        FieldPolynomial([1], 1)


def test_mismatched_orders():
    with pytest.raises(PolynomialError):
        FieldPolynomial([1], 7).add(FieldPolynomial([1], 11))
    with pytest.raises(PolynomialError):
        FieldPolynomial([1], 7).mult(FieldPolynomial([1], 11))


def test_evaluate_small_field():
    poly = FieldPolynomial([3, 0, 1], 11)  # x^2 + 3
    assert poly.evaluate(0) == 3
    assert poly(4) == 19 % 11


@hsettings(max_examples=30, deadline=None)
@given(coeff_lists, coeff_lists, st.integers(min_value=0, max_value=ORDER - 1))
def test_ring_operations_agree_with_evaluation(a, b, x):
    p = FieldPolynomial(a, ORDER)
    q = FieldPolynomial(b, ORDER)
    assert (p + q).evaluate(x) == (p.evaluate(x) + q.evaluate(x)) % ORDER
    assert (p * q).evaluate(x) == p.evaluate(x) * q.evaluate(x) % ORDER
    assert p.mult_scalar(5).evaluate(x) == 5 * p.evaluate(x) % ORDER


def test_random_polynomial_has_exact_degree():
    for degree in range(0, 5):
        assert random_polynomial(ED, degree).degree == degree
    with pytest.raises(PolynomialError):
        random_polynomial(ED, -1)


@hsettings(max_examples=20, deadline=None)
@given(st.lists(st.integers(min_value=0, max_value=ORDER - 1), min_size=1, max_size=5))
def test_interpolation_recovers_polynomial(coeffs):
    poly = FieldPolynomial(coeffs, ORDER)
    points = [(x, poly.evaluate(x)) for x in range(len(coeffs))]
    assert interpolate(ED, points) == poly


def test_interpolation_rejects_repeated_x():
    with pytest.raises(InterpolationError, match="distinct"):
        interpolate(ED, [(1, 2), (1 + ORDER, 3)])


def test_interpolation_rejects_too_many_points():
    class Tiny:
        order = 3

    with pytest.raises(InterpolationError, match="exceeds order"):
        interpolate(Tiny(), [(0, 0), (1, 1), (2, 2), (3, 3)])
