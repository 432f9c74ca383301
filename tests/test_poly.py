import random

import pytest

from polygen.fields import FieldError, FieldKind, PrimeElement, Rational, Real
from polygen.monomial import MonomialOrder
from polygen.poly import (
    Poly,
    constant_poly,
    one_poly,
    random_poly,
    symbolic_poly,
    unknown_poly,
    zero_poly,
)
from polygen.term import unknown_term

Q = FieldKind.Q


@pytest.fixture
def xy():
    return unknown_poly(1, 2, Q), unknown_poly(2, 2, Q)


def test_difference_of_squares(xy):
    x, y = xy
    assert (x + y) * (x - y) == x * x - y * y


def test_cancellation_gives_zero(xy):
    x, _ = xy
    result = x - x
    assert result.is_zero()
    assert len(result) == 1
    assert result == zero_poly(2, Q)


def test_one_poly_is_one():
    assert one_poly(3, Q).is_one()
    assert not constant_poly(2, 3, Q).is_one()


def test_one_and_zero_from_poly(xy):
    x, y = xy
    p = x * y + x
    assert p.one().is_one()
    assert p.zero().is_zero()
    assert p * p.one() == p


def test_terms_sorted_descending(xy):
    x, y = xy
    p = y + x * x + one_poly(2, Q)
    monomials = [t.monomial for t in p]
    assert all(a > b for a, b in zip(monomials, monomials[1:]))
    assert p.leading_term.monomial.exponents == (2, 0)


def test_to_string(xy):
    x, _ = xy
    assert (x + one_poly(2, Q)).to_string(False) == "x_1 + 1"


def test_leading_coefficient_and_monomial(xy):
    x, y = xy
    p = constant_poly(3, 2, Q) * x * y + y
    coefficient = p.leading_coefficient()
    assert coefficient.coefficient == Rational(3)
    assert coefficient.monomial.is_one()
    monomial = p.leading_monomial()
    assert monomial.coefficient.is_one()
    assert monomial.monomial == p.leading_term.monomial


def test_evaluate_is_multiplicative(xy):
    x, y = xy
    p = x + constant_poly(2, 2, Q) * y
    q = x * y - one_poly(2, Q)
    values = [1.5, -0.5]
    assert (p * q).evaluate(values).value == pytest.approx(
        p.evaluate(values).value * q.evaluate(values).value
    )


def test_evaluate_in_field(xy):
    x, y = xy
    p = x * x + y
    values = [Rational(1, 2), Rational(3)]
    assert p.evaluate(values) == values[0] * values[0] + values[1]


def test_evaluate_wrong_count(xy):
    x, _ = xy
    with pytest.raises(ValueError):
        x.evaluate([1.0])


def test_evaluate_symbolic_with_numbers_fails():
    p = symbolic_poly("a", 2)
    with pytest.raises(FieldError):
        p.evaluate([1.0, 2.0])


def test_mixed_fields_rejected():
    with pytest.raises(FieldError):
        unknown_poly(1, 2, Q) + unknown_poly(1, 2, FieldKind.R)


def test_mixed_dimensions_rejected():
    with pytest.raises(FieldError):
        unknown_poly(1, 2, Q) * unknown_poly(1, 3, Q)


def test_truncated(xy):
    x, _ = xy
    one = one_poly(2, Q)
    assert (x * x + x + one).truncated(1) == x + one


def test_with_order_changes_leading_term(xy):
    x, y = xy
    p = x + y * y
    assert p.leading_term.monomial.exponents == (0, 2)
    lex = p.with_order(MonomialOrder.LEX)
    assert lex.leading_term.monomial.exponents == (1, 0)
    assert len(lex) == len(p)


def test_is_similar(xy):
    x, y = xy
    p = x + y
    q = constant_poly(2, 2, Q) * x + constant_poly(3, 2, Q) * y
    assert p.is_similar(q)
    assert not p.is_similar(x * y + y)


def test_add_and_multiply_by_term(xy):
    x, y = xy
    term = unknown_term(2, 2, Q)
    assert x + term == x + y
    assert x * term == x * y
    assert term * x == x * y


def test_negation(xy):
    x, y = xy
    p = x + y
    assert (-p + p).is_zero()
    assert -(-p) == p


def test_dominant_switch_and_clone():
    rng = random.Random(3)
    p = symbolic_poly("a", 2, with_random_zp=True, rng=rng)
    assert p.leading_term.coefficient.to_string(False) == "a"
    p.set_dominant(1)
    assert isinstance(p.leading_term.coefficient, PrimeElement)
    reduced = p.clone(False)
    assert len(reduced.leading_term.coefficients) == 1
    assert isinstance(reduced.leading_term.coefficient, PrimeElement)


def test_random_poly_is_constant():
    p = random_poly(3, FieldKind.R, rng=random.Random(1))
    assert len(p) == 1
    assert p.leading_term.monomial.is_one()
    assert isinstance(p.evaluate([0.0, 0.0, 0.0]), Real)


def test_empty_poly_rejected():
    with pytest.raises(ValueError):
        Poly([])