import random

import pytest

from polygen.fields import FieldError, FieldKind, PrimeElement
from polygen.monomial import Monomial, MonomialOrder
from polygen.term import (
    Term,
    constant_term,
    one_term,
    random_term,
    symbolic_term,
    unknown_term,
    zero_term,
)

SZ = (FieldKind.SYM, FieldKind.ZP)


def test_zero_and_one_terms():
    assert zero_term(3).is_zero()
    assert one_term(3).is_one()
    assert not unknown_term(1, 3).is_one()


def test_unknowns_multiply_to_monomial_product():
    product = unknown_term(1, 3, FieldKind.ZP) * unknown_term(2, 3, FieldKind.ZP)
    assert product.monomial.exponents == (1, 1, 0)
    assert product.coefficient.is_one()


def test_multiplication_then_division_round_trip():
    a = unknown_term(1, 2, FieldKind.ZP, constant=6)
    b = unknown_term(2, 2, FieldKind.ZP, constant=4)
    assert (a * b) / b == a


def test_addition_of_like_terms_matches_constant():
    x = unknown_term(1, 2, FieldKind.ZP, constant=3)
    y = unknown_term(1, 2, FieldKind.ZP, constant=4)
    assert x + y == unknown_term(1, 2, FieldKind.ZP, constant=7)
    assert (x + y) - y == x


def test_addition_of_unlike_terms_raises():
    with pytest.raises(ValueError):
        unknown_term(1, 2) + unknown_term(2, 2)


def test_division_by_non_divisor_raises():
    with pytest.raises(ValueError):
        unknown_term(1, 2) / unknown_term(2, 2)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        one_term(2, FieldKind.ZP) / zero_term(2, FieldKind.ZP)


def test_multiplicity_mismatch_raises():
    with pytest.raises(FieldError):
        one_term(2, SZ) * one_term(2, FieldKind.ZP)


def test_field_mismatch_raises():
    with pytest.raises(FieldError):
        one_term(2, FieldKind.R) * one_term(2, FieldKind.ZP)


def test_negation_twice_is_identity():
    term = unknown_term(2, 3, SZ, constant=5)
    assert -(-term) == term
    assert (term + (-term)).is_zero()


def test_clone_without_full_keeps_dominant_only():
    term = constant_term(3, 2, SZ)
    term.set_dominant(1)
    single = term.clone(False)
    assert not single.is_multiple()
    assert single.coefficient == PrimeElement(3)
    assert term.is_multiple()


def test_clone_is_independent():
    term = constant_term(3, 2, SZ)
    copy = term.clone()
    copy.set_dominant(1)
    assert term.dominant == 0
    assert copy == term


def test_set_dominant_switches_coefficient():
    term = symbolic_term("a", 2, with_random_zp=True, rng=random.Random(3))
    assert term.coefficient.kind is FieldKind.SYM
    term.set_dominant(1)
    assert term.coefficient.kind is FieldKind.ZP


def test_set_dominant_out_of_range_raises():
    with pytest.raises(IndexError):
        one_term(2).set_dominant(1)


def test_zero_and_one_from_term_keep_fields():
    term = unknown_term(1, 3, SZ, constant=4)
    assert term.zero().is_zero()
    assert term.zero().kinds == SZ
    assert term.one().is_one()
    assert term.one(False).kinds == (FieldKind.SYM,)


def test_to_string_forms():
    assert unknown_term(1, 2, FieldKind.ZP).to_string(False) == "x_1"
    assert constant_term(3, 2, FieldKind.ZP).to_string() == "3"
    assert unknown_term(1, 2, FieldKind.ZP, constant=3).to_string() == "3*x_1"


def test_symbolic_term_string_uses_name():
    assert symbolic_term("F1(0,0)", 3).to_string() == "F1(0,0)"


def test_is_similar():
    assert unknown_term(1, 3, SZ).is_similar(one_term(3, SZ))
    assert not one_term(3, SZ).is_similar(one_term(3, FieldKind.ZP))
    assert not one_term(3).is_similar(one_term(4))
    assert not one_term(3).is_similar(one_term(3, order=MonomialOrder.LEX))


def test_with_order_changes_order_only():
    term = unknown_term(1, 3)
    lex = term.with_order(MonomialOrder.LEX)
    assert lex.monomial.order is MonomialOrder.LEX
    assert lex == term


def test_ordering_follows_monomials():
    x1 = unknown_term(1, 3)
    x3 = unknown_term(3, 3)
    assert x1 > x3
    assert sorted([x3, x1], reverse=True) == [x1, x3]


def test_random_term_reproducible():
    a = random_term(2, FieldKind.ZP, rng=random.Random(9))
    b = random_term(2, FieldKind.ZP, rng=random.Random(9))
    assert a == b
    assert not a.is_zero()


def test_term_needs_coefficients():
    with pytest.raises(ValueError):
        Term((), Monomial((0, 0)))
    with pytest.raises(TypeError):
        Term([3], Monomial((0, 0)))