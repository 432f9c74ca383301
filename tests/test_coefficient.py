import random

import pytest

from polygen.coefficient import (
    constant_coefficient,
    random_coefficient,
    rational_coefficient,
    real_coefficient,
    symbolic_coefficient,
    zero_coefficient,
)
from polygen.fields import FieldError, FieldKind, PrimeElement, Rational


@pytest.mark.parametrize("kind", list(FieldKind))
def test_zero_coefficient_is_zero(kind):
    value = zero_coefficient(kind)
    assert value.kind is kind
    assert value.is_zero()


@pytest.mark.parametrize("kind", list(FieldKind))
def test_constant_one_is_one(kind):
    value = constant_coefficient(1, kind)
    assert value.kind is kind
    assert value.is_one()


@pytest.mark.parametrize("kind", list(FieldKind))
def test_constant_plus_its_negation_is_zero(kind):
    value = constant_coefficient(7, kind)
    assert (value + (-value)).is_zero()


def test_constant_prime_element_is_reduced():
    value = constant_coefficient(30097 + 5, FieldKind.ZP)
    assert value == PrimeElement(5)


@pytest.mark.parametrize("kind", [FieldKind.R, FieldKind.Q, FieldKind.ZP])
def test_random_coefficient_is_nonzero_and_reproducible(kind):
    first = random_coefficient(kind, random.Random(42))
    second = random_coefficient(kind, random.Random(42))
    assert first.kind is kind
    assert not first.is_zero()
    assert first == second


def test_random_symbolic_raises():
    with pytest.raises(FieldError):
        random_coefficient(FieldKind.SYM, random.Random(1))


def test_real_coefficient_keeps_value():
    assert real_coefficient(2.5).value == 2.5


def test_rational_coefficient_is_reduced():
    assert rational_coefficient(2, 4) == rational_coefficient(1, 2)
    assert rational_coefficient(2, 4).denominator == 2


def test_rational_zero_denominator_raises():
    with pytest.raises(ZeroDivisionError):
        rational_coefficient(1, 0)


def test_rational_inverse_round_trip():
    value = rational_coefficient(3, 7)
    assert value * value.inverse() == Rational(1, 1)


def test_symbolic_coefficient_name():
    value = symbolic_coefficient("fs[0][1]")
    assert value.kind is FieldKind.SYM
    assert value.to_string() == "fs[0][1]"


def test_symbolic_coefficient_empty_name_raises():
    with pytest.raises(ValueError):
        symbolic_coefficient("")