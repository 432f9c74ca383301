"""Factories for polynomial coefficients.

A coefficient is a member of one of the fields in :mod:`polygen.fields`
or :mod:`polygen.symbolic`. These helpers build the common ones by field
kind, so that callers need not know which class backs each kind.
"""

from __future__ import annotations

from typing import Any

from polygen.fields import (
    Field,
    FieldError,
    FieldKind,
    PrimeElement,
    Rational,
    Real,
    random_prime_element,
    random_rational,
    random_real,
)
from polygen.symbolic import Symbolic, symbol, symbolic_constant


def zero_coefficient(kind: FieldKind) -> Field:
    """Return the zero member of the field of the given kind."""
    return constant_coefficient(0, kind)


def random_coefficient(kind: FieldKind, rng: Any = None) -> Field:
    """Return a random non-zero member of a numeric field.

    Symbolic members have no random values and raise :class:`FieldError`.
    """
    if kind is FieldKind.R:
        return random_real(rng)
    if kind is FieldKind.Q:
        return random_rational(rng)
    if kind is FieldKind.ZP:
        return random_prime_element(rng)
    raise FieldError(f"no random members exist for field {kind.value}")


def constant_coefficient(constant: int, kind: FieldKind) -> Field:
    """Return the integer ``constant`` as a member of the field of ``kind``."""
    constant = int(constant)
    if kind is FieldKind.R:
        return Real(float(constant))
    if kind is FieldKind.Q:
        return Rational(constant, 1)
    if kind is FieldKind.ZP:
        return PrimeElement(constant)
    if kind is FieldKind.SYM:
        return symbolic_constant(constant) if constant else Symbolic()
    raise FieldError(f"unknown field kind {kind!r}")


def real_coefficient(value: float) -> Real:
    """Return a member of R."""
    return Real(value)


def rational_coefficient(numerator: int, denominator: int = 1) -> Rational:
    """Return a member of Q; the fraction is kept reduced."""
    return Rational(numerator, denominator)


def symbolic_coefficient(name: str) -> Symbolic:
    """Return a symbolic member consisting of the single symbol ``name``."""
    return symbol(name)