"""Multivariate polynomials built from :class:`~polygen.term.Term` objects.

A polynomial always holds at least one term, so even zero keeps its fields,
dimensions and monomial order. Terms are stored in descending monomial
order; like terms are merged and terms whose coefficients all vanish are
dropped.
"""

from __future__ import annotations

import functools
from typing import Any, Iterable, Iterator, Sequence, Union

from polygen.fields import Field, FieldError, FieldKind, Real
from polygen.monomial import MonomialOrder
from polygen.term import (
    Kinds,
    Term,
    constant_term,
    one_term,
    random_term,
    symbolic_term,
    unknown_term,
    zero_term,
)

_descending = functools.cmp_to_key(lambda a, b: b.monomial.compare(a.monomial))


def _power(value: Field, exponent: int) -> Field:
    result = value.one()
    for _ in range(exponent):
        result = result * value
    return result


class Poly:
    """A polynomial with coefficients in one or several fields at once."""

    __slots__ = ("_terms", "_zero_term")

    def __init__(self, terms: Union[Term, Iterable[Term]]) -> None:
        if isinstance(terms, Term):
            terms = (terms,)
        terms = tuple(terms)
        if not terms:
            raise ValueError("a polynomial needs at least one term")
        self._zero_term = terms[0].zero()
        self._terms = self._normalize(terms)

    # -- construction helpers ---------------------------------------------------

    def _compatible(self, term: Term) -> None:
        if not term.is_similar(self._zero_term):
            raise FieldError(
                "incompatible polynomial terms: fields, dimensions or order differ"
            )

    def _normalize(self, terms: Iterable[Term]) -> tuple[Term, ...]:
        merged: dict[tuple[int, ...], Term] = {}
        for term in terms:
            self._compatible(term)
            key = term.monomial.exponents
            previous = merged.get(key)
            merged[key] = term if previous is None else previous + term
        kept = [
            t for t in merged.values() if not all(c.is_zero() for c in t.coefficients)
        ]
        if not kept:
            return (self._zero_term,)
        return tuple(sorted(kept, key=_descending))

    def _derived(self, terms: Iterable[Term]) -> "Poly":
        result = Poly.__new__(Poly)
        result._zero_term = self._zero_term
        result._terms = result._normalize(terms)
        return result

    # -- access -----------------------------------------------------------------

    @property
    def terms(self) -> tuple[Term, ...]:
        return self._terms

    @property
    def leading_term(self) -> Term:
        return self._terms[0]

    @property
    def dimensions(self) -> int:
        return self._zero_term.monomial.dimensions

    @property
    def degree(self) -> int:
        return max(t.monomial.degree for t in self._terms)

    def clone(self, full: bool = True) -> "Poly":
        """Return a copy; without ``full`` only the dominant coefficients are kept."""
        return Poly(t.clone(full) for t in self._terms)

    def one(self) -> "Poly":
        """Return the polynomial 1 with the same fields, dimensions and order."""
        return Poly(self._zero_term.one())

    def zero(self) -> "Poly":
        """Return the polynomial 0 with the same fields, dimensions and order."""
        return Poly(self._zero_term)

    def set_dominant(self, index: int) -> None:
        """Choose the dominant coefficient in every term."""
        self._zero_term.set_dominant(index)
        self._terms = tuple(
            Term(t.coefficients, t.monomial, index) for t in self._terms
        )

    def to_string(self, c_version: bool = True) -> str:
        """Return the polynomial as text, using the dominant coefficients."""
        return " + ".join(t.to_string(c_version) for t in self._terms)

    def leading_coefficient(self) -> Term:
        """Return the leading coefficient(s) as a constant term."""
        lead = self.leading_term
        return Term(lead.coefficients, lead.monomial.one(), lead.dominant)

    def leading_monomial(self) -> Term:
        """Return the leading monomial as a term with unit coefficients."""
        lead = self.leading_term
        return Term(
            tuple(c.one() for c in lead.coefficients), lead.monomial, lead.dominant
        )

    def evaluate(self, values: Sequence[Union[float, Field]]) -> Field:
        """Replace the unknowns by ``values`` and return the result.

        Field members are evaluated in their field with the dominant
        coefficients; plain numbers give a member of R.
        """
        values = list(values)
        if len(values) != self.dimensions:
            raise ValueError(f"expected {self.dimensions} values, got {len(values)}")
        if values and all(isinstance(v, Field) for v in values):
            total = None
            for term in self._terms:
                part = term.coefficient
                for value, exponent in zip(values, term.monomial.exponents):
                    part = part * _power(value, exponent)
                total = part if total is None else total + part
            return total
        if any(isinstance(v, Field) for v in values):
            raise TypeError("values must be all field members or all numbers")
        total = 0.0
        for term in self._terms:
            try:
                coefficient = float(term.coefficient)
            except TypeError as exc:
                raise FieldError(
                    f"coefficient {term.coefficient} has no numeric value"
                ) from exc
            total += coefficient * term.monomial.evaluate([float(v) for v in values])
        return Real(total)

    # -- derived polynomials ------------------------------------------------------

    def with_order(self, order: MonomialOrder) -> "Poly":
        """Return the same polynomial sorted by another monomial order."""
        return Poly(
            [self._zero_term.with_order(order)]
            + [t.with_order(order) for t in self._terms]
        )

    def truncated(self, max_degree: int) -> "Poly":
        """Return the polynomial without terms of degree above ``max_degree``."""
        return self._derived(t for t in self._terms if t.monomial.degree <= max_degree)

    def is_similar(self, other: "Poly") -> bool:
        """Same monomials in the same order?"""
        return len(self._terms) == len(other._terms) and all(
            a.monomial == b.monomial for a, b in zip(self._terms, other._terms)
        )

    def is_zero(self) -> bool:
        return all(t.is_zero() for t in self._terms)

    def is_one(self) -> bool:
        return len(self._terms) == 1 and self._terms[0].is_one()

    # -- protocols ----------------------------------------------------------------

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __neg__(self) -> "Poly":
        return self._derived(-t for t in self._terms)

    @staticmethod
    def _as_terms(other: Any) -> Union[tuple[Term, ...], None]:
        if isinstance(other, Poly):
            return other._terms
        if isinstance(other, Term):
            return (other,)
        return None

    def __add__(self, other: Any) -> "Poly":
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        return self._derived(self._terms + terms)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Poly":
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        return self._derived(self._terms + tuple(-t for t in terms))

    def __rsub__(self, other: Any) -> "Poly":
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        return self._derived(terms + tuple(-t for t in self._terms))

    def __mul__(self, other: Any) -> "Poly":
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        for term in terms:
            self._compatible(term)
        return self._derived(a * b for a in self._terms for b in terms)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __str__(self) -> str:
        return self.to_string(False)

    def __repr__(self) -> str:
        return f"Poly({self.to_string(False)!r})"


# -- named constructors -------------------------------------------------------------


def zero_poly(
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
) -> Poly:
    """Return the zero polynomial."""
    return Poly(zero_term(dimensions, kinds, order))


def one_poly(
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
) -> Poly:
    """Return the polynomial 1."""
    return Poly(one_term(dimensions, kinds, order))


def constant_poly(
    constant: int,
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
) -> Poly:
    """Return an integer constant as a polynomial."""
    return Poly(constant_term(constant, dimensions, kinds, order))


def unknown_poly(
    index: int,
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
    constant: int = 1,
) -> Poly:
    """Return ``constant`` times the unknown with the 1-based ``index``."""
    return Poly(unknown_term(index, dimensions, kinds, order, constant))


def random_poly(
    dimensions: int,
    kind: FieldKind = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
    rng: Any = None,
) -> Poly:
    """Return a constant polynomial with a random coefficient."""
    return Poly(random_term(dimensions, kind, order, rng))


def symbolic_poly(
    name: str,
    dimensions: int,
    order: MonomialOrder = MonomialOrder.GREVLEX,
    with_random_zp: bool = False,
    rng: Any = None,
) -> Poly:
    """Return a constant polynomial holding the symbol ``name``."""
    return Poly(symbolic_term(name, dimensions, order, with_random_zp, rng))