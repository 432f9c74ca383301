"""Polynomial terms: one or more coefficients times a monomial.

A term may carry several coefficients at once, one per field (for example
a symbolic one and a prime-field one). All of them take part in every
operation; the *dominant* one is used when the term is shown or tested for
zero or one.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Union

from polygen.coefficient import (
    constant_coefficient,
    random_coefficient,
    symbolic_coefficient,
    zero_coefficient,
)
from polygen.fields import Field, FieldError, FieldKind, random_prime_element
from polygen.monomial import Monomial, MonomialOrder, unit_monomial, unknown_monomial

Kinds = Union[FieldKind, Sequence[FieldKind]]


def _kinds(kinds: Kinds) -> tuple[FieldKind, ...]:
    result = (kinds,) if isinstance(kinds, FieldKind) else tuple(kinds)
    if not result:
        raise ValueError("at least one field kind is required")
    return result


class Term:
    """A monomial with one or more coefficients."""

    __slots__ = ("_coefficients", "_dominant", "_monomial")

    def __init__(
        self,
        coefficients: Union[Field, Iterable[Field]],
        monomial: Monomial,
        dominant: int = 0,
    ) -> None:
        if isinstance(coefficients, Field):
            coefficients = (coefficients,)
        coefficients = tuple(coefficients)
        if not coefficients:
            raise ValueError("a term needs at least one coefficient")
        if not all(isinstance(c, Field) for c in coefficients):
            raise TypeError("term coefficients must be field members")
        if not isinstance(monomial, Monomial):
            raise TypeError("a term needs a Monomial")
        self._coefficients: tuple[Field, ...] = coefficients
        self._monomial = monomial
        self._dominant = 0
        self.set_dominant(dominant)

    # -- access ---------------------------------------------------------------

    @property
    def coefficients(self) -> tuple[Field, ...]:
        return self._coefficients

    @property
    def coefficient(self) -> Field:
        """The dominant coefficient."""
        return self._coefficients[self._dominant]

    @property
    def monomial(self) -> Monomial:
        return self._monomial

    @property
    def dominant(self) -> int:
        return self._dominant

    @property
    def kinds(self) -> tuple[FieldKind, ...]:
        return tuple(c.kind for c in self._coefficients)

    def clone(self, full: bool = True) -> "Term":
        """Return a copy; without ``full`` only the dominant coefficient is kept."""
        if full:
            return Term(self._coefficients, self._monomial, self._dominant)
        return Term((self.coefficient,), self._monomial)

    def zero(self, full: bool = True) -> "Term":
        """Return a zero term of the same fields and dimensions."""
        source = self._coefficients if full else (self.coefficient,)
        dominant = self._dominant if full else 0
        return Term(tuple(c.zero() for c in source), self._monomial.one(), dominant)

    def one(self, full: bool = True) -> "Term":
        """Return the term 1 of the same fields and dimensions."""
        source = self._coefficients if full else (self.coefficient,)
        dominant = self._dominant if full else 0
        return Term(tuple(c.one() for c in source), self._monomial.one(), dominant)

    def is_multiple(self) -> bool:
        return len(self._coefficients) > 1

    def set_dominant(self, index: int) -> None:
        """Choose which coefficient is shown and tested."""
        if not 0 <= index < len(self._coefficients):
            raise IndexError(
                f"dominant index {index} outside 0..{len(self._coefficients) - 1}"
            )
        self._dominant = index

    def to_string(self, c_version: bool = True) -> str:
        """Return the dominant coefficient times the monomial as text."""
        text = self.coefficient.to_string(c_version)
        if self._monomial.is_one():
            return text
        monomial_text = self._monomial.to_string(c_version)
        if self.coefficient.is_one():
            return monomial_text
        if " " in text:
            text = f"({text})"
        return f"{text}*{monomial_text}"

    def with_order(self, order: MonomialOrder) -> "Term":
        """Return the same term with a different monomial order."""
        return Term(self._coefficients, self._monomial.with_order(order), self._dominant)

    def is_similar(self, other: "Term") -> bool:
        """Same fields, dimensions and monomial order?"""
        return (
            self.kinds == other.kinds
            and self._monomial.dimensions == other._monomial.dimensions
            and self._monomial.order is other._monomial.order
        )

    def is_zero(self) -> bool:
        return self.coefficient.is_zero()

    def is_one(self) -> bool:
        return self.coefficient.is_one() and self._monomial.is_one()

    # -- arithmetic -------------------------------------------------------------

    def _check(self, other: "Term") -> None:
        if len(other._coefficients) != len(self._coefficients):
            raise FieldError(
                "terms of different multiplicity: "
                f"{len(self._coefficients)} and {len(other._coefficients)}"
            )

    def _same_monomial(self, other: "Term") -> None:
        if self._monomial != other._monomial:
            raise ValueError(
                f"terms with different monomials: {self._monomial} and {other._monomial}"
            )

    def __neg__(self) -> "Term":
        return Term(tuple(-c for c in self._coefficients), self._monomial, self._dominant)

    def __add__(self, other: Any) -> "Term":
        if not isinstance(other, Term):
            return NotImplemented
        self._check(other)
        self._same_monomial(other)
        return Term(
            tuple(a + b for a, b in zip(self._coefficients, other._coefficients)),
            self._monomial,
            self._dominant,
        )

    def __sub__(self, other: Any) -> "Term":
        if not isinstance(other, Term):
            return NotImplemented
        self._check(other)
        self._same_monomial(other)
        return Term(
            tuple(a - b for a, b in zip(self._coefficients, other._coefficients)),
            self._monomial,
            self._dominant,
        )

    def __mul__(self, other: Any) -> "Term":
        if not isinstance(other, Term):
            return NotImplemented
        self._check(other)
        return Term(
            tuple(a * b for a, b in zip(self._coefficients, other._coefficients)),
            self._monomial * other._monomial,
            self._dominant,
        )

    def __truediv__(self, other: Any) -> "Term":
        if not isinstance(other, Term):
            return NotImplemented
        self._check(other)
        return Term(
            tuple(a / b for a, b in zip(self._coefficients, other._coefficients)),
            self._monomial / other._monomial,
            self._dominant,
        )

    # -- comparisons --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return (
            self._monomial == other._monomial
            and self._coefficients == other._coefficients
        )

    def __hash__(self) -> int:
        return hash((self._coefficients, self._monomial))

    def __gt__(self, other: "Term") -> bool:
        """Order by monomial, as used for sorting polynomial terms."""
        return self._monomial > other._monomial

    def __lt__(self, other: "Term") -> bool:
        return self._monomial < other._monomial

    def __str__(self) -> str:
        return self.to_string(False)

    def __repr__(self) -> str:
        return f"Term({self.to_string(False)!r})"


# -- named constructors -----------------------------------------------------------


def zero_term(
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
) -> Term:
    """Return the zero term with one coefficient per field kind."""
    return Term(
        tuple(zero_coefficient(k) for k in _kinds(kinds)), unit_monomial(dimensions, order)
    )


def one_term(
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
) -> Term:
    """Return the term 1 with one coefficient per field kind."""
    return constant_term(1, dimensions, kinds, order)


def constant_term(
    constant: int,
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
) -> Term:
    """Return an integer constant as a term."""
    return Term(
        tuple(constant_coefficient(constant, k) for k in _kinds(kinds)),
        unit_monomial(dimensions, order),
    )


def unknown_term(
    index: int,
    dimensions: int,
    kinds: Kinds = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
    constant: int = 1,
) -> Term:
    """Return ``constant`` times the unknown with the 1-based ``index``."""
    return Term(
        tuple(constant_coefficient(constant, k) for k in _kinds(kinds)),
        unknown_monomial(dimensions, index, order),
    )


def random_term(
    dimensions: int,
    kind: FieldKind = FieldKind.R,
    order: MonomialOrder = MonomialOrder.GREVLEX,
    rng: Any = None,
) -> Term:
    """Return a constant term with a random coefficient of a numeric field."""
    return Term(random_coefficient(kind, rng), unit_monomial(dimensions, order))


def symbolic_term(
    name: str,
    dimensions: int,
    order: MonomialOrder = MonomialOrder.GREVLEX,
    with_random_zp: bool = False,
    rng: Any = None,
) -> Term:
    """Return a constant term holding the symbol ``name``.

    With ``with_random_zp`` a random prime-field coefficient is carried as a
    second coefficient alongside the symbol.
    """
    coefficients: list[Field] = [symbolic_coefficient(name)]
    if with_random_zp:
        coefficients.append(random_prime_element(rng))
    return Term(coefficients, unit_monomial(dimensions, order))