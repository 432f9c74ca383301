"""Members of the algebraic fields used for polynomial coefficients.

Three concrete fields are provided: the reals (floating point), the
rationals (exact fractions) and prime fields Z/pZ. All members are
immutable value objects; arithmetic returns new members. Mixing members
of different fields raises :class:`FieldError`.
"""

from __future__ import annotations

import enum
import random
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, ClassVar, Hashable

DEFAULT_CHARACTERISTIC = 30097


class FieldKind(enum.Enum):
    """The kinds of fields a coefficient can belong to."""

    R = "R"
    Q = "Q"
    ZP = "Zp"
    SYM = "Sym"


class FieldError(ValueError):
    """Raised when members of incompatible fields are combined."""


class Field(ABC):
    """Abstract member of an algebraic field."""

    kind: ClassVar[FieldKind]

    # -- to be provided by concrete fields ---------------------------------

    @abstractmethod
    def to_string(self, c_version: bool = True) -> str:
        """Return a textual form; with ``c_version`` it is valid C++ syntax."""

    @abstractmethod
    def zero(self) -> "Field":
        """Return the additive identity of this member's field."""

    @abstractmethod
    def one(self) -> "Field":
        """Return the multiplicative identity of this member's field."""

    @abstractmethod
    def inverse(self) -> "Field":
        """Return the multiplicative inverse; raises ZeroDivisionError for zero."""

    @abstractmethod
    def _compare(self, other: "Field") -> int:
        """Compare with a compatible member of the same field."""

    @abstractmethod
    def __neg__(self) -> "Field":
        """Return the additive inverse."""

    @abstractmethod
    def _add(self, other: "Field") -> "Field": ...

    @abstractmethod
    def _sub(self, other: "Field") -> "Field": ...

    @abstractmethod
    def _mul(self, other: "Field") -> "Field": ...

    @abstractmethod
    def _key(self) -> Hashable:
        """Return a value that identifies this member within its kind."""

    # -- shared behaviour ---------------------------------------------------

    def _check(self, other: "Field") -> None:
        if other.kind is not self.kind:
            raise FieldError(
                f"field not compatible: {self.kind.value} and {other.kind.value}"
            )

    def compare(self, other: "Field") -> int:
        """Return -1, 0 or 1 as this member is smaller, equal or bigger."""
        self._check(other)
        return self._compare(other)

    def is_zero(self) -> bool:
        return self == self.zero()

    def is_one(self) -> bool:
        return self == self.one()

    def __add__(self, other: Any) -> "Field":
        if not isinstance(other, Field):
            return NotImplemented
        self._check(other)
        return self._add(other)

    def __sub__(self, other: Any) -> "Field":
        if not isinstance(other, Field):
            return NotImplemented
        self._check(other)
        return self._sub(other)

    def __mul__(self, other: Any) -> "Field":
        if not isinstance(other, Field):
            return NotImplemented
        self._check(other)
        return self._mul(other)

    def __truediv__(self, other: Any) -> "Field":
        if not isinstance(other, Field):
            return NotImplemented
        self._check(other)
        return self._mul(other.inverse())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        if other.kind is not self.kind:
            return False
        return self._key() == other._key()

    def __lt__(self, other: "Field") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Field") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Field") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Field") -> bool:
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.kind, self._key()))

    def __str__(self) -> str:
        return self.to_string(False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string(False)})"


def _sign(value: Any) -> int:
    return (value > 0) - (value < 0)


class Real(Field):
    """A member of R, stored as a float."""

    kind = FieldKind.R
    __slots__ = ("_value",)

    def __init__(self, value: float = 0.0) -> None:
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def to_string(self, c_version: bool = True) -> str:
        return repr(self._value)

    def zero(self) -> "Real":
        return Real(0.0)

    def one(self) -> "Real":
        return Real(1.0)

    def inverse(self) -> "Real":
        if self._value == 0.0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return Real(1.0 / self._value)

    def _compare(self, other: Field) -> int:
        assert isinstance(other, Real)
        return _sign(self._value - other._value)

    def __neg__(self) -> "Real":
        return Real(-self._value)

    def _add(self, other: Field) -> "Real":
        assert isinstance(other, Real)
        return Real(self._value + other._value)

    def _sub(self, other: Field) -> "Real":
        assert isinstance(other, Real)
        return Real(self._value - other._value)

    def _mul(self, other: Field) -> "Real":
        assert isinstance(other, Real)
        return Real(self._value * other._value)

    def _key(self) -> Hashable:
        return self._value

    def __float__(self) -> float:
        return self._value


class Rational(Field):
    """A member of Q, kept as a reduced fraction with positive denominator."""

    kind = FieldKind.Q
    __slots__ = ("_value",)

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDivisionError("rational with zero denominator")
        self._value = Fraction(int(numerator), int(denominator))

    @classmethod
    def _from_fraction(cls, value: Fraction) -> "Rational":
        return cls(value.numerator, value.denominator)

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    def to_string(self, c_version: bool = True) -> str:
        num, den = self.numerator, self.denominator
        if c_version:
            if den == 1:
                return f"{num}.0"
            return f"({num}.0/{den}.0)"
        if den == 1:
            return str(num)
        return f"{num}/{den}"

    def zero(self) -> "Rational":
        return Rational(0, 1)

    def one(self) -> "Rational":
        return Rational(1, 1)

    def inverse(self) -> "Rational":
        if self._value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return Rational._from_fraction(1 / self._value)

    def _compare(self, other: Field) -> int:
        assert isinstance(other, Rational)
        return _sign(self._value - other._value)

    def __neg__(self) -> "Rational":
        return Rational._from_fraction(-self._value)

    def _add(self, other: Field) -> "Rational":
        assert isinstance(other, Rational)
        return Rational._from_fraction(self._value + other._value)

    def _sub(self, other: Field) -> "Rational":
        assert isinstance(other, Rational)
        return Rational._from_fraction(self._value - other._value)

    def _mul(self, other: Field) -> "Rational":
        assert isinstance(other, Rational)
        return Rational._from_fraction(self._value * other._value)

    def _key(self) -> Hashable:
        return self._value

    def __float__(self) -> float:
        return float(self._value)


class PrimeElement(Field):
    """A member of the prime field Z/pZ."""

    kind = FieldKind.ZP
    __slots__ = ("_value", "_characteristic")

    def __init__(
        self, value: int = 0, characteristic: int = DEFAULT_CHARACTERISTIC
    ) -> None:
        if characteristic < 2:
            raise ValueError("characteristic must be a prime of at least 2")
        self._characteristic = int(characteristic)
        self._value = int(value) % self._characteristic

    @property
    def value(self) -> int:
        return self._value

    @property
    def characteristic(self) -> int:
        return self._characteristic

    def _check(self, other: Field) -> None:
        super()._check(other)
        assert isinstance(other, PrimeElement)
        if other._characteristic != self._characteristic:
            raise FieldError(
                "prime fields of different characteristic: "
                f"{self._characteristic} and {other._characteristic}"
            )

    def _make(self, value: int) -> "PrimeElement":
        return PrimeElement(value, self._characteristic)

    def to_string(self, c_version: bool = True) -> str:
        return str(self._value)

    def zero(self) -> "PrimeElement":
        return self._make(0)

    def one(self) -> "PrimeElement":
        return self._make(1)

    def inverse(self) -> "PrimeElement":
        if self._value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return self._make(pow(self._value, -1, self._characteristic))

    def _compare(self, other: Field) -> int:
        assert isinstance(other, PrimeElement)
        return _sign(self._value - other._value)

    def __neg__(self) -> "PrimeElement":
        return self._make(-self._value)

    def _add(self, other: Field) -> "PrimeElement":
        assert isinstance(other, PrimeElement)
        return self._make(self._value + other._value)

    def _sub(self, other: Field) -> "PrimeElement":
        assert isinstance(other, PrimeElement)
        return self._make(self._value - other._value)

    def _mul(self, other: Field) -> "PrimeElement":
        assert isinstance(other, PrimeElement)
        return self._make(self._value * other._value)

    def _key(self) -> Hashable:
        return (self._value, self._characteristic)

    def __int__(self) -> int:
        return self._value


def random_real(rng: Any = None) -> Real:
    """Return a real drawn uniformly from [-1, 1]."""
    rng = random if rng is None else rng
    return Real(rng.uniform(-1.0, 1.0))


def random_rational(rng: Any = None) -> Rational:
    """Return a random non-zero rational with small numerator and denominator."""
    rng = random if rng is None else rng
    numerator = 0
    while numerator == 0:
        numerator = rng.randint(-100, 100)
    return Rational(numerator, rng.randint(1, 100))


def random_prime_element(
    rng: Any = None, characteristic: int = DEFAULT_CHARACTERISTIC
) -> PrimeElement:
    """Return a random non-zero member of Z/pZ."""
    rng = random if rng is None else rng
    return PrimeElement(rng.randrange(1, characteristic), characteristic)