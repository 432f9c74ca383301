"""Monomials over a fixed number of unknowns, with the usual term orders."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence


class MonomialOrder(enum.Enum):
    """Monomial orders used to sort the terms of polynomials."""

    LEX = "lex"
    REVLEX = "revlex"
    GRLEX = "grlex"
    GREVLEX = "grevlex"


def _lex(a: Sequence[int], b: Sequence[int]) -> int:
    for x, y in zip(a, b):
        if x != y:
            return 1 if x > y else -1
    return 0


def _revlex(a: Sequence[int], b: Sequence[int]) -> int:
    # The last differing unknown decides; the smaller exponent is bigger.
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return 1 if x < y else -1
    return 0


def _by_degree(a: Sequence[int], b: Sequence[int]) -> int:
    da, db = sum(a), sum(b)
    return (da > db) - (da < db)


def _compare(a: Sequence[int], b: Sequence[int], order: MonomialOrder) -> int:
    if order is MonomialOrder.LEX:
        return _lex(a, b)
    if order is MonomialOrder.REVLEX:
        return _revlex(a, b)
    if order is MonomialOrder.GRLEX:
        return _by_degree(a, b) or _lex(a, b)
    return _by_degree(a, b) or _revlex(a, b)


@dataclass(frozen=True)
class Monomial:
    """A product of unknowns with non-negative exponents.

    Equality and hashing use the exponents only; the order decides how the
    rich comparisons behave.
    """

    exponents: tuple[int, ...]
    order: MonomialOrder = field(default=MonomialOrder.GREVLEX, compare=False)

    def __post_init__(self) -> None:
        exponents = tuple(int(e) for e in self.exponents)
        if any(e < 0 for e in exponents):
            raise ValueError("monomial exponents must be non-negative")
        object.__setattr__(self, "exponents", exponents)

    @property
    def dimensions(self) -> int:
        return len(self.exponents)

    @property
    def degree(self) -> int:
        return sum(self.exponents)

    def _check(self, other: "Monomial") -> None:
        if not isinstance(other, Monomial):
            raise TypeError(f"expected a Monomial, got {type(other).__name__}")
        if other.dimensions != self.dimensions:
            raise ValueError(
                f"monomials of different dimensions: {self.dimensions} and {other.dimensions}"
            )

    def to_string(self, c_version: bool = True) -> str:
        """Return the monomial as text, using pow(...) when ``c_version`` is set."""
        parts = []
        for index, exponent in enumerate(self.exponents, start=1):
            if exponent == 0:
                continue
            name = f"x_{index}"
            if exponent == 1:
                parts.append(name)
            elif c_version:
                parts.append(f"pow({name},{exponent})")
            else:
                parts.append(f"{name}^{exponent}")
        return "*".join(parts) if parts else "1"

    def alpha(self) -> str:
        """Return only the exponents, separated by underscores."""
        return "_".join(str(e) for e in self.exponents)

    def one(self) -> "Monomial":
        return Monomial((0,) * self.dimensions, self.order)

    def evaluate(self, values: Sequence[float]) -> float:
        """Replace each unknown with the given value and return the product."""
        if len(values) != self.dimensions:
            raise ValueError(
                f"expected {self.dimensions} values, got {len(values)}"
            )
        return math.prod(v**e for v, e in zip(values, self.exponents))

    def with_order(self, order: MonomialOrder) -> "Monomial":
        return replace(self, order=order)

    def lcm(self, other: "Monomial") -> "Monomial":
        """Return the least common multiple."""
        self._check(other)
        return Monomial(
            tuple(max(a, b) for a, b in zip(self.exponents, other.exponents)), self.order
        )

    def compare(self, other: "Monomial", order: MonomialOrder | None = None) -> int:
        """Return -1, 0 or 1 as this monomial is smaller, equal or bigger."""
        self._check(other)
        return _compare(self.exponents, other.exponents, order or self.order)

    def is_divisible_by(self, other: "Monomial") -> bool:
        self._check(other)
        return all(a >= b for a, b in zip(self.exponents, other.exponents))

    def is_relatively_prime(self, other: "Monomial") -> bool:
        self._check(other)
        return not any(a and b for a, b in zip(self.exponents, other.exponents))

    def is_one(self) -> bool:
        return not any(self.exponents)

    def __mul__(self, other: object) -> "Monomial":
        if not isinstance(other, Monomial):
            return NotImplemented
        self._check(other)
        return Monomial(
            tuple(a + b for a, b in zip(self.exponents, other.exponents)), self.order
        )

    def __truediv__(self, other: object) -> "Monomial":
        if not isinstance(other, Monomial):
            return NotImplemented
        if not self.is_divisible_by(other):
            raise ValueError(
                f"{self.to_string(False)} is not divisible by {other.to_string(False)}"
            )
        return Monomial(
            tuple(a - b for a, b in zip(self.exponents, other.exponents)), self.order
        )

    def __lt__(self, other: "Monomial") -> bool:
        return self.compare(other) < 0

    def __gt__(self, other: "Monomial") -> bool:
        return self.compare(other) > 0

    def __le__(self, other: "Monomial") -> bool:
        return self.compare(other) <= 0

    def __ge__(self, other: "Monomial") -> bool:
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return self.to_string(False)


def unit_monomial(
    dimensions: int, order: MonomialOrder = MonomialOrder.GREVLEX
) -> Monomial:
    """Return the monomial 1 over ``dimensions`` unknowns."""
    if dimensions < 0:
        raise ValueError("dimensions must be non-negative")
    return Monomial((0,) * dimensions, order)


def unknown_monomial(
    dimensions: int, index: int, order: MonomialOrder = MonomialOrder.GREVLEX
) -> Monomial:
    """Return the unknown with the 1-based ``index``; index 0 gives the monomial 1."""
    if not 0 <= index <= dimensions:
        raise ValueError(f"unknown index {index} outside 0..{dimensions}")
    exponents = [0] * dimensions
    if index:
        exponents[index - 1] = 1
    return Monomial(tuple(exponents), order)


def monomials_from(
    rows: Iterable[Sequence[int]], order: MonomialOrder = MonomialOrder.GREVLEX
) -> list[Monomial]:
    """Build a list of monomials from exponent rows."""
    return [Monomial(tuple(row), order) for row in rows]