"""Symbolic field members: integer combinations of products of named symbols.

A :class:`Symbolic` value is a sum of :class:`SymbolicProduct` terms, each an
integer factor times a product of powered symbols. Values stay in a canonical
form. Products with the same symbols and exponents are merged, terms that
cancel are dropped, and the terms are kept in descending order.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Union

from polygen.fields import Field, FieldError, FieldKind


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class PoweredSymbol:
    """A named symbol raised to a positive integer power."""

    symbol: str
    exponent: int = 1

    def __post_init__(self) -> None:
        if self.exponent < 0:
            raise ValueError("symbol exponents must be non-negative")

    def to_string(self, c_version: bool = True) -> str:
        if self.exponent == 1:
            return self.symbol
        if c_version:
            return f"pow({self.symbol},{self.exponent})"
        return f"{self.symbol}^{self.exponent}"


_Operand = Union[PoweredSymbol, "SymbolicProduct"]


@dataclass(frozen=True)
class SymbolicProduct:
    """An integer factor times a product of powered symbols.

    The symbols are merged by name and sorted in descending name order. A zero
    factor clears the symbols.
    """

    symbols: tuple[PoweredSymbol, ...] = field(default=())
    factor: int = 1

    def __post_init__(self) -> None:
        merged: dict[str, int] = {}
        if self.factor != 0:
            for powered in self.symbols:
                merged[powered.symbol] = merged.get(powered.symbol, 0) + powered.exponent
        symbols = tuple(
            PoweredSymbol(name, exponent)
            for name, exponent in sorted(merged.items(), reverse=True)
            if exponent > 0
        )
        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "factor", int(self.factor))

    @property
    def shape(self) -> tuple[tuple[str, int], ...]:
        """The symbols and exponents, without the factor."""
        return tuple((p.symbol, p.exponent) for p in self.symbols)

    @property
    def is_constant(self) -> bool:
        return not self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def multiply(self, other: _Operand) -> "SymbolicProduct":
        """Return the product with a powered symbol or another product."""
        if isinstance(other, PoweredSymbol):
            return SymbolicProduct(self.symbols + (other,), self.factor)
        if isinstance(other, SymbolicProduct):
            return SymbolicProduct(self.symbols + other.symbols, self.factor * other.factor)
        raise TypeError(f"cannot multiply a symbolic product by {type(other).__name__}")

    def compare(self, other: "SymbolicProduct") -> int:
        """Order by number of symbols, then symbol names, then exponents.

        The factor does not take part in the comparison.
        """
        if len(self.symbols) != len(other.symbols):
            return _sign(len(self.symbols) - len(other.symbols))
        for mine, theirs in zip(self.symbols, other.symbols):
            if mine.symbol != theirs.symbol:
                return 1 if mine.symbol > theirs.symbol else -1
            if mine.exponent != theirs.exponent:
                return _sign(mine.exponent - theirs.exponent)
        return 0

    def _body(self, c_version: bool, float_factors: bool) -> str:
        magnitude = abs(self.factor)
        factor_text = f"{magnitude}.0" if float_factors else str(magnitude)
        parts = [p.to_string(c_version) for p in self.symbols]
        if not parts:
            return factor_text
        if magnitude == 1:
            return "*".join(parts)
        return factor_text + "*" + "*".join(parts)

    def to_string(self, c_version: bool = True) -> str:
        body = self._body(c_version, False)
        return "-" + body if self.factor < 0 else body


_descending = functools.cmp_to_key(lambda a, b: b.compare(a))


class Symbolic(Field):
    """A member of the symbolic field: a sum of symbolic products."""

    kind = FieldKind.SYM
    __slots__ = ("_products",)

    def __init__(self, products: Iterable[SymbolicProduct] = ()) -> None:
        merged: dict[tuple, SymbolicProduct] = {}
        for product in products:
            key = product.shape
            previous = merged.get(key)
            factor = product.factor + (previous.factor if previous else 0)
            merged[key] = SymbolicProduct(product.symbols, factor)
        self._products = tuple(
            sorted((p for p in merged.values() if p.factor != 0), key=_descending)
        )

    @property
    def products(self) -> tuple[SymbolicProduct, ...]:
        """The terms of the combination in descending order."""
        return self._products

    @property
    def is_constant(self) -> bool:
        return all(p.is_constant for p in self._products)

    def _render(self, c_version: bool, float_factors: bool) -> str:
        if not self._products:
            return "0.0" if float_factors else "0"
        pieces = []
        for position, product in enumerate(self._products):
            body = product._body(c_version, float_factors)
            if position == 0:
                pieces.append("-" + body if product.factor < 0 else body)
            else:
                pieces.append((" - " if product.factor < 0 else " + ") + body)
        return "".join(pieces)

    def to_string(self, c_version: bool = True) -> str:
        return self._render(c_version, False)

    def special_string(self, c_version: bool = True) -> str:
        """Return the text with integer factors written as floating-point literals."""
        return self._render(c_version, True)

    def zero(self) -> "Symbolic":
        return Symbolic()

    def one(self) -> "Symbolic":
        return symbolic_constant(1)

    def inverse(self) -> "Symbolic":
        if not self._products:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        if len(self._products) == 1:
            only = self._products[0]
            if only.is_constant and abs(only.factor) == 1:
                return self
        raise FieldError(f"symbolic member {self.to_string(False)} cannot be inverted")

    def _compare(self, other: Field) -> int:
        assert isinstance(other, Symbolic)
        if len(self._products) != len(other._products):
            return _sign(len(self._products) - len(other._products))
        for mine, theirs in zip(self._products, other._products):
            result = mine.compare(theirs)
            if result:
                return result
            if mine.factor != theirs.factor:
                return _sign(mine.factor - theirs.factor)
        return 0

    def __neg__(self) -> "Symbolic":
        return Symbolic(SymbolicProduct(p.symbols, -p.factor) for p in self._products)

    def _add(self, other: Field) -> "Symbolic":
        assert isinstance(other, Symbolic)
        return Symbolic(self._products + other._products)

    def _sub(self, other: Field) -> "Symbolic":
        assert isinstance(other, Symbolic)
        return self._add(-other)

    def _mul(self, other: Field) -> "Symbolic":
        assert isinstance(other, Symbolic)
        return Symbolic(a.multiply(b) for a in self._products for b in other._products)

    def _key(self) -> Hashable:
        return tuple((p.shape, p.factor) for p in self._products)


def symbol(name: str) -> Symbolic:
    """Return the symbolic member consisting of a single named symbol."""
    if not name:
        raise ValueError("a symbol needs a non-empty name")
    return Symbolic([SymbolicProduct((PoweredSymbol(name),), 1)])


def symbolic_constant(constant: int) -> Symbolic:
    """Return the symbolic member for an integer constant."""
    return Symbolic([SymbolicProduct((), int(constant))])