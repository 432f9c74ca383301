"""Polynomial algebra over several fields at once, with Gauss-Jordan reduction of coefficient matrices."""

__version__ = "0.1.0"

__all__ = [
    "fields",
    "symbolic",
    "monomial",
    "coefficient",
    "term",
    "poly",
    "gaussjordan",
    "timing",
]