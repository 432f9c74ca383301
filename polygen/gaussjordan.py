"""Gauss-Jordan reduction of coefficient matrices.

Two variants are offered. :func:`gauss_reduction_float` works on floating
point arrays with partial pivoting and a fixed zero tolerance.
:func:`gauss_reduction` works exactly on any field members, or on numbers
that support the four basic operations. Both return the reduced row echelon
form with the trailing zero rows removed. An all-zero matrix is returned
unchanged.
"""

from __future__ import annotations

from os import PathLike
from typing import Any, Optional, Sequence, Union

import numpy as np
from PIL import Image

from polygen.fields import Field

PRECISION = 1e-10
"""Magnitude below which a floating-point entry counts as zero."""

ZERO_COLOR = (0, 0, 255)
NONZERO_COLOR = (255, 0, 0)
NONZERO_ODD_COLOR = (220, 0, 0)


def _is_zero(value: Any) -> bool:
    if isinstance(value, Field):
        return value.is_zero()
    return value == 0


def _zero_like(value: Any) -> Any:
    if isinstance(value, Field):
        return value.zero()
    return type(value)(0)


def _one_like(value: Any) -> Any:
    if isinstance(value, Field):
        return value.one()
    return type(value)(1)


def _rows_of(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("the matrix needs at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows of the matrix must have the same length")
    return rows


def gauss_reduction_float(matrix: Any) -> np.ndarray:
    """Return the reduced row echelon form of a float matrix.

    Pivots are chosen by largest magnitude; entries within ``PRECISION`` of
    zero are treated as zero. The input is not modified.
    """
    work = np.array(matrix, dtype=float)
    if work.ndim != 2 or work.size == 0:
        raise ValueError("the matrix must be two-dimensional and non-empty")
    rows, cols = work.shape
    indentation = 0
    front = 0

    for _ in range(min(rows, cols)):
        pivot = None
        while indentation < cols:
            column = np.abs(work[front:, indentation])
            best = int(np.argmax(column))
            if column[best] > PRECISION:
                pivot = front + best
                break
            indentation += 1
        if pivot is None:
            break

        work[[front, pivot]] = work[[pivot, front]]
        work[front] /= work[front, indentation]

        below = work[front + 1 :]
        leads = below[:, indentation].copy()
        mask = np.abs(leads) > PRECISION
        below[mask] -= np.outer(leads[mask], work[front])

        front += 1
        indentation += 1
        if indentation >= cols:
            break

    if front == 0:
        return work

    work = work[:front].copy()
    for front_row in range(front - 1, 0, -1):
        nonzero = np.flatnonzero(np.abs(work[front_row]) >= PRECISION)
        if nonzero.size == 0:
            break
        column = nonzero[0]
        above = work[:front_row]
        leads = above[:, column].copy()
        mask = np.abs(leads) > PRECISION
        above[mask] -= np.outer(leads[mask], work[front_row])
    return work


def _eliminate(
    rows: list[list[Any]], source: int, column: int, targets: range
) -> None:
    """Subtract multiples of ``rows[source]`` to clear ``column`` in the target rows."""
    pivot_row = rows[source]
    active = [c for c in range(column, len(pivot_row)) if not _is_zero(pivot_row[c])]
    for target in targets:
        lead = rows[target][column]
        if _is_zero(lead):
            continue
        updated = list(rows[target])
        for c in active:
            updated[c] = updated[c] - lead * pivot_row[c]
        rows[target] = updated


def gauss_reduction(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the exact reduced row echelon form of a matrix.

    Entries may be field members or numbers such as :class:`fractions.Fraction`.
    The first non-zero entry of a column is used as pivot. The input is not
    modified.
    """
    rows = _rows_of(matrix)
    sample = rows[0][0]
    one = _one_like(sample)
    n_rows, n_cols = len(rows), len(rows[0])
    indentation = 0
    front = 0

    for _ in range(min(n_rows, n_cols)):
        pivot = None
        while indentation < n_cols:
            pivot = next(
                (r for r in range(front, n_rows) if not _is_zero(rows[r][indentation])),
                None,
            )
            if pivot is not None:
                break
            indentation += 1
        if pivot is None:
            break

        rows[front], rows[pivot] = rows[pivot], rows[front]
        pivot_row = rows[front]
        inverse = one / pivot_row[indentation]
        rows[front] = (
            pivot_row[:indentation]
            + [_one_like(sample)]
            + [value * inverse for value in pivot_row[indentation + 1 :]]
        )
        _eliminate(rows, front, indentation, range(front + 1, n_rows))

        front += 1
        indentation += 1
        if indentation >= n_cols:
            break

    if front == 0:
        return rows

    rows = rows[:front]
    for front_row in range(front - 1, 0, -1):
        column = next(
            (c for c, value in enumerate(rows[front_row]) if not _is_zero(value)), None
        )
        if column is None:
            break
        _eliminate(rows, front_row, column, range(front_row))
    return rows


def _text(value: Any) -> str:
    if isinstance(value, Field):
        return value.to_string(False)
    return str(value)


def format_matrix(matrix: Sequence[Sequence[Any]]) -> str:
    """Return the matrix as text, one row per paragraph."""
    rows = _rows_of(matrix)
    return "".join(" ".join(_text(v) for v in row) + "\n\n" for row in rows) + "\n"


def visualize_matrix(
    matrix: Sequence[Sequence[Any]],
    path: Optional[Union[str, PathLike]] = None,
) -> np.ndarray:
    """Return an RGB image with one pixel per entry, saving it to ``path`` if given.

    Zero entries get ``ZERO_COLOR``; non-zero entries get ``NONZERO_COLOR`` in
    even columns and ``NONZERO_ODD_COLOR`` in odd ones.
    """
    rows = _rows_of(matrix)
    height, width = len(rows), len(rows[0])
    nonzero = np.array([[not _is_zero(v) for v in row] for row in rows], dtype=bool)
    odd = (np.arange(width) % 2) == 1

    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:] = ZERO_COLOR
    pixels[nonzero & ~odd] = NONZERO_COLOR
    pixels[nonzero & odd] = NONZERO_ODD_COLOR

    if path is not None:
        Image.fromarray(pixels).save(str(path))
    return pixels