# polygen

Polynomial algebra in which every coefficient can live in several fields
at once, for example a symbolic name together with a random element of a
prime field, plus Gauss–Jordan reduction of coefficient matrices.

## What is inside

- `polygen.fields`: immutable field members `Real` (floats), `Rational`
  (reduced fractions) and `PrimeElement` (integers modulo a prime, default
  characteristic 30097), each tagged by a `FieldKind`. Combining members of
  different fields, or prime fields of different characteristic, raises
  `FieldError`. `random_real`, `random_rational` and `random_prime_element`
  draw random members and take an optional `random.Random`.
- `polygen.symbolic`: `Symbolic` members, integer combinations of products
  of named symbols (`PoweredSymbol`, `SymbolicProduct`), built with
  `symbol(name)` and `symbolic_constant(n)`. `to_string(True)` writes powers
  as `pow(a,2)`; `special_string` writes integer factors as `2.0`.
  Only `1` and `-1` can be inverted.
- `polygen.coefficient`: factories that build a coefficient by `FieldKind`
  (`zero_coefficient`, `constant_coefficient`, `random_coefficient`, …).
- `polygen.monomial`: `Monomial` with the orders of `MonomialOrder`
  (`LEX`, `REVLEX`, `GRLEX`, `GREVLEX`), least common multiples,
  divisibility, evaluation and text output (`x_1*pow(x_2,3)`).
- `polygen.term`: `Term`, a monomial with one or more coefficients; one of
  them is the dominant one, used for printing and zero tests. Named
  constructors: `zero_term`, `one_term`, `constant_term`, `unknown_term`,
  `random_term`, `symbolic_term`.
- `polygen.poly`: `Poly`, kept in descending monomial order with like terms
  merged. Addition, subtraction, multiplication, `evaluate`, `with_order`,
  `truncated`, and the matching named constructors (`zero_poly`,
  `one_poly`, `constant_poly`, `unknown_poly`, `random_poly`,
  `symbolic_poly`).
- `polygen.gaussjordan`: `gauss_reduction_float` (NumPy, partial pivoting,
  tolerance `1e-10`) and `gauss_reduction` (exact, on field members or
  numbers such as `Fraction`). Both return the reduced row echelon form
  without trailing zero rows. `format_matrix` renders a matrix as text;
  `visualize_matrix` returns an RGB sparsity image and can save it.
- `polygen.timing`: `Stopwatch`, a context manager measuring elapsed time,
  and `time_difference` for (seconds, microseconds) stamps.

## Installation

```
pip install .
```

## Examples

Polynomials over a prime field:

```python
from polygen.fields import FieldKind
from polygen.poly import one_poly, unknown_poly

kinds = (FieldKind.ZP,)
x = unknown_poly(1, 2, kinds)
y = unknown_poly(2, 2, kinds)

p = x * x + y * y - one_poly(2, kinds)
print(p.to_string(True))
```

A symbol carried together with a random prime-field value:

```python
from polygen.poly import symbolic_poly

a = symbolic_poly("a", 2, with_random_zp=True)
a.set_dominant(1)          # show the prime-field coefficient
print(a.to_string(False))
```

Symbolic arithmetic:

```python
from polygen.symbolic import symbol, symbolic_constant

s = symbol("a") * symbol("b") + symbolic_constant(2)
print(s.to_string())       # b*a + 2
print(s.special_string())  # b*a + 2.0
```

Exact reduction:

```python
from fractions import Fraction
from polygen.gaussjordan import gauss_reduction, visualize_matrix

m = [[Fraction(2), Fraction(4)], [Fraction(1), Fraction(3)]]
print(gauss_reduction(m))  # identity, as Fractions
visualize_matrix(m, "sparsity.png")
```

Timing a block:

```python
from polygen.timing import Stopwatch

with Stopwatch() as watch:
    for _ in range(50):
        p * p
print(watch.per_iteration(50))
```

## What it does not do

The package provides the algebra and the matrix reduction only. It has no
matrices of polynomials, no step that turns a set of polynomials into a
coefficient matrix and back, and it does not generate solver code or
write files other than the sparsity image. It also has no helpers for
synthetic camera experiments. There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```