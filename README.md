# ddlapack

Dense linear-algebra kernels that compute in double-double precision: every
value is an `mpmath` number carrying 106 bits of mantissa (about 32
significant decimal digits). The routines follow the familiar BLAS and LAPACK
conventions, but take Python sequences and matrices instead of raw pointers,
leading dimensions and strides.

## Installation

```
pip install ddlapack
```

The package depends on `mpmath` and `numpy`.

## Data conventions

- **Scalars** are converted with `ddlapack.numeric.dd`, which accepts ints,
  floats, strings and `mpmath` numbers. Every routine converts its inputs
  this way, so plain Python numbers may be passed.
- **Vectors** are mutable sequences: lists or one-dimensional NumPy arrays of
  `dtype=object`. Strided or reversed access is expressed by passing a slice;
  for NumPy arrays a slice is a view, so in-place updates reach the
  underlying storage.
- **Matrices** are two-dimensional NumPy arrays (`dtype=object`) or lists of
  equal-length rows, indexed as `a[i][j]`.
- Routines that update an argument do so **in place** and return `None`.
- **Option arguments** such as `trans`, `uplo`, `side` or `norm` are letters
  compared case-insensitively on their first character only, so
  `"Transpose"`, `"t"` and `"T"` all mean the same. `ddlapack.options.lsame`
  makes this comparison.

## Modules

### `ddlapack.numeric`

- `dd(value)`: convert to a double-double number.
- `approx_log2`, `approx_log`, `approx_log10`, `approx_pow`, `approx_cos`,
  `approx_sin`, `approx_exp`, `approx_pi()`: elementary functions at the
  same precision.
- `sign(a, b)`: `|a|` with the sign of `b` (positive when `b` is zero).
- `lapy2(x, y)`: `sqrt(x**2 + y**2)` without needless overflow.
- `lassq(x, scale, sumsq)`: update a scaled sum of squares; returns the new
  `(scale, sumsq)`.
- `CONTEXT` and `PRECISION_BITS`: the shared `mpmath` context and its
  precision.

### `ddlapack.machine`

`lamch(cmach)` returns a machine parameter chosen by its first letter:
`E` epsilon (2⁻¹⁰⁴), `S` safe minimum, `B` base (2), `P` epsilon × base,
`N` mantissa digits, `R` rounding flag, `M` minimum exponent, `U` underflow
threshold, `L` maximum exponent, `O` overflow threshold. The constants
`EPS`, `SAFE_MIN` and `OVERFLOW` are also exported.

### `ddlapack.blas1`

Vector operations: `axpy(alpha, x, y)`, `copy(x, y)`, `dot(x, y)`,
`nrm2(x)` and `scal(alpha, x)`. Vectors of different lengths raise
`ValueError`.

### `ddlapack.level2` and `ddlapack.level3`

- `gemv(trans, alpha, a, x, beta, y)`: `y := alpha*op(A)*x + beta*y`.
- `ger(alpha, x, y, a)`: rank-one update `A := alpha*x*y' + A`.
- `gemm(transa, transb, alpha, a, b, beta, c)`:
  `C := alpha*op(A)*op(B) + beta*C`.

Operands whose shapes do not fit raise `ValueError`.

### `ddlapack.eigen2`

- `lae2(a, b, c)`: eigenvalues `(rt1, rt2)` of `[[a, b], [b, c]]`, with
  `rt1` the one of larger absolute value.
- `laev2(a, b, c)`: `(rt1, rt2, cs1, sn1)`, adding the unit eigenvector
  `(cs1, sn1)` for `rt1`.

### `ddlapack.rotations`

- `lartg(f, g)`: a plane rotation `(cs, sn, r)` with
  `[cs sn; -sn cs] @ [f; g] == [r; 0]`.
- `lasr(side, pivot, direct, c, s, a)`: apply a sequence of rotations to a
  matrix from the left (`L`) or right (`R`), with variable (`V`), top (`T`)
  or bottom (`B`) pivots, forwards (`F`) or backwards (`B`).

### `ddlapack.matrix_aux`

- `lascl(kind, kl, ku, cfrom, cto, a)`: multiply a full (`G`), triangular
  (`L`, `U`), Hessenberg (`H`) or band-stored (`B`, `Q`, `Z`) matrix by
  `cto/cfrom` without over- or underflow.
- `laset(uplo, alpha, beta, a)`: set off-diagonal entries to `alpha` and the
  diagonal to `beta`.
- `lasrt(order, d)`: sort in increasing (`I`) or decreasing (`D`) order.

### `ddlapack.norms`

- `lanst(norm, d, e)`: norm of a symmetric tridiagonal matrix.
- `lansy(norm, uplo, a)`: norm of a symmetric matrix stored in one triangle.

`norm` is `M` (largest absolute entry), `O`, `1` or `I` (one-norm, equal to
the infinity norm here) or `F`/`E` (Frobenius).

### `ddlapack.householder`

- `larfg(alpha, x)`: generate a reflector `H = I - tau*v*v'` with
  `H @ [alpha; x] == [beta; 0]`. `x` is overwritten with the tail of `v`;
  `(beta, tau)` is returned.
- `larf(side, v, tau, c)`: apply `H` to `C` from the left (`L`) or right.

### `ddlapack.orthogonal`

- `org2r(a, tau)`: overwrite `A` with `Q = H(1) H(2) … H(k)` from the
  reflectors left in its columns by a QR factorisation, `k = len(tau)`.
- `org2l(a, tau)`: the same for the reflectors of a QL factorisation,
  `Q = H(k) … H(2) H(1)`.

Both require at least as many rows as columns and `len(tau)` no larger than
the number of columns.

### `ddlapack.cholesky`

`potf2(uplo, a)` overwrites the upper (`U`, `A = U'U`) or lower (`L`,
`A = LL'`) triangle of a symmetric positive definite matrix with its
Cholesky factor, leaving the other triangle alone.

## Errors

- `ddlapack.errors.IllegalArgumentError` (a `ValueError`) is raised when an
  option or argument has an illegal value. Its `routine` and `position`
  attributes name the routine and the conventional one-based number of the
  offending parameter. `ddlapack.errors.xerbla(routine, info)` raises it.
- `ddlapack.cholesky.NotPositiveDefiniteError` (an `ArithmeticError`) is
  raised by `potf2` when a leading minor is not positive definite. Its
  `order` attribute gives the order of that minor; the matrix then holds the
  partial factorisation, with the failing diagonal value in place.

## Example

```python
from ddlapack.numeric import dd
from ddlapack.blas1 import dot, nrm2
from ddlapack.cholesky import potf2

x = [dd(1), dd(2), dd(3)]
dot(x, x)    # 14
nrm2(x)      # sqrt(14) to about 32 digits

a = [[dd(4), dd(2)],
     [dd(2), dd(3)]]
potf2("L", a)
# a[0][0] == 2, a[1][0] == 1, a[1][1] == sqrt(2); a[0][1] is unchanged
```

## What it does not do

The package provides unblocked building blocks only. It has no blocked
factorisations, no QR/QL factorisation routine, no tridiagonal reduction and
no symmetric eigenvalue solver; those would be assembled from the routines
above. It is a library with no command-line interface.

## Running the tests

```
pip install "ddlapack[test]"
pytest
```