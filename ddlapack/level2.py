"""Matrix-vector operations in double-double precision.

A matrix is a two-dimensional NumPy array (object dtype for double-double
storage) or a list of equal-length rows, indexed as ``a[i][j]``. Vectors are
mutable sequences. Updates are made in place.
"""

from __future__ import annotations

from typing import MutableSequence, Sequence

from .errors import xerbla
from .numeric import dd
from .options import lsame


def _shape(a) -> tuple[int, int]:
    shape = getattr(a, "shape", None)
    if shape is not None:
        if len(shape) != 2:
            raise ValueError(f"expected a two-dimensional matrix, got shape {shape}")
        return int(shape[0]), int(shape[1])
    rows = len(a)
    cols = len(a[0]) if rows else 0
    if any(len(row) != cols for row in a):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def _check_length(name: str, vector: Sequence, expected: int) -> None:
    if len(vector) != expected:
        raise ValueError(
            f"vector {name} has length {len(vector)}, expected {expected}"
        )


def gemv(trans: str, alpha, a, x: Sequence, beta, y: MutableSequence) -> None:
    """Replace ``y`` with ``alpha*A*x + beta*y`` or ``alpha*A'*x + beta*y``.

    ``trans`` selects the form by its first letter: ``N`` for ``A``, ``T`` or
    ``C`` for the transpose. An unknown option raises
    :class:`~ddlapack.errors.IllegalArgumentError` for parameter 1; vectors of
    the wrong length raise ``ValueError``. When ``A`` has no rows or no
    columns, or ``alpha`` is zero and ``beta`` is one, ``y`` is left as it is.
    """
    if not (lsame(trans, "N") or lsame(trans, "T") or lsame(trans, "C")):
        xerbla("Rgemv", 1)
    m, n = _shape(a)
    notrans = lsame(trans, "N")
    lenx, leny = (n, m) if notrans else (m, n)
    _check_length("x", x, lenx)
    _check_length("y", y, leny)

    alpha = dd(alpha)
    beta = dd(beta)
    if m == 0 or n == 0 or (alpha == 0 and beta == 1):
        return

    if beta == 1:
        result = [dd(v) for v in y]
    elif beta == 0:
        result = [dd(0)] * leny
    else:
        result = [beta * dd(v) for v in y]

    if alpha != 0:
        if notrans:
            for j, xj in enumerate(x):
                xj = dd(xj)
                if xj != 0:
                    temp = alpha * xj
                    result = [r + temp * dd(row[j]) for r, row in zip(result, a)]
        else:
            for j in range(n):
                temp = dd(0)
                for row, xi in zip(a, x):
                    temp = temp + dd(row[j]) * dd(xi)
                result[j] = result[j] + alpha * temp

    y[:] = result


def ger(alpha, x: Sequence, y: Sequence, a) -> None:
    """Replace ``A`` in place with the rank-one update ``alpha*x*y' + A``.

    ``x`` must have one element per row of ``A`` and ``y`` one per column;
    otherwise ``ValueError`` is raised. Nothing changes when ``alpha`` is zero
    or ``A`` is empty.
    """
    m, n = _shape(a)
    _check_length("x", x, m)
    _check_length("y", y, n)
    alpha = dd(alpha)
    if m == 0 or n == 0 or alpha == 0:
        return

    xs = [dd(v) for v in x]
    for j, yj in enumerate(y):
        yj = dd(yj)
        if yj != 0:
            temp = alpha * yj
            for row, xi in zip(a, xs):
                row[j] = dd(row[j]) + xi * temp