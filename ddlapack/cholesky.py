"""Unblocked Cholesky factorisation in double-double precision."""

from __future__ import annotations

import numpy as np

from .blas1 import dot, scal
from .errors import xerbla
from .level2 import gemv
from .numeric import CONTEXT, dd
from .options import lsame


class NotPositiveDefiniteError(ArithmeticError):
    """The matrix is not positive definite.

    ``order`` is the order of the leading minor that is not positive
    definite; the factorisation could not be completed.
    """

    def __init__(self, order: int) -> None:
        self.order = order
        super().__init__(
            f"the leading minor of order {order} is not positive definite"
        )


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


def potf2(uplo: str, a) -> None:
    """Cholesky-factorise the symmetric positive definite ``A`` in place.

    ``uplo`` ``U`` reads the upper triangle and overwrites it with ``U``
    such that ``A = U' * U``; ``L`` reads the lower triangle and overwrites
    it with ``L`` such that ``A = L * L'``. The other triangle is left alone.

    An unknown ``uplo`` raises :class:`~ddlapack.errors.IllegalArgumentError`
    for parameter 1 and a non-square ``A`` raises ``ValueError``. If a leading
    minor is not positive definite, ``A`` holds the partial factorisation
    (with the failing diagonal value in place) and
    :class:`NotPositiveDefiniteError` is raised.
    """
    upper = lsame(uplo, "U")
    if not upper and not lsame(uplo, "L"):
        xerbla("Rpotf2", 1)
    m, n = _shape(a)
    if m != n:
        raise ValueError(f"matrix must be square, got {m} by {n}")
    if n == 0:
        return

    f = np.empty((n, n), dtype=object)
    for i in range(n):
        for j in range(n):
            f[i, j] = dd(a[i][j])

    failed = None
    for j in range(n):
        if upper:
            ajj = f[j, j] - dot(f[:j, j], f[:j, j])
        else:
            ajj = f[j, j] - dot(f[j, :j], f[j, :j])
        if ajj <= 0:
            f[j, j] = ajj
            failed = j + 1
            break
        ajj = CONTEXT.sqrt(ajj)
        f[j, j] = ajj
        if upper:
            gemv("Transpose", -1, f[:j, j + 1 :], f[:j, j], 1, f[j, j + 1 :])
            scal(1 / ajj, f[j, j + 1 :])
        else:
            gemv("No transpose", -1, f[j + 1 :, :j], f[j, :j], 1, f[j + 1 :, j])
            scal(1 / ajj, f[j + 1 :, j])

    for i in range(n):
        for j in range(n):
            a[i][j] = f[i, j]
    if failed is not None:
        raise NotPositiveDefiniteError(failed)