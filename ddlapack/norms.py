"""Norms of symmetric tridiagonal and symmetric matrices."""

from __future__ import annotations

from typing import Sequence

from .errors import xerbla
from .numeric import CONTEXT, dd, lassq
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


def _is_one_norm(norm: str) -> bool:
    return lsame(norm, "O") or lsame(norm, "1") or lsame(norm, "I")


def _is_frobenius(norm: str) -> bool:
    return lsame(norm, "F") or lsame(norm, "E")


def lanst(norm: str, d: Sequence, e: Sequence):
    """Norm of the symmetric tridiagonal matrix with diagonal ``d`` and off-diagonal ``e``.

    ``norm`` ``M`` gives the largest absolute entry, ``O``, ``1`` or ``I``
    the one-norm (equal to the infinity norm), ``F`` or ``E`` the Frobenius
    norm. An empty matrix has norm zero. Only the first ``len(d) - 1``
    elements of ``e`` are used; a shorter ``e`` raises ``ValueError`` and an
    unknown ``norm`` raises :class:`~ddlapack.errors.IllegalArgumentError`.
    """
    n = len(d)
    if n <= 0:
        return dd(0)
    if len(e) < n - 1:
        raise ValueError(f"off-diagonal has {len(e)} elements, expected {n - 1}")
    ds = [abs(dd(v)) for v in d]
    es = [abs(dd(v)) for v in list(e)[: n - 1]]

    if lsame(norm, "M"):
        anorm = ds[-1]
        for dv, ev in zip(ds, es):
            anorm = max(anorm, dv, ev)
        return anorm
    if _is_one_norm(norm):
        if n == 1:
            return ds[0]
        anorm = max(ds[0] + es[0], es[-1] + ds[-1])
        for dv, ev, eprev in zip(ds[1:-1], es[1:], es[:-1]):
            anorm = max(anorm, dv + ev + eprev)
        return anorm
    if _is_frobenius(norm):
        scale, total = dd(0), dd(1)
        if n > 1:
            scale, total = lassq(es, scale, total)
            total = total * 2
        scale, total = lassq(ds, scale, total)
        return scale * CONTEXT.sqrt(total)
    xerbla("Rlanst", 1)


def lansy(norm: str, uplo: str, a):
    """Norm of the symmetric matrix stored in the ``uplo`` triangle of ``A``.

    ``uplo`` ``U`` reads the upper triangle, any other letter the lower one;
    the other triangle is never referenced. ``norm`` is ``M``, ``O``/``1``/``I``
    or ``F``/``E`` as for :func:`lanst`. An empty matrix has norm zero. A
    non-square ``A`` raises ``ValueError``; an unknown ``norm`` raises
    :class:`~ddlapack.errors.IllegalArgumentError`.
    """
    rows, n = _shape(a)
    if rows != n:
        raise ValueError(f"matrix must be square, got {rows} by {n}")
    if n == 0:
        return dd(0)
    upper = lsame(uplo, "U")

    def stored(j: int) -> range:
        return range(j + 1) if upper else range(j, n)

    if lsame(norm, "M"):
        value = dd(0)
        for j in range(n):
            for i in stored(j):
                value = max(value, abs(dd(a[i][j])))
        return value

    if _is_one_norm(norm):
        work = [dd(0)] * n
        value = dd(0)
        if upper:
            for j in range(n):
                total = dd(0)
                for i in range(j):
                    absa = abs(dd(a[i][j]))
                    total += absa
                    work[i] += absa
                work[j] = total + abs(dd(a[j][j]))
            for w in work:
                value = max(value, w)
        else:
            for j in range(n):
                total = work[j] + abs(dd(a[j][j]))
                for i in range(j + 1, n):
                    absa = abs(dd(a[i][j]))
                    total += absa
                    work[i] += absa
                value = max(value, total)
        return value

    if _is_frobenius(norm):
        scale, total = dd(0), dd(1)
        if upper:
            for j in range(1, n):
                scale, total = lassq((a[i][j] for i in range(j)), scale, total)
        else:
            for j in range(n - 1):
                scale, total = lassq((a[i][j] for i in range(j + 1, n)), scale, total)
        total = total * 2
        scale, total = lassq((a[i][i] for i in range(n)), scale, total)
        return scale * CONTEXT.sqrt(total)

    xerbla("Rlansy", 1)