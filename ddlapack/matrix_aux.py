"""Scaling, initialisation and sorting helpers for double-double matrices.

A matrix is a two-dimensional NumPy array (object dtype for double-double
storage) or a list of equal-length rows, indexed as ``a[i][j]``. All updates
are made in place.
"""

from __future__ import annotations

from typing import Iterator, MutableSequence

from .errors import xerbla
from .machine import lamch
from .numeric import dd
from .options import lsame

# Storage kinds accepted by lascl, keyed by their option letter.
_GENERAL, _LOWER, _UPPER, _HESSENBERG, _SYM_BAND_LOWER, _SYM_BAND_UPPER, _BAND = range(7)
_KINDS = {
    "G": _GENERAL,
    "L": _LOWER,
    "U": _UPPER,
    "H": _HESSENBERG,
    "B": _SYM_BAND_LOWER,
    "Q": _SYM_BAND_UPPER,
    "Z": _BAND,
}


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


def _region(kind: int, kl: int, ku: int, m: int, n: int) -> Iterator[tuple[int, int]]:
    """Yield the ``(row, column)`` positions of the stored part of a matrix."""
    for j in range(n):
        if kind == _GENERAL:
            rows = range(m)
        elif kind == _LOWER:
            rows = range(j, m)
        elif kind == _UPPER:
            rows = range(min(j, m - 1) + 1)
        elif kind == _HESSENBERG:
            rows = range(min(j + 1, m - 1) + 1)
        elif kind == _SYM_BAND_LOWER:
            rows = range(min(kl + 1, n - j))
        elif kind == _SYM_BAND_UPPER:
            rows = range(max(ku - j, 0), ku + 1)
        else:
            rows = range(max(kl + ku - j, kl), min(2 * kl + ku + 1, kl + ku + m - j))
        for i in rows:
            yield i, j


def lascl(kind: str, kl: int, ku: int, cfrom, cto, a) -> None:
    """Multiply the stored part of ``A`` by ``cto/cfrom`` without over/underflow.

    ``kind`` selects the storage by its first letter: ``G`` full, ``L`` lower
    triangular, ``U`` upper triangular, ``H`` upper Hessenberg, ``B`` lower
    half of a symmetric band matrix, ``Q`` upper half of a symmetric band
    matrix, ``Z`` general band matrix. For the band kinds ``a`` is the band
    storage, with one column per column of the (square) full matrix and
    ``kl``/``ku`` the numbers of sub- and super-diagonals.

    Illegal arguments raise :class:`~ddlapack.errors.IllegalArgumentError`
    with the conventional parameter number: 1 for ``kind``, 2 for ``kl``,
    3 for ``ku``, 4 for a zero ``cfrom``, 9 for band storage with too few rows.
    """
    code = _KINDS.get(kind[:1].upper())
    if code is None:
        xerbla("Rlascl", 1)
    cfrom = dd(cfrom)
    cto = dd(cto)
    rows, n = _shape(a)
    m = n if code >= _SYM_BAND_LOWER else rows

    if cfrom == 0:
        xerbla("Rlascl", 4)
    if code >= _SYM_BAND_LOWER:
        if kl < 0 or kl > max(m - 1, 0):
            xerbla("Rlascl", 2)
        if (
            ku < 0
            or ku > max(n - 1, 0)
            or (code in (_SYM_BAND_LOWER, _SYM_BAND_UPPER) and kl != ku)
        ):
            xerbla("Rlascl", 3)
        needed = {
            _SYM_BAND_LOWER: kl + 1,
            _SYM_BAND_UPPER: ku + 1,
            _BAND: 2 * kl + ku + 1,
        }[code]
        if rows < needed:
            xerbla("Rlascl", 9)

    if m == 0 or n == 0:
        return

    smlnum = lamch("S")
    bignum = 1 / smlnum
    cells = list(_region(code, kl, ku, m, n))

    cfromc = cfrom
    ctoc = cto
    done = False
    while not done:
        cfrom1 = cfromc * smlnum
        cto1 = ctoc / bignum
        if abs(cfrom1) > abs(ctoc) and ctoc != 0:
            mul = smlnum
            cfromc = cfrom1
        elif abs(cto1) > abs(cfromc):
            mul = bignum
            ctoc = cto1
        else:
            mul = ctoc / cfromc
            done = True
        for i, j in cells:
            a[i][j] = dd(a[i][j]) * mul


def laset(uplo: str, alpha, beta, a) -> None:
    """Set the off-diagonal part of ``A`` to ``alpha`` and its diagonal to ``beta``.

    ``uplo`` ``U`` touches only the strictly upper triangle, ``L`` only the
    strictly lower triangle, and any other letter the whole matrix. The first
    ``min(m, n)`` diagonal elements are always set to ``beta``.
    """
    m, n = _shape(a)
    alpha = dd(alpha)
    beta = dd(beta)
    if lsame(uplo, "U"):
        for j in range(1, n):
            for i in range(min(j, m)):
                a[i][j] = alpha
    elif lsame(uplo, "L"):
        for j in range(min(m, n)):
            for i in range(j + 1, m):
                a[i][j] = alpha
    else:
        for j in range(n):
            for i in range(m):
                a[i][j] = alpha
    for i in range(min(m, n)):
        a[i][i] = beta


def lasrt(order: str, d: MutableSequence) -> None:
    """Sort ``d`` in place: ``I`` for increasing, ``D`` for decreasing order.

    Any other letter raises :class:`~ddlapack.errors.IllegalArgumentError`
    for parameter 1.
    """
    if lsame(order, "I"):
        descending = False
    elif lsame(order, "D"):
        descending = True
    else:
        xerbla("Rlasrt", 1)
    d[:] = sorted((dd(v) for v in d), reverse=descending)