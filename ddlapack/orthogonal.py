"""Generation of orthogonal matrices from elementary reflectors.

The matrix argument is a two-dimensional NumPy array (object dtype for
double-double storage) or a list of equal-length rows; it is overwritten in
place with the generated matrix.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .blas1 import scal
from .errors import xerbla
from .householder import larf
from .numeric import dd


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


def _working_copy(a, m: int, n: int) -> np.ndarray:
    work = np.empty((m, n), dtype=object)
    for i in range(m):
        for j in range(n):
            work[i, j] = dd(a[i][j])
    return work


def _store(a, work: np.ndarray) -> None:
    for i, row in enumerate(work):
        for j, value in enumerate(row):
            a[i][j] = value


def _validate(routine: str, m: int, n: int, k: int) -> None:
    if n > m:
        xerbla(routine, 2)
    if k > n:
        xerbla(routine, 3)


def org2r(a, tau: Sequence) -> None:
    """Overwrite the m-by-n ``A`` with ``Q = H(1) H(2) ... H(k)``, ``k = len(tau)``.

    Column ``i`` of ``A`` below the diagonal holds the tail of the vector
    defining ``H(i)``, as left by a QR factorisation. Requires ``m >= n`` and
    ``k <= n``; otherwise :class:`~ddlapack.errors.IllegalArgumentError` is
    raised for parameter 2 or 3. Columns ``k`` to ``n - 1`` start as columns
    of the unit matrix.
    """
    m, n = _shape(a)
    k = len(tau)
    _validate("Rorg2r", m, n, k)
    if n <= 0:
        return

    taus = [dd(t) for t in tau]
    q = _working_copy(a, m, n)
    zero, one = dd(0), dd(1)

    for j in range(k, n):
        q[:, j] = [zero] * m
        q[j, j] = one

    for i in reversed(range(k)):
        t = taus[i]
        if i < n - 1:
            q[i, i] = one
            larf("Left", q[i:, i], t, q[i:, i + 1 :])
        if i < m - 1:
            scal(-t, q[i + 1 :, i])
        q[i, i] = one - t
        q[:i, i] = [zero] * i

    _store(a, q)


def org2l(a, tau: Sequence) -> None:
    """Overwrite the m-by-n ``A`` with ``Q = H(k) ... H(2) H(1)``, ``k = len(tau)``.

    Column ``n - k + i`` of ``A`` above row ``m - k + i`` holds the head of
    the vector defining ``H(i)``, as left by a QL factorisation. Requires
    ``m >= n`` and ``k <= n``; otherwise
    :class:`~ddlapack.errors.IllegalArgumentError` is raised for parameter 2
    or 3. Columns ``0`` to ``n - k - 1`` start as the last columns of the
    unit matrix.
    """
    m, n = _shape(a)
    k = len(tau)
    _validate("Rorg2l", m, n, k)
    if n <= 0:
        return

    taus = [dd(t) for t in tau]
    q = _working_copy(a, m, n)
    zero, one = dd(0), dd(1)

    for j in range(n - k):
        q[:, j] = [zero] * m
        q[m - n + j, j] = one

    for i, t in enumerate(taus):
        col = n - k + i
        row = m - n + col
        q[row, col] = one
        larf("Left", q[: row + 1, col], t, q[: row + 1, :col])
        scal(-t, q[:row, col])
        q[row, col] = one - t
        q[row + 1 :, col] = [zero] * (m - row - 1)

    _store(a, q)