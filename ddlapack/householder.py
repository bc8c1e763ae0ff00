"""Elementary reflectors (Householder transformations) in double-double precision.

A reflector has the form ``H = I - tau * v * v'``. Matrices are
two-dimensional NumPy arrays (object dtype for double-double storage) or
lists of equal-length rows, indexed as ``a[i][j]``; vectors are mutable
sequences. Updates are made in place.
"""

from __future__ import annotations

from typing import MutableSequence, Sequence

from .blas1 import nrm2, scal
from .level2 import gemv, ger
from .machine import lamch
from .numeric import dd, lapy2, sign
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


def larfg(alpha, x: MutableSequence):
    """Generate a reflector ``H`` with ``H * [alpha; x] == [beta; 0]``.

    ``H = I - tau * v * v'`` with ``v = [1; x_out]``. On return ``x`` holds
    the tail of ``v`` (overwritten in place) and ``(beta, tau)`` is returned.
    When ``x`` is empty or zero, ``tau`` is zero, ``H`` is the identity and
    ``beta`` is ``alpha``. Otherwise ``1 <= tau <= 2`` and ``beta`` has the
    opposite sign to ``alpha``.
    """
    alpha = dd(alpha)
    if not len(x):
        return alpha, dd(0)
    xnorm = nrm2(x)
    if xnorm == 0:
        return alpha, dd(0)

    beta = -sign(lapy2(alpha, xnorm), alpha)
    safmin = lamch("S") / lamch("E")
    knt = 0
    if abs(beta) < safmin:
        # beta and xnorm may be inaccurate; scale x up and recompute them.
        rsafmn = 1 / safmin
        while abs(beta) < safmin:
            knt += 1
            scal(rsafmn, x)
            beta = beta * rsafmn
            alpha = alpha * rsafmn
        xnorm = nrm2(x)
        beta = -sign(lapy2(alpha, xnorm), alpha)

    tau = (beta - alpha) / beta
    scal(1 / (alpha - beta), x)
    for _ in range(knt):
        beta = beta * safmin
    return beta, tau


def larf(side: str, v: Sequence, tau, c) -> None:
    """Apply ``H = I - tau * v * v'`` to ``C`` in place.

    ``side`` ``L`` forms ``H * C`` (``v`` has one element per row of ``C``);
    any other letter forms ``C * H`` (``v`` has one element per column).
    Nothing changes when ``tau`` is zero. A ``v`` of the wrong length raises
    ``ValueError``.
    """
    m, n = _shape(c)
    tau = dd(tau)
    if lsame(side, "L"):
        if len(v) != m:
            raise ValueError(f"vector v has length {len(v)}, expected {m}")
        if tau == 0:
            return
        w = [dd(0)] * n
        gemv("Transpose", 1, c, v, 0, w)
        ger(-tau, v, w, c)
    else:
        if len(v) != n:
            raise ValueError(f"vector v has length {len(v)}, expected {n}")
        if tau == 0:
            return
        w = [dd(0)] * m
        gemv("No transpose", 1, c, v, 0, w)
        ger(-tau, w, v, c)