"""Plane rotations in double-double precision."""

from __future__ import annotations

from typing import Sequence

from .errors import xerbla
from .machine import lamch
from .numeric import CONTEXT, dd
from .options import lsame


def lartg(f, g):
    """Generate a plane rotation with ``[cs sn; -sn cs] @ [f; g] == [r; 0]``.

    Returns ``(cs, sn, r)`` with ``cs**2 + sn**2 == 1``. When ``g`` is zero
    the rotation is the identity; when ``f`` is zero it swaps the components.
    If ``|f| > |g|`` the cosine is made positive.
    """
    f = dd(f)
    g = dd(g)
    if g == 0:
        return dd(1), dd(0), f
    if f == 0:
        return dd(0), dd(1), g

    safmin = lamch("S")
    eps = lamch("E")
    safmn2 = CONTEXT.sqrt(safmin / eps)
    safmx2 = 1 / safmn2

    f1, g1 = f, g
    scale = max(abs(f1), abs(g1))
    count = 0
    factor = dd(1)
    if scale >= safmx2:
        factor = safmx2
        while scale >= safmx2:
            count += 1
            f1 = f1 * safmn2
            g1 = g1 * safmn2
            scale = max(abs(f1), abs(g1))
    elif scale <= safmn2:
        factor = safmn2
        while scale <= safmn2:
            count += 1
            f1 = f1 * safmx2
            g1 = g1 * safmx2
            scale = max(abs(f1), abs(g1))

    r = CONTEXT.sqrt(f1 * f1 + g1 * g1)
    cs = f1 / r
    sn = g1 / r
    for _ in range(count):
        r = r * factor

    if abs(f) > abs(g) and cs < 0:
        cs, sn, r = -cs, -sn, -r
    return cs, sn, r


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


def _planes(pivot: str, direct: str, size: int):
    """Yield ``(k, p, q)``: rotation ``k`` acts in the plane of lines p and q."""
    if lsame(pivot, "V"):
        planes = [(j, j, j + 1) for j in range(size - 1)]
    elif lsame(pivot, "T"):
        planes = [(j - 1, 0, j) for j in range(1, size)]
    else:
        planes = [(j, j, size - 1) for j in range(size - 1)]
    return planes if lsame(direct, "F") else planes[::-1]


def lasr(side: str, pivot: str, direct: str, c: Sequence, s: Sequence, a) -> None:
    """Apply a sequence of plane rotations to ``A`` in place.

    ``side`` ``L`` forms ``P*A`` and ``R`` forms ``A*P'``, where ``P`` is the
    product of the rotations ``(c[k], s[k])``. ``pivot`` chooses the planes:
    ``V`` variable (k, k+1), ``T`` top (1, k+1), ``B`` bottom (k, z).
    ``direct`` ``F`` applies them first to last, ``B`` last to first.
    Unknown options raise :class:`~ddlapack.errors.IllegalArgumentError` for
    parameters 1 to 3; ``c`` or ``s`` too short for ``A`` raise ``ValueError``.
    """
    if not (lsame(side, "L") or lsame(side, "R")):
        xerbla("Rlasr", 1)
    if not (lsame(pivot, "V") or lsame(pivot, "T") or lsame(pivot, "B")):
        xerbla("Rlasr", 2)
    if not (lsame(direct, "F") or lsame(direct, "B")):
        xerbla("Rlasr", 3)

    m, n = _shape(a)
    if m == 0 or n == 0:
        return

    left = lsame(side, "L")
    size, other = (m, n) if left else (n, m)
    needed = size - 1
    if len(c) < needed or len(s) < needed:
        raise ValueError(
            f"need {needed} rotations, got {len(c)} cosines and {len(s)} sines"
        )

    for k, p, q in _planes(pivot, direct, size):
        ctemp = dd(c[k])
        stemp = dd(s[k])
        if ctemp == 1 and stemp == 0:
            continue
        for i in range(other):
            if left:
                vp, vq = dd(a[p][i]), dd(a[q][i])
            else:
                vp, vq = dd(a[i][p]), dd(a[i][q])
            new_p = stemp * vq + ctemp * vp
            new_q = ctemp * vq - stemp * vp
            if left:
                a[p][i] = new_p
                a[q][i] = new_q
            else:
                a[i][p] = new_p
                a[i][q] = new_q