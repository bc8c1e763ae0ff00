"""Matrix-matrix multiplication in double-double precision."""

from __future__ import annotations

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


def gemm(transa: str, transb: str, alpha, a, b, beta, c) -> None:
    """Replace ``C`` in place with ``alpha*op(A)*op(B) + beta*C``.

    ``op(X)`` is ``X`` when the option's first letter is ``N`` and ``X'``
    when it is ``T`` or ``C``. An unknown ``transa`` or ``transb`` raises
    :class:`~ddlapack.errors.IllegalArgumentError` for parameter 1 or 2;
    operands whose shapes do not fit together raise ``ValueError``.
    """
    nota = lsame(transa, "N")
    notb = lsame(transb, "N")
    if not nota and not lsame(transa, "C") and not lsame(transa, "T"):
        xerbla("Rgemm", 1)
    if not notb and not lsame(transb, "C") and not lsame(transb, "T"):
        xerbla("Rgemm", 2)

    ar, ac = _shape(a)
    br, bc = _shape(b)
    m, n = _shape(c)
    opa_rows, k = (ar, ac) if nota else (ac, ar)
    opb = (br, bc) if notb else (bc, br)
    if opa_rows != m:
        raise ValueError(f"op(A) has {opa_rows} rows but C has {m}")
    if opb != (k, n):
        raise ValueError(f"op(B) has shape {opb}, expected {(k, n)}")

    alpha = dd(alpha)
    beta = dd(beta)
    if m == 0 or n == 0 or ((alpha == 0 or k == 0) and beta == 1):
        return

    if alpha == 0:
        for row in c:
            for j in range(n):
                row[j] = dd(0) if beta == 0 else beta * dd(row[j])
        return

    def b_at(l: int, j: int):
        return dd(b[l][j]) if notb else dd(b[j][l])

    if nota:
        for j in range(n):
            for row in c:
                if beta == 0:
                    row[j] = dd(0)
                elif beta != 1:
                    row[j] = beta * dd(row[j])
            for l in range(k):
                blj = b_at(l, j)
                if blj != 0:
                    temp = alpha * blj
                    for crow, arow in zip(c, a):
                        crow[j] = dd(crow[j]) + temp * dd(arow[l])
    else:
        for j in range(n):
            for i, crow in enumerate(c):
                temp = dd(0)
                for l in range(k):
                    temp = temp + dd(a[l][i]) * b_at(l, j)
                if beta == 0:
                    crow[j] = alpha * temp
                else:
                    crow[j] = alpha * temp + beta * dd(crow[j])