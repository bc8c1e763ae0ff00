"""Eigen-decomposition of real symmetric 2-by-2 matrices."""

from __future__ import annotations

from .numeric import CONTEXT, dd

_HALF = dd("0.5")


def _eigenvalues(a, b, c):
    """Shared part of :func:`lae2` and :func:`laev2`.

    Returns ``(rt1, rt2, sgn1, df, tb, ab, rt)``.
    """
    sm = a + c
    df = a - c
    adf = abs(df)
    tb = b + b
    ab = abs(tb)

    if abs(a) > abs(c):
        acmx, acmn = a, c
    else:
        acmx, acmn = c, a

    if adf > ab:
        ratio = ab / adf
        rt = adf * CONTEXT.sqrt(1 + ratio * ratio)
    elif adf < ab:
        ratio = adf / ab
        rt = ab * CONTEXT.sqrt(1 + ratio * ratio)
    else:
        # Includes the case ab == adf == 0.
        rt = ab * CONTEXT.sqrt(2)

    if sm < 0:
        rt1 = _HALF * (sm - rt)
        sgn1 = -1
        # Order of evaluation matters for an accurate smaller eigenvalue.
        rt2 = (acmx / rt1) * acmn - (b / rt1) * b
    elif sm > 0:
        rt1 = _HALF * (sm + rt)
        sgn1 = 1
        rt2 = (acmx / rt1) * acmn - (b / rt1) * b
    else:
        # Includes the case rt1 == rt2 == 0.
        rt1 = _HALF * rt
        rt2 = -_HALF * rt
        sgn1 = 1
    return rt1, rt2, sgn1, df, tb, ab, rt


def lae2(a, b, c):
    """Eigenvalues of the symmetric matrix ``[[a, b], [b, c]]``.

    Returns ``(rt1, rt2)`` where ``rt1`` is the eigenvalue of larger absolute
    value and ``rt2`` the one of smaller absolute value.
    """
    rt1, rt2, *_ = _eigenvalues(dd(a), dd(b), dd(c))
    return rt1, rt2


def laev2(a, b, c):
    """Eigenvalues and eigenvector of the symmetric matrix ``[[a, b], [b, c]]``.

    Returns ``(rt1, rt2, cs1, sn1)``: ``rt1`` is the eigenvalue of larger
    absolute value, ``rt2`` the other, and ``(cs1, sn1)`` is the unit right
    eigenvector belonging to ``rt1``.
    """
    a, b, c = dd(a), dd(b), dd(c)
    rt1, rt2, sgn1, df, tb, ab, rt = _eigenvalues(a, b, c)

    if df >= 0:
        cs = df + rt
        sgn2 = 1
    else:
        cs = df - rt
        sgn2 = -1

    acs = abs(cs)
    if acs > ab:
        ct = -tb / cs
        sn1 = 1 / CONTEXT.sqrt(1 + ct * ct)
        cs1 = ct * sn1
    elif ab == 0:
        cs1 = dd(1)
        sn1 = dd(0)
    else:
        tn = -cs / tb
        cs1 = 1 / CONTEXT.sqrt(1 + tn * tn)
        sn1 = tn * cs1

    if sgn1 == sgn2:
        cs1, sn1 = -sn1, cs1
    return rt1, rt2, cs1, sn1