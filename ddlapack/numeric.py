"""Double-double precision scalars and elementary helpers."""

from __future__ import annotations

from typing import Iterable

from mpmath.ctx_mp import MPContext

#: Bits of mantissa carried by a double-double number.
PRECISION_BITS = 106

#: Arithmetic context shared by every routine in the package.
CONTEXT = MPContext()
CONTEXT.prec = PRECISION_BITS


def dd(value):
    """Convert ``value`` (int, float, string or mpf) to a double-double number."""
    return CONTEXT.mpf(value)


def approx_log2(x):
    """Base-2 logarithm of ``x``."""
    return CONTEXT.log10(dd(x)) / (CONTEXT.ln2 / CONTEXT.ln10)


def approx_log(x):
    """Natural logarithm of ``x``."""
    return CONTEXT.log(dd(x))


def approx_log10(x):
    """Base-10 logarithm of ``x``."""
    return CONTEXT.log10(dd(x))


def approx_pow(x, y):
    """``x`` raised to the power ``y``."""
    return CONTEXT.power(dd(x), dd(y))


def approx_cos(x):
    """Cosine of ``x``."""
    return CONTEXT.cos(dd(x))


def approx_sin(x):
    """Sine of ``x``."""
    return CONTEXT.sin(dd(x))


def approx_exp(x):
    """Exponential of ``x``."""
    return CONTEXT.exp(dd(x))


def approx_pi():
    """The constant pi."""
    return +CONTEXT.pi


def sign(a, b):
    """Return ``|a|`` carrying the sign of ``b`` (positive when ``b`` is zero)."""
    magnitude = abs(dd(a))
    return magnitude if dd(b) >= 0 else -magnitude


def lapy2(x, y):
    """Return ``sqrt(x**2 + y**2)``, avoiding unnecessary overflow."""
    xabs = abs(dd(x))
    yabs = abs(dd(y))
    w = max(xabs, yabs)
    z = min(xabs, yabs)
    if z == 0:
        return w
    ratio = z / w
    return w * CONTEXT.sqrt(1 + ratio * ratio)


def lassq(x: Iterable, scale, sumsq):
    """Update a scaled sum of squares with the values in ``x``.

    Returns ``(scale_out, sumsq_out)`` such that
    ``scale_out**2 * sumsq_out == sum(v**2 for v in x) + scale**2 * sumsq``,
    with ``scale_out`` the largest of ``scale`` and the magnitudes seen.
    """
    scale = dd(scale)
    sumsq = dd(sumsq)
    for value in x:
        value = dd(value)
        if value == 0:
            continue
        absxi = abs(value)
        if scale < absxi:
            ratio = scale / absxi
            sumsq = 1 + sumsq * ratio * ratio
            scale = absxi
        else:
            ratio = absxi / scale
            sumsq = sumsq + ratio * ratio
    return scale, sumsq