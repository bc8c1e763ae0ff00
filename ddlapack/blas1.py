"""Vector operations in double-double precision.

The vectors are mutable sequences such as lists or one-dimensional NumPy
object arrays. Strided or reversed access is expressed by passing a slice;
for NumPy arrays the slice is a view, so in-place updates reach the
underlying storage.
"""

from __future__ import annotations

from typing import MutableSequence, Sequence

from .numeric import CONTEXT, dd, lassq


def _check_lengths(x: Sequence, y: Sequence) -> None:
    if len(x) != len(y):
        raise ValueError(
            f"vectors have different lengths: {len(x)} and {len(y)}"
        )


def axpy(alpha, x: Sequence, y: MutableSequence) -> None:
    """Replace ``y`` in place with ``alpha * x + y``.

    Nothing is changed when ``alpha`` is zero or the vectors are empty.
    Raises ``ValueError`` if ``x`` and ``y`` differ in length.
    """
    _check_lengths(x, y)
    alpha = dd(alpha)
    if not len(x) or alpha == 0:
        return
    y[:] = [dd(yi) + alpha * dd(xi) for xi, yi in zip(x, y)]


def copy(x: Sequence, y: MutableSequence) -> None:
    """Copy the elements of ``x`` into ``y`` in place.

    Raises ``ValueError`` if ``x`` and ``y`` differ in length.
    """
    _check_lengths(x, y)
    if not len(x):
        return
    y[:] = [dd(xi) for xi in x]


def dot(x: Sequence, y: Sequence):
    """Return the dot product of ``x`` and ``y``, accumulated in order.

    The dot product of empty vectors is zero. Raises ``ValueError`` if the
    vectors differ in length.
    """
    _check_lengths(x, y)
    total = dd(0)
    for xi, yi in zip(x, y):
        total = total + dd(xi) * dd(yi)
    return total


def nrm2(x: Sequence):
    """Return the Euclidean norm of ``x``, computed without undue overflow."""
    if len(x) < 1:
        return dd(0)
    if len(x) == 1:
        return abs(dd(x[0]))
    scale, ssq = lassq(x, 0, 1)
    return scale * CONTEXT.sqrt(ssq)


def scal(alpha, x: MutableSequence) -> None:
    """Multiply every element of ``x`` by ``alpha`` in place."""
    if not len(x):
        return
    alpha = dd(alpha)
    x[:] = [alpha * dd(xi) for xi in x]