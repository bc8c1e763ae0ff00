"""Matching of single-letter option arguments."""


def lsame(a: str, b: str) -> bool:
    """Return True if the first letters of ``a`` and ``b`` match, ignoring case.

    Only the leading character of each argument counts, so ``"Transpose"``
    matches ``"T"``. An empty string matches only another empty string.
    """
    return a[:1].upper() == b[:1].upper()