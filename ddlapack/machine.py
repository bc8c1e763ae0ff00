"""Machine parameters of the double-double arithmetic."""

import sys

from .errors import xerbla
from .numeric import dd

#: Relative machine precision: about 4.93e-32.
EPS = dd(2) ** -104

#: Smallest normalised value, such that 1/SAFE_MIN does not overflow.
SAFE_MIN = dd(2) ** (-1022 + 53)

#: Largest representable value.
OVERFLOW = dd(sys.float_info.max) + dd(9.97920154767359795037e291)

_PARAMETERS = {
    "E": EPS,
    "S": SAFE_MIN,
    "B": dd(2),
    "P": EPS * 2,
    "N": dd(209),
    "R": dd(1),
    "M": dd(-1022 + 53),
    "U": SAFE_MIN,
    "L": dd(1024),
    "O": OVERFLOW,
}


def lamch(cmach: str):
    """Return the machine parameter selected by the first letter of ``cmach``.

    ``E`` eps, ``S`` safe minimum, ``B`` base, ``P`` eps*base, ``N`` mantissa
    digits, ``R`` rounding flag, ``M`` minimum exponent, ``U`` underflow
    threshold, ``L`` maximum exponent, ``O`` overflow threshold. Case is
    ignored. Any other letter raises
    :class:`~ddlapack.errors.IllegalArgumentError`.
    """
    try:
        return _PARAMETERS[cmach[:1].upper()]
    except KeyError:
        xerbla("Rlamch", 1)
        raise