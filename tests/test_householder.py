import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ddlapack.householder import larf, larfg
from ddlapack.numeric import CONTEXT, dd

TOL = dd("1e-27")


def _mat(rows):
    m = len(rows)
    n = len(rows[0]) if m else 0
    out = np.empty((m, n), dtype=object)
    for i, row in enumerate(rows):
        for j, v in enumerate(row):
            out[i, j] = dd(v)
    return out


def _maxdiff(a, b):
    return max(abs(dd(x) - dd(y)) for x, y in zip(np.ravel(a), np.ravel(b)))


def test_larfg_empty_vector_is_identity():
    beta, tau = larfg(3, [])
    assert beta == 3
    assert tau == 0


def test_larfg_zero_vector_is_identity():
    x = [dd(0), dd(0)]
    beta, tau = larfg(2, x)
    assert beta == 2
    assert tau == 0
    assert x == [0, 0]


def test_larfg_three_four_five():
    x = [dd(4)]
    beta, tau = larfg(3, x)
    assert abs(beta + 5) < TOL


@pytest.mark.parametrize(
    "alpha, tail",
    [(3, [4]), (-1, [2, 2]), (0, [1, -1, 1]), (2.5, [0.5, -7, 3, 1e-3])],
)
def test_larfg_reflector_annihilates_tail(alpha, tail):
    x = [dd(v) for v in tail]
    beta, tau = larfg(alpha, x)
    column = [[dd(alpha)]] + [[dd(v)] for v in tail]
    larf("L", [dd(1)] + x, tau, column)
    assert abs(column[0][0] - beta) < TOL
    assert all(abs(row[0]) < TOL for row in column[1:])


@settings(max_examples=30, deadline=None)
@given(
    st.integers(-50, 50),
    st.lists(st.integers(-50, 50), min_size=1, max_size=5).filter(any),
)
def test_larfg_beta_magnitude_and_tau_range(alpha, tail):
    x = [dd(v) for v in tail]
    beta, tau = larfg(alpha, x)
    norm = CONTEXT.sqrt(sum(dd(v) ** 2 for v in [alpha] + tail))
    assert abs(abs(beta) - norm) < TOL * norm
    assert dd(1) - TOL <= tau <= dd(2) + TOL
    if alpha != 0:
        assert (beta > 0) != (alpha > 0)


def test_larf_zero_tau_leaves_matrix():
    c = _mat([[1, 2], [3, 4]])
    original = c.copy()
    larf("L", [dd(1), dd(5)], 0, c)
    assert _maxdiff(c, original) == 0


def test_larf_twice_restores_matrix():
    x = [dd(1), dd(-2)]
    _, tau = larfg(3, x)
    v = [dd(1)] + x
    c = _mat([[1, 2], [3, -4], [5, 6]])
    original = c.copy()
    larf("L", v, tau, c)
    assert _maxdiff(c, original) > TOL
    larf("L", v, tau, c)
    assert _maxdiff(c, original) < TOL


def test_larf_right_matches_left_on_transpose():
    x = [dd(2), dd(1)]
    _, tau = larfg(-1, x)
    v = [dd(1)] + x
    c = _mat([[1, 0, 2], [-3, 4, 1]])
    ct = c.T.copy()
    larf("R", v, tau, c)
    larf("L", v, tau, ct)
    assert _maxdiff(c, ct.T) < TOL


def test_larf_works_on_list_of_rows():
    x = [dd(1)]
    _, tau = larfg(1, x)
    v = [dd(1)] + x
    rows = [[dd(1), dd(2)], [dd(3), dd(4)]]
    arr = _mat([[1, 2], [3, 4]])
    larf("L", v, tau, rows)
    larf("L", v, tau, arr)
    assert _maxdiff(rows, arr) < TOL


def test_larf_wrong_vector_length():
    c = _mat([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        larf("L", [dd(1)], dd(1), c)