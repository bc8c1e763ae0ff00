import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from ddlapack.blas1 import axpy, copy, dot, nrm2, scal
from ddlapack.numeric import CONTEXT, dd

small_ints = st.integers(min_value=-1000, max_value=1000)
int_vectors = st.lists(small_ints, min_size=0, max_size=12)


def _pair(draw_len):
    return st.tuples(
        st.lists(small_ints, min_size=draw_len, max_size=draw_len),
        st.lists(small_ints, min_size=draw_len, max_size=draw_len),
    )


pairs = st.integers(min_value=0, max_value=10).flatmap(_pair)


def test_dot_worked_example():
    assert dot([1, 2, 3], [4, 5, 6]) == 32


def test_nrm2_worked_example():
    assert nrm2([3, 4]) == 5


def test_nrm2_empty_and_single():
    assert nrm2([]) == 0
    assert nrm2([-7]) == 7


def test_nrm2_all_zero():
    assert nrm2([0, 0, 0]) == 0


def test_dot_empty_is_zero():
    assert dot([], []) == 0


@given(pairs)
def test_dot_is_symmetric(pair):
    x, y = pair
    assert dot(x, y) == dot(y, x)


@given(int_vectors)
def test_dot_with_itself_matches_norm_squared(x):
    norm = nrm2(x)
    squared = dot(x, x)
    assert CONTEXT.almosteq(norm * norm, squared, rel_eps=dd(2) ** -100, abs_eps=dd(2) ** -100)


@given(int_vectors)
def test_nrm2_is_nonnegative_and_bounds_entries(x):
    norm = nrm2(x)
    assert norm >= 0
    assert all(abs(v) <= norm * (1 + dd(2) ** -100) for v in x)


def test_nrm2_avoids_overflow():
    big = dd(10) ** 300
    result = nrm2([big, big])
    assert CONTEXT.almosteq(result / big, CONTEXT.sqrt(2), rel_eps=dd(2) ** -100)


@given(pairs, small_ints)
def test_axpy_then_inverse_restores(pair, alpha):
    x, y = pair
    original = list(y)
    axpy(alpha, x, y)
    axpy(-alpha, x, y)
    assert y == original


@given(pairs)
def test_axpy_zero_alpha_leaves_y(pair):
    x, y = pair
    original = list(y)
    axpy(0, x, y)
    assert y == original


@given(int_vectors)
def test_axpy_into_zeros_equals_copy(x):
    y1 = [0] * len(x)
    y2 = [0] * len(x)
    axpy(1, x, y1)
    copy(x, y2)
    assert y1 == y2 == x


@given(pairs)
def test_copy_makes_equal(pair):
    x, y = pair
    copy(x, y)
    assert y == x


@given(int_vectors, small_ints)
def test_scal_scales_dot(x, alpha):
    scaled = list(x)
    scal(alpha, scaled)
    assert dot(scaled, x) == alpha * dot(x, x)


@given(int_vectors)
def test_scal_by_one_is_identity(x):
    y = list(x)
    scal(1, y)
    assert y == x


def test_scal_on_numpy_strided_view_updates_storage():
    a = np.array([dd(v) for v in [1, 2, 3, 4, 5]], dtype=object)
    scal(10, a[::2])
    assert list(a) == [10, 2, 30, 4, 50]


def test_axpy_on_reversed_numpy_view():
    x = [1, 2, 3]
    y = np.array([dd(0)] * 3, dtype=object)
    axpy(1, x, y[::-1])
    assert list(y) == [3, 2, 1]


def test_results_carry_double_double_precision():
    tiny = dd(2) ** -80
    assert dot([1, tiny], [1, 1]) - 1 == tiny


@pytest.mark.parametrize(
    "func, args",
    [
        (axpy, (1, [1, 2], [1])),
        (copy, ([1, 2, 3], [0, 0])),
        (dot, ([1], [1, 2])),
    ],
)
def test_length_mismatch_raises(func, args):
    with pytest.raises(ValueError):
        func(*args)