import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from ddlapack.errors import IllegalArgumentError
from ddlapack.norms import lansy, lanst
from ddlapack.numeric import dd


def tridiagonal(d, e):
    n = len(d)
    m = np.diag(np.array(d, dtype=float))
    if n > 1:
        m += np.diag(np.array(e[: n - 1], dtype=float), 1)
        m += np.diag(np.array(e[: n - 1], dtype=float), -1)
    return m


D = [1.0, -4.0, 2.5, 3.0]
E = [2.0, -1.5, 0.5]


def test_lanst_max():
    assert lanst("M", D, E) == 4


@pytest.mark.parametrize("norm", ["O", "1", "I"])
def test_lanst_one_norm_matches_dense(norm):
    dense = tridiagonal(D, E)
    assert float(lanst(norm, D, E)) == pytest.approx(np.linalg.norm(dense, 1))
    assert float(lanst(norm, D, E)) == pytest.approx(np.linalg.norm(dense, np.inf))


@pytest.mark.parametrize("norm", ["F", "E"])
def test_lanst_frobenius_matches_dense(norm):
    dense = tridiagonal(D, E)
    assert float(lanst(norm, D, E)) == pytest.approx(np.linalg.norm(dense, "fro"))


def test_lanst_single_element():
    assert lanst("1", [dd(-3)], []) == 3
    assert lanst("F", [dd(-3)], []) == 3


def test_lanst_empty_is_zero():
    assert lanst("M", [], []) == 0


def test_lanst_short_off_diagonal():
    with pytest.raises(ValueError):
        lanst("M", [1, 2, 3], [1])


def test_lanst_bad_norm():
    with pytest.raises(IllegalArgumentError) as info:
        lanst("X", [1, 2], [1])
    assert info.value.routine == "Rlanst"


@given(
    st.lists(st.floats(min_value=-1e6, max_value=1e6), min_size=1, max_size=8),
    st.lists(st.floats(min_value=-1e6, max_value=1e6), min_size=7, max_size=7),
)
def test_lanst_frobenius_squared(d, e):
    dense = tridiagonal(d, e)
    expected = np.linalg.norm(dense, "fro")
    assert float(lanst("F", d, e)) == pytest.approx(expected, rel=1e-9, abs=1e-12)


SYM = np.array(
    [
        [4.0, -1.0, 2.0],
        [-1.0, 3.0, 0.5],
        [2.0, 0.5, -5.0],
    ]
)


def garbage_outside(uplo):
    a = SYM.copy().tolist()
    for i in range(3):
        for j in range(3):
            if (uplo == "U" and i > j) or (uplo == "L" and i < j):
                a[i][j] = 1000.0
    return a


@pytest.mark.parametrize("uplo", ["U", "L"])
def test_lansy_max(uplo):
    assert lansy("M", uplo, garbage_outside(uplo)) == 5


@pytest.mark.parametrize("uplo", ["U", "L"])
@pytest.mark.parametrize("norm", ["I", "O", "1"])
def test_lansy_one_norm(uplo, norm):
    result = lansy(norm, uplo, garbage_outside(uplo))
    assert float(result) == pytest.approx(np.linalg.norm(SYM, 1))


@pytest.mark.parametrize("uplo", ["U", "L"])
@pytest.mark.parametrize("norm", ["F", "E"])
def test_lansy_frobenius(uplo, norm):
    result = lansy(norm, uplo, garbage_outside(uplo))
    assert float(result) == pytest.approx(np.linalg.norm(SYM, "fro"))


def test_lansy_numpy_object_array():
    a = np.array([[dd(v) for v in row] for row in SYM], dtype=object)
    assert float(lansy("F", "U", a)) == pytest.approx(np.linalg.norm(SYM, "fro"))


def test_lansy_empty_is_zero():
    assert lansy("M", "U", []) == 0


def test_lansy_non_square():
    with pytest.raises(ValueError):
        lansy("M", "U", [[1, 2, 3], [4, 5, 6]])


def test_lansy_bad_norm():
    with pytest.raises(IllegalArgumentError) as info:
        lansy("X", "U", [[1.0]])
    assert info.value.position == 1


@given(
    st.lists(
        st.floats(min_value=-1e3, max_value=1e3), min_size=9, max_size=9
    )
)
def test_lansy_upper_equals_lower(values):
    m = np.array(values).reshape(3, 3)
    sym = (m + m.T).tolist()
    for norm in ("M", "1", "F"):
        assert lansy(norm, "U", sym) == lansy(norm, "L", sym)