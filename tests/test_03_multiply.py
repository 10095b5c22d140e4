"""Test matrix-matrix and matrix-scalar multiplication."""
import logging
import pytest
import numpy as np
from intmatrix import Matrix, DisableLogger, IncompatibleDimensionsError

PRODUCT = [
    [5, 14, 23, 32],
    [14, 50, 86, 122],
    [23, 86, 149, 212],
    [32, 122, 212, 302],
]


def test_matrix_multiply(counting_matrix):
    m = counting_matrix
    with pytest.raises(IncompatibleDimensionsError):
        m * m
    n = m.transpose()
    p = m * n
    assert p.size() == (m.rows(), n.cols())
    #  0  1  2     0  3  6  9      5  14  23  32
    #  3  4  5  *  1  4  7 10  =  14  50  86 122
    #  6  7  8     2  5  8 11     23  86 149 212
    #  9 10 11                    32 122 212 302
    assert p == Matrix.from_rows(PRODUCT)


def test_matrix_multiply_forms(counting_matrix):
    n = counting_matrix.transpose()
    expected = Matrix.from_rows(PRODUCT)
    assert counting_matrix.multiply(n) == expected
    assert counting_matrix @ n == expected
    # operands are left alone
    assert counting_matrix.size() == (4, 3)
    assert n.size() == (3, 4)


def test_incompatible_dimensions_details(counting_matrix):
    before = counting_matrix.copy()
    with pytest.raises(IncompatibleDimensionsError) as excinfo:
        counting_matrix.multiply(counting_matrix)
    assert excinfo.value.lhs_size == (4, 3)
    assert excinfo.value.rhs_size == (4, 3)
    assert isinstance(excinfo.value, ValueError)
    assert counting_matrix == before


def test_compound_matrix_multiply(counting_matrix):
    m = counting_matrix.copy()
    same = m
    m *= counting_matrix.transpose()
    assert m is same
    assert m == Matrix.from_rows(PRODUCT)
    m @= Matrix.identity(4)
    assert m == Matrix.from_rows(PRODUCT)


def test_failed_compound_multiply_leaves_matrix(counting_matrix):
    m = counting_matrix.copy()
    with pytest.raises(IncompatibleDimensionsError):
        m *= counting_matrix
    assert m == counting_matrix


@pytest.mark.timeout(15)
def test_self_multiply(dtype, rng, random_matrix):
    for _ in range(20):
        rows, cols = (int(v) for v in rng.integers(1, 12, size=2))
        m = random_matrix(rows, cols, dtype)
        if rows == cols:
            assert (m * m).size() == (rows, rows)
        else:
            with pytest.raises(IncompatibleDimensionsError):
                m * m


def test_empty_times_empty():
    p = Matrix() * Matrix()
    assert p.empty()


def test_empty_times_nonempty():
    with pytest.raises(IncompatibleDimensionsError):
        Matrix() * Matrix(2, 2)


def test_identity_is_neutral(random_matrix):
    m = random_matrix(5, 7)
    assert Matrix.identity(5) * m == m
    assert m * Matrix.identity(7) == m


@pytest.mark.timeout(15)
def test_transpose_multiply_interchange(dtype, rng, random_matrix):
    for _ in range(20):
        rows, cols = (int(v) for v in rng.integers(1, 12, size=2))
        a = random_matrix(rows, cols, dtype)
        b = random_matrix(cols, rows, dtype)
        assert (a * b).transpose() == b.transpose() * a.transpose()


def test_product_matches_numpy(random_matrix):
    a = random_matrix(6, 4)
    b = random_matrix(4, 5)
    expected = np.array([a.row(i) for i in range(6)]) @ np.array([b.row(i) for i in range(4)])
    p = a * b
    for i, j, value in p.cells():
        assert value == expected[i, j]


def test_product_keeps_lhs_dtype(random_matrix):
    a = random_matrix(3, 3, np.int32)
    b = random_matrix(3, 3)
    assert (a * b).dtype is np.int32
    assert (b * a).dtype is int
    assert a * b == a.copy() * b.copy()


@pytest.mark.timeout(15)
def test_scalar_multiply(dtype, rng, random_matrix):
    m = random_matrix(4, 3, dtype)
    for s in (int(v) for v in rng.integers(-50, 50, size=10)):
        n = m * s
        for i, j, value in m.cells():
            assert n.at(i, j) == value * s
        assert s * m == n
        assert m.multiply(s) == n


def test_scalar_multiply_forms(counting_matrix):
    tripled = Matrix.from_rows([[3 * (i * 3 + j) for j in range(3)] for i in range(4)])
    assert counting_matrix * 3 == tripled
    assert 3 * counting_matrix == tripled
    assert np.int64(3) * counting_matrix == tripled
    assert counting_matrix * np.int8(3) == tripled
    m = counting_matrix.copy()
    same = m
    m *= 3
    assert m is same
    assert m == tripled


def test_scalar_multiply_transposed(counting_matrix):
    t = counting_matrix.transpose() * 2
    assert t.size() == (3, 4)
    assert t.at(2, 3) == 22


def test_scalar_multiply_empty():
    assert (Matrix() * 5).empty()


@pytest.mark.parametrize("scalar", [1.5, 2.0, True, "2"])
def test_non_integral_scalar(counting_matrix, scalar):
    with pytest.raises(TypeError):
        counting_matrix * scalar
    with pytest.raises(TypeError):
        counting_matrix.multiply(scalar)
    assert counting_matrix.at(3, 2) == 11


def test_matmul_rejects_scalar(counting_matrix):
    with pytest.raises(TypeError):
        counting_matrix @ 3


def test_multiply_logging(counting_matrix, caplog):
    with caplog.at_level(logging.DEBUG):
        counting_matrix * counting_matrix.transpose()
    assert "Multiplying 4x3 by 3x4 matrix." in caplog.text


def test_disable_logger(counting_matrix, caplog):
    with caplog.at_level(logging.DEBUG):
        with DisableLogger():
            counting_matrix * counting_matrix.transpose()
    assert caplog.records == []
