#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Conversion between intmatrix matrices and the numpy, scipy and sympy matrix types.

Only integral data is accepted. Shapes with exactly one zero extent cannot be
represented by a Matrix and raise InvalidDimensionsError.
"""

import logging
import numpy as np
from scipy import sparse
import sympy

from .names import COLS
from .errors import InvalidDimensionsError
from .integral import IntegralMath
from .matrix import Matrix, check_extents


def _numpy_dtype(matrix: Matrix):
    if matrix.dtype is int:
        return np.int64
    return matrix.dtype


def from_numpy(array: np.ndarray) -> Matrix:
    """
    Create a Matrix from a numpy array.

    A Fortran-ordered array is taken over column by column, so the matrix is
    stored by columns as well.

    Args:
        array: 2D array with an integer dtype

    Returns:
        Matrix with the same values and the array's scalar type as dtype
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise InvalidDimensionsError(None, None, f"expected a 2D array, got shape {array.shape}")
    if not IntegralMath.is_integral_type(array.dtype.type):
        raise TypeError(f"Cannot convert array of dtype {array.dtype} to an integral matrix")
    rows, cols = check_extents(*array.shape)
    dtype = array.dtype.type
    if array.flags.f_contiguous and not array.flags.c_contiguous:
        logging.debug(f"Adopting Fortran-ordered {rows}x{cols} array by columns.")
        return Matrix.from_rows(array.T.tolist(), dtype=dtype, rows_in_dim1=False)
    return Matrix.from_rows(array.tolist(), dtype=dtype)


def to_numpy(matrix: Matrix) -> np.ndarray:
    """
    Convert a Matrix to a dense numpy array.

    Matrices of Python ints become int64 arrays. If a value does not fit, an
    object array holding the Python ints is returned instead.

    Args:
        matrix: Matrix to convert

    Returns:
        Array of shape matrix.size(), Fortran-ordered if the matrix is stored by columns
    """
    rows, cols = matrix.size()
    values = [matrix.row(i) for i in range(rows)]
    order = 'F' if matrix.order == COLS else 'C'
    try:
        return np.array(values, dtype=_numpy_dtype(matrix), order=order).reshape((rows, cols))
    except OverflowError:
        logging.warning(f"Values of {rows}x{cols} matrix exceed {np.dtype(_numpy_dtype(matrix))}, "
                        "returning an object array.")
        return np.array(values, dtype=object, order=order).reshape((rows, cols))


def from_sparse(sparse_matrix) -> Matrix:
    """
    Create a Matrix from a scipy sparse matrix.

    Duplicate entries of COO input are summed up. The input is not modified.

    Args:
        sparse_matrix: Scipy sparse matrix with an integer dtype

    Returns:
        Matrix with the same values
    """
    if not sparse.issparse(sparse_matrix):
        raise TypeError(f"Expected a scipy sparse matrix, got {type(sparse_matrix).__name__}")
    if not IntegralMath.is_integral_type(sparse_matrix.dtype.type):
        raise TypeError(f"Cannot convert sparse matrix of dtype {sparse_matrix.dtype} to an integral matrix")
    rows, cols = sparse_matrix.shape
    coo = sparse.coo_matrix(sparse_matrix, copy=True)
    coo.sum_duplicates()
    matrix = Matrix(rows, cols, dtype=sparse_matrix.dtype.type)
    for i, j, v in zip(coo.row, coo.col, coo.data):
        matrix.set_element(int(i), int(j), v)
    return matrix


def to_sparse(matrix: Matrix) -> sparse.csr_matrix:
    """
    Convert a Matrix to a scipy CSR matrix.

    Raises:
        OverflowError: If a value does not fit into int64, scipy.sparse has no object dtype
    """
    if matrix.empty():
        return sparse.csr_matrix((0, 0), dtype=_numpy_dtype(matrix))
    array = to_numpy(matrix)
    if array.dtype == object:
        rows, cols = matrix.size()
        raise OverflowError(f"Values of {rows}x{cols} matrix exceed {np.dtype(_numpy_dtype(matrix))}, "
                            "which is the widest integer type scipy.sparse supports.")
    return sparse.csr_matrix(array)


def to_sympy(matrix: Matrix) -> sympy.Matrix:
    """Convert a Matrix to a sympy Matrix of Integers."""
    rows, cols = matrix.size()
    return sympy.Matrix(rows, cols, [sympy.Integer(int(value)) for _, _, value in matrix.cells()])


def from_sympy(smatrix) -> Matrix:
    """
    Create a Matrix from a sympy Matrix.

    Args:
        smatrix: sympy Matrix whose entries are all Integers

    Returns:
        Matrix of Python ints
    """
    check_extents(*smatrix.shape)
    values = smatrix.tolist()
    for line in values:
        for value in line:
            if not IntegralMath.is_integral(value):
                raise TypeError(f"Cannot convert sympy entry {value} to an integral value")
    return Matrix.from_rows(values, dtype=int)


__all__ = [
    "from_numpy",
    "to_numpy",
    "from_sparse",
    "to_sparse",
    "to_sympy",
    "from_sympy",
]
