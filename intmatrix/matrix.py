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
Dense matrix container for integral element types.

The elements of a matrix are kept as a list of lines. Depending on the storage
order a line is either a row (ROWS) or a column (COLS) of the matrix. All
accessors translate the logical (row, col) index with the storage order, so a
transposed matrix is a copy of the lines with the order flipped. Elements are
never reordered.
"""

import logging
import operator
import numpy as np
from typing import Any, Callable, Generic, Iterator, List, Sequence, Tuple, TypeVar

from .names import ROWS, COLS
from .errors import InvalidDimensionsError, OutOfRangeError, IncompatibleDimensionsError
from .integral import IntegralMath

N = TypeVar('N')


def _as_index(value) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Matrix extents and indices must be integers, got {value!r}")
    return operator.index(value)


def check_extents(rows: int, cols: int) -> Tuple[int, int]:
    """
    Validate the extents of a matrix.

    Args:
        rows: Number of rows
        cols: Number of columns

    Returns:
        (rows, cols) as ints

    Raises:
        InvalidDimensionsError: If an extent is negative or exactly one of them is zero
    """
    rows, cols = _as_index(rows), _as_index(cols)
    if rows < 0 or cols < 0:
        raise InvalidDimensionsError(rows, cols, "negative extent")
    if (rows == 0) != (cols == 0):
        raise InvalidDimensionsError(rows, cols)
    return rows, cols


class Matrix(Generic[N]):
    """
    Dense two-dimensional matrix over an integral element type.

    A matrix is either empty (0x0) or has at least one row and one column.
    Elements are zero-initialized and always stored as instances of the
    element type (dtype). Copies are independent, take() moves the storage
    into a new matrix and leaves the source empty.

    Access comes in two flavours: element()/set_element() skip all bounds
    checks, at()/set_at() and subscription raise OutOfRangeError.

    Example:
        >>> m = Matrix.from_rows([[0, 1, 2], [3, 4, 5]])
        >>> (m * m.transpose()).at(1, 1)
        50
    """

    # numpy defers binary operators to the matrix, e.g. numpy.int64(3) * m
    __array_ufunc__ = None

    def __init__(self, rows: int = 0, cols: int = 0, dtype: type = int):
        """
        Initialize a zero matrix.

        Args:
            rows: Number of rows
            cols: Number of columns
            dtype: Integral element type (int or a numpy integer type)
        """
        self._dtype = IntegralMath.check_type(dtype)
        rows, cols = check_extents(rows, cols)
        zero = IntegralMath.zero(dtype)
        self._elements: List[List[N]] = [[zero] * cols for _ in range(rows)]
        self._order = ROWS

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[Any]], dtype: type = None, rows_in_dim1: bool = True) -> 'Matrix':
        """
        Create a matrix from nested sequences.

        Args:
            data: 2D data, data[i][j] is row i, column j
            dtype: Element type, inferred from the first value if omitted
            rows_in_dim1: If False, data[i][j] is column i, row j. The matrix
                then keeps the columns as they are and is stored by columns.

        Returns:
            Matrix holding a copy of data
        """
        lines = [list(line) for line in data]
        outer = len(lines)
        inner = len(lines[0]) if outer else 0
        if any(len(line) != inner for line in lines):
            raise InvalidDimensionsError(outer, inner, "lines of different length")
        check_extents(outer, inner)
        if dtype is None:
            dtype = IntegralMath.infer_dtype(lines[0][0]) if outer else int
        result = cls(0, 0, dtype)
        result._elements = [[IntegralMath.to_element(value, dtype) for value in line] for line in lines]
        result._order = ROWS if rows_in_dim1 else COLS
        return result

    @classmethod
    def identity(cls, n: int, dtype: type = int) -> 'Matrix':
        """Create the n x n identity matrix."""
        result = cls(n, n, dtype)
        one = IntegralMath.to_element(1, dtype)
        for i in range(n):
            result._elements[i][i] = one
        return result

    @classmethod
    def from_numpy(cls, array) -> 'Matrix':
        """Create a matrix from a 2D integer numpy array (see conversion.from_numpy)."""
        from .conversion import from_numpy
        return from_numpy(array)

    @classmethod
    def from_sparse(cls, sparse_matrix) -> 'Matrix':
        """Create a matrix from a scipy sparse matrix (see conversion.from_sparse)."""
        from .conversion import from_sparse
        return from_sparse(sparse_matrix)

    @classmethod
    def from_sympy(cls, smatrix) -> 'Matrix':
        """Create a matrix from a sympy Matrix of Integers (see conversion.from_sympy)."""
        from .conversion import from_sympy
        return from_sympy(smatrix)

    def to_numpy(self):
        from .conversion import to_numpy
        return to_numpy(self)

    def to_sparse(self):
        from .conversion import to_sparse
        return to_sparse(self)

    def to_sympy(self):
        from .conversion import to_sympy
        return to_sympy(self)

    # Copy and move
    def copy(self) -> 'Matrix[N]':
        """Create a deep copy of this matrix"""
        result = type(self).__new__(type(self))
        result._dtype = self._dtype
        result._elements = [list(line) for line in self._elements]
        result._order = self._order
        return result

    def __copy__(self) -> 'Matrix[N]':
        return self.copy()

    def __deepcopy__(self, memo) -> 'Matrix[N]':
        return self.copy()

    def assign(self, other: 'Matrix') -> 'Matrix[N]':
        """Replace the contents of this matrix with a copy of other."""
        if other is not self:
            self._dtype = other._dtype
            self._elements = [list(line) for line in other._elements]
            self._order = other._order
        return self

    def assign_from(self, other: 'Matrix') -> 'Matrix[N]':
        """Move the storage of other into this matrix, other is left empty."""
        if other is not self:
            self._dtype = other._dtype
            self._elements = other._elements
            self._order = other._order
            other.clear()
        return self

    def take(self) -> 'Matrix[N]':
        """Move the storage of this matrix into a new matrix and leave this one empty."""
        result = type(self).__new__(type(self))
        result._dtype = self._dtype
        result._elements = self._elements
        result._order = self._order
        self.clear()
        return result

    # Shape
    @property
    def dtype(self) -> type:
        """Element type"""
        return self._dtype

    @property
    def order(self) -> str:
        """Storage order of the backing lines, ROWS or COLS"""
        return self._order

    def size(self) -> Tuple[int, int]:
        """Get (rows, cols)"""
        outer = len(self._elements)
        inner = len(self._elements[0]) if outer else 0
        if self._order == ROWS:
            return outer, inner
        return inner, outer

    def rows(self) -> int:
        """Get number of rows"""
        return self.size()[0]

    def cols(self) -> int:
        """Get number of columns"""
        return self.size()[1]

    def empty(self) -> bool:
        return self.rows() == 0

    def clear(self) -> None:
        """Reset to the empty 0x0 matrix, keeping the element type."""
        self._elements = []
        self._order = ROWS

    # Element access
    def element(self, row: int, col: int) -> N:
        """Get value at (row, col) without bounds checking"""
        if self._order == COLS:
            row, col = col, row
        return self._elements[row][col]

    def set_element(self, row: int, col: int, value: Any) -> None:
        """Set value at (row, col) without bounds checking"""
        value = IntegralMath.to_element(value, self._dtype)
        if self._order == COLS:
            row, col = col, row
        self._elements[row][col] = value

    def _check_index(self, row: int, col: int) -> Tuple[int, int]:
        rows, cols = self.size()
        row, col = _as_index(row), _as_index(col)
        if not (0 <= row < rows and 0 <= col < cols):
            raise OutOfRangeError(row, col, (rows, cols))
        return row, col

    def at(self, row: int, col: int) -> N:
        """
        Get value at (row, col).

        Raises:
            OutOfRangeError: If row >= rows() or col >= cols() (or either is negative)
        """
        row, col = self._check_index(row, col)
        return self.element(row, col)

    def set_at(self, row: int, col: int, value: Any) -> None:
        """
        Set value at (row, col).

        Raises:
            OutOfRangeError: If row >= rows() or col >= cols() (or either is negative)
            TypeError: If value is not integral
        """
        row, col = self._check_index(row, col)
        self.set_element(row, col, value)

    @staticmethod
    def _split_index(index) -> Tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(f"Matrix indices must be (row, col) pairs, got {index!r}")
        return index

    def __getitem__(self, index) -> N:
        return self.at(*self._split_index(index))

    def __setitem__(self, index, value) -> None:
        self.set_at(*self._split_index(index), value)

    def row(self, row: int) -> List[N]:
        """Get a row as a list"""
        row, _ = self._check_index(row, 0)
        return [self.element(row, col) for col in range(self.cols())]

    def column(self, col: int) -> List[N]:
        """Get a column as a list"""
        _, col = self._check_index(0, col)
        return [self.element(row, col) for row in range(self.rows())]

    # Transposition
    def transpose(self) -> 'Matrix[N]':
        """
        Return the transposed matrix.

        The lines are copied as they are and only the storage order of the
        copy is flipped.
        """
        result = self.copy()
        result._order = COLS if self._order == ROWS else ROWS
        return result

    @property
    def T(self) -> 'Matrix[N]':
        return self.transpose()

    # Multiplication
    def multiply(self, rhs) -> 'Matrix':
        """
        Multiply this matrix by another matrix or by an integral scalar.

        Neither operand is modified.

        Args:
            rhs: Matrix with rows() == self.cols(), or an integral scalar

        Returns:
            New matrix holding the product

        Raises:
            IncompatibleDimensionsError: If self.cols() != rhs.rows()
            TypeError: If rhs is neither a matrix nor an integral value
        """
        if isinstance(rhs, Matrix):
            return self._multiply_matrix(rhs)
        result = self.copy()
        result._scale(rhs)
        return result

    def _multiply_matrix(self, rhs: 'Matrix') -> 'Matrix':
        m, p = self.size()
        rhs_rows, n = rhs.size()
        if p != rhs_rows:
            raise IncompatibleDimensionsError((m, p), (rhs_rows, n))
        logging.debug(f"Multiplying {m}x{p} by {rhs_rows}x{n} matrix.")
        result = Matrix(m, n, self._dtype)
        zero = IntegralMath.zero(self._dtype)
        for i in range(m):
            for j in range(n):
                total = zero
                for k in range(p):
                    total += self.element(i, k) * rhs.element(k, j)
                result.set_element(i, j, total)
        return result

    def _scale(self, scalar) -> None:
        if not IntegralMath.is_integral(scalar):
            raise TypeError(f"Cannot multiply an integral matrix by {type(scalar).__name__}")
        # new lines are complete before they replace the old ones
        self._elements = [[IntegralMath.to_element(value * scalar, self._dtype) for value in line]
                          for line in self._elements]

    def __mul__(self, rhs):
        if isinstance(rhs, Matrix) or IntegralMath.is_integral(rhs):
            return self.multiply(rhs)
        return NotImplemented

    def __rmul__(self, lhs):
        if IntegralMath.is_integral(lhs):
            return self.multiply(lhs)
        return NotImplemented

    def __imul__(self, rhs):
        if isinstance(rhs, Matrix):
            product = self._multiply_matrix(rhs)
            self._elements, self._order = product._elements, product._order
        elif IntegralMath.is_integral(rhs):
            self._scale(rhs)
        else:
            return NotImplemented
        return self

    def __matmul__(self, rhs):
        if isinstance(rhs, Matrix):
            return self._multiply_matrix(rhs)
        return NotImplemented

    def __imatmul__(self, rhs):
        if isinstance(rhs, Matrix):
            return self.__imul__(rhs)
        return NotImplemented

    # Comparison
    def equals(self, other: 'Matrix') -> bool:
        """
        Element-wise equality.

        Matrices are equal if they have the same size and all elements
        compare equal. Element types and storage orders are not compared.
        """
        if not isinstance(other, Matrix):
            return False
        size = self.size()
        if size != other.size():
            return False
        return self._foreach_until(lambda row, col, value: value == other.element(row, col)) == size

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    # Traversal
    def _foreach_until(self, visitor: Callable[[int, int, N], bool]) -> Tuple[int, int]:
        """
        Visit elements in row-major order until visitor returns a false value.

        Returns:
            Position of the element that stopped the traversal, or size() if
            all elements were visited
        """
        rows, cols = self.size()
        for row in range(rows):
            for col in range(cols):
                if not visitor(row, col, self.element(row, col)):
                    return row, col
        return rows, cols

    def foreach(self, visitor: Callable[[int, int, N], Any]) -> None:
        """
        Call visitor(row, col, value) for every element in row-major order.

        Return values of visitor are ignored.
        """

        def visit(row, col, value):
            visitor(row, col, value)
            return True

        self._foreach_until(visit)

    def transform(self, mutator: Callable[[int, int, N], Any]) -> None:
        """
        Replace every element by mutator(row, col, value), in row-major order.

        Each result is stored right after the call for that position.
        """
        rows, cols = self.size()
        for row in range(rows):
            for col in range(cols):
                self.set_element(row, col, mutator(row, col, self.element(row, col)))

    def cells(self) -> Iterator[Tuple[int, int, N]]:
        """Yield (row, col, value) triples in row-major order."""
        rows, cols = self.size()
        for row in range(rows):
            for col in range(cols):
                yield row, col, self.element(row, col)

    # String representation
    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", ",", "", "", ", ")

    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        return self._matrix_to_string("{\n", "}\n", " [", "]\n", "", " ", " ", ",")

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str, row_postfix: str, row_separator: str,
                          col_prefix: str, col_postfix: str, col_separator: str) -> str:
        result = [prefix]
        rows, cols = self.size()
        for row in range(rows):
            if row > 0:
                result.append(row_separator)
            result.append(row_prefix)
            for col in range(cols):
                if col > 0:
                    result.append(col_separator)
                result.append(col_prefix)
                result.append(str(self.element(row, col)))
                result.append(col_postfix)
            result.append(row_postfix)
        result.append(postfix)
        return ''.join(result)

    def __repr__(self) -> str:
        rows, cols = self.size()
        return f"Matrix({rows}x{cols}, dtype={self._dtype.__name__})"


__all__ = [
    "Matrix",
    "check_extents",
]
