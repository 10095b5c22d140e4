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
"""Exceptions raised by intmatrix

All errors derive from MatrixError. Each concrete error additionally derives
from the builtin exception a caller would expect (ValueError, IndexError), so
generic handlers keep working.
"""

from typing import Tuple


class MatrixError(Exception):
    """Base class for all matrix errors."""


class InvalidDimensionsError(MatrixError, ValueError):
    """Raised when a matrix would have an invalid shape.

    A matrix is either empty (0x0) or has at least one row and one column.
    Negative extents and jagged input data are rejected as well.
    """

    def __init__(self, rows, cols, reason: str = None):
        self.rows = rows
        self.cols = cols
        if reason is None:
            reason = "exactly one of rows and columns is zero"
        if rows is None:
            super().__init__(f"Invalid matrix dimensions: {reason}")
        else:
            super().__init__(f"Invalid matrix dimensions {rows}x{cols}: {reason}")


class OutOfRangeError(MatrixError, IndexError):
    """Raised by checked element access with an index outside the matrix."""

    def __init__(self, row: int, col: int, size: Tuple[int, int]):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(f"Index ({row}, {col}) out of range for {size[0]}x{size[1]} matrix")


class IncompatibleDimensionsError(MatrixError, ValueError):
    """Raised when the column count of the left operand does not match the row count of the right operand."""

    def __init__(self, lhs_size: Tuple[int, int], rhs_size: Tuple[int, int]):
        self.lhs_size = lhs_size
        self.rhs_size = rhs_size
        super().__init__(f"Matrix dimensions incompatible: {lhs_size[0]}x{lhs_size[1]} * "
                         f"{rhs_size[0]}x{rhs_size[1]}")


__all__ = [
    "MatrixError",
    "InvalidDimensionsError",
    "OutOfRangeError",
    "IncompatibleDimensionsError",
]
