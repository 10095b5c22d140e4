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
Integral element handling for intmatrix.

Matrices only hold integral values. This module decides which element types
are acceptable and converts incoming values to the element type of a matrix.
Accepted values are Python ints, numpy integer scalars and sympy Integers;
booleans and anything fractional are rejected instead of being truncated.
"""

from typing import Any, Union
import numpy as np
from sympy import Integer

# Type alias for values that can be stored in a matrix
Integral = Union[int, np.integer, Integer]

# Abstract numpy classes cannot be instantiated
_ABSTRACT_NUMPY_TYPES = (np.integer, np.signedinteger, np.unsignedinteger)

# Integer-backed types without integral semantics
_NON_INTEGRAL_TYPES = (bool, np.bool_, np.timedelta64)


class IntegralMath:
    """Utility class for integral element types and values."""

    @staticmethod
    def is_integral_type(dtype: Any) -> bool:
        """
        Check whether dtype can be used as matrix element type.

        Args:
            dtype: A type object such as int or numpy.int32

        Returns:
            True for int and concrete numpy integer types, False otherwise
        """
        if not isinstance(dtype, type):
            return False
        if issubclass(dtype, _NON_INTEGRAL_TYPES) or dtype in _ABSTRACT_NUMPY_TYPES:
            return False
        return issubclass(dtype, (int, np.integer))

    @staticmethod
    def is_integral(value: Any) -> bool:
        """
        Check whether value has integral semantics.

        Args:
            value: Value to check

        Returns:
            True for ints, numpy integer scalars and sympy Integers
        """
        if isinstance(value, _NON_INTEGRAL_TYPES):
            return False
        return isinstance(value, (int, np.integer, Integer))

    @staticmethod
    def check_type(dtype: Any) -> type:
        """Return dtype unchanged or raise TypeError if it is not an integral type."""
        if not IntegralMath.is_integral_type(dtype):
            raise TypeError(f"Matrix element type must be integral, got {dtype!r}")
        return dtype

    @staticmethod
    def zero(dtype: type) -> Integral:
        """Zero value of the element type."""
        return dtype(0)

    @staticmethod
    def to_element(value: Any, dtype: type) -> Integral:
        """
        Convert a value to the element type of a matrix.

        Args:
            value: An int, numpy integer or sympy Integer
            dtype: Element type of the target matrix

        Returns:
            value as an instance of dtype

        Raises:
            TypeError: If value is not integral (floats are never truncated)
            OverflowError: If value does not fit into a fixed-width numpy type
        """
        if not IntegralMath.is_integral(value):
            raise TypeError(f"Cannot store {type(value).__name__} value {value!r} in an integral matrix")
        if type(value) is dtype:
            return value
        return dtype(int(value))

    @staticmethod
    def infer_dtype(value: Any) -> type:
        """
        Element type matching a sample value.

        numpy integer scalars keep their own type, every other integral value
        maps to int.
        """
        if not IntegralMath.is_integral(value):
            raise TypeError(f"Cannot infer an integral element type from {type(value).__name__}")
        if isinstance(value, np.integer):
            return type(value)
        return int


__all__ = [
    "Integral",
    "IntegralMath",
]
