"""Test if package imports successfully."""

import pytest


def test1():
    import intmatrix
    m = intmatrix.Matrix(2, 2)
    m[0, 1] = 1
    assert (m * m).empty() is False
    assert intmatrix.COLS == 'cols'
    assert intmatrix.__version__ == "1.0"
