import pytest
import numpy as np
from intmatrix import Matrix

# Element types every property test runs with
dtypes = [int, np.int64, np.int32]


@pytest.fixture(params=dtypes, scope="session")
def dtype(request: pytest.FixtureRequest) -> type:
    """Provide session-level fixture for parametrized element types."""
    return request.param


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random generator so randomized tests are reproducible."""
    return np.random.default_rng(4711)


@pytest.fixture
def random_matrix(rng):
    """Provide a factory for randomly filled matrices.

    Values are kept small so products of matrices with up to 12 columns stay
    within int32.
    """

    def make(rows: int, cols: int, dtype: type = int) -> Matrix:
        m = Matrix(rows, cols, dtype)
        values = rng.integers(-100, 100, size=(rows, cols))
        m.transform(lambda i, j, _: values[i, j])
        return m

    return make


@pytest.fixture
def counting_matrix():
    """4x3 matrix with m(i, j) = i * 3 + j."""
    m = Matrix(4, 3)
    m.transform(lambda i, j, _: i * 3 + j)
    return m
