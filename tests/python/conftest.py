"""
Pytest configuration and shared fixtures for numvec tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import numvec
from numvec.vector import VectorBase, VectorKind, VectorElement, DenseVector
from numvec._errors import VectorError, NUMVEC_ERROR_NOT_IMPLEMENTED


# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Sparse Test Double
# =============================================================================

class SparseTestVector(VectorBase):
    """
    Minimal dict-backed sparse vector.

    Only the surface DenseVector relies on is implemented. With
    ``strict=True`` any dense-style access (``get``/``to_array``) fails,
    proving an operation went through ``iterate_non_zero()`` only.
    """

    def __init__(self, dimension, entries=None, strict=False):
        self._dimension = dimension
        self._entries = {i: float(v) for i, v in (entries or {}).items() if v != 0.0}
        self._strict = strict
        self.non_zero_calls = 0

    @classmethod
    def from_dense(cls, values, strict=False):
        return cls(len(values), {i: v for i, v in enumerate(values)}, strict=strict)

    @property
    def kind(self):
        return VectorKind.SPARSE

    @property
    def length(self):
        return len(self._entries)

    @property
    def dimension(self):
        return self._dimension

    def get(self, index):
        if self._strict:
            raise AssertionError("dense access on a strict sparse vector")
        return self._entries.get(index, 0.0)

    def set(self, index, value):
        if value == 0.0:
            self._entries.pop(index, None)
        else:
            self._entries[index] = float(value)

    def iterate_non_zero(self):
        self.non_zero_calls += 1
        for index in sorted(self._entries):
            yield VectorElement(index, self._entries[index])

    def iterate(self):
        for index in range(self._dimension):
            yield VectorElement(index, self._entries.get(index, 0.0))

    def to_array(self):
        if self._strict:
            raise AssertionError("dense access on a strict sparse vector")
        data = np.zeros(self._dimension)
        for index, value in self._entries.items():
            data[index] = value
        return data

    def deep_copy(self):
        return SparseTestVector(self._dimension, dict(self._entries))

    def slice(self, start, end=None):
        if end is None:
            start, end = 0, start
        entries = {i - start: v for i, v in self._entries.items() if start <= i < end}
        return SparseTestVector(end - start, entries)

    def _unsupported(self, *args, **kwargs):
        raise VectorError(NUMVEC_ERROR_NOT_IMPLEMENTED, "test double")

    apply = add = subtract = subtract_from = multiply = _unsupported
    divide = divide_from = pow = abs = sqrt = log = exp = _unsupported
    sum = dot = max = min = max_index = min_index = _unsupported
    slice_by_length = _unsupported


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate configuration and environment between tests."""
    monkeypatch.delenv("NUMVEC_REPR_THRESHOLD", raising=False)
    numvec.reset_config()
    yield
    numvec.reset_config()


@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture
def sparse_factory():
    """Factory for sparse test vectors."""
    return SparseTestVector


@pytest.fixture
def small_dense():
    """Dense vector [0, 2, 0, 0, 7]."""
    return DenseVector([0.0, 2.0, 0.0, 0.0, 7.0])


@pytest.fixture
def small_sparse():
    """Sparse vector equal to [0, 3, 0, -1, 0]."""
    return SparseTestVector(5, {1: 3.0, 3: -1.0})


@pytest.fixture
def random_dense():
    """Dense vector of 100 standard normal values (seeded)."""
    rng = np.random.default_rng(42)
    return DenseVector(rng.standard_normal(100))


# =============================================================================
# Helper Functions
# =============================================================================

def assert_vector_close(actual, expected, rtol=1e-12, atol=1e-12):
    """Assert a vector's cells approximately equal ``expected``."""
    if hasattr(actual, 'to_array'):
        actual = actual.to_array()
    if hasattr(expected, 'to_array'):
        expected = expected.to_array()
    np.testing.assert_allclose(np.asarray(actual), np.asarray(expected), rtol=rtol, atol=atol)
