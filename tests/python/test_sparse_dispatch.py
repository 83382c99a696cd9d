"""
Tests for sparse-operand dispatch in DenseVector.

Binary operations must reach a sparse operand only through
iterate_non_zero(); the strict test double fails on any get()/to_array().
"""

import pytest
import numpy as np

from numvec import VectorZeroDivisionError
from numvec.vector import DenseVector

from conftest import SparseTestVector, assert_vector_close


@pytest.fixture
def receiver():
    return DenseVector([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def strict_sparse():
    """Strict sparse vector equal to [0, 3, 0, -1, 0]."""
    return SparseTestVector(5, {1: 3.0, 3: -1.0}, strict=True)


@pytest.fixture
def dense_twin():
    return DenseVector([0.0, 3.0, 0.0, -1.0, 0.0])


class TestSparseArithmetic:
    """Test arithmetic against a sparse operand."""

    def test_add(self, receiver, strict_sparse, dense_twin):
        """Test add visits non-zero cells only and matches the dense path."""
        result = receiver.add(strict_sparse)
        assert result == receiver.add(dense_twin)
        assert result.to_array().tolist() == [1.0, 5.0, 3.0, 3.0, 5.0]
        assert strict_sparse.non_zero_calls == 1

    def test_subtract(self, receiver, strict_sparse, dense_twin):
        result = receiver.subtract(strict_sparse)
        assert result == receiver.subtract(dense_twin)
        assert result.to_array().tolist() == [1.0, -1.0, 3.0, 5.0, 5.0]

    def test_subtract_from(self, receiver, strict_sparse, dense_twin):
        """Test other - self with a sparse other."""
        result = receiver.subtract_from(strict_sparse)
        assert result == receiver.subtract_from(dense_twin)
        assert result.to_array().tolist() == [-1.0, 1.0, -3.0, -5.0, -5.0]

    def test_multiply(self, receiver, strict_sparse, dense_twin):
        """Test cells the operand does not store multiply to zero."""
        result = receiver.multiply(strict_sparse)
        assert result == receiver.multiply(dense_twin)
        assert result.to_array().tolist() == [0.0, 6.0, 0.0, -4.0, 0.0]

    def test_divide_from(self, receiver, strict_sparse, dense_twin):
        """Test other / self with a sparse other."""
        result = receiver.divide_from(strict_sparse)
        assert_vector_close(result, receiver.divide_from(dense_twin))
        assert_vector_close(result, [0.0, 1.5, 0.0, -0.25, 0.0])

    def test_divide_from_keeps_nan_receiver_cells(self, strict_sparse):
        """Test a NaN cell the operand does not store stays NaN, as on the dense path."""
        receiver = DenseVector([np.nan, 2.0, 3.0, 4.0, 5.0])
        dense = DenseVector([0.0, 3.0, 0.0, -1.0, 0.0])
        result = receiver.divide_from(strict_sparse)
        np.testing.assert_array_equal(result.to_array(), receiver.divide_from(dense).to_array())
        assert np.isnan(result.get(0))
        assert result.get(1) == 1.5

    def test_divide_by_sparse_hits_implicit_zero(self, receiver, small_sparse):
        """Test implicit zeros of a sparse divisor are divisors too."""
        with pytest.raises(VectorZeroDivisionError):
            receiver.divide(small_sparse)

    def test_divide_by_full_sparse(self, receiver):
        """Test dividing by a sparse vector with no implicit zeros."""
        sparse = SparseTestVector.from_dense([1.0, 2.0, 3.0, 4.0, 5.0], strict=True)
        assert receiver.divide(sparse).to_array().tolist() == [1.0] * 5

    def test_receiver_unchanged(self, receiver, strict_sparse):
        before = receiver.to_array().copy()
        receiver.add(strict_sparse)
        receiver.multiply(strict_sparse)
        np.testing.assert_array_equal(receiver.to_array(), before)


class TestSparseDot:
    """Test dot-product dispatch equivalence."""

    def test_dot_matches_dense(self, receiver, strict_sparse, dense_twin):
        """Test the sparse path equals the dense path."""
        assert receiver.dot(strict_sparse) == receiver.dot(dense_twin)
        assert receiver.dot(strict_sparse) == 2.0

    def test_dot_random(self):
        """Test equivalence on a larger random vector."""
        rng = np.random.default_rng(7)
        a = DenseVector(rng.standard_normal(200))
        values = rng.standard_normal(200)
        values[rng.random(200) < 0.8] = 0.0
        sparse = SparseTestVector.from_dense(values.tolist(), strict=True)
        assert a.dot(sparse) == pytest.approx(a.dot(DenseVector(values)))

    def test_dot_empty_sparse(self, receiver):
        assert receiver.dot(SparseTestVector(5, strict=True)) == 0.0


class TestDimensionContract:
    """Test length vs dimension cooperation."""

    def test_sparse_length_below_dimension(self, strict_sparse):
        assert strict_sparse.length == 2
        assert strict_sparse.dimension == 5
        assert strict_sparse.is_sparse

    def test_dense_from_sparse_uses_dimension(self, strict_sparse):
        """Test materialisation allocates dimension cells, not length."""
        v = DenseVector(strict_sparse)
        assert v.length == strict_sparse.dimension

    def test_apply_binary_with_sparse(self, receiver, small_sparse):
        """Test apply reads the other vector's logical values."""
        from numvec.vector import binary
        result = receiver.apply(binary(lambda i, left, right: left * 10 + right), small_sparse)
        assert result.to_array().tolist() == [10.0, 23.0, 30.0, 39.0, 50.0]

    def test_len_is_dimension(self, small_sparse):
        """Test len() agrees with iteration, which walks every logical cell."""
        assert small_sparse.length == 2
        assert len(small_sparse) == small_sparse.dimension == 5
        assert len(small_sparse) == len(list(small_sparse))
        assert list(small_sparse) == [0.0, 3.0, 0.0, -1.0, 0.0]

    def test_python_slice_spans_dimension(self, small_sparse):
        """Test v[a:b] bounds are normalised against the dimension."""
        full = small_sparse[0:5]
        assert full.dimension == 5
        assert list(full) == [0.0, 3.0, 0.0, -1.0, 0.0]
        assert small_sparse[:].dimension == 5
        assert list(small_sparse[2:]) == [0.0, -1.0, 0.0]
        assert list(small_sparse[-2:]) == [-1.0, 0.0]
