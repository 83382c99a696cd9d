"""High-Level Vector Operations.

This module provides functional helpers built on the vector primitives:
- Cross-platform conversions (numpy, scipy.sparse)
- Concatenation
- Distances

All helpers accept any ``VectorBase`` and never mutate their inputs.

Example:
    >>> from numvec.vector import DenseVector, to_scipy, distance
    >>>
    >>> v = DenseVector([0.0, 3.0, 0.0, 4.0])
    >>> to_scipy(v).nnz
    2
    >>> distance(v, DenseVector.zeros(4))
    5.0
"""

from __future__ import annotations

import logging
import math
from typing import Any, List

import numpy as np

from .._errors import VectorError, NUMVEC_ERROR_INVALID_ARGUMENT
from ._base import VectorBase
from ._dense import DenseVector, _gather_non_zero, _materialize

logger = logging.getLogger("numvec.ops")

__all__ = [
    # Cross-platform
    'from_numpy',
    'to_numpy',
    'from_scipy',
    'to_scipy',

    # Combination
    'concatenate',
    'distance',
]


# =============================================================================
# Cross-Platform Conversions
# =============================================================================

def from_numpy(array: Any) -> DenseVector:
    """Create a DenseVector from a numpy array (copied, flattened)."""
    return DenseVector(np.ravel(np.asarray(array, dtype=np.float64)))


def to_numpy(vector: VectorBase) -> np.ndarray:
    """
    Independent float64 array of ``vector.dimension`` cells.

    Sparse vectors are materialised through their non-zero traversal.
    Unlike ``DenseVector.to_array()`` the result never aliases the vector.
    """
    return _materialize(vector)


def from_scipy(matrix: Any) -> DenseVector:
    """Create a DenseVector from a 1xN or Nx1 scipy sparse matrix.

    Args:
        matrix: ``scipy.sparse`` matrix or array with one row or one column.

    Raises:
        VectorError: If the matrix is not row- or column-shaped.
    """
    rows, cols = matrix.shape
    if rows != 1 and cols != 1:
        raise VectorError(
            NUMVEC_ERROR_INVALID_ARGUMENT,
            f"Expected a 1xN or Nx1 matrix, got {rows}x{cols}",
        )
    logger.debug(f"from_scipy: {rows}x{cols}, nnz={matrix.nnz}")
    return DenseVector(np.ravel(matrix.toarray()))


def to_scipy(vector: VectorBase):
    """Convert to a 1xN ``scipy.sparse.csr_matrix`` of the non-zero cells.

    Requires scipy (imported lazily).
    """
    import scipy.sparse as sp

    indices, values = _gather_non_zero(vector)
    logger.debug(f"to_scipy: dimension={vector.dimension}, nnz={len(values)}")
    rows = np.zeros(len(indices), dtype=np.intp)
    return sp.csr_matrix(
        (values, (rows, indices)),
        shape=(1, vector.dimension),
    )


# =============================================================================
# Combination
# =============================================================================

def concatenate(vectors: List[VectorBase]) -> DenseVector:
    """Join vectors end to end into one dense vector.

    Example:
        >>> concatenate([DenseVector([1, 2]), DenseVector([3])]).to_array().tolist()
        [1.0, 2.0, 3.0]
    """
    if len(vectors) == 0:
        return DenseVector.zeros(0)
    return DenseVector._wrap(np.concatenate([_materialize(v) for v in vectors]))


def distance(a: VectorBase, b: VectorBase) -> float:
    """Euclidean distance between two vectors of equal dimension."""
    return math.sqrt(a.subtract(b).pow(2).sum())
