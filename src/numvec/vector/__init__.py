"""numvec Vector Module.

This module provides the vector abstraction: one operation surface shared
by dense, sparse, named and single-entry vectors, plus the dense
reference implementation.

Type Hierarchy:

    VectorBase (ABC)
    └── DenseVector               # Contiguous float64 storage

    VectorFunction (ABC)          # f(index, value)
    BinaryVectorFunction (ABC)    # f(index, left, right)

Quick Start:
    >>> from numvec.vector import DenseVector, unary
    >>>
    >>> a = DenseVector([3.0, 5.0, 5.0, 1.0])
    >>> a.max_index()
    1
    >>> a.apply(unary(lambda i, v: v * i)).to_array().tolist()
    [0.0, 5.0, 10.0, 3.0]

Iteration:
    - iterate():          every cell, zeros included
    - iterate_non_zero(): cells whose value is not exactly 0.0

Sparse Cooperation:
    Any object implementing VectorBase with ``kind = VectorKind.SPARSE`` is
    accepted as an operand. DenseVector only touches it through
    ``iterate_non_zero()``, ``dimension`` and ``get()``.

Key Functions:
    - from_numpy, to_numpy: numpy interop
    - from_scipy, to_scipy: scipy.sparse interop
    - concatenate, distance
"""

# =============================================================================
# Core Types
# =============================================================================
from ._element import VectorElement
from ._base import VectorBase, VectorKind
from ._functions import (
    VectorFunction,
    BinaryVectorFunction,
    CallableVectorFunction,
    CallableBinaryVectorFunction,
    unary,
    binary,
)
from ._dense import DenseVector

# =============================================================================
# Operations
# =============================================================================
from ._ops import (
    from_numpy,
    to_numpy,
    from_scipy,
    to_scipy,
    concatenate,
    distance,
)

# =============================================================================
# Convenience Factories
# =============================================================================
zeros = DenseVector.zeros
ones = DenseVector.ones
from_up_to = DenseVector.from_up_to

__all__ = [
    # Core types
    'VectorElement',
    'VectorBase',
    'VectorKind',
    'DenseVector',

    # Function contracts
    'VectorFunction',
    'BinaryVectorFunction',
    'CallableVectorFunction',
    'CallableBinaryVectorFunction',
    'unary',
    'binary',

    # Factories
    'zeros',
    'ones',
    'from_up_to',

    # Operations
    'from_numpy',
    'to_numpy',
    'from_scipy',
    'to_scipy',
    'concatenate',
    'distance',
]
