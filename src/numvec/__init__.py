"""
numvec - Numeric Vectors

Uniform numeric-vector abstraction for scientific code:
- One operation surface for dense, sparse, named and single-entry vectors
- numpy-backed dense reference implementation
- Sparse-aware arithmetic and dot products (operand-driven dispatch)
- Pluggable element-wise functions

Modules:
- vector: Vector types, function contracts and operations

Example:
    >>> import numvec
    >>> from numvec import DenseVector
    >>>
    >>> a = DenseVector([1.0, 2.0, 3.0])
    >>> b = DenseVector.ones(3)
    >>> (a + b).sum()
    9.0
    >>> a.dot(b)
    6.0
"""

__version__ = '0.1.0'

# Import main modules
from . import vector

from ._config import get_config, set_repr_threshold, reset_config
from ._errors import VectorError, VectorZeroDivisionError

# Re-export common types
from .vector import (
    # Core classes
    VectorBase,
    VectorKind,
    VectorElement,
    DenseVector,

    # Function contracts
    VectorFunction,
    BinaryVectorFunction,
    unary,
    binary,

    # Factories
    zeros,
    ones,
    from_up_to,

    # Cross-platform conversion
    from_numpy,
    to_numpy,
    from_scipy,
    to_scipy,
)

__all__ = [
    # Version
    '__version__',

    # Modules
    'vector',

    # Configuration
    'get_config',
    'set_repr_threshold',
    'reset_config',

    # Errors
    'VectorError',
    'VectorZeroDivisionError',

    # Core classes
    'VectorBase',
    'VectorKind',
    'VectorElement',
    'DenseVector',

    # Function contracts
    'VectorFunction',
    'BinaryVectorFunction',
    'unary',
    'binary',

    # Factories
    'zeros',
    'ones',
    'from_up_to',

    # Cross-platform conversion
    'from_numpy',
    'to_numpy',
    'from_scipy',
    'to_scipy',
]
