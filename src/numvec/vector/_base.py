"""
Vector Base Classes

This module defines the abstract base class every numvec vector implements.
It establishes one operation surface (arithmetic, reductions, slicing,
iteration, capability flags) so dense, sparse, named and single-entry
vectors can be combined interchangeably.

Type Hierarchy:

    VectorBase (ABC)
    ├── DenseVector      kind = DENSE   contiguous float64 storage
    ├── <sparse>         kind = SPARSE  external, consumed via iterate_non_zero()
    ├── <named>          kind = NAMED   external, exposes name
    └── <single entry>   kind = SINGLE  external

Design Philosophy:

1. Closed Variants: Every vector reports exactly one ``VectorKind``. Binary
   operations switch on the operand's kind instead of inspecting its class.

2. Length vs Dimension: ``length`` is the number of stored cells,
   ``dimension`` the logical size. They differ only for sparse vectors,
   where unset indices are implicit zeros.

3. Fresh Results: Every arithmetic/transform method returns a new vector.
   ``set`` is the only in-place mutator.

4. No Hidden Validation: Indices and dimensions are the caller's
   responsibility. Violations surface as numpy's own errors.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, Optional, Union, TYPE_CHECKING

import numpy as np

from .._errors import VectorError, NUMVEC_ERROR_NOT_IMPLEMENTED
from ._element import VectorElement

if TYPE_CHECKING:
    from ._functions import VectorFunction, BinaryVectorFunction

__all__ = [
    'VectorKind',
    'VectorBase',
    'Operand',
]


class VectorKind(Enum):
    """Closed set of vector variants."""
    DENSE = 'dense'
    SPARSE = 'sparse'
    NAMED = 'named'
    SINGLE = 'single'

    def __str__(self) -> str:
        return self.value


Operand = Union['VectorBase', float]


class VectorBase(ABC):
    """
    Abstract base class for all vectors.

    Required Properties (subclasses must implement):
        kind: The variant tag
        length: Number of stored cells, O(1)
        dimension: Logical size, ``dimension >= length``

    Required Methods (subclasses must implement):
        get/set, apply, the arithmetic family, reductions, slicing,
        to_array, deep_copy, iterate, iterate_non_zero

    Arithmetic methods accept either a scalar (broadcast) or another
    vector (element-wise). When the operand is a vector whose kind is
    SPARSE, implementations only visit the operand's non-zero cells.
    """

    __slots__ = ()

    # numpy scalars must defer to our reflected operators
    __array_ufunc__ = None

    # =========================================================================
    # Abstract Properties
    # =========================================================================

    @property
    @abstractmethod
    def kind(self) -> VectorKind:
        """Variant tag."""
        ...

    @property
    @abstractmethod
    def length(self) -> int:
        """Number of stored cells (not the dimension)."""
        ...

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Logical size of the vector."""
        ...

    # =========================================================================
    # Capability Flags
    # =========================================================================

    @property
    def is_sparse(self) -> bool:
        return self.kind is VectorKind.SPARSE

    @property
    def is_named(self) -> bool:
        return self.kind is VectorKind.NAMED

    @property
    def is_single(self) -> bool:
        return self.kind is VectorKind.SINGLE

    @property
    def name(self) -> Optional[str]:
        """Name of a named vector, ``None`` for every other kind."""
        return None

    # =========================================================================
    # Abstract Methods - Element Access
    # =========================================================================

    @abstractmethod
    def get(self, index: int) -> float:
        """Value at ``index``."""
        ...

    @abstractmethod
    def set(self, index: int, value: float) -> None:
        """Set the value at ``index`` in place."""
        ...

    @abstractmethod
    def apply(
        self,
        func: Union['VectorFunction', 'BinaryVectorFunction'],
        other: Optional['VectorBase'] = None,
    ) -> 'VectorBase':
        """
        Apply an element-wise function and return a new vector.

        Args:
            func: ``VectorFunction`` when ``other`` is None, otherwise a
                ``BinaryVectorFunction`` receiving ``(index, self[i], other[i])``
            other: Vector of the same dimension
        """
        ...

    # =========================================================================
    # Abstract Methods - Arithmetic
    # =========================================================================

    @abstractmethod
    def add(self, other: Operand) -> 'VectorBase':
        ...

    @abstractmethod
    def subtract(self, other: Operand) -> 'VectorBase':
        """``self - other``."""
        ...

    @abstractmethod
    def subtract_from(self, other: Operand) -> 'VectorBase':
        """``other - self``."""
        ...

    @abstractmethod
    def multiply(self, other: Operand) -> 'VectorBase':
        ...

    @abstractmethod
    def divide(self, other: Operand) -> 'VectorBase':
        """``self / other``. Raises on a zero divisor."""
        ...

    @abstractmethod
    def divide_from(self, other: Operand) -> 'VectorBase':
        """``other / self``. Raises on a zero cell of ``self``."""
        ...

    @abstractmethod
    def pow(self, x: float) -> 'VectorBase':
        ...

    @abstractmethod
    def abs(self) -> 'VectorBase':
        ...

    @abstractmethod
    def sqrt(self) -> 'VectorBase':
        ...

    @abstractmethod
    def log(self) -> 'VectorBase':
        ...

    @abstractmethod
    def exp(self) -> 'VectorBase':
        ...

    # =========================================================================
    # Abstract Methods - Reductions
    # =========================================================================

    @abstractmethod
    def sum(self) -> float:
        ...

    @abstractmethod
    def dot(self, other: 'VectorBase') -> float:
        ...

    @abstractmethod
    def max(self) -> float:
        """Maximum value. On sparse vectors implicit zeros may not be seen."""
        ...

    @abstractmethod
    def min(self) -> float:
        """Minimum value. On sparse vectors implicit zeros may not be seen."""
        ...

    @abstractmethod
    def max_index(self) -> int:
        """First index holding the maximum."""
        ...

    @abstractmethod
    def min_index(self) -> int:
        """First index holding the minimum."""
        ...

    # =========================================================================
    # Abstract Methods - Slicing, Copies, Iteration
    # =========================================================================

    @abstractmethod
    def slice(self, start: int, end: Optional[int] = None) -> 'VectorBase':
        """
        Copy the half-open range ``[start, end)``.

        ``slice(end)`` is shorthand for ``slice(0, end)``.
        """
        ...

    @abstractmethod
    def slice_by_length(self, start: int, length: int) -> 'VectorBase':
        """Copy ``[start, start + length)``."""
        ...

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """Dense array representation of this vector."""
        ...

    @abstractmethod
    def deep_copy(self) -> 'VectorBase':
        """Copy sharing no storage with this vector."""
        ...

    @abstractmethod
    def iterate(self) -> Iterator[VectorElement]:
        """Traverse every stored cell in index order."""
        ...

    @abstractmethod
    def iterate_non_zero(self) -> Iterator[VectorElement]:
        """Traverse the cells whose value is not exactly zero."""
        ...

    # =========================================================================
    # Python Protocols
    # =========================================================================

    def __len__(self) -> int:
        # logical size, so len(v) == len(list(v)) for sparse vectors too
        return self.dimension

    def __getitem__(self, key):
        if isinstance(key, slice):
            start, stop, step = key.indices(self.dimension)
            if step != 1:
                raise VectorError.from_code(
                    NUMVEC_ERROR_NOT_IMPLEMENTED,
                    f"strided slicing (step={step})",
                )
            return self.slice(start, max(start, stop))
        return self.get(key)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[float]:
        for element in self.iterate():
            yield element.value

    # Operators accept vectors and real scalars only
    @staticmethod
    def _is_operand(other) -> bool:
        return isinstance(other, (VectorBase, numbers.Real))

    def __add__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.subtract_from(other)

    def __mul__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.divide_from(other)

    def __pow__(self, x):
        if not isinstance(x, numbers.Real):
            return NotImplemented
        return self.pow(x)

    def __matmul__(self, other):
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self.dot(other)

    def __neg__(self):
        return self.subtract_from(0.0)

    def __abs__(self):
        return self.abs()
