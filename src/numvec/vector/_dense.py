"""
Dense Vector

Reference ``VectorBase`` implementation backed by a private, contiguous
``float64`` numpy array.

Binary operations dispatch on the *operand's* kind:

    other.kind is SPARSE  ->  start from the receiver (or zeros) and only
                              combine other.iterate_non_zero() positions
    anything else         ->  combine every position densely

The dispatch is one-sided on purpose. ``dense.add(sparse)`` costs
O(nnz(sparse)) on top of copying the receiver; the receiver's own kind
never changes the traversal.

Example:
    >>> v = DenseVector([0.0, 2.0, 0.0, 0.0, 7.0])
    >>> [tuple(e) for e in v.iterate_non_zero()]
    [(1, 2.0), (4, 7.0)]
    >>> v.add(1.0).max_index()
    4
"""

from __future__ import annotations

import math
import numbers
import sys
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from .._config import get_config
from .._errors import VectorError, NUMVEC_ERROR_INVALID_ARGUMENT, division_by_zero
from ._base import VectorBase, VectorKind, Operand
from ._element import VectorElement
from ._functions import VectorFunction, BinaryVectorFunction

__all__ = ['DenseVector']

_MAX = sys.float_info.max


# =============================================================================
# Helpers
# =============================================================================

def _gather_non_zero(vector: VectorBase) -> Tuple[np.ndarray, np.ndarray]:
    """Collect (indices, values) from a vector's non-zero traversal."""
    indices = []
    values = []
    for index, value in vector.iterate_non_zero():
        indices.append(index)
        values.append(value)
    return np.asarray(indices, dtype=np.intp), np.asarray(values, dtype=np.float64)


def _materialize(vector: VectorBase) -> np.ndarray:
    """Fresh dense float64 copy of any vector, ``dimension`` cells long."""
    if vector.kind is VectorKind.SPARSE:
        data = np.zeros(vector.dimension, dtype=np.float64)
        indices, values = _gather_non_zero(vector)
        data[indices] = values
        return data
    return np.array(vector.to_array(), dtype=np.float64)


def _values_of(vector: VectorBase) -> np.ndarray:
    """Dense values of a vector, without copying when already dense."""
    if vector.kind is VectorKind.SPARSE:
        return _materialize(vector)
    return np.asarray(vector.to_array(), dtype=np.float64)


def _iterate_all(data: np.ndarray) -> Iterator[VectorElement]:
    for index in range(data.shape[0]):
        yield VectorElement(index, float(data[index]))


def _iterate_non_zero(data: np.ndarray) -> Iterator[VectorElement]:
    # exact comparison: only cells holding 0.0 (or -0.0) are skipped
    for index in range(data.shape[0]):
        value = data[index]
        if value != 0.0:
            yield VectorElement(index, float(value))


# =============================================================================
# DenseVector
# =============================================================================

class DenseVector(VectorBase):
    """
    Dense double vector.

    Construction always copies; the vector owns its storage exclusively.

    Args:
        data: One of
            - ``int``: length of a new vector filled with ``fill``
            - array-like: 1-D sequence or ndarray (copied)
            - ``VectorBase``: any vector; sparse sources are materialised
              through their non-zero traversal
        fill: Cell value when ``data`` is a length

    Example:
        >>> DenseVector(3)
        DenseVector([0.0, 0.0, 0.0])
        >>> DenseVector(2, 1.5)
        DenseVector([1.5, 1.5])
        >>> DenseVector([1, 2, 3]).dot(DenseVector([1, 1, 1]))
        6.0
    """

    __slots__ = ('_data',)

    def __init__(
        self,
        data: Union[int, Sequence[float], np.ndarray, VectorBase] = 0,
        fill: float = 0.0,
    ):
        if isinstance(data, VectorBase):
            self._data = _materialize(data)
        elif isinstance(data, numbers.Integral):
            self._data = np.full(int(data), fill, dtype=np.float64)
        else:
            arr = np.array(data, dtype=np.float64)
            if arr.ndim != 1:
                raise VectorError(
                    NUMVEC_ERROR_INVALID_ARGUMENT,
                    f"Expected 1D data, got {arr.ndim}D",
                )
            self._data = arr

    @classmethod
    def _wrap(cls, data: np.ndarray) -> 'DenseVector':
        """Adopt a freshly computed array without copying (internal)."""
        vec = cls.__new__(cls)
        vec._data = data
        return vec

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def zeros(cls, length: int) -> 'DenseVector':
        """Vector of ``length`` zeros."""
        return cls(length)

    @classmethod
    def ones(cls, length: int) -> 'DenseVector':
        """Vector of ``length`` ones."""
        return cls(length, 1.0)

    @classmethod
    def append(cls, array: Sequence[float], last: float) -> 'DenseVector':
        """Copy of ``array`` with ``last`` appended (``len(array) + 1`` cells)."""
        data = np.empty(len(array) + 1, dtype=np.float64)
        data[:-1] = array
        data[-1] = last
        return cls._wrap(data)

    @classmethod
    def prepend(cls, first: float, array: Sequence[float]) -> 'DenseVector':
        """``first`` followed by a copy of ``array``."""
        data = np.empty(len(array) + 1, dtype=np.float64)
        data[0] = first
        data[1:] = array
        return cls._wrap(data)

    @classmethod
    def from_up_to(cls, start: float, stop: float, step: float) -> 'DenseVector':
        """
        Arithmetic progression ``start, start + step, ...`` up to ``stop``.

        The cell count is ``(stop - start) / step + 0.5`` rounded half up,
        so ``stop`` itself is included when it lies on the grid.

        Example:
            >>> DenseVector.from_up_to(0, 1, 0.25).to_array().tolist()
            [0.0, 0.25, 0.5, 0.75, 1.0]
        """
        count = int(math.floor((stop - start) / step + 0.5 + 0.5))
        data = np.arange(count, dtype=np.float64) * step + start
        return cls._wrap(data)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def kind(self) -> VectorKind:
        return VectorKind.DENSE

    @property
    def length(self) -> int:
        return self._data.shape[0]

    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    # -------------------------------------------------------------------------
    # Element Access
    # -------------------------------------------------------------------------

    def get(self, index: int) -> float:
        return float(self._data[index])

    def set(self, index: int, value: float) -> None:
        self._data[index] = value

    def apply(
        self,
        func: Union[VectorFunction, BinaryVectorFunction],
        other: Optional[VectorBase] = None,
    ) -> 'DenseVector':
        values = self._data.tolist()
        if other is None:
            out = [func.calculate(i, value) for i, value in enumerate(values)]
        else:
            out = [func.calculate(i, value, other.get(i)) for i, value in enumerate(values)]
        return self._wrap(np.array(out, dtype=np.float64))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Operand) -> 'DenseVector':
        if isinstance(other, VectorBase):
            if other.kind is VectorKind.SPARSE:
                result = self._data.copy()
                indices, values = _gather_non_zero(other)
                result[indices] = self._data[indices] + values
                return self._wrap(result)
            return self._wrap(self._data + _values_of(other))
        return self._wrap(self._data + other)

    def subtract(self, other: Operand) -> 'DenseVector':
        if isinstance(other, VectorBase):
            if other.kind is VectorKind.SPARSE:
                result = self._data.copy()
                indices, values = _gather_non_zero(other)
                result[indices] = self._data[indices] - values
                return self._wrap(result)
            return self._wrap(self._data - _values_of(other))
        return self._wrap(self._data - other)

    def subtract_from(self, other: Operand) -> 'DenseVector':
        if isinstance(other, VectorBase):
            if other.kind is VectorKind.SPARSE:
                result = 0.0 - self._data
                indices, values = _gather_non_zero(other)
                result[indices] = values - self._data[indices]
                return self._wrap(result)
            return self._wrap(_values_of(other) - self._data)
        return self._wrap(other - self._data)

    def multiply(self, other: Operand) -> 'DenseVector':
        if isinstance(other, VectorBase):
            if other.kind is VectorKind.SPARSE:
                # cells the operand does not store multiply to zero
                result = np.zeros(self.length, dtype=np.float64)
                indices, values = _gather_non_zero(other)
                result[indices] = self._data[indices] * values
                return self._wrap(result)
            return self._wrap(self._data * _values_of(other))
        return self._wrap(self._data * other)

    def divide(self, other: Operand) -> 'DenseVector':
        if isinstance(other, VectorBase):
            # every cell of the operand is a divisor, so no sparse shortcut
            divisor = _values_of(other)
            if not divisor.all():
                raise division_by_zero("divide")
            with np.errstate(over='ignore', invalid='ignore'):
                return self._wrap(self._data / divisor)
        if other == 0.0:
            raise division_by_zero("divide")
        with np.errstate(over='ignore', invalid='ignore'):
            return self._wrap(self._data / other)

    def divide_from(self, other: Operand) -> 'DenseVector':
        if not self._data.all():
            raise division_by_zero("divide_from")
        with np.errstate(over='ignore', invalid='ignore'):
            if isinstance(other, VectorBase):
                if other.kind is VectorKind.SPARSE:
                    # 0 / self keeps NaN cells of the receiver, as the dense path does
                    result = 0.0 / self._data
                    indices, values = _gather_non_zero(other)
                    result[indices] = values / self._data[indices]
                    return self._wrap(result)
                return self._wrap(_values_of(other) / self._data)
            return self._wrap(other / self._data)

    def pow(self, x: float) -> 'DenseVector':
        if x == 2:
            return self._wrap(self._data * self._data)
        with np.errstate(all='ignore'):
            return self._wrap(np.power(self._data, x))

    def abs(self) -> 'DenseVector':
        return self._wrap(np.abs(self._data))

    def sqrt(self) -> 'DenseVector':
        with np.errstate(invalid='ignore'):
            return self._wrap(np.sqrt(self._data))

    def log(self) -> 'DenseVector':
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(np.log(self._data))

    def exp(self) -> 'DenseVector':
        with np.errstate(over='ignore'):
            return self._wrap(np.exp(self._data))

    # -------------------------------------------------------------------------
    # Reductions
    # -------------------------------------------------------------------------

    def sum(self) -> float:
        return float(self._data.sum())

    def dot(self, other: VectorBase) -> float:
        if other.kind is VectorKind.SPARSE:
            indices, values = _gather_non_zero(other)
            return float(np.dot(self._data[indices], values))
        return float(np.dot(self._data, _values_of(other)))

    def max(self) -> float:
        # fmax skips NaN; an empty vector reports the initial bound
        return float(np.fmax.reduce(self._data, initial=-_MAX))

    def min(self) -> float:
        return float(np.fmin.reduce(self._data, initial=_MAX))

    def max_index(self) -> int:
        best = self.max()
        if best == -_MAX:
            return 0
        return int(np.flatnonzero(self._data == best)[0])

    def min_index(self) -> int:
        best = self.min()
        if best == _MAX:
            return 0
        return int(np.flatnonzero(self._data == best)[0])

    # -------------------------------------------------------------------------
    # Slicing, Copies, Iteration
    # -------------------------------------------------------------------------

    def slice(self, start: int, end: Optional[int] = None) -> 'DenseVector':
        if end is None:
            start, end = 0, start
        return self._wrap(self._data[start:end].copy())

    def slice_by_length(self, start: int, length: int) -> 'DenseVector':
        return self._wrap(self._data[start:start + length].copy())

    def to_array(self) -> np.ndarray:
        """
        Return the backing array itself, not a copy.

        Writes through the returned array are visible in this vector.
        Use ``deep_copy().to_array()`` or ``to_numpy()`` for an
        independent array.
        """
        return self._data

    def deep_copy(self) -> 'DenseVector':
        return self._wrap(self._data.copy())

    def iterate(self) -> Iterator[VectorElement]:
        return _iterate_all(self._data)

    def iterate_non_zero(self) -> Iterator[VectorElement]:
        return _iterate_non_zero(self._data)

    # -------------------------------------------------------------------------
    # numpy Interop
    # -------------------------------------------------------------------------

    def __array__(self, dtype=None, copy=None):
        if copy:
            return np.array(self._data, dtype=dtype, copy=True)
        if dtype is None:
            return self._data
        return self._data.astype(dtype, copy=False)

    # -------------------------------------------------------------------------
    # Equality / Representation
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data, equal_nan=True))

    def __hash__(self) -> int:
        # NaN cells compare equal, so they must hash alike
        cells = np.where(np.isnan(self._data), 0.0, self._data)
        return hash((type(self).__name__, tuple(cells.tolist())))

    def __str__(self) -> str:
        if self.length < get_config().repr_threshold:
            return str(self._data.tolist())
        return f"{self.length}x1"

    def __repr__(self) -> str:
        return f"DenseVector({self})"
