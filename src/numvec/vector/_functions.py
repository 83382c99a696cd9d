"""
Element-wise Function Contracts

Strategies handed to ``VectorBase.apply`` to transform a vector without
knowing how it is stored.

    VectorFunction (ABC)          calculate(index, value) -> float
    BinaryVectorFunction (ABC)    calculate(index, left, right) -> float

Implementations must be pure; they are called once per visited cell.

Example:

    class Scale(VectorFunction):
        def __init__(self, factor):
            self.factor = factor

        def calculate(self, index, value):
            return value * self.factor

    doubled = vec.apply(Scale(2.0))

    # Or wrap a plain callable
    shifted = vec.apply(unary(lambda i, v: v + i))
"""

from abc import ABC, abstractmethod
from typing import Callable

__all__ = [
    'VectorFunction',
    'BinaryVectorFunction',
    'CallableVectorFunction',
    'CallableBinaryVectorFunction',
    'unary',
    'binary',
]


class VectorFunction(ABC):
    """Function over a single vector, applied cell by cell."""

    __slots__ = ()

    @abstractmethod
    def calculate(self, index: int, value: float) -> float:
        """Calculate the new value for the cell at ``index``."""
        ...

    def __call__(self, index: int, value: float) -> float:
        return self.calculate(index, value)


class BinaryVectorFunction(ABC):
    """Function over two vectors, applied at matching indices."""

    __slots__ = ()

    @abstractmethod
    def calculate(self, index: int, left: float, right: float) -> float:
        """
        Calculate the result of the left and right value at ``index``.

        Args:
            index: Cell index
            left: Value of the receiver vector
            right: Value of the other vector
        """
        ...

    def __call__(self, index: int, left: float, right: float) -> float:
        return self.calculate(index, left, right)


class CallableVectorFunction(VectorFunction):
    """Adapts ``fn(index, value)`` to ``VectorFunction``."""

    __slots__ = ('_fn',)

    def __init__(self, fn: Callable[[int, float], float]):
        self._fn = fn

    def calculate(self, index: int, value: float) -> float:
        return self._fn(index, value)

    def __repr__(self) -> str:
        return f"unary({self._fn!r})"


class CallableBinaryVectorFunction(BinaryVectorFunction):
    """Adapts ``fn(index, left, right)`` to ``BinaryVectorFunction``."""

    __slots__ = ('_fn',)

    def __init__(self, fn: Callable[[int, float, float], float]):
        self._fn = fn

    def calculate(self, index: int, left: float, right: float) -> float:
        return self._fn(index, left, right)

    def __repr__(self) -> str:
        return f"binary({self._fn!r})"


def unary(fn: Callable[[int, float], float]) -> VectorFunction:
    """Wrap a plain callable as a ``VectorFunction``."""
    return CallableVectorFunction(fn)


def binary(fn: Callable[[int, float, float], float]) -> BinaryVectorFunction:
    """Wrap a plain callable as a ``BinaryVectorFunction``."""
    return CallableBinaryVectorFunction(fn)
