"""
Vector Element

The unit yielded by vector traversals: an ``(index, value)`` pair.
"""

from typing import NamedTuple

__all__ = ['VectorElement']


class VectorElement(NamedTuple):
    """
    One visited cell of a vector.

    Elements are immutable values, a fresh one per step, so holding on to
    an element after the iterator advances is safe.

    Example:
        >>> for index, value in vec.iterate_non_zero():
        ...     print(index, value)
    """

    index: int
    value: float

    def __str__(self) -> str:
        return f"{self.index} -> {self.value}"
