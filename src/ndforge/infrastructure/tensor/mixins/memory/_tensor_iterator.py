"""
Linear-order element iterator.

`TensorIterator` walks a tensor in increasing linear-index order using only
``get_linear``. Position 1 is the start state; the iterator is done once the
position exceeds the element count. Each ``iter(tensor)`` call creates a
fresh iterator, and :meth:`TensorIterator.restart` rewinds an existing one.
"""

from __future__ import annotations

from typing import Any

from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import element_count


class TensorIterator:
    """Lazy, finite, restartable iterator over a tensor's elements."""

    __slots__ = ("_tensor", "_count", "position")

    def __init__(self, tensor: ITensor) -> None:
        self._tensor = tensor
        self._count = element_count(tensor.shape)
        self.position = 1

    @property
    def done(self) -> bool:
        return self.position > self._count

    def restart(self) -> "TensorIterator":
        self.position = 1
        return self

    def __iter__(self) -> "TensorIterator":
        return self

    def __next__(self) -> Any:
        if self.done:
            raise StopIteration
        value = self._tensor.get_linear(self.position)
        self.position += 1
        return value

    def __length_hint__(self) -> int:
        return max(self._count - self.position + 1, 0)
