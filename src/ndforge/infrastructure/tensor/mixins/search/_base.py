"""
Search mixin: nonzero location and counting.
"""

from __future__ import annotations

from abc import ABC
from typing import Union

from .....domain._tensor import ITensor
from ._tensor_find import find, nnz


class TensorMixinSearch(ABC):
    """Mixin implementing ``find`` and ``nnz``."""

    def find(self: ITensor) -> Union[list[int], tuple[list[int], ...]]:
        """
        Positions of the nonzero elements, in linear order.

        A vector yields linear positions; higher ranks yield one coordinate
        list per axis.
        """
        return find(self)

    def nnz(self: ITensor) -> int:
        return nnz(self)
