"""
Bitwise and logical mixin.

Bitwise ``&``, ``|`` and ``^`` follow NumPy integer/bool promotion (and are
rejected for floating-point elements). ``logical_and`` / ``logical_or``
always produce ``bool`` tensors.
"""

from __future__ import annotations

from abc import ABC

from .....domain._tensor import ITensor
from ..._elementwise import Operand
from ._tensor_bitwise import tensor_and, tensor_or, tensor_xor
from ._tensor_logical import tensor_logical_and, tensor_logical_or


class TensorMixinBitwise(ABC):
    """Mixin implementing elementwise bitwise and logical operators."""

    def __and__(self: ITensor, other: Operand) -> "ITensor":
        """
        Elementwise bitwise AND.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand; must be integer or ``bool`` typed.

        Returns
        -------
        ITensor
            New tensor holding ``self[i] & other[i]``.

        Raises
        ------
        UnsupportedOperationError
            For floating-point or complex element types.
        ShapeMismatchError
            If ``other`` is a tensor of a different shape.
        """
        return tensor_and(self, other)

    def __rand__(self: ITensor, other: Operand) -> "ITensor":
        return tensor_and(other, self)

    def __or__(self: ITensor, other: Operand) -> "ITensor":
        """Elementwise bitwise OR."""
        return tensor_or(self, other)

    def __ror__(self: ITensor, other: Operand) -> "ITensor":
        return tensor_or(other, self)

    def __xor__(self: ITensor, other: Operand) -> "ITensor":
        """Elementwise bitwise exclusive OR."""
        return tensor_xor(self, other)

    def __rxor__(self: ITensor, other: Operand) -> "ITensor":
        return tensor_xor(other, self)

    def logical_and(self: ITensor, other: Operand) -> "ITensor":
        """Elementwise ``bool(a) and bool(b)``."""
        return tensor_logical_and(self, other)

    def logical_or(self: ITensor, other: Operand) -> "ITensor":
        """Elementwise ``bool(a) or bool(b)``."""
        return tensor_logical_or(self, other)
