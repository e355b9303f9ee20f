"""
Comparison mixin defining elementwise Tensor comparison operators.

Implements ``==``, ``!=``, ``<``, ``<=``, ``>`` and ``>=`` for tensor-tensor,
tensor-scalar and scalar-tensor operands. Results are always ``bool``
tensors, regardless of the operand element types.

Because ``__eq__`` is elementwise, tensors are unhashable and have no
general truth value: ``bool(A == B)`` is only defined when the result holds
a single element. Use :meth:`TensorMixinMemory.isequal` for whole-tensor
equality, or reduce the mask with ``all()`` / ``any()`` and call ``item()``.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

from .....domain._errors import UnsupportedOperationError
from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import element_count
from ..._elementwise import Operand
from ._tensor_eq import tensor_eq, tensor_ne
from ._tensor_gt import tensor_ge, tensor_gt
from ._tensor_lt import tensor_le, tensor_lt


class TensorMixinComparison(ABC):
    """
    Mixin implementing elementwise comparisons.

    Notes
    -----
    Python resolves ``scalar < tensor`` through the reflected ``tensor >
    scalar``, so no separate ``__r*__`` methods are needed.
    """

    def __eq__(self: ITensor, other: Operand) -> Any:  # type: ignore[override]
        """
        Elementwise equality.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand. A scalar is compared against every position.

        Returns
        -------
        ITensor
            ``bool`` tensor, ``True`` where ``self[i] == other[i]``.
            ``NotImplemented`` for operands that are neither tensors nor
            numbers, so ``tensor == "x"`` falls back to identity and is
            ``False``.

        Raises
        ------
        ShapeMismatchError
            If ``other`` is a tensor of a different shape.
        """
        return tensor_eq(self, other)

    def __ne__(self: ITensor, other: Operand) -> Any:  # type: ignore[override]
        """Elementwise inequality; the complement of :meth:`__eq__`."""
        return tensor_ne(self, other)

    def __lt__(self: ITensor, other: Operand) -> Any:
        return tensor_lt(self, other)

    def __le__(self: ITensor, other: Operand) -> Any:
        return tensor_le(self, other)

    def __gt__(self: ITensor, other: Operand) -> Any:
        """
        Elementwise greater-than.

        Returns
        -------
        ITensor
            ``bool`` tensor, ``True`` where ``self[i] > other[i]``.
        """
        return tensor_gt(self, other)

    def __ge__(self: ITensor, other: Operand) -> Any:
        return tensor_ge(self, other)

    def __bool__(self: ITensor) -> bool:
        """
        Truth value of a single-element tensor.

        Raises
        ------
        UnsupportedOperationError
            If the tensor does not hold exactly one element.
        """
        count = element_count(self.shape)
        if count != 1:
            raise UnsupportedOperationError(
                "truth value",
                f"tensor of shape {tuple(self.shape)} has {count} elements; "
                "use isequal(), or all()/any() followed by item()",
            )
        return bool(self.get_linear(1))

    __hash__ = None  # type: ignore[assignment]
