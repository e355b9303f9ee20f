"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, which exposes addition,
subtraction, elementwise multiplication, elementwise power, true division,
integer (floor) division and modulo, each in tensor-tensor, tensor-scalar
and scalar-tensor forms. The per-operator work lives in the sibling
``_tensor_<op>`` modules.

Semantics
---------
- Position ``i`` of the result holds ``op(A[i], B[i])`` (or the scalar in
  place of the missing tensor operand).
- Tensor-tensor operands must have identical shapes; there is no
  broadcasting beyond scalars.
- The result element type follows NumPy promotion of the operand types.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable

from .....domain._tensor import ITensor
from ..._elementwise import Operand, map_binary
from ._tensor_addition import tensor_add
from ._tensor_division import tensor_floordiv, tensor_mod, tensor_truediv
from ._tensor_multiplication import tensor_mul, tensor_pow
from ._tensor_subtraction import tensor_sub


class TensorMixinArithmetic(ABC):
    """
    Mixin implementing elementwise arithmetic operators.

    Notes
    -----
    - ``*`` is elementwise multiplication; there is no matrix product.
    - Reflected methods (``__radd__`` etc.) handle ``scalar op tensor``.
    - Operands that are neither tensors nor numbers make every operator
      return ``NotImplemented``, so Python raises its usual ``TypeError``.
    """

    # NumPy scalars on the left defer to the reflected methods below.
    __array_ufunc__ = None

    # ----------------------------
    # Addition / subtraction
    # ----------------------------
    def __add__(self: ITensor, other: Operand) -> "ITensor":
        """
        Elementwise addition.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand. A scalar is used at every position.

        Returns
        -------
        ITensor
            New tensor holding ``self[i] + other[i]``.

        Raises
        ------
        ShapeMismatchError
            If ``other`` is a tensor of a different shape.
        """
        return tensor_add(self, other)

    def __radd__(self: ITensor, other: Operand) -> "ITensor":
        """Right-hand addition to support ``scalar + Tensor``."""
        return tensor_add(other, self)

    def __sub__(self: ITensor, other: Operand) -> "ITensor":
        """
        Elementwise subtraction.

        Raises
        ------
        ShapeMismatchError
            If ``other`` is a tensor of a different shape.
        UnsupportedOperationError
            For ``bool`` operands.
        """
        return tensor_sub(self, other)

    def __rsub__(self: ITensor, other: Operand) -> "ITensor":
        """Right-hand subtraction: ``other - self`` elementwise."""
        return tensor_sub(other, self)

    # ----------------------------
    # Multiplication / power
    # ----------------------------
    def __mul__(self: ITensor, other: Operand) -> "ITensor":
        """
        Elementwise (Hadamard) multiplication.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.

        Returns
        -------
        ITensor
            New tensor holding ``self[i] * other[i]``.
        """
        return tensor_mul(self, other)

    def __rmul__(self: ITensor, other: Operand) -> "ITensor":
        return tensor_mul(other, self)

    def __pow__(self: ITensor, other: Operand) -> "ITensor":
        """Elementwise power ``self[i] ** other[i]``."""
        return tensor_pow(self, other)

    def __rpow__(self: ITensor, other: Operand) -> "ITensor":
        """Right-hand power: ``other ** self`` elementwise."""
        return tensor_pow(other, self)

    # ----------------------------
    # Division
    # ----------------------------
    def __truediv__(self: ITensor, other: Operand) -> "ITensor":
        """
        Elementwise true division.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand (divisor).

        Returns
        -------
        ITensor
            New tensor holding ``self[i] / other[i]``. Integer operands
            produce a floating-point result.
        """
        return tensor_truediv(self, other)

    def __rtruediv__(self: ITensor, other: Operand) -> "ITensor":
        """Right-hand true division to support ``scalar / Tensor``."""
        return tensor_truediv(other, self)

    def __floordiv__(self: ITensor, other: Operand) -> "ITensor":
        """Elementwise integer (floor) division."""
        return tensor_floordiv(self, other)

    def __rfloordiv__(self: ITensor, other: Operand) -> "ITensor":
        return tensor_floordiv(other, self)

    def __mod__(self: ITensor, other: Operand) -> "ITensor":
        """
        Elementwise modulo.

        The sign of a non-zero remainder follows the divisor, as for Python
        ints: ``Tensor.from_list([-7]) % 3`` holds ``2``.
        """
        return tensor_mod(self, other)

    def __rmod__(self: ITensor, other: Operand) -> "ITensor":
        return tensor_mod(other, self)

    def zip_with(
        self: ITensor, other: Operand, fn: Callable[[Any, Any], Any], dtype: Any = None
    ) -> "ITensor":
        """
        Combine with ``other`` through a caller-supplied scalar function.

        Parameters
        ----------
        other : ITensor or scalar
            Right operand; a scalar is broadcast.
        fn : Callable[[Any, Any], Any]
            Binary scalar function.
        dtype : optional
            Result element type. Defaults to the receiver's dtype.

        Raises
        ------
        ShapeMismatchError
            If ``other`` is a tensor of a different shape.
        """
        return map_binary(self, other, fn, self.dtype if dtype is None else dtype)
