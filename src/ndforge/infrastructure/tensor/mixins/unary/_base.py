"""
Unary operation mixin defining elementwise Tensor unary APIs.

This module declares :class:`TensorMixinUnary`, which exposes negation,
bitwise complement, complex conjugate / real part / imaginary part, logical
not and absolute value as "apply a scalar function at every linear
position". The per-operation work lives in ``_tensor_neg``, ``_tensor_abs``
and ``_tensor_complex``.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Optional

from .....domain._tensor import ITensor
from ..._elementwise import map_unary
from ._tensor_abs import tensor_abs
from ._tensor_complex import tensor_conj, tensor_imag, tensor_real
from ._tensor_neg import tensor_invert, tensor_logical_not, tensor_neg


class TensorMixinUnary(ABC):
    """
    Mixin implementing elementwise unary operations.

    Notes
    -----
    - Every method allocates a new tensor via ``similar``; the receiver is
      never modified.
    - Result dtypes follow NumPy type resolution for the matching ufunc.
    """

    def __neg__(self: ITensor) -> "ITensor":
        """
        Compute the elementwise negation of the tensor.

        Returns
        -------
        ITensor
            New tensor holding ``-self[i]``.

        Raises
        ------
        UnsupportedOperationError
            For element types without negation (e.g. ``bool``).
        """
        return tensor_neg(self)

    def __invert__(self: ITensor) -> "ITensor":
        """
        Compute the elementwise bitwise complement (logical not for ``bool``).

        Raises
        ------
        UnsupportedOperationError
            For floating-point or complex element types.
        """
        return tensor_invert(self)

    def __abs__(self: ITensor) -> "ITensor":
        """Compute the elementwise absolute value (magnitude for complex)."""
        return tensor_abs(self)

    def conj(self: ITensor) -> "ITensor":
        """
        Compute the elementwise complex conjugate.

        Real tensors are returned as an equal copy.
        """
        return tensor_conj(self)

    def real(self: ITensor) -> "ITensor":
        """Return the elementwise real part."""
        return tensor_real(self)

    def imag(self: ITensor) -> "ITensor":
        """
        Return the elementwise imaginary part.

        For real tensors this is a zero tensor of the same shape and dtype.
        """
        return tensor_imag(self)

    def logical_not(self: ITensor) -> "ITensor":
        """Elementwise logical negation; always produces a ``bool`` tensor."""
        return tensor_logical_not(self)

    def map(self: ITensor, fn: Callable[[Any], Any], dtype: Optional[Any] = None) -> "ITensor":
        """
        Apply a caller-supplied scalar function at every position.

        Parameters
        ----------
        fn : Callable[[Any], Any]
            Scalar function (e.g. ``math.sqrt``).
        dtype : optional
            Result element type. Defaults to the receiver's dtype.
        """
        return map_unary(self, fn, self.dtype if dtype is None else dtype)
