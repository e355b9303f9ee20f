"""
Permutation mixin defining axis-rearranging Tensor APIs.

This module declares :class:`TensorMixinPermutation`: general axis
permutation (``permute``/``ipermute``) and the vector/matrix transposes
(``transpose``/``ctranspose`` and the ``T``/``H`` shorthands).
"""

from __future__ import annotations

from abc import ABC

from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import is_index_scalar
from ._tensor_permute import ipermute, permute
from ._tensor_transpose import ctranspose, transpose


class TensorMixinPermutation(ABC):
    """
    Mixin implementing axis permutation and transposition.

    Notes
    -----
    Every method returns a new tensor; data is copied, never aliased.
    """

    def permute(self: ITensor, *perm: int) -> "ITensor":
        """
        Rearrange axes: output axis ``k`` is source axis ``perm[k]``.

        Accepts ``A.permute(2, 1)`` or ``A.permute([2, 1])``.

        Raises
        ------
        ShapeMismatchError
            If ``perm`` is not a permutation of ``1..rank``.
        """
        if len(perm) == 1 and not is_index_scalar(perm[0]):
            perm = tuple(perm[0])
        return permute(self, perm)

    def ipermute(self: ITensor, *perm: int) -> "ITensor":
        """Inverse of :meth:`permute` for the same ``perm``."""
        if len(perm) == 1 and not is_index_scalar(perm[0]):
            perm = tuple(perm[0])
        return ipermute(self, perm)

    def transpose(self: ITensor) -> "ITensor":
        """
        Transpose a vector (to a ``1 x n`` row) or a matrix.

        Raises
        ------
        UnsupportedOperationError
            For rank > 2.
        """
        return transpose(self)

    def ctranspose(self: ITensor) -> "ITensor":
        """Conjugate transpose of a vector or matrix."""
        return ctranspose(self)

    @property
    def T(self: ITensor) -> "ITensor":
        return transpose(self)

    @property
    def H(self: ITensor) -> "ITensor":
        return ctranspose(self)
