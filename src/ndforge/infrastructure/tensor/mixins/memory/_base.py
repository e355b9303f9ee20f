"""
Tensor contract-derived defaults (memory / structure).

This module defines `TensorMixinMemory`, a mixin that implements the
operations every tensor gets "for free" from the minimal contract
(``shape``, ``get_linear``, ``set_linear``, ``similar``):

- counting: ``numel``/``element_count``, ``ndim``, ``size``, ``length``
- copying and filling: ``copy``, ``fill``
- reinterpretation: ``reshape``
- iteration: ``__iter__`` (via :class:`TensorIterator`), ``to_list``
- structural equality: ``isequal``

None of these methods touch storage directly, so they work unchanged for the
dense `Tensor` and for `SubArray` views.
"""

from __future__ import annotations

import copy as _copy
from abc import ABC
from typing import Any, Optional, Sequence, Union

import numpy as np
from typing_extensions import Self

from .....domain._errors import (
    OutOfBoundsError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import as_shape, element_count
from ._tensor_iterator import TensorIterator


def _dims_arg(dims: Sequence[Any]) -> tuple[int, ...]:
    if len(dims) == 1 and not isinstance(dims[0], (int, np.integer)):
        return as_shape(dims[0])
    return as_shape(dims)


def elements_equal(a: Any, b: Any) -> bool:
    """Element comparison that recurses into tensors-of-tensors."""
    a_is_t, b_is_t = isinstance(a, ITensor), isinstance(b, ITensor)
    if a_is_t and b_is_t:
        return a.isequal(b)
    if a_is_t or b_is_t:
        return False
    return bool(a == b)


class TensorMixinMemory(ABC):
    """
    Mixin implementing contract-derived structural operations.

    Notes
    -----
    The host class must provide ``shape``, ``dtype``, ``get_linear``,
    ``set_linear`` and ``similar``; nothing else is assumed.
    """

    @property
    def ndim(self: ITensor) -> int:
        """Number of axes (rank)."""
        return len(self.shape)

    def numel(self: ITensor) -> int:
        """
        Return the total number of elements.

        Returns
        -------
        int
            Product of all axis lengths (0 when any axis is empty).
        """
        return element_count(self.shape)

    element_count = numel

    def size(self: ITensor, axis: Optional[int] = None) -> Union[tuple[int, ...], int]:
        """
        Return the shape, or the length of one (1-based) axis.

        Axes beyond the rank have length 1.

        Raises
        ------
        OutOfBoundsError
            If ``axis < 1``.
        """
        if axis is None:
            return tuple(self.shape)
        if axis < 1:
            raise OutOfBoundsError(axis, len(self.shape), "Axes are 1-based.")
        if axis > len(self.shape):
            return 1
        return self.shape[axis - 1]

    def length(self: ITensor) -> int:
        """
        Return the length of a tensor that has a 1-d interpretation.

        Vectors, ``1 x n`` rows and ``n x 1`` columns qualify.

        Raises
        ------
        UnsupportedOperationError
            For any other shape.
        """
        shape = tuple(self.shape)
        if len(shape) == 1:
            return shape[0]
        if len(shape) == 2 and 1 in shape:
            return shape[0] * shape[1]
        raise UnsupportedOperationError(
            "length", f"tensor of shape {shape} has no 1-d interpretation"
        )

    def fill(self: ITensor, value: Any) -> Self:
        """
        Set every element to ``value``, in place.

        Returns
        -------
        Self
            The same tensor, to allow chaining.
        """
        put = self.set_linear
        for i in range(1, element_count(self.shape) + 1):
            put(i, value)
        return self

    def copy(self: ITensor) -> "ITensor":
        """
        Return a new tensor with the same shape, dtype and contents.

        Elements of ``object`` dtype are deep-copied, so a tensor of tensors
        does not share its inner tensors with the copy.
        """
        out = self.similar(self.dtype, self.shape)
        get, put = self.get_linear, out.set_linear
        deep = np.dtype(self.dtype).kind == "O"
        for i in range(1, element_count(self.shape) + 1):
            v = get(i)
            put(i, _copy.deepcopy(v) if deep else v)
        return out

    def reshape(self: ITensor, *dims: Any) -> "ITensor":
        """
        Reinterpret the elements under a new shape.

        Accepts ``reshape(2, 3)`` or ``reshape((2, 3))``. Elements are copied
        across in linear order unchanged; nothing is rearranged.

        Raises
        ------
        ShapeMismatchError
            If the new shape has a different element count.
        """
        new_shape = _dims_arg(dims)
        n = element_count(self.shape)
        if element_count(new_shape) != n:
            raise ShapeMismatchError(
                n, element_count(new_shape), f"Cannot reshape {tuple(self.shape)} to {new_shape}."
            )
        out = self.similar(self.dtype, new_shape)
        get, put = self.get_linear, out.set_linear
        for i in range(1, n + 1):
            put(i, get(i))
        return out

    def __iter__(self: ITensor) -> TensorIterator:
        """Iterate over elements in increasing linear order."""
        return TensorIterator(self)

    def to_list(self: ITensor) -> list:
        """Elements as a flat list, in linear order."""
        return list(TensorIterator(self))

    def isequal(self: ITensor, other: Any) -> bool:
        """
        Return True if ``other`` is a tensor of the same shape with equal
        elements at every linear position.
        """
        if not isinstance(other, ITensor) or tuple(other.shape) != tuple(self.shape):
            return False
        get_a, get_b = self.get_linear, other.get_linear
        return all(
            elements_equal(get_a(i), get_b(i))
            for i in range(1, element_count(self.shape) + 1)
        )
