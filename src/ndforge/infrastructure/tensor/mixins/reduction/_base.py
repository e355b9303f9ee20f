"""
Reduction mixin defining the public Tensor reduction API.

This module declares :class:`TensorMixinReduction`, which exposes the
reduction engine (:func:`._tensor_reduce.reduce`) as methods. Every method
collapses the requested axes to length 1 and keeps the rank, so the result of
reducing over all axes is a tensor of shape ``(1, ..., 1)`` rather than a
bare scalar; use ``item()`` to extract the value.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Optional

import numpy as np

from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import element_count
from .....domain.utils._operators import ADD, AND, MAX, MIN, MUL, OR
from ._tensor_reduce import Region, accumulate, accumulator_dtype, normalize_region, reduce


class TensorMixinReduction(ABC):
    """
    Mixin implementing reductions and inclusive scans.

    Notes
    -----
    - ``region`` is a 1-based axis or a collection of axes; ``None`` means
      every axis and an empty collection means none (the result is an
      equal copy).
    - Folding relies on associativity only; each output position is folded
      in increasing linear order.
    """

    def reduce(
        self: ITensor,
        op: Callable[..., Any],
        region: Region = None,
        init: Optional[Any] = None,
        dtype: Any = None,
    ) -> "ITensor":
        """
        Fold a caller-supplied associative operator over ``region``.

        Parameters
        ----------
        op : Callable
            ``op(x, y)`` combines two elements, ``op()`` returns the identity.
        region : int, Iterable[int] or None
            Axes to collapse.
        init : optional
            Starting value overriding ``op()``.
        dtype : optional
            Result element type; inferred from the element type and the
            identity when omitted.

        Raises
        ------
        OutOfBoundsError
            If an axis is outside ``1..rank``.
        """
        return reduce(op, self, region, init=init, dtype=dtype)

    def sum(self: ITensor, region: Region = None) -> "ITensor":
        """
        Sum of elements over ``region``.

        Examples
        --------
        For the 3x3 matrix holding 1..9 in storage order, ``A.sum(1)`` is the
        1x3 row ``[6, 15, 24]`` and ``A.sum(2)`` the 3x1 column
        ``[12, 15, 18]``.

        ``bool`` and narrow integer elements are summed in the platform
        integer, as ``np.sum`` does, so ``int8`` input does not wrap.
        """
        return reduce(ADD, self, region, dtype=accumulator_dtype(np.sum, self.dtype))

    def prod(self: ITensor, region: Region = None) -> "ITensor":
        """Product of elements over ``region``, widened like :meth:`sum`."""
        return reduce(MUL, self, region, dtype=accumulator_dtype(np.prod, self.dtype))

    def maximum(self: ITensor, region: Region = None) -> "ITensor":
        """
        Largest element over ``region``.

        The fold starts from the lowest value of the element type, so an
        empty region of an integer tensor yields ``iinfo(dtype).min``.
        """
        return reduce(MAX, self, region)

    def minimum(self: ITensor, region: Region = None) -> "ITensor":
        """Smallest element over ``region``."""
        return reduce(MIN, self, region)

    def all(self: ITensor, region: Region = None) -> "ITensor":
        """
        ``True`` where every element over ``region`` is truthy.

        The result is always a ``bool`` tensor, whatever the element type.
        """
        return reduce(AND, self, region, dtype=np.bool_)

    def any(self: ITensor, region: Region = None) -> "ITensor":
        """``True`` where some element over ``region`` is truthy (``bool`` result)."""
        return reduce(OR, self, region, dtype=np.bool_)

    def mean(self: ITensor, region: Region = None) -> "ITensor":
        """
        Arithmetic mean over ``region``.

        Computed as the sum divided by the number of folded elements; the
        result has a floating-point element type for numeric input.
        """
        axes = normalize_region(region, len(self.shape))
        count = element_count(tuple(self.shape[k - 1] for k in axes)) if axes else 1
        return reduce(ADD, self, axes, dtype=accumulator_dtype(np.sum, self.dtype)) / count

    def cumsum(self: ITensor, axis: int = 1) -> "ITensor":
        """
        Inclusive running sum along ``axis``.

        Returns a tensor of the same shape; empty input gives empty output.
        """
        return accumulate(ADD, self, axis, dtype=accumulator_dtype(np.sum, self.dtype))

    def cumprod(self: ITensor, axis: int = 1) -> "ITensor":
        """Inclusive running product along ``axis``."""
        return accumulate(MUL, self, axis, dtype=accumulator_dtype(np.prod, self.dtype))
