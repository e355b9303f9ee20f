"""
Tensor interface definitions.

This module defines the domain-level capability set every array-like type must
satisfy to take part in ndforge operations. The interface is deliberately tiny:
a shape, an element type, linear element get/set, and a way to allocate a new
tensor of the same family. Everything else (copy, fill, reshape, iteration,
elementwise operators, indexing, reductions, permutation, search) is derived
from these capabilities by the infrastructure mixins.

Notes
-----
- Linear indices are 1-based and follow the column-major order documented in
  :mod:`ndforge.domain._layout`.
- Implementations are expected to bounds-check ``get_linear``/``set_linear``
  and raise :class:`~ndforge.domain._errors.OutOfBoundsError`.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ITensor(Protocol):
    """
    Generic tensor contract.

    An `ITensor` is identified by an element type and a fixed rank. Its rank
    never changes for the lifetime of the value; operations that change the
    shape return new tensors.

    Notes
    -----
    This protocol uses structural typing so dense tensors, views, and any
    third-party storage wrapper can satisfy the same contract without sharing
    a base class.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the ordered per-axis lengths.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape; ``len(shape)`` is the rank.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Return the element type descriptor (a ``numpy.dtype`` in the dense
        backend).
        """
        ...

    def get_linear(self, index: int) -> Any:
        """
        Read the element at a 1-based linear position.

        Raises
        ------
        OutOfBoundsError
            If ``index`` is outside ``1..element_count``.
        """
        ...

    def set_linear(self, index: int, value: Any) -> None:
        """
        Write the element at a 1-based linear position.

        Raises
        ------
        OutOfBoundsError
            If ``index`` is outside ``1..element_count``.
        """
        ...

    def similar(self, dtype: Any = None, dims: Sequence[int] | None = None) -> "ITensor":
        """
        Allocate a new, uninitialized tensor of the same family.

        Parameters
        ----------
        dtype : Any, optional
            Element type of the new tensor. Defaults to ``self.dtype``.
        dims : Sequence[int], optional
            Shape of the new tensor. Defaults to ``self.shape``.
        """
        ...

    def zero(self) -> Any:
        """
        Return the zero value of this tensor's element type.

        Used as the nonzero test in ``find``/``nnz`` and as the initial value of
        ``accumarray``.
        """
        ...
