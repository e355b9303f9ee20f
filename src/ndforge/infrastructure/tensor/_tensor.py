"""
Concrete Tensor implementation (NumPy backend).

This module provides the dense `Tensor`, which satisfies the domain-level
`ITensor` protocol by storing its elements in a flat 1-D NumPy buffer laid
out in column-major order (axis 1 fastest, see
:mod:`ndforge.domain._layout`). Linear index ``i`` (1-based) lives at buffer
offset ``i - 1``.

Every derived operation (structure, elementwise operators, indexing,
reductions, permutation, search) comes from the mixins and touches storage
only through ``get_linear``/``set_linear``/``similar``.

Design notes
------------
- This file sits in the infrastructure layer: it owns the NumPy buffer and
  the conversions to and from NumPy arrays.
- ``object`` dtype is supported, which allows tensors of arbitrary Python
  values, including tensors of tensors.
- Binary ops require exact shape matches; only scalars broadcast.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._errors import InvalidRankError, ShapeMismatchError, UnsupportedOperationError
from ...domain._layout import STORAGE_ORDER
from ...domain._tensor import ITensor
from ...domain.utils._index_algebra import as_shape, check_linear, element_count, is_index_scalar
from ._elementwise import zero_of
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.bitwise import TensorMixinBitwise
from .mixins.comparison import TensorMixinComparison
from .mixins.indexing import TensorMixinIndexing
from .mixins.memory import TensorMixinMemory
from .mixins.permutation import TensorMixinPermutation
from .mixins.reduction import TensorMixinReduction
from .mixins.search import TensorMixinSearch
from .mixins.unary import TensorMixinUnary

DEFAULT_DTYPE = np.dtype(np.float64)
"""Element type used when none is given."""

ShapeLike = Union[int, Sequence[int]]


def _normalize_shape(shape: ShapeLike) -> tuple[int, ...]:
    dims = (int(shape),) if is_index_scalar(shape) else as_shape(shape)
    if len(dims) == 0:
        raise InvalidRankError(0)
    return dims


def _infer_dtype(value: Any) -> np.dtype:
    if isinstance(value, (Number, np.generic)):
        return np.result_type(value)
    return np.dtype(object)


class Tensor(
    TensorMixinMemory,
    TensorMixinUnary,
    TensorMixinArithmetic,
    TensorMixinComparison,
    TensorMixinBitwise,
    TensorMixinIndexing,
    TensorMixinReduction,
    TensorMixinPermutation,
    TensorMixinSearch,
    ITensor,
):
    """
    Dense, NumPy-backed tensor of any rank >= 1.

    Parameters
    ----------
    shape : int or Sequence[int]
        Per-axis lengths. Zero-length axes are allowed; rank 0 is not.
    dtype : numpy dtype-like, optional
        Element type. Defaults to :data:`DEFAULT_DTYPE`.
    data : numpy.ndarray, optional
        Flat buffer of ``element_count(shape)`` elements in column-major
        order. Used as-is (not copied). When omitted, a zero-filled buffer is
        allocated.

    Raises
    ------
    InvalidRankError
        If ``shape`` is empty.
    ShapeMismatchError
        If an axis length is negative or ``data`` has the wrong size.

    Notes
    -----
    Indexing is 1-based: ``t[1, 1]`` is the first element.
    """

    def __init__(
        self,
        shape: ShapeLike,
        dtype: Any = None,
        data: Optional[np.ndarray] = None,
    ) -> None:
        self._shape = _normalize_shape(shape)
        self._count = element_count(self._shape)
        if data is None:
            self._dtype = DEFAULT_DTYPE if dtype is None else np.dtype(dtype)
            self._data = np.zeros(self._count, dtype=self._dtype)
        else:
            buf = np.asarray(data)
            if dtype is not None:
                buf = buf.astype(dtype, copy=False)
            if buf.ndim != 1 or buf.shape[0] != self._count:
                raise ShapeMismatchError(
                    (self._count,), buf.shape, "Storage must be a flat buffer of element_count entries."
                )
            self._dtype = buf.dtype
            self._data = buf

    # ----------------------------
    # ITensor contract
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def data(self) -> np.ndarray:
        """
        Return the flat column-major storage buffer.

        Mutating the returned array mutates the tensor.
        """
        return self._data

    def get_linear(self, index: int) -> Any:
        return self._data[check_linear(index, self._count) - 1]

    def set_linear(self, index: int, value: Any) -> None:
        self._data[check_linear(index, self._count) - 1] = value

    def similar(self, dtype: Any = None, dims: Optional[Sequence[int]] = None) -> "Tensor":
        return Tensor(
            self._shape if dims is None else dims,
            self._dtype if dtype is None else dtype,
        )

    def zero(self) -> Any:
        return zero_of(self._dtype)

    # ----------------------------
    # Constructors
    # ----------------------------
    @classmethod
    def zeros(cls, shape: ShapeLike, dtype: Any = None) -> "Tensor":
        """Tensor of ``shape`` filled with the zero of ``dtype``."""
        return cls(shape, dtype)

    @classmethod
    def ones(cls, shape: ShapeLike, dtype: Any = None) -> "Tensor":
        """Tensor of ``shape`` filled with ones."""
        out = cls(shape, dtype)
        out._data.fill(1)
        return out

    @classmethod
    def full(cls, shape: ShapeLike, value: Any, dtype: Any = None) -> "Tensor":
        """
        Tensor of ``shape`` with every element set to ``value``.

        The element type is inferred from ``value`` when ``dtype`` is omitted
        (``object`` for non-numeric values).
        """
        out = cls(shape, _infer_dtype(value) if dtype is None else dtype)
        out.fill(value)
        return out

    @classmethod
    def from_numpy(cls, array: Any, dtype: Any = None) -> "Tensor":
        """
        Copy a NumPy array (or array-like) into a new tensor.

        ``A[i1, ..., iN]`` of the tensor equals ``array[i1 - 1, ..., iN - 1]``.

        Raises
        ------
        InvalidRankError
            For 0-d input.
        """
        arr = np.asarray(array, dtype=dtype)
        if arr.ndim == 0:
            raise InvalidRankError(0)
        return cls(arr.shape, arr.dtype, arr.ravel(order=STORAGE_ORDER).copy())

    @classmethod
    def from_list(cls, values: Sequence[Any], dtype: Any = None) -> "Tensor":
        """
        Build a tensor from a (possibly nested) list in natural row notation.

        ``Tensor.from_list([[1, 2], [3, 4]])[1, 2] == 2``. For ``object``
        dtype only flat lists are accepted, and elements are stored as-is.
        """
        if dtype is not None and np.dtype(dtype).kind == "O":
            buf = np.empty(len(values), dtype=object)
            for k, v in enumerate(values):
                buf[k] = v
            return cls((len(values),), object, buf)
        return cls.from_numpy(values, dtype)

    # ----------------------------
    # Conversions
    # ----------------------------
    def to_numpy(self) -> np.ndarray:
        """Return a NumPy array copy with the same shape and element positions."""
        return self._data.reshape(self._shape, order=STORAGE_ORDER).copy()

    def item(self) -> Any:
        """
        Return the only element of a single-element tensor.

        Raises
        ------
        UnsupportedOperationError
            If the tensor does not hold exactly one element.
        """
        if self._count != 1:
            raise UnsupportedOperationError(
                "item", f"tensor of shape {self._shape} has {self._count} elements"
            )
        return self._data[0]

    def __repr__(self) -> str:
        body = np.array2string(self.to_numpy(), separator=", ")
        return f"Tensor(shape={self._shape}, dtype={self._dtype}, data={body})"
