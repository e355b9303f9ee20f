"""
Non-owning sub-views.

A `SubArray` stores its parent and one coordinate sequence per parent axis;
it copies no data. View coordinate ``(i1, ..., iN)`` maps to parent
coordinate ``(indexes[1][i1], ..., indexes[N][iN])`` and every read or write
is forwarded to the parent's ``ref``/``assign``. Changes made to the parent
through any alias are visible through the view immediately.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ...domain._errors import UnsupportedOperationError
from ...domain._tensor import ITensor
from ...domain.utils._index_algebra import check_linear, element_count, ind2sub
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.bitwise import TensorMixinBitwise
from .mixins.comparison import TensorMixinComparison
from .mixins.indexing import TensorMixinIndexing, normalize_specifiers
from .mixins.memory import TensorMixinMemory
from .mixins.permutation import TensorMixinPermutation
from .mixins.reduction import TensorMixinReduction
from .mixins.search import TensorMixinSearch
from .mixins.unary import TensorMixinUnary


class SubArray(
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
    Coordinate-translating view over a parent tensor.

    Parameters
    ----------
    parent : ITensor
        Tensor being viewed. Any contract-conforming type works, including
        another `SubArray`.
    *indexes
        One specifier per parent axis: an integer (the axis has length 1 in
        the view), a coordinate sequence, a boolean mask, or ``ALL``.

    Raises
    ------
    UnsupportedOperationError
        If the number of specifiers differs from the parent's rank.

    Notes
    -----
    Parent coordinates are not validated up front; an out-of-range entry in
    ``indexes`` surfaces the parent's ``OutOfBoundsError`` when it is read or
    written.
    """

    def __init__(self, parent: ITensor, *indexes: Any) -> None:
        rank = len(parent.shape)
        if len(indexes) != rank:
            raise UnsupportedOperationError(
                "view", f"{len(indexes)} specifiers for a rank-{rank} tensor"
            )
        self._parent = parent
        self._indexes = normalize_specifiers(tuple(parent.shape), indexes)
        self._dims = tuple(len(ix) for ix in self._indexes)
        self._count = element_count(self._dims)

    @property
    def parent(self) -> ITensor:
        return self._parent

    @property
    def indexes(self) -> tuple[tuple[int, ...], ...]:
        """Per-axis parent coordinates selected by this view."""
        return self._indexes

    @property
    def shape(self) -> tuple[int, ...]:
        return self._dims

    @property
    def dtype(self) -> Any:
        return self._parent.dtype

    def _parent_coords(self, index: int) -> tuple[int, ...]:
        coords = ind2sub(self._dims, check_linear(index, self._count))
        return tuple(ix[c - 1] for ix, c in zip(self._indexes, coords))

    def get_linear(self, index: int) -> Any:
        return self._parent.ref(*self._parent_coords(index))

    def set_linear(self, index: int, value: Any) -> None:
        self._parent.assign(value, *self._parent_coords(index))

    def similar(self, dtype: Any = None, dims: Optional[Sequence[int]] = None) -> ITensor:
        """Allocate through the parent, so copies of a view are dense."""
        return self._parent.similar(
            self.dtype if dtype is None else dtype,
            self._dims if dims is None else dims,
        )

    def zero(self) -> Any:
        return self._parent.zero()

    def __repr__(self) -> str:
        return f"SubArray(shape={self._dims}, dtype={self.dtype}, parent={type(self._parent).__name__})"
