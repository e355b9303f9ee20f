"""
Multi-index access mixin (``ref`` / ``assign``).

Index specifiers are 1-based. Each position of an index tuple is either a
single integer or a selector (sequence, range, ndarray, tensor, boolean mask,
or ``ALL``). The mixin routes each call to one of three paths:

- all scalars, one per axis: direct stride arithmetic (rank 1-4 fast paths
  plus a generic N-ary path) and ``get_linear``/``set_linear``;
- a single specifier on a rank > 1 tensor: linear indexing;
- any selector: fancy gather/scatter through the specialization cache.

Python's ``t[i, j]`` / ``t[i, j] = v`` map onto ``ref`` / ``assign`` with the
same 1-based semantics.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

from typing_extensions import Self

from .....domain._errors import UnsupportedOperationError
from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import element_count, is_index_scalar
from ._tensor_fancy import gather, normalize_selector, normalize_specifiers, scatter
from ._tensor_scalar_index import linear_index


def _check_arity(t: ITensor, idx: tuple, op: str) -> None:
    if len(idx) == 0 or (len(idx) != 1 and len(idx) != len(t.shape)):
        raise UnsupportedOperationError(
            op, f"{len(idx)} indices for a rank-{len(t.shape)} tensor"
        )


class TensorMixinIndexing(ABC):
    """
    Mixin implementing ``ref``/``assign`` and the ``[]`` operators.

    Notes
    -----
    - Fancy results keep the source rank: a scalar specifier contributes an
      axis of length 1.
    - Out-of-range coordinates raise ``OutOfBoundsError`` when they are
      reached, not in a bulk pre-check.
    """

    def ref(self: ITensor, *idx: Any) -> Any:
        """
        Read one element, or gather a sub-tensor.

        Examples
        --------
        ``A.ref(2, 3)`` reads one element of a matrix; ``A.ref([1, 3], ALL)``
        gathers rows 1 and 3 into a ``2 x n`` tensor; ``A.ref(5)`` is the
        element at linear position 5.

        Raises
        ------
        OutOfBoundsError
            If a coordinate is outside its axis.
        UnsupportedOperationError
            If the number of specifiers is neither 1 nor the rank.
        """
        _check_arity(self, idx, "ref")
        shape = tuple(self.shape)

        if len(idx) == 1 and len(shape) != 1:
            spec = idx[0]
            if is_index_scalar(spec):
                return self.get_linear(int(spec))
            count = element_count(shape)
            return gather(self, (count,), (normalize_selector(spec, count),))

        if all(is_index_scalar(s) for s in idx):
            return self.get_linear(linear_index(shape, idx))
        return gather(self, shape, normalize_specifiers(shape, idx))

    def assign(self: ITensor, value: Any, *idx: Any) -> Self:
        """
        Write one element, or scatter into the selected positions.

        With selectors, a scalar ``value`` is broadcast to every selected
        position; a tensor/sequence ``value`` supplies one element per
        position in gather order (axis 1 fastest).

        Returns
        -------
        Self
            The receiver, to allow chaining.

        Raises
        ------
        OutOfBoundsError
            If a coordinate is outside its axis.
        ShapeMismatchError
            If ``value`` does not hold exactly one element per selected
            position.
        UnsupportedOperationError
            If the number of specifiers is neither 1 nor the rank.
        """
        _check_arity(self, idx, "assign")
        shape = tuple(self.shape)

        if len(idx) == 1 and len(shape) != 1:
            spec = idx[0]
            if is_index_scalar(spec):
                self.set_linear(int(spec), value)
                return self
            count = element_count(shape)
            scatter(self, (count,), (normalize_selector(spec, count),), value)
            return self

        if all(is_index_scalar(s) for s in idx):
            self.set_linear(linear_index(shape, idx), value)
            return self
        scatter(self, shape, normalize_specifiers(shape, idx), value)
        return self

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return self.ref(*key)
        return self.ref(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            self.assign(value, *key)
        else:
            self.assign(value, key)

    def view(self: ITensor, *idx: Any) -> "ITensor":
        """
        Build a non-owning :class:`SubArray` over the selected coordinates.
        """
        from ..._sub_array import SubArray

        return SubArray(self, *idx)
