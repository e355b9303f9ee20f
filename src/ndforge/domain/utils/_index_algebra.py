"""
Shape and linear-index algebra.

Pure functions converting between 1-based multi-dimensional coordinates and
1-based linear storage offsets for arrays of any rank, under the column-major
layout of :mod:`ndforge.domain._layout`.

With strides ``s_1 = 1`` and ``s_k = s_{k-1} * shape[k-1]``::

    linear = coords[1] + sum_{k=2..rank} (coords[k] - 1) * s_k

``ind2sub`` inverts this by successive div/rem against the cumulative
products, from the highest axis down to axis 1.
"""

from __future__ import annotations

from numbers import Integral, Real
from typing import Any, Iterable, Sequence, Union

import numpy as np

from .._errors import InvalidRankError, OutOfBoundsError, ShapeMismatchError

Coordinate = Union[int, Sequence[int]]


def is_index_scalar(value: Any) -> bool:
    """
    Return True for a single integer coordinate (Python or NumPy int).

    Booleans are not coordinates: ``True`` is a mask entry, not position 1.
    """
    return isinstance(value, Integral) and not isinstance(value, (bool, np.bool_))


def as_index(value: Any) -> int:
    """
    Convert one coordinate to a plain int.

    Integer-valued floats (``2.0``) are accepted; anything with a fractional
    part is rejected rather than truncated.

    Raises
    ------
    OutOfBoundsError
        If ``value`` is not an integral number.
    """
    if is_index_scalar(value):
        return int(value)
    if isinstance(value, Real) and not isinstance(value, bool) and float(value).is_integer():
        return int(value)
    raise OutOfBoundsError(value, "integer coordinates", "Coordinates must be integral.")


def as_shape(shape: Iterable[int]) -> tuple[int, ...]:
    """
    Normalize a shape-like iterable into a tuple of non-negative ints.

    Raises
    ------
    ShapeMismatchError
        If any axis length is negative.
    """
    dims = tuple(int(n) for n in shape)
    for n in dims:
        if n < 0:
            raise ShapeMismatchError(
                "non-negative axis lengths", dims, "Axis lengths must be >= 0."
            )
    return dims


def element_count(shape: Sequence[int]) -> int:
    """
    Return the product of the axis lengths.

    Raises
    ------
    InvalidRankError
        If ``shape`` has rank 0.
    """
    if len(shape) == 0:
        raise InvalidRankError(0)
    count = 1
    for n in shape:
        count *= int(n)
    return count


def strides(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Column-major strides of ``shape``: ``(1, n1, n1*n2, ...)``.
    """
    out = []
    step = 1
    for n in shape:
        out.append(step)
        step *= int(n)
    return tuple(out)


def check_linear(index: int, count: int) -> int:
    """
    Validate a 1-based linear index against an element count.

    Returns
    -------
    int
        ``index`` as a plain int.

    Raises
    ------
    OutOfBoundsError
        If ``index`` is outside ``1..count``.
    """
    i = as_index(index)
    if i < 1 or i > count:
        raise OutOfBoundsError(i, count)
    return i


def _sub2ind_scalar(dims: tuple[int, ...], st: tuple[int, ...], coords: Sequence[int]) -> int:
    linear = 1
    for k, c in enumerate(coords):
        c = as_index(c)
        if c < 1 or c > dims[k]:
            raise OutOfBoundsError(tuple(coords), dims, f"Axis {k + 1}.")
        linear += (c - 1) * st[k]
    return linear


def sub2ind(shape: Sequence[int], *coords: Coordinate) -> Union[int, list[int]]:
    """
    Convert 1-based coordinates to a 1-based linear index.

    Parameters
    ----------
    shape : Sequence[int]
        Array shape.
    *coords : int or Sequence[int]
        One coordinate per axis. When any coordinate is a sequence, every
        sequence must have the same length; scalars are repeated against them
        and a list of linear indices is returned, in input order.

    Returns
    -------
    int or list[int]
        The linear index, or one linear index per input position.

    Raises
    ------
    OutOfBoundsError
        If ``shape`` has rank 0 or any coordinate lies outside its axis.
    ShapeMismatchError
        If the number of coordinates differs from the rank, or the coordinate
        sequences have different lengths.
    """
    dims = as_shape(shape)
    if len(dims) == 0:
        raise OutOfBoundsError(coords, dims, "A rank-0 shape has no linear index.")
    if len(coords) != len(dims):
        raise ShapeMismatchError(len(dims), len(coords), "One coordinate per axis is required.")

    st = strides(dims)
    if all(is_index_scalar(c) for c in coords):
        return _sub2ind_scalar(dims, st, coords)

    lengths = {len(c) for c in coords if not is_index_scalar(c)}
    if len(lengths) != 1:
        raise ShapeMismatchError(
            "equal-length coordinate vectors", sorted(lengths)
        )
    (n,) = lengths
    columns = [
        [c] * n if is_index_scalar(c) else [as_index(x) for x in c] for c in coords
    ]
    return [_sub2ind_scalar(dims, st, point) for point in zip(*columns)]


def ind2sub(shape: Sequence[int], index: Union[int, Sequence[int]]):
    """
    Convert a 1-based linear index to 1-based coordinates.

    Parameters
    ----------
    shape : Sequence[int]
        Array shape.
    index : int or Sequence[int]
        Linear index, or a sequence of linear indices.

    Returns
    -------
    tuple[int, ...] or tuple[list[int], ...]
        The coordinate tuple for a scalar index; for a sequence of indices, one
        coordinate list per axis (all of the input's length).

    Raises
    ------
    OutOfBoundsError
        If ``shape`` has rank 0 or an index is outside ``1..element_count``.
    """
    dims = as_shape(shape)
    if len(dims) == 0:
        raise OutOfBoundsError(index, dims, "A rank-0 shape has no linear index.")
    count = element_count(dims)
    st = strides(dims)

    def _one(i: int) -> tuple[int, ...]:
        rem = check_linear(i, count) - 1
        coords = [0] * len(dims)
        for k in range(len(dims) - 1, -1, -1):
            q, rem = divmod(rem, st[k])
            coords[k] = q + 1
        return tuple(coords)

    if is_index_scalar(index):
        return _one(index)

    points = [_one(i) for i in index]
    return tuple([p[k] for p in points] for k in range(len(dims)))
