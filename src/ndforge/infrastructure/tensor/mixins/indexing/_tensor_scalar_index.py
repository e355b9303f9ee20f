"""
Scalar-coordinate fast paths.

When every index is a single integer the coordinate count is fixed at the
call site, so the linear offset is computed directly from the stride formula
without going through the specialization cache. Ranks 1 through 4 get a
dedicated function; anything larger falls back to the generic
:func:`~ndforge.domain.utils._index_algebra.sub2ind`.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from .....domain._errors import OutOfBoundsError
from .....domain.utils._index_algebra import as_index, sub2ind


def _oob(coords: tuple, shape: Sequence[int], axis: int) -> OutOfBoundsError:
    return OutOfBoundsError(coords, tuple(shape), f"Axis {axis}.")


def _linear1(shape: Sequence[int], i: int) -> int:
    i = as_index(i)
    if i < 1 or i > shape[0]:
        raise _oob((i,), shape, 1)
    return i


def _linear2(shape: Sequence[int], i: int, j: int) -> int:
    n1, n2 = shape
    i, j = as_index(i), as_index(j)
    if i < 1 or i > n1:
        raise _oob((i, j), shape, 1)
    if j < 1 or j > n2:
        raise _oob((i, j), shape, 2)
    return i + (j - 1) * n1


def _linear3(shape: Sequence[int], i: int, j: int, k: int) -> int:
    n1, n2, n3 = shape
    i, j, k = as_index(i), as_index(j), as_index(k)
    if i < 1 or i > n1:
        raise _oob((i, j, k), shape, 1)
    if j < 1 or j > n2:
        raise _oob((i, j, k), shape, 2)
    if k < 1 or k > n3:
        raise _oob((i, j, k), shape, 3)
    return i + n1 * ((j - 1) + n2 * (k - 1))


def _linear4(shape: Sequence[int], i: int, j: int, k: int, l: int) -> int:
    n1, n2, n3, n4 = shape
    i, j, k, l = as_index(i), as_index(j), as_index(k), as_index(l)
    if i < 1 or i > n1:
        raise _oob((i, j, k, l), shape, 1)
    if j < 1 or j > n2:
        raise _oob((i, j, k, l), shape, 2)
    if k < 1 or k > n3:
        raise _oob((i, j, k, l), shape, 3)
    if l < 1 or l > n4:
        raise _oob((i, j, k, l), shape, 4)
    return i + n1 * ((j - 1) + n2 * ((k - 1) + n3 * (l - 1)))


_FAST_PATHS: Dict[int, Callable[..., int]] = {
    1: _linear1,
    2: _linear2,
    3: _linear3,
    4: _linear4,
}


def linear_index(shape: Sequence[int], coords: Sequence[int]) -> int:
    """
    1-based linear offset of scalar ``coords`` in ``shape``.

    ``len(coords)`` must equal the rank; callers check this.

    Raises
    ------
    OutOfBoundsError
        If any coordinate is outside its axis or is not integral.
    """
    fast = _FAST_PATHS.get(len(coords))
    if fast is not None:
        return fast(shape, *coords)
    return sub2ind(shape, *coords)
