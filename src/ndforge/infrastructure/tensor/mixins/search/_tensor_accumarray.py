"""
Additive scatter into a fresh matrix.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import numpy as np

from .....domain._errors import ShapeMismatchError
from .....domain._layout import STORAGE_ORDER
from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import as_shape
from ..._elementwise import is_tensor, zero_of
from ..indexing._tensor_scalar_index import linear_index

logger = logging.getLogger(__name__)


def _as_values(x: Any) -> Optional[list]:
    """Flat list of the elements of a tensor/ndarray/sequence, ``None`` for scalars."""
    if is_tensor(x):
        return x.to_list()
    if isinstance(x, np.ndarray):
        return list(x.ravel(order=STORAGE_ORDER))
    if isinstance(x, (list, tuple, range)):
        return list(x)
    return None


def _values_dtype(v: Any) -> np.dtype:
    if is_tensor(v):
        return np.dtype(v.dtype)
    if isinstance(v, np.ndarray):
        return v.dtype
    if isinstance(v, (list, tuple, range)):
        return np.asarray(list(v)).dtype if len(v) else np.dtype(np.float64)
    return np.result_type(v)


def accumarray(
    rows: Sequence[int],
    cols: Sequence[int],
    values: Any,
    m: int,
    n: int,
    dtype: Any = None,
) -> "ITensor":
    """
    Build an ``m x n`` tensor by adding ``values[k]`` at ``(rows[k], cols[k])``.

    Duplicate coordinate pairs accumulate by addition. A scalar ``values`` is
    added once per coordinate pair.

    Parameters
    ----------
    rows, cols : Sequence[int]
        1-based row and column coordinates (lists, tuples, ndarrays or
        tensors), of equal length.
    values : scalar or Sequence
        One value per pair, or a scalar.
    m, n : int
        Result shape.
    dtype : optional
        Result element type; inferred from ``values`` when omitted.

    Raises
    ------
    ShapeMismatchError
        If ``rows``, ``cols`` and a non-scalar ``values`` differ in length.
    OutOfBoundsError
        If a coordinate pair lies outside ``m x n``, or a coordinate is not
        integral (``1.7`` is rejected, not truncated).

    Examples
    --------
    ``accumarray([1, 1], [1, 1], [3, 4], 2, 2)`` has ``7`` at ``(1, 1)`` and
    zeros elsewhere.
    """
    from ..._tensor import Tensor

    shape = as_shape((m, n))
    ii = _as_values(rows)
    jj = _as_values(cols)
    if ii is None or jj is None:
        raise ShapeMismatchError("coordinate sequences", (rows, cols))
    if len(ii) != len(jj):
        raise ShapeMismatchError(len(ii), len(jj), "Row and column coordinates differ in length.")
    vv = _as_values(values)
    if vv is not None and len(vv) != len(ii):
        raise ShapeMismatchError(len(ii), len(vv), "One value per coordinate pair.")

    dt = _values_dtype(values) if dtype is None else np.dtype(dtype)
    out = Tensor.full(shape, zero_of(dt), dtype=dt)
    get, put = out.get_linear, out.set_linear
    for k, (i, j) in enumerate(zip(ii, jj)):
        lin = linear_index(shape, (i, j))
        put(lin, get(lin) + (values if vv is None else vv[k]))
    logger.debug("accumarray: %d contributions into %s", len(ii), shape)
    return out
