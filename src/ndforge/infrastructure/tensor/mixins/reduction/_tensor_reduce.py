"""
Reduction engine.

``reduce(op, A, region)`` folds an associative operator over the axes in
``region``; the result has ``A``'s shape with every reduced axis collapsed to
length 1.

Generic path
------------
One loop nest over ``A``'s own shape, specialized per source rank. Each
axis carries an *output* stride: kept axes use the stride of the output
tensor, reduced axes use 0. The hoisted partial offsets therefore land every
source element on its output position, and because the nest visits ``A`` in
storage order the source side is a plain running counter::

    for i2 in range(1, n2 + 1):
        q2 = q3 + (i2 - 1) * o2
        for i1 in range(1, n1 + 1):
            q1 = q2 + (i1 - 1) * o1
            lin += 1
            acc_put(q1, op(acc_get(q1), get(lin)))

The outer iteration over output coordinates and the inner fold over reduced
axes are thus one nest. Each output position starts from the identity and
folds its sources in increasing linear order, so only associativity of
``op`` is relied upon.

Fast paths
----------
Rank-2 tensors reduced along exactly one axis (rows or columns) use plain
two-level loops with a local accumulator; the fold order is the same as the
generic path.
"""

from __future__ import annotations

import logging
from numbers import Number
from typing import Any, Callable, Iterable, Optional, Union

import numpy as np

from .....domain._errors import OutOfBoundsError
from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import element_count, is_index_scalar, strides
from .....domain.utils._operators import identity_for
from .....domain.utils._specialization import LoopNestTemplate, specialize, unpack

logger = logging.getLogger(__name__)

Region = Union[None, int, Iterable[int]]


REDUCE = LoopNestTemplate(
    name="reduce",
    captures=("ost", "get", "acc_get", "acc_put", "op"),
    prologue=lambda rank: [unpack("o", rank, "ost"), f"q{rank + 1} = 1", "lin = 0"],
    hoist=lambda axis, v: [f"q{axis} = q{axis + 1} + ({v[axis - 1]} - 1) * o{axis}"],
    body=lambda v: ["lin += 1", "acc_put(q1, op(acc_get(q1), get(lin)))"],
)


def normalize_region(region: Region, rank: int) -> tuple[int, ...]:
    """
    Sorted, de-duplicated 1-based axes of ``region``.

    ``None`` selects every axis; an empty sequence selects none.

    Raises
    ------
    OutOfBoundsError
        If an axis is outside ``1..rank``.
    """
    if region is None:
        return tuple(range(1, rank + 1))
    axes = (region,) if is_index_scalar(region) else tuple(region)
    for axis in axes:
        if axis < 1 or axis > rank:
            raise OutOfBoundsError(axis, rank, "Reduction axes are 1-based.")
    return tuple(sorted({int(a) for a in axes}))


def reduction_dtype(dtype: Any, identity: Any) -> np.dtype:
    """
    Element type of a reduction result: NumPy promotion of the element type
    with the identity value, or ``object`` for non-numeric identities.
    """
    if isinstance(identity, (Number, np.generic)):
        return np.result_type(np.dtype(dtype), identity)
    return np.dtype(object)


def accumulator_dtype(reducer: Callable[..., Any], dtype: Any) -> Optional[np.dtype]:
    """
    Widened result type NumPy uses when summing or multiplying ``dtype``.

    ``reducer`` is ``np.sum`` or ``np.prod``. For ``bool`` and integer types
    narrower than the platform integer this is the platform integer
    (``uint64`` for unsigned input), so ``int8`` sums do not wrap. Every
    other element type returns ``None``, leaving the result to
    :func:`reduction_dtype`.
    """
    dt = np.dtype(dtype)
    if dt.kind not in "biu":
        return None
    return reducer(np.empty(0, dtype=dt)).dtype


def _reduce_rows(a: ITensor, out: ITensor, op: Callable[..., Any]) -> None:
    n1, n2 = a.shape
    get, acc_get, acc_put = a.get_linear, out.get_linear, out.set_linear
    lin = 0
    for j in range(1, n2 + 1):
        acc = acc_get(j)
        for _ in range(n1):
            lin += 1
            acc = op(acc, get(lin))
        acc_put(j, acc)


def _reduce_cols(a: ITensor, out: ITensor, op: Callable[..., Any]) -> None:
    n1, n2 = a.shape
    get, acc_get, acc_put = a.get_linear, out.get_linear, out.set_linear
    for i in range(1, n1 + 1):
        acc = acc_get(i)
        for lin in range(i, i + n1 * n2, n1):
            acc = op(acc, get(lin))
        acc_put(i, acc)


def reduce(
    op: Callable[..., Any],
    a: ITensor,
    region: Region = None,
    *,
    init: Optional[Any] = None,
    dtype: Any = None,
) -> ITensor:
    """
    Fold ``op`` over the axes of ``a`` named in ``region``.

    Parameters
    ----------
    op : Callable
        Associative operator: ``op(x, y)`` combines, ``op()`` is the
        identity (see :class:`~ndforge.domain.utils._operators.AssociativeOp`).
    a : ITensor
        Source tensor.
    region : int, Iterable[int] or None
        1-based axis or axes to collapse; ``None`` collapses all of them.
    init : optional
        Starting value overriding the operator's identity.
    dtype : optional
        Result element type. Defaults to :func:`reduction_dtype` of the
        source type and the identity.

    Returns
    -------
    ITensor
        Tensor shaped like ``a`` with every reduced axis of length 1.

    Raises
    ------
    OutOfBoundsError
        If an axis in ``region`` is outside ``1..rank``.
    """
    shape = tuple(a.shape)
    rank = len(shape)
    axes = normalize_region(region, rank)
    identity = identity_for(op, a.dtype) if init is None else init

    out_dims = tuple(1 if k in axes else n for k, n in enumerate(shape, start=1))
    if dtype is None:
        dtype = reduction_dtype(a.dtype, identity)
    out = a.similar(dtype, out_dims)
    out.fill(identity)

    if rank == 2 and axes == (1,):
        logger.debug("reduce: rank-2 row fast path for %s", shape)
        _reduce_rows(a, out, op)
        return out
    if rank == 2 and axes == (2,):
        logger.debug("reduce: rank-2 column fast path for %s", shape)
        _reduce_cols(a, out, op)
        return out

    ost = tuple(
        0 if k in axes else s for k, s in enumerate(strides(out_dims), start=1)
    )
    routine = specialize(REDUCE, rank)
    routine(shape, ost, a.get_linear, out.get_linear, out.set_linear, op)
    return out


def accumulate(
    op: Callable[..., Any],
    a: ITensor,
    axis: int = 1,
    *,
    init: Optional[Any] = None,
    dtype: Any = None,
) -> ITensor:
    """
    Inclusive scan of ``op`` along one axis (``cumsum``/``cumprod``).

    Position ``x`` of the result is the fold, from the identity, of every
    source element on its line along ``axis`` up to and including ``x``.
    Runs in storage order: the predecessor along ``axis`` always has a lower
    linear index, so it has already been written.

    ``dtype`` overrides the result element type as in :func:`reduce`.

    Raises
    ------
    OutOfBoundsError
        If ``axis`` is outside ``1..rank``.
    """
    shape = tuple(a.shape)
    if axis < 1 or axis > len(shape):
        raise OutOfBoundsError(axis, len(shape), "Scan axis is 1-based.")
    identity = identity_for(op, a.dtype) if init is None else init
    if dtype is None:
        dtype = reduction_dtype(a.dtype, identity)
    out = a.similar(dtype, shape)

    step = strides(shape)[axis - 1]
    length = shape[axis - 1]
    get, out_get, put = a.get_linear, out.get_linear, out.set_linear
    for lin in range(1, element_count(shape) + 1):
        if ((lin - 1) // step) % length == 0:
            put(lin, op(identity, get(lin)))
        else:
            put(lin, op(out_get(lin - step), get(lin)))
    return out
