"""
Fancy-index gather and scatter through the rank-specialization cache.

A fancy index selects, per axis, an explicit sequence of 1-based coordinates.
The loop nest ranges over the *lengths of the selectors* (not the source
shape). At each level the selected source coordinate is looked up,
bounds-checked, and folded into a partial linear offset, so the innermost
body only adds the axis-1 term::

    for i2 in range(1, n2 + 1):
        c2 = s2[i2 - 1]
        <check c2 against m2>
        p2 = p3 + (c2 - 1) * t2
        for i1 in range(1, n1 + 1):
            c1 = s1[i1 - 1]
            <check c1 against m1>
            p1 = p2 + (c1 - 1) * t1
            k += 1
            put(k, get(p1 + 1))

Traversal order is axis 1 fastest for every rank, matching storage order:
the gather output is written at a monotonically advancing linear counter
``k``, and a scatter consumes its source values in the same order.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Sequence

import numpy as np

from .....domain._errors import (
    OutOfBoundsError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from .....domain._layout import STORAGE_ORDER
from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import as_index, element_count, is_index_scalar, strides
from .....domain.utils._specialization import LoopNestTemplate, specialize, unpack
from ..._elementwise import is_tensor

ALL = slice(None)
"""Full-axis selector, the equivalent of ``:``."""


def _selector_prologue(rank: int) -> list[str]:
    return [
        unpack("s", rank, "sels"),
        unpack("t", rank, "sts"),
        unpack("m", rank, "lims"),
        f"p{rank + 1} = 0",
        "k = 0",
    ]


def _selector_hoist(axis: int, variables: Sequence[str]) -> list[str]:
    return [
        f"c{axis} = s{axis}[{variables[axis - 1]} - 1]",
        f"if c{axis} < 1 or c{axis} > m{axis}:",
        f"    raise OutOfBoundsError(c{axis}, m{axis}, 'Axis {axis}.')",
        f"p{axis} = p{axis + 1} + (c{axis} - 1) * t{axis}",
    ]


FANCY_GATHER = LoopNestTemplate(
    name="fancy_gather",
    captures=("sels", "sts", "lims", "get", "put"),
    prologue=_selector_prologue,
    hoist=_selector_hoist,
    body=lambda variables: ["k += 1", "put(k, get(p1 + 1))"],
    namespace={"OutOfBoundsError": OutOfBoundsError},
)

FANCY_SCATTER = LoopNestTemplate(
    name="fancy_scatter",
    captures=("sels", "sts", "lims", "put", "fetch"),
    prologue=_selector_prologue,
    hoist=_selector_hoist,
    body=lambda variables: ["k += 1", "put(p1 + 1, fetch(k))"],
    namespace={"OutOfBoundsError": OutOfBoundsError},
)


def _is_bool_dtype(dtype: Any) -> bool:
    return np.dtype(dtype).kind == "b"


def _mask_positions(mask: Sequence[Any], length: int) -> tuple[int, ...]:
    if len(mask) != length:
        raise ShapeMismatchError(length, len(mask), "Boolean mask length must match the axis.")
    return tuple(k for k, flag in enumerate(mask, start=1) if flag)


def normalize_selector(spec: Any, length: int) -> tuple[int, ...]:
    """
    Turn a non-scalar index specifier into a tuple of 1-based coordinates.

    Accepts ``ALL`` (``slice(None)``), ranges, lists, tuples, 1-D ndarrays,
    tensors (read in linear order) and boolean masks of the axis length.
    Coordinates are *not* range-checked here; that happens at access.

    Raises
    ------
    UnsupportedOperationError
        For slices other than ``ALL`` and for scalars that are not
        integers (``True``, ``1.5``).
    ShapeMismatchError
        For a boolean mask whose length differs from the axis.
    """
    if isinstance(spec, (Number, np.generic)):
        raise UnsupportedOperationError(
            "index", f"{type(spec).__name__} scalar {spec!r} is not a coordinate"
        )
    if isinstance(spec, slice):
        if spec != ALL:
            raise UnsupportedOperationError(
                "index", "only the full-axis slice (ALL) is supported"
            )
        return tuple(range(1, length + 1))
    if is_tensor(spec):
        values = list(spec)
        if _is_bool_dtype(spec.dtype):
            return _mask_positions(values, length)
        return tuple(as_index(v) for v in values)
    if isinstance(spec, np.ndarray):
        flat = spec.ravel(order=STORAGE_ORDER)
        if _is_bool_dtype(flat.dtype):
            return _mask_positions(list(flat), length)
        return tuple(as_index(v) for v in flat)
    values = list(spec)
    if values and all(isinstance(v, (bool, np.bool_)) for v in values):
        return _mask_positions(values, length)
    return tuple(as_index(v) for v in values)


def normalize_specifiers(shape: Sequence[int], specs: Sequence[Any]) -> tuple[tuple[int, ...], ...]:
    """One coordinate tuple per axis; scalars become length-1 tuples."""
    return tuple(
        (int(s),) if is_index_scalar(s) else normalize_selector(s, shape[axis])
        for axis, s in enumerate(specs)
    )


def gather(src: ITensor, shape: Sequence[int], sels: Sequence[Sequence[int]]) -> ITensor:
    """
    Gather the elements selected by ``sels`` from ``src``.

    Parameters
    ----------
    src : ITensor
        Source tensor.
    shape : Sequence[int]
        The shape ``sels`` indexes into (``src.shape``, or ``(numel,)`` for
        linear indexing).
    sels : Sequence[Sequence[int]]
        One coordinate sequence per axis of ``shape``.

    Returns
    -------
    ITensor
        Tensor of shape ``tuple(len(s) for s in sels)``.
    """
    shape = tuple(shape)
    dims = tuple(len(s) for s in sels)
    out = src.similar(src.dtype, dims)
    routine = specialize(FANCY_GATHER, len(shape))
    routine(dims, tuple(sels), strides(shape), shape, src.get_linear, out.set_linear)
    return out


def _fetcher(value: Any, count: int) -> Any:
    if is_tensor(value):
        if element_count(value.shape) != count:
            raise ShapeMismatchError(count, element_count(value.shape), "One value per selected position.")
        return value.get_linear
    if isinstance(value, np.ndarray):
        values = list(value.ravel(order=STORAGE_ORDER))
    elif isinstance(value, (list, tuple, range)):
        values = list(value)
    else:
        return lambda k: value
    if len(values) != count:
        raise ShapeMismatchError(count, len(values), "One value per selected position.")
    return lambda k: values[k - 1]


def scatter(
    dst: ITensor, shape: Sequence[int], sels: Sequence[Sequence[int]], value: Any
) -> None:
    """
    Write ``value`` to every position selected by ``sels`` in ``dst``.

    A scalar ``value`` is broadcast. A tensor, ndarray or sequence supplies
    one element per selected position, consumed in gather order (axis 1
    fastest).

    Raises
    ------
    ShapeMismatchError
        If a non-scalar ``value`` has the wrong element count.
    OutOfBoundsError
        If a selected coordinate is outside ``shape``.
    """
    shape = tuple(shape)
    dims = tuple(len(s) for s in sels)
    fetch = _fetcher(value, element_count(dims))
    routine = specialize(FANCY_SCATTER, len(shape))
    routine(dims, tuple(sels), strides(shape), shape, dst.set_linear, fetch)
