"""
Shared helpers for elementwise Tensor operations.

Every elementwise operator in ndforge is "apply a scalar function at every
linear position". Rank never enters the picture, so these helpers loop over
``1..element_count`` with ``get_linear``/``set_linear`` and need no
specialized loop nest.

Result element types follow NumPy's ufunc type resolution: the ufunc is
applied to zero-length arrays carrying the operand dtypes (Python scalars
are passed through as-is, so they promote weakly).
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Callable, Optional, Union

import numpy as np

from ...domain._errors import ShapeMismatchError, UnsupportedOperationError
from ...domain._tensor import ITensor
from ...domain.utils._index_algebra import element_count


def is_tensor(x: Any) -> bool:
    """Return True if ``x`` satisfies the tensor contract."""
    return isinstance(x, ITensor)


Operand = Union[ITensor, Number]
"""Operands accepted by the elementwise operators: tensors and scalars."""


def is_operand(x: Any) -> bool:
    """True for tensors and scalars (Python or NumPy numbers)."""
    return is_tensor(x) or isinstance(x, (Number, np.generic))


def _promotion_operand(x: Any) -> Any:
    if is_tensor(x):
        return np.empty(0, dtype=x.dtype)
    if isinstance(x, np.ndarray):
        return np.empty(0, dtype=x.dtype)
    return x


def result_dtype(ufunc: np.ufunc, *operands: Any, op: Optional[str] = None) -> np.dtype:
    """
    Resolve the result dtype of ``ufunc`` applied to ``operands``.

    Raises
    ------
    UnsupportedOperationError
        If NumPy has no loop for the operand types (e.g. bitwise ops on
        floats).
    """
    try:
        return ufunc(*(_promotion_operand(x) for x in operands)).dtype
    except TypeError as exc:
        dtypes = tuple(
            str(x.dtype) if is_tensor(x) else type(x).__name__ for x in operands
        )
        raise UnsupportedOperationError(
            op or ufunc.__name__, f"no implementation for element types {dtypes}"
        ) from exc


def zero_of(dtype: Any) -> Any:
    """Zero value of an element type (plain ``0`` for ``object``)."""
    dt = np.dtype(dtype)
    if dt.kind == "O":
        return 0
    return dt.type(0)


def binary_shape_check(a: ITensor, b: ITensor) -> None:
    """
    Validate shape compatibility for binary elementwise operations.

    No broadcasting: shapes must be identical.

    Raises
    ------
    ShapeMismatchError
        If shapes do not match exactly.
    """
    if tuple(a.shape) != tuple(b.shape):
        raise ShapeMismatchError(tuple(a.shape), tuple(b.shape))


def map_unary(a: ITensor, fn: Callable[[Any], Any], dtype: Any) -> ITensor:
    """
    Allocate a tensor shaped like ``a`` holding ``fn(a[i])`` at every position.
    """
    out = a.similar(dtype, a.shape)
    get, put = a.get_linear, out.set_linear
    for i in range(1, element_count(a.shape) + 1):
        put(i, fn(get(i)))
    return out


def map_binary(a: Any, b: Any, fn: Callable[[Any, Any], Any], dtype: Any) -> ITensor:
    """
    Apply ``fn`` pairwise at every linear position.

    Either operand may be a scalar, which is broadcast against every position
    of the tensor operand. Two tensor operands must have identical shapes.

    Raises
    ------
    ShapeMismatchError
        If both operands are tensors with different shapes.
    """
    a_is_t, b_is_t = is_tensor(a), is_tensor(b)
    if a_is_t and b_is_t:
        binary_shape_check(a, b)
    like = a if a_is_t else b
    out = like.similar(dtype, like.shape)
    put = out.set_linear
    n = element_count(like.shape)

    if a_is_t and b_is_t:
        get_a, get_b = a.get_linear, b.get_linear
        for i in range(1, n + 1):
            put(i, fn(get_a(i), get_b(i)))
    elif a_is_t:
        get_a = a.get_linear
        for i in range(1, n + 1):
            put(i, fn(get_a(i), b))
    else:
        get_b = b.get_linear
        for i in range(1, n + 1):
            put(i, fn(a, get_b(i)))
    return out


def binary_op(
    a: Any,
    b: Any,
    ufunc: np.ufunc,
    fn: Callable[[Any, Any], Any],
    name: str,
) -> Any:
    """
    Dispatch helper shared by the operator modules.

    The result dtype is resolved from ``ufunc``; the values come from ``fn``.
    Returns ``NotImplemented`` for unsupported operand types so Python can
    try the reflected operation.
    """
    if not (is_operand(a) and is_operand(b)):
        return NotImplemented
    dtype = result_dtype(ufunc, a, b, op=name)
    return map_binary(a, b, fn, dtype)


def predicate_op(a: Any, b: Any, fn: Callable[[Any, Any], Any]) -> Any:
    """Like :func:`binary_op`, but the result is always a ``bool`` tensor."""
    if not (is_operand(a) and is_operand(b)):
        return NotImplemented
    return map_binary(a, b, fn, np.bool_)
