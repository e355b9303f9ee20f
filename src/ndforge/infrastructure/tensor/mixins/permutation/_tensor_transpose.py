"""
Direct index-swap transpose for vectors and matrices.
"""

from __future__ import annotations

from .....domain._errors import UnsupportedOperationError
from .....domain._tensor import ITensor


def transpose(a: ITensor) -> ITensor:
    """
    Transpose a rank-1 or rank-2 tensor.

    A length-``n`` vector becomes a ``1 x n`` row; an ``m x n`` matrix
    becomes ``n x m`` with ``T[j, i] = A[i, j]``.

    Raises
    ------
    UnsupportedOperationError
        For rank > 2 (use ``permute``).
    """
    shape = tuple(a.shape)
    get = a.get_linear

    if len(shape) == 1:
        (n,) = shape
        out = a.similar(a.dtype, (1, n))
        put = out.set_linear
        for i in range(1, n + 1):
            put(i, get(i))
        return out

    if len(shape) == 2:
        n1, n2 = shape
        out = a.similar(a.dtype, (n2, n1))
        put = out.set_linear
        lin = 0
        for j in range(1, n2 + 1):
            for i in range(1, n1 + 1):
                lin += 1
                put(j + (i - 1) * n2, get(lin))
        return out

    raise UnsupportedOperationError(
        "transpose", f"rank-{len(shape)} tensor; use permute"
    )


def ctranspose(a: ITensor) -> ITensor:
    """Conjugate transpose; equals ``transpose`` for real element types."""
    return transpose(a).conj()
