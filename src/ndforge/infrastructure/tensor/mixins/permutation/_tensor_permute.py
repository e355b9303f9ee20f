"""
Axis permutation through the rank-specialization cache.

``permute(A, perm)`` builds ``P`` with ``shape(P)[k] = shape(A)[perm[k]]``
and ``P[i1, ..., iN] = A[i_perm[1], ..., i_perm[N]]``. The loop nest ranges
over the *output* shape; output axis ``k`` advances the source offset by the
stride of source axis ``perm[k]``. Loop variables are 1-based, so the sum of
``i_k * ps_k`` overshoots the 1-based source index by ``sum(ps)``; the
correction ``offset = 1 - sum(ps)`` is computed once and seeds the partial
offsets::

    for i2 in range(1, n2 + 1):
        o2 = o3 + i2 * ps2
        for i1 in range(1, n1 + 1):
            o1 = o2 + i1 * ps1
            k += 1
            put(k, get(o1))
"""

from __future__ import annotations

from typing import Sequence

from .....domain._errors import ShapeMismatchError
from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import strides
from .....domain.utils._specialization import LoopNestTemplate, specialize, unpack


PERMUTE = LoopNestTemplate(
    name="permute",
    captures=("pst", "offset", "get", "put"),
    prologue=lambda rank: [unpack("ps", rank, "pst"), f"o{rank + 1} = offset", "k = 0"],
    hoist=lambda axis, v: [f"o{axis} = o{axis + 1} + {v[axis - 1]} * ps{axis}"],
    body=lambda v: ["k += 1", "put(k, get(o1))"],
)


def check_permutation(perm: Sequence[int], rank: int) -> tuple[int, ...]:
    """
    Validate that ``perm`` is a bijection on ``1..rank``.

    Raises
    ------
    ShapeMismatchError
        If ``perm`` has the wrong length or is not a permutation.
    """
    perm = tuple(int(p) for p in perm)
    if sorted(perm) != list(range(1, rank + 1)):
        raise ShapeMismatchError(
            tuple(range(1, rank + 1)), perm, "Not a permutation of the axes."
        )
    return perm


def inverse_permutation(perm: Sequence[int]) -> tuple[int, ...]:
    """``iperm`` with ``iperm[perm[i]] = i`` (1-based)."""
    inv = [0] * len(perm)
    for i, p in enumerate(perm, start=1):
        inv[p - 1] = i
    return tuple(inv)


def permute(a: ITensor, perm: Sequence[int]) -> ITensor:
    """
    Rearrange the axes of ``a`` according to ``perm``.

    Parameters
    ----------
    a : ITensor
        Source tensor.
    perm : Sequence[int]
        1-based bijection on the axes; ``perm[k]`` is the source axis that
        becomes output axis ``k``.

    Returns
    -------
    ITensor
        New tensor of shape ``tuple(a.shape[p - 1] for p in perm)``.

    Raises
    ------
    ShapeMismatchError
        If ``perm`` is not a permutation of ``1..rank``.
    """
    shape = tuple(a.shape)
    perm = check_permutation(perm, len(shape))
    st = strides(shape)
    dims = tuple(shape[p - 1] for p in perm)
    pst = tuple(st[p - 1] for p in perm)

    out = a.similar(a.dtype, dims)
    routine = specialize(PERMUTE, len(shape))
    routine(dims, pst, 1 - sum(pst), a.get_linear, out.set_linear)
    return out


def ipermute(a: ITensor, perm: Sequence[int]) -> ITensor:
    """
    Undo ``permute(., perm)``: ``ipermute(permute(A, perm), perm) == A``.

    Raises
    ------
    ShapeMismatchError
        If ``perm`` is not a permutation of ``1..rank``.
    """
    perm = check_permutation(perm, len(a.shape))
    return permute(a, inverse_permutation(perm))
