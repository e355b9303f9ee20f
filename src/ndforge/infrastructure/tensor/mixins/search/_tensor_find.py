"""
Nonzero search.

``find`` runs two passes over the source. The first counts the nonzero
elements so the per-axis coordinate lists can be allocated at their exact
length; the second is one loop nest over the full shape (specialized per
rank) that writes every loop variable at a shared running position ``w``
whenever the visited element differs from the zero of its element type::

    for i2 in range(1, n2 + 1):
        for i1 in range(1, n1 + 1):
            lin += 1
            if nonzero(get(lin)):
                w += 1
                r1[w - 1] = i1
                r2[w - 1] = i2

Coordinates therefore come out in increasing linear order.
"""

from __future__ import annotations

from typing import Any, Callable, Union

from .....domain._tensor import ITensor
from .....domain.utils._index_algebra import element_count
from .....domain.utils._specialization import LoopNestTemplate, specialize, unpack


def _find_body(variables: tuple[str, ...]) -> list[str]:
    lines = ["lin += 1", "if nonzero(get(lin)):", "    w += 1"]
    lines += [f"    r{k}[w - 1] = {v}" for k, v in enumerate(variables, start=1)]
    return lines


FIND = LoopNestTemplate(
    name="find",
    captures=("get", "nonzero", "outs"),
    prologue=lambda rank: [unpack("r", rank, "outs"), "lin = 0", "w = 0"],
    body=_find_body,
    epilogue=lambda rank: "w",
)


def _nonzero_test(a: ITensor) -> Callable[[Any], bool]:
    zero = a.zero()
    return lambda x: bool(x != zero)


def nnz(a: ITensor) -> int:
    """Number of elements that differ from the zero of the element type."""
    nonzero = _nonzero_test(a)
    get = a.get_linear
    return sum(1 for i in range(1, element_count(a.shape) + 1) if nonzero(get(i)))


def find(a: ITensor) -> Union[list[int], tuple[list[int], ...]]:
    """
    Locate the nonzero elements of ``a``.

    Returns
    -------
    list[int] or tuple[list[int], ...]
        For a rank-1 tensor, the 1-based linear positions of the nonzero
        elements. For higher ranks, one coordinate list per axis, all of
        length ``nnz(a)``, so that ``(r1[k], ..., rN[k])`` is the ``k``-th
        nonzero element in linear order.
    """
    shape = tuple(a.shape)
    count = nnz(a)
    outs = tuple([0] * count for _ in shape)
    routine = specialize(FIND, len(shape))
    routine(shape, a.get_linear, _nonzero_test(a), outs)
    if len(shape) == 1:
        return outs[0]
    return outs
