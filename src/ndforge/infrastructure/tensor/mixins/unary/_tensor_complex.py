"""
Complex-number parts: conjugate, real part and imaginary part.

Real-valued tensors are fixed points of ``conj`` and ``real`` (an equal copy
is returned), and their ``imag`` is the zero tensor of the same shape and
dtype. ``object`` tensors defer to each element's own ``conjugate`` /
``real`` / ``imag``, recursing into tensors of tensors for ``conj``.
"""

from typing import Any

import numpy as np

from .....domain._tensor import ITensor
from ..._elementwise import map_unary, zero_of


def _kind(t: ITensor) -> str:
    return np.dtype(t.dtype).kind


def _conj_element(x: Any) -> Any:
    if isinstance(x, ITensor):
        return x.conj()
    conjugate = getattr(x, "conjugate", None)
    return conjugate() if callable(conjugate) else x


def tensor_conj(a: ITensor) -> ITensor:
    if _kind(a) in "cO":
        return map_unary(a, _conj_element, a.dtype)
    return a.copy()


def tensor_real(a: ITensor) -> ITensor:
    kind = _kind(a)
    if kind == "c":
        dtype = np.real(np.empty(0, dtype=a.dtype)).dtype
        return map_unary(a, lambda x: x.real, dtype)
    if kind == "O":
        return map_unary(a, lambda x: getattr(x, "real", x), a.dtype)
    return a.copy()


def tensor_imag(a: ITensor) -> ITensor:
    kind = _kind(a)
    if kind == "c":
        dtype = np.imag(np.empty(0, dtype=a.dtype)).dtype
        return map_unary(a, lambda x: x.imag, dtype)
    if kind == "O":
        return map_unary(a, lambda x: getattr(x, "imag", 0), a.dtype)
    return a.similar(a.dtype, a.shape).fill(zero_of(a.dtype))
