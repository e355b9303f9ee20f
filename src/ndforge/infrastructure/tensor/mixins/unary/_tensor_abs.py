"""
Elementwise absolute value.

Complex elements give their magnitude, so ``complex128`` input produces a
``float64`` tensor, as with ``np.absolute``.
"""

import numpy as np

from .....domain._tensor import ITensor
from ..._elementwise import map_unary, result_dtype


def tensor_abs(a: ITensor) -> ITensor:
    return map_unary(a, abs, result_dtype(np.absolute, a, op="abs"))
