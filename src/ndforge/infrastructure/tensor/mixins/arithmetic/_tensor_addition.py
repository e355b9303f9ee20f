"""
Elementwise addition.

Position ``i`` of the result holds ``A[i] + B[i]``; a scalar operand is used
at every position. The element type is whatever ``np.add`` resolves for the
operand types, so ``int8 + 1`` stays ``int8`` while ``int8 + 1.5`` becomes
``float64``.

Elements are combined with Python's ``+``, so ``object`` tensors (including
tensors of tensors) add through their elements' own ``__add__``.
"""

import operator
from typing import Any

import numpy as np

from ..._elementwise import binary_op


def tensor_add(a: Any, b: Any) -> Any:
    """Return ``a + b`` elementwise, or ``NotImplemented`` for foreign operands."""
    return binary_op(a, b, np.add, operator.add, "add")
