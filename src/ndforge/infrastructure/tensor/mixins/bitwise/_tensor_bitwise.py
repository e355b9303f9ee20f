"""
Elementwise bitwise ``&``, ``|`` and ``^``.

Result types follow NumPy's integer/bool resolution: two ``bool`` tensors
give ``bool``, mixed widths widen. Floating-point and complex elements have
no bitwise loop and raise ``UnsupportedOperationError``.
"""

import operator
from typing import Any

import numpy as np

from ..._elementwise import binary_op


def tensor_and(a: Any, b: Any) -> Any:
    return binary_op(a, b, np.bitwise_and, operator.and_, "bitwise_and")


def tensor_or(a: Any, b: Any) -> Any:
    return binary_op(a, b, np.bitwise_or, operator.or_, "bitwise_or")


def tensor_xor(a: Any, b: Any) -> Any:
    return binary_op(a, b, np.bitwise_xor, operator.xor, "bitwise_xor")
