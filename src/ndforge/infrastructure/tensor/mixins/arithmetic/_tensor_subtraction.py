"""
Elementwise subtraction.

Subtraction on ``bool`` tensors has no NumPy loop and is rejected with
``UnsupportedOperationError``, matching ``np.subtract``.
"""

import operator
from typing import Any

import numpy as np

from ..._elementwise import binary_op


def tensor_sub(a: Any, b: Any) -> Any:
    return binary_op(a, b, np.subtract, operator.sub, "subtract")
