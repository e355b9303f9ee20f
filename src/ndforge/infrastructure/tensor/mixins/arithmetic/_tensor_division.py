"""
Elementwise division: true, floor and modulo.

True division of integer tensors produces ``float64`` (NumPy's
``true_divide`` resolution). Floor division and modulo keep integer types
and follow Python's sign convention: the remainder takes the divisor's sign.
"""

import operator
from typing import Any

import numpy as np

from ..._elementwise import binary_op


def tensor_truediv(a: Any, b: Any) -> Any:
    return binary_op(a, b, np.true_divide, operator.truediv, "divide")


def tensor_floordiv(a: Any, b: Any) -> Any:
    return binary_op(a, b, np.floor_divide, operator.floordiv, "floordiv")


def tensor_mod(a: Any, b: Any) -> Any:
    return binary_op(a, b, np.remainder, operator.mod, "mod")
