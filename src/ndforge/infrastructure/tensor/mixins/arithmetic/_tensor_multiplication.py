"""
Elementwise multiplication and power.

``*`` is the Hadamard product: there is no matrix product anywhere in
ndforge. ``**`` raises each element to the matching exponent.
"""

import operator
from typing import Any

import numpy as np

from ..._elementwise import binary_op


def tensor_mul(a: Any, b: Any) -> Any:
    """Return ``a * b`` elementwise."""
    return binary_op(a, b, np.multiply, operator.mul, "multiply")


def tensor_pow(a: Any, b: Any) -> Any:
    """Return ``a ** b`` elementwise."""
    return binary_op(a, b, np.power, operator.pow, "power")
