"""
Elementwise negations: arithmetic ``-A``, bitwise ``~A`` and logical not.

``-A`` and ``~A`` resolve their element type through ``np.negative`` and
``np.invert``; ``bool`` has no negation loop, while ``~`` on ``bool`` is
logical not. :func:`tensor_logical_not` always yields ``bool``.
"""

import operator

import numpy as np

from .....domain._tensor import ITensor
from ..._elementwise import map_unary, result_dtype


def tensor_neg(a: ITensor) -> ITensor:
    return map_unary(a, operator.neg, result_dtype(np.negative, a, op="negate"))


def tensor_invert(a: ITensor) -> ITensor:
    return map_unary(a, operator.invert, result_dtype(np.invert, a, op="complement"))


def tensor_logical_not(a: ITensor) -> ITensor:
    return map_unary(a, operator.not_, np.bool_)
