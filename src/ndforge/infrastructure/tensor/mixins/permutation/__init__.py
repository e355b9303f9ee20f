"""
Permutation mixins for Tensor operations.

- ``permute``/``ipermute``     : general axis permutation via the cache
- ``transpose``/``ctranspose`` : rank-1 and rank-2 index-swap special cases

Public API
----------
- ``TensorMixinPermutation``
- ``permute``, ``ipermute``, ``transpose``, ``ctranspose``
"""

from ._tensor_permute import PERMUTE, ipermute, permute
from ._tensor_transpose import ctranspose, transpose
from ._base import TensorMixinPermutation

__all__ = [
    TensorMixinPermutation.__name__,
    permute.__name__,
    ipermute.__name__,
    transpose.__name__,
    ctranspose.__name__,
    "PERMUTE",
]
