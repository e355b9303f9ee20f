"""
Search and accumulation for Tensor operations.

- ``find``       : nonzero positions (linear for vectors, per-axis otherwise)
- ``nnz``        : nonzero count
- ``accumarray`` : additive scatter into a fresh ``m x n`` tensor

Public API
----------
- ``TensorMixinSearch``
- ``find``, ``nnz``, ``accumarray``
"""

from ._tensor_find import FIND, find, nnz
from ._tensor_accumarray import accumarray
from ._base import TensorMixinSearch

__all__ = [
    TensorMixinSearch.__name__,
    find.__name__,
    nnz.__name__,
    accumarray.__name__,
    "FIND",
]
