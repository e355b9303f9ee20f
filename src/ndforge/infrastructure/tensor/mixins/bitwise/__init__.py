"""
Bitwise and logical mixin for Tensor operations.

- bitwise ``& | ^`` and reflected forms, ``_tensor_bitwise``
- ``logical_and`` / ``logical_or``, ``_tensor_logical``

Public API
----------
- ``TensorMixinBitwise``
"""

from ._base import TensorMixinBitwise

__all__ = [
    TensorMixinBitwise.__name__,
]
