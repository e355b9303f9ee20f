"""
Structural mixin derived from the tensor contract.

Counting, copying, filling, reshaping, iteration and whole-tensor equality,
implemented once on top of ``get_linear``/``set_linear``/``similar``.

Public API
----------
- ``TensorMixinMemory``
- ``TensorIterator``
"""

from ._tensor_iterator import TensorIterator
from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
    TensorIterator.__name__,
]
