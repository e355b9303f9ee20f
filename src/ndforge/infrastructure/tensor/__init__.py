"""
NumPy-backed tensor infrastructure.

Public API
----------
- ``Tensor``   : dense column-major tensor
- ``SubArray`` : non-owning view
"""

from ._tensor import DEFAULT_DTYPE, Tensor
from ._sub_array import SubArray

__all__ = [
    Tensor.__name__,
    SubArray.__name__,
    "DEFAULT_DTYPE",
]
