"""
Arithmetic mixin and per-operator implementations for Tensor operations.

- addition       (``__add__`` / ``__radd__``), ``_tensor_addition``
- subtraction    (``__sub__`` / ``__rsub__``), ``_tensor_subtraction``
- multiplication (``__mul__`` / ``__rmul__``) and power, ``_tensor_multiplication``
- division       (``__truediv__``, ``__floordiv__``, ``__mod__`` and reflected
  forms), ``_tensor_division``
- ``zip_with``   : caller-supplied binary scalar function

The implementation modules are internal; only the mixin is exported.

Public API
----------
- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
