"""
Unary mixin for Tensor operations.

- ``__neg__``, ``__invert__``, ``logical_not``, ``_tensor_neg``
- ``__abs__``, ``_tensor_abs``
- ``conj``, ``real``, ``imag``, ``_tensor_complex``
- ``map`` : caller-supplied scalar function

Public API
----------
- ``TensorMixinUnary``
"""

from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
