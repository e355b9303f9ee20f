"""
Comparison mixin for Tensor operations.

- equality     (``==`` / ``!=``), ``_tensor_eq``
- greater-than (``>`` / ``>=``), ``_tensor_gt``
- less-than    (``<`` / ``<=``), ``_tensor_lt``
- truth value  (``__bool__``) of single-element tensors

Results are ``bool`` tensors.

Public API
----------
- ``TensorMixinComparison``
"""

from ._base import TensorMixinComparison

__all__ = [
    TensorMixinComparison.__name__,
]
