"""
Reduction mixins for Tensor operations.

This package aggregates the reduction engine and the mixin exposing it:

- ``reduce``     : fold an associative operator over a region of axes
- ``accumulate`` : inclusive scan along one axis
- ``sum``/``prod``/``maximum``/``minimum``/``all``/``any``/``mean`` and
  ``cumsum``/``cumprod`` as methods

Public API
----------
- ``TensorMixinReduction``
- ``reduce``, ``accumulate``
"""

from ._tensor_reduce import REDUCE, accumulate, reduce
from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
    reduce.__name__,
    accumulate.__name__,
    "REDUCE",
]
