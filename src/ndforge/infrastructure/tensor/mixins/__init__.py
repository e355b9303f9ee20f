"""
Tensor mixin families.

Each subpackage implements one family of operations purely in terms of the
``ITensor`` contract, so `Tensor` and `SubArray` share every implementation.
"""
