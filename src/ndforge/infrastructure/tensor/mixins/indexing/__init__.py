"""
Multi-index access for Tensor operations.

- scalar coordinates : rank 1-4 fast paths plus the generic ``sub2ind`` path
- fancy gather       : selectors per axis, via the ``fancy_gather`` template
- fancy scatter      : broadcast or element-wise writes, via ``fancy_scatter``

Public API
----------
- ``TensorMixinIndexing``
- ``ALL`` (full-axis selector)
- ``normalize_specifiers`` (used by ``SubArray``)
"""

from ._tensor_fancy import ALL, FANCY_GATHER, FANCY_SCATTER, normalize_specifiers
from ._base import TensorMixinIndexing

__all__ = [
    TensorMixinIndexing.__name__,
    normalize_specifiers.__name__,
    "ALL",
    "FANCY_GATHER",
    "FANCY_SCATTER",
]
