"""
ndforge: rank-polymorphic N-d arrays with 1-based, column-major indexing.

Every operation (indexing, elementwise arithmetic, reductions, permutation,
search) works for any rank. Operations that need a loop nest as deep as the
rank obtain it from a process-wide cache of routines specialized per
(template, rank), built on first use.
"""

from .domain._errors import (
    InvalidRankError,
    NDForgeError,
    OutOfBoundsError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from .domain._layout import STORAGE_ORDER
from .domain._tensor import ITensor
from .domain.utils._index_algebra import element_count, ind2sub, strides, sub2ind
from .domain.utils._operators import ADD, AND, MAX, MIN, MUL, OR, AssociativeOp
from .domain.utils._specialization import (
    SPECIALIZATIONS,
    LoopNestTemplate,
    SpecializationRegistry,
    SpecKey,
    specialize,
)
from .infrastructure.tensor import DEFAULT_DTYPE, SubArray, Tensor
from .infrastructure.tensor.mixins.indexing import ALL
from .infrastructure.tensor.mixins.permutation import (
    ctranspose,
    ipermute,
    permute,
    transpose,
)
from .infrastructure.tensor.mixins.reduction import accumulate, reduce
from .infrastructure.tensor.mixins.search import accumarray, find, nnz

__version__ = "0.1.0"

__all__ = [
    "Tensor",
    "SubArray",
    "ITensor",
    "ALL",
    "DEFAULT_DTYPE",
    "STORAGE_ORDER",
    "sub2ind",
    "ind2sub",
    "strides",
    "element_count",
    "LoopNestTemplate",
    "SpecializationRegistry",
    "SpecKey",
    "SPECIALIZATIONS",
    "specialize",
    "AssociativeOp",
    "ADD",
    "MUL",
    "MAX",
    "MIN",
    "AND",
    "OR",
    "reduce",
    "accumulate",
    "permute",
    "ipermute",
    "transpose",
    "ctranspose",
    "find",
    "nnz",
    "accumarray",
    "NDForgeError",
    "OutOfBoundsError",
    "ShapeMismatchError",
    "InvalidRankError",
    "UnsupportedOperationError",
]
