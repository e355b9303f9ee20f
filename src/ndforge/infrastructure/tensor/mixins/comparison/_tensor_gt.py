"""
Elementwise greater-than comparisons (``>`` and ``>=``).

The result is a ``bool`` tensor shaped like the tensor operand, ``True``
where the comparison holds.
"""

import operator
from typing import Any

from ..._elementwise import predicate_op


def tensor_gt(a: Any, b: Any) -> Any:
    """Return the ``bool`` mask ``a > b``."""
    return predicate_op(a, b, operator.gt)


def tensor_ge(a: Any, b: Any) -> Any:
    """Return the ``bool`` mask ``a >= b``."""
    return predicate_op(a, b, operator.ge)
