"""
Elementwise less-than comparisons (``<`` and ``<=``).
"""

import operator
from typing import Any

from ..._elementwise import predicate_op


def tensor_lt(a: Any, b: Any) -> Any:
    return predicate_op(a, b, operator.lt)


def tensor_le(a: Any, b: Any) -> Any:
    return predicate_op(a, b, operator.le)
