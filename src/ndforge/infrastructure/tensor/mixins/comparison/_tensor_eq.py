"""
Elementwise equality and inequality.

Elements are compared with Python's ``==`` / ``!=``, so NaN compares unequal
to itself and ``object`` elements use their own ``__eq__``.
"""

import operator
from typing import Any

from ..._elementwise import predicate_op


def tensor_eq(a: Any, b: Any) -> Any:
    return predicate_op(a, b, operator.eq)


def tensor_ne(a: Any, b: Any) -> Any:
    return predicate_op(a, b, operator.ne)
