"""
Elementwise logical conjunction and disjunction on element truthiness.
"""

from typing import Any

import numpy as np

from ..._elementwise import map_binary


def _and(a: Any, b: Any) -> bool:
    return bool(a) and bool(b)


def _or(a: Any, b: Any) -> bool:
    return bool(a) or bool(b)


def tensor_logical_and(a: Any, b: Any) -> Any:
    return map_binary(a, b, _and, np.bool_)


def tensor_logical_or(a: Any, b: Any) -> Any:
    return map_binary(a, b, _or, np.bool_)
