"""
Associative binary operators with identity elements.

Reductions accept any callable ``op`` that has two forms:

- ``op(a, b)`` : the associative binary operation,
- ``op()``     : its identity element.

:class:`AssociativeOp` packages a plain binary function and an identity into
that shape. The identity may depend on the element type (``MAX`` over
``int32`` starts from the smallest ``int32``, not ``-inf``), which is what
:meth:`AssociativeOp.identity` resolves.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Union

import numpy as np

Identity = Union[Any, Callable[[Any], Any]]


class AssociativeOp:
    """
    Associative binary operator with a (possibly dtype-dependent) identity.

    Parameters
    ----------
    name : str
        Display name.
    fn : Callable[[Any, Any], Any]
        The binary operation. Only associativity is assumed, not
        commutativity.
    identity : Any or Callable[[dtype], Any]
        Identity element, or a function of the element dtype (``None`` when
        unknown) returning it.
    """

    __slots__ = ("name", "fn", "_identity")

    def __init__(self, name: str, fn: Callable[[Any, Any], Any], identity: Identity) -> None:
        self.name = name
        self.fn = fn
        self._identity = identity

    def identity(self, dtype: Any = None) -> Any:
        if callable(self._identity):
            return self._identity(dtype)
        return self._identity

    def __call__(self, *args: Any) -> Any:
        if not args:
            return self.identity()
        acc = args[0]
        for x in args[1:]:
            acc = self.fn(acc, x)
        return acc

    def __repr__(self) -> str:
        return f"AssociativeOp({self.name})"


def identity_for(op: Callable[..., Any], dtype: Any = None) -> Any:
    """
    Resolve the identity of ``op`` for elements of ``dtype``.

    Uses ``op.identity(dtype)`` when available, otherwise the zero-argument
    form ``op()``.
    """
    resolver = getattr(op, "identity", None)
    if callable(resolver):
        return resolver(dtype)
    return op()


def _lowest(dtype: Any) -> Any:
    dt = None if dtype is None else np.dtype(dtype)
    if dt is not None and dt.kind == "b":
        return False
    if dt is not None and dt.kind in "iu":
        return dt.type(np.iinfo(dt).min)
    return -np.inf


def _highest(dtype: Any) -> Any:
    dt = None if dtype is None else np.dtype(dtype)
    if dt is not None and dt.kind == "b":
        return True
    if dt is not None and dt.kind in "iu":
        return dt.type(np.iinfo(dt).max)
    return np.inf


def _max(a: Any, b: Any) -> Any:
    return b if b > a else a


def _min(a: Any, b: Any) -> Any:
    return b if b < a else a


ADD = AssociativeOp("add", operator.add, 0)
MUL = AssociativeOp("mul", operator.mul, 1)
MAX = AssociativeOp("max", _max, _lowest)
MIN = AssociativeOp("min", _min, _highest)
AND = AssociativeOp("and", lambda a, b: bool(a) and bool(b), True)
OR = AssociativeOp("or", lambda a, b: bool(a) or bool(b), False)
