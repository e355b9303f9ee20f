"""
Contract-violation exceptions for ndforge.

This module defines the four error kinds raised by the tensor core. Every
error is detected at the point of violation and propagated immediately to the
caller; the core never retries or recovers internally.

Each class also derives from the closest built-in exception (``IndexError``,
``ValueError``, ``NotImplementedError``) so callers that only know the Python
builtins can still catch them.
"""

from typing import Any, Optional


class NDForgeError(Exception):
    """Base class for ndforge-specific exceptions."""


class OutOfBoundsError(NDForgeError, IndexError):
    """
    Raised when a coordinate or linear index falls outside its valid range.

    A coordinate is valid when ``1 <= coord <= shape[k]`` on its axis; a
    linear index is valid when ``1 <= index <= element_count``.

    Attributes
    ----------
    index : Any
        The offending coordinate, coordinate tuple, or linear index.
    bounds : Any
        The shape (or axis length) the index was checked against.
    """

    def __init__(self, index: Any, bounds: Any, detail: Optional[str] = None) -> None:
        """
        Initialize the OutOfBoundsError.

        Parameters
        ----------
        index : Any
            The index that was attempted.
        bounds : Any
            Shape or length used for the check.
        detail : Optional[str]
            Extra context appended to the message.
        """
        message = f"Index {index!r} is out of bounds for {bounds!r}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class ShapeMismatchError(NDForgeError, ValueError):
    """
    Raised when operand shapes are incompatible.

    Typical sources are binary elementwise operators on tensors of different
    shapes, a ``reshape`` that changes the element count, or an assignment
    whose source does not supply one value per selected position.

    Attributes
    ----------
    expected : Any
        The shape (or count) required by the operation.
    actual : Any
        The shape (or count) that was supplied.
    """

    def __init__(self, expected: Any, actual: Any, detail: Optional[str] = None) -> None:
        message = f"Shape mismatch: expected {expected!r}, got {actual!r}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidRankError(NDForgeError, ValueError):
    """
    Raised when a rank <= 0 (or a non-integer rank) reaches the shape algebra
    or the rank-specialization cache.
    """

    def __init__(self, rank: Any) -> None:
        super().__init__(f"Rank must be a positive integer, got {rank!r}.")
        self.rank = rank


class UnsupportedOperationError(NDForgeError, NotImplementedError):
    """
    Raised when an operation has no defined implementation for the given
    type/rank combination (e.g. ``length`` of a 3-D tensor).

    Attributes
    ----------
    op : str
        Name of the operation that was attempted.
    """

    def __init__(self, op: str, detail: str) -> None:
        super().__init__(f"{op} is not supported: {detail}")
        self.op = op
