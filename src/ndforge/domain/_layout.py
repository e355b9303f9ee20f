"""
Storage layout constants.

Every stride and offset formula in ndforge assumes column-major ("Fortran")
linear order: axis 1 varies fastest and axis ``k`` has stride
``shape[1] * ... * shape[k-1]``. This module is the single place where that
convention is stated; the dense backend passes ``STORAGE_ORDER`` to NumPy
whenever it converts between its flat buffer and an N-d ndarray.

Changing ``STORAGE_ORDER`` invalidates ``sub2ind``/``ind2sub``, the fancy
indexing loop nests, the reduction engine and ``permute``.
"""

STORAGE_ORDER = "F"
"""NumPy ``order=`` code for the linear storage layout (axis 1 fastest)."""
