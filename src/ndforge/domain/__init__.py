"""
Backend-agnostic contracts: errors, layout, the tensor protocol, and pure
algorithms in :mod:`ndforge.domain.utils`.
"""
