"""
Pure algorithms shared by every tensor implementation: index algebra,
associative operators and the rank-specialization cache.
"""
