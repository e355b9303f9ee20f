"""Concrete implementations of the domain contracts."""
