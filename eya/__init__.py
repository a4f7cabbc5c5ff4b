"""Bounds-checked byte buffer operations, address helpers and small runtime utilities."""

__version__ = "1.0.0"

__all__ = [
    "exception_stack",
    "memory",
    "memory_std",
    "ptr_util",
    "terminate",
    "version",
]