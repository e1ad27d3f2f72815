"""
kindred.errors
==============

Exceptions raised by the domain model beyond the built-in ``ValueError``
used for invalid arguments.
"""

from __future__ import annotations

__all__ = [
    "IllegalStateError",
    "UnsupportedOperationError",
    "ConcurrentModificationError",
]


class IllegalStateError(ValueError):
    """An object is not in a state that permits the requested operation."""


class UnsupportedOperationError(TypeError):
    """The operation is disabled for this (specialised) type."""


class ConcurrentModificationError(RuntimeError):
    """A group was structurally modified while it was being traversed."""
