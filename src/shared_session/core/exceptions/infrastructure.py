"""Infrastructure-specific exceptions for shared-session.

This module defines the base for errors raised by the key-value store and
the session directory backing the permission engine.
"""

from .base import SharedSessionError


# Store Errors
class StoreError(SharedSessionError):
    """Base class for key-value store errors."""
    pass
