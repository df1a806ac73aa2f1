"""Domain-level exceptions for shared-session.

Errors raised while validating configuration and domain values,
independent of any storage backend.
"""

from .base import SharedSessionError


# Configuration Errors
class ConfigurationError(SharedSessionError):
    """Raised when settings or factory input are invalid."""
    pass


# Validation Errors
class ValidationError(SharedSessionError):
    """Raised when input validation fails."""
    pass


class InvalidIdentifierError(ValidationError):
    """Raised when a session or user identifier is empty or not a string."""
    pass
