"""Exceptions module for shared-session.

This module provides the exception hierarchy for shared-session,
organized by domain concerns and infrastructure concerns.
"""

from .base import (
    SharedSessionError,
    create_error_response,
)

from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidIdentifierError,
)

from .infrastructure import StoreError

__all__ = [
    # Base
    "SharedSessionError",
    "create_error_response",
    
    # Domain
    "ConfigurationError",
    "ValidationError",
    "InvalidIdentifierError",
    
    # Infrastructure
    "StoreError",
]
