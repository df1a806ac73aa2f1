"""Base exception for shared-session.

Every error raised by the permission engine, its stores and its
configuration derives from SharedSessionError. Store failures carry the
operation and the masked session in ``details``, so a hosting layer can
log or render them without parsing messages.
"""

from typing import Any, Dict, Optional


class SharedSessionError(Exception):
    """Root of the shared-session error hierarchy.
    
    Attributes:
        message: Human readable description
        error_code: Stable code for callers; defaults to the class name
        details: Structured context such as ``operation``, ``session_id``
            (masked) or ``key``
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}


def create_error_response(exception: SharedSessionError) -> Dict[str, Any]:
    """Render an engine error for a hosting layer (HTTP handler, RPC reply).
    
    Returns:
        ``{"error": {"code", "message", "details", "type"}}``; for store
        failures ``details`` holds the operation and the masked session
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": type(exception).__name__,
        }
    }
