"""Permission store failure exceptions."""

from typing import Any, Dict, Optional

from ....core.exceptions import StoreError


class PermissionStoreError(StoreError):
    """Raised when the permission store rejects or fails an operation.
    
    Carries the operation name and the (masked) session it was scoped to.
    Retries, if any, belong to the store client, never to the engine.
    """
    
    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        session_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        details = {
            "operation": operation,
            "session_id": session_id,
            **(context or {}),
        }
        super().__init__(message, details=details)
        self.operation = operation
        self.session_id = session_id


class PermissionStoreUnavailable(PermissionStoreError):
    """Raised when the permission store cannot be reached or timed out."""
    pass
