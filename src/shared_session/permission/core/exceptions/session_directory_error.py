"""Session directory failure exceptions."""

from typing import Optional

from ....core.exceptions import StoreError


class SessionDirectoryError(StoreError):
    """Raised when live sessions of a user cannot be listed."""
    
    def __init__(self, message: str, *, user_id: Optional[str] = None) -> None:
        super().__init__(message, details={"user_id": user_id})
        self.user_id = user_id


class SessionDirectoryUnavailable(SessionDirectoryError):
    """Raised when the session directory cannot be reached or timed out."""
    pass
