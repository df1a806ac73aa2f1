"""Invalid permission key exception."""

from typing import Optional

from ....core.exceptions import ValidationError


class InvalidPermissionKey(ValidationError):
    """Raised when a permission cannot be built from its parts or its stored key."""
    
    def __init__(self, message: str, *, key: Optional[str] = None) -> None:
        super().__init__(message, details={"key": key} if key is not None else {})
        self.key = key
