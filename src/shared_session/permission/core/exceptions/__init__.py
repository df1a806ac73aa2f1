"""Permission domain exceptions.

Each exception covers one failure scenario of the permission engine or of
the collaborators it consumes.
"""

from .invalid_permission_key import InvalidPermissionKey
from .permission_store_error import PermissionStoreError, PermissionStoreUnavailable
from .session_directory_error import SessionDirectoryError, SessionDirectoryUnavailable

__all__ = [
    "InvalidPermissionKey",
    "PermissionStoreError",
    "PermissionStoreUnavailable",
    "SessionDirectoryError",
    "SessionDirectoryUnavailable",
]
