"""Permission core: value objects, protocols and exceptions."""

from .value_objects import Permission, PermissionKind
from .protocols import PermissionStore, SessionDirectory, PermissionHierarchy
from .exceptions import (
    InvalidPermissionKey,
    PermissionStoreError,
    PermissionStoreUnavailable,
    SessionDirectoryError,
    SessionDirectoryUnavailable,
)

__all__ = [
    "Permission",
    "PermissionKind",
    "PermissionStore",
    "SessionDirectory",
    "PermissionHierarchy",
    "InvalidPermissionKey",
    "PermissionStoreError",
    "PermissionStoreUnavailable",
    "SessionDirectoryError",
    "SessionDirectoryUnavailable",
]
