"""Protocols consumed by the permission engine.

Concrete implementations are injected; nothing here reaches for global state.
"""

from .permission_store import PermissionStore
from .session_directory import SessionDirectory
from .permission_hierarchy import PermissionHierarchy

__all__ = [
    "PermissionStore",
    "SessionDirectory",
    "PermissionHierarchy",
]
