"""Permission value objects."""

from .permission import Permission, PermissionKind

__all__ = [
    "Permission",
    "PermissionKind",
]
