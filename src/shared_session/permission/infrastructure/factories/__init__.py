"""Permission infrastructure factories."""

from .runtime_factory import PermissionRuntimeFactory

__all__ = [
    "PermissionRuntimeFactory",
]
