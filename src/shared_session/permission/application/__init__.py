"""Permission application layer: closure resolution, authorization and fan-out."""

from .closure import PermissionClosureResolver
from .authorization import SessionPermissionAuthorizer
from .fanout import SessionFanOutCoordinator
from .runtime import SharedSessionPermissionRuntime

__all__ = [
    "PermissionClosureResolver",
    "SessionPermissionAuthorizer",
    "SessionFanOutCoordinator",
    "SharedSessionPermissionRuntime",
]
