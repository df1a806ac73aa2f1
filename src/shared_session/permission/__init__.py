"""Session permission feature for shared-session.

Layered architecture for session-scoped authorization:
- core/: Permission value objects, collaborator protocols and exceptions
- application/: Closure resolution, single-session authorization and fan-out
- infrastructure/: Redis and in-memory stores, hierarchy adapter, factories
"""

# Core entities and protocols
from .core import (
    Permission,
    PermissionKind,
    PermissionStore,
    SessionDirectory,
    PermissionHierarchy,
    InvalidPermissionKey,
    PermissionStoreError,
    PermissionStoreUnavailable,
    SessionDirectoryError,
    SessionDirectoryUnavailable,
)

# Application services
from .application import (
    PermissionClosureResolver,
    SessionPermissionAuthorizer,
    SessionFanOutCoordinator,
    SharedSessionPermissionRuntime,
)

# Concrete implementations
from .infrastructure import (
    RedisSessionPermissionRepository,
    RedisSessionDirectory,
    InMemorySessionPermissionRepository,
    InMemorySessionDirectory,
    MappingPermissionHierarchy,
    PermissionRuntimeFactory,
)

__all__ = [
    # Core
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
    
    # Application
    "PermissionClosureResolver",
    "SessionPermissionAuthorizer",
    "SessionFanOutCoordinator",
    "SharedSessionPermissionRuntime",
    
    # Infrastructure
    "RedisSessionPermissionRepository",
    "RedisSessionDirectory",
    "InMemorySessionPermissionRepository",
    "InMemorySessionDirectory",
    "MappingPermissionHierarchy",
    "PermissionRuntimeFactory",
]
