"""Shared-Session - session-scoped permission authorization backed by Redis.

Decides whether a permission is granted to a live session, expanding it
through the permission hierarchy, and maintains granted permissions per
session, per user and across groups of users.
"""

from .__version__ import __version__

from .config import (
    SharedSessionSettings,
    get_settings,
    LoggingConfig,
    setup_logging,
)

from .core.exceptions import (
    SharedSessionError,
    ConfigurationError,
    ValidationError,
    InvalidIdentifierError,
    StoreError,
    create_error_response,
)

from .core.value_objects import SessionId, UserId

from .permission import (
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
    PermissionClosureResolver,
    SessionPermissionAuthorizer,
    SessionFanOutCoordinator,
    SharedSessionPermissionRuntime,
    RedisSessionPermissionRepository,
    RedisSessionDirectory,
    InMemorySessionPermissionRepository,
    InMemorySessionDirectory,
    MappingPermissionHierarchy,
    PermissionRuntimeFactory,
)

__all__ = [
    "__version__",
    
    # Configuration
    "SharedSessionSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
    
    # Exceptions
    "SharedSessionError",
    "ConfigurationError",
    "ValidationError",
    "InvalidIdentifierError",
    "StoreError",
    "create_error_response",
    "InvalidPermissionKey",
    "PermissionStoreError",
    "PermissionStoreUnavailable",
    "SessionDirectoryError",
    "SessionDirectoryUnavailable",
    
    # Identifiers
    "SessionId",
    "UserId",
    
    # Permissions
    "Permission",
    "PermissionKind",
    "PermissionStore",
    "SessionDirectory",
    "PermissionHierarchy",
    "PermissionClosureResolver",
    "SessionPermissionAuthorizer",
    "SessionFanOutCoordinator",
    "SharedSessionPermissionRuntime",
    "RedisSessionPermissionRepository",
    "RedisSessionDirectory",
    "InMemorySessionPermissionRepository",
    "InMemorySessionDirectory",
    "MappingPermissionHierarchy",
    "PermissionRuntimeFactory",
]
