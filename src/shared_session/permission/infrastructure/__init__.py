"""Permission infrastructure: Redis and in-memory implementations of the core protocols."""

from .repositories import (
    RedisSessionPermissionRepository,
    RedisSessionDirectory,
    InMemorySessionPermissionRepository,
    InMemorySessionDirectory,
)
from .adapters import MappingPermissionHierarchy
from .factories import PermissionRuntimeFactory

__all__ = [
    "RedisSessionPermissionRepository",
    "RedisSessionDirectory",
    "InMemorySessionPermissionRepository",
    "InMemorySessionDirectory",
    "MappingPermissionHierarchy",
    "PermissionRuntimeFactory",
]
