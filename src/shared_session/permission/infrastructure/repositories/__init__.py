"""Permission infrastructure repositories.

Concrete permission stores and session directories backed by Redis or by
process memory.
"""

from .redis_permission_repository import RedisSessionPermissionRepository
from .redis_session_directory import RedisSessionDirectory
from .memory_permission_repository import InMemorySessionPermissionRepository
from .memory_session_directory import InMemorySessionDirectory

__all__ = [
    "RedisSessionPermissionRepository",
    "RedisSessionDirectory",
    "InMemorySessionPermissionRepository",
    "InMemorySessionDirectory",
]
