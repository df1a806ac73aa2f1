"""Permission runtime factory for shared sessions."""

import logging
from typing import Optional

import redis.asyncio as redis

from ....config import SharedSessionSettings, get_settings
from ....core.exceptions import ConfigurationError
from ...application import (
    PermissionClosureResolver,
    SessionFanOutCoordinator,
    SessionPermissionAuthorizer,
    SharedSessionPermissionRuntime,
)
from ...core.protocols import PermissionHierarchy, PermissionStore, SessionDirectory
from ..repositories import (
    InMemorySessionDirectory,
    InMemorySessionPermissionRepository,
    RedisSessionDirectory,
    RedisSessionPermissionRepository,
)

logger = logging.getLogger(__name__)


class PermissionRuntimeFactory:
    """Permission runtime factory following maximum separation principle.

    Handles ONLY instantiation and wiring of the permission runtime.
    Does not handle authorization logic or storage operations.
    """

    def __init__(self, settings: Optional[SharedSessionSettings] = None):
        """Initialize permission runtime factory.

        Args:
            settings: Runtime settings; loaded from the environment when omitted
        """
        self.settings = settings or get_settings()

    def create_redis_client(self) -> redis.Redis:
        """Create an async Redis client from settings.

        Raises:
            ConfigurationError: If the Redis URL cannot be used
        """
        try:
            client = redis.from_url(
                self.settings.redis_url,
                decode_responses=self.settings.redis_decode_responses,
                socket_timeout=self.settings.redis_socket_timeout,
            )
        except ValueError as e:
            logger.error(f"Failed to create Redis client: {e}")
            raise ConfigurationError(
                "Redis client creation failed",
                details={"error": str(e)}
            ) from e

        logger.debug("Created Redis client for permission runtime")
        return client

    def create_runtime(
        self,
        hierarchy: PermissionHierarchy,
        permission_store: PermissionStore,
        session_directory: SessionDirectory
    ) -> SharedSessionPermissionRuntime:
        """Wire a runtime from explicit collaborators.

        Args:
            hierarchy: Permission hierarchy knowledge base
            permission_store: Store of granted permissions per session
            session_directory: Directory of live sessions per user

        Returns:
            Configured SharedSessionPermissionRuntime instance
        """
        if hierarchy is None:
            raise ConfigurationError("Permission hierarchy is required")
        if permission_store is None:
            raise ConfigurationError("Permission store is required")
        if session_directory is None:
            raise ConfigurationError("Session directory is required")

        authorizer = SessionPermissionAuthorizer(
            PermissionClosureResolver(hierarchy),
            permission_store
        )
        fan_out = SessionFanOutCoordinator(
            authorizer,
            session_directory,
            max_concurrency=self.settings.fanout_max_concurrency
        )
        return SharedSessionPermissionRuntime(authorizer, fan_out)

    def create_redis_runtime(
        self,
        hierarchy: PermissionHierarchy,
        redis_client: Optional[redis.Redis] = None
    ) -> SharedSessionPermissionRuntime:
        """Create a runtime backed by Redis for both permissions and sessions.

        Args:
            hierarchy: Permission hierarchy knowledge base
            redis_client: Existing client to share; created from settings when omitted

        Returns:
            Configured SharedSessionPermissionRuntime instance
        """
        client = redis_client or self.create_redis_client()

        runtime = self.create_runtime(
            hierarchy,
            RedisSessionPermissionRepository(client, self.settings.permission_key_prefix),
            RedisSessionDirectory(client, self.settings.session_key_prefix),
        )
        logger.info(
            f"Created Redis permission runtime (permission prefix: {self.settings.permission_key_prefix}, "
            f"session prefix: {self.settings.session_key_prefix})"
        )
        return runtime

    def create_in_memory_runtime(
        self,
        hierarchy: PermissionHierarchy,
        session_directory: Optional[SessionDirectory] = None
    ) -> SharedSessionPermissionRuntime:
        """Create a runtime keeping all state in process memory."""
        return self.create_runtime(
            hierarchy,
            InMemorySessionPermissionRepository(),
            session_directory or InMemorySessionDirectory(),
        )
