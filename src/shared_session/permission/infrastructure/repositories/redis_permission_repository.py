"""Redis permission repository for shared sessions."""

import logging
from typing import List, Sequence, Set

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ....core.value_objects import SessionId
from ...core.exceptions import (
    InvalidPermissionKey,
    PermissionStoreError,
    PermissionStoreUnavailable,
)
from ...core.value_objects import Permission

logger = logging.getLogger(__name__)


class RedisSessionPermissionRepository:
    """Redis permission repository following maximum separation principle.

    Handles ONLY storage of granted permission keys, one Redis set per session.
    Does not handle closure expansion, authorization decisions, or session lifecycle.
    """

    def __init__(self, redis_client, key_prefix: str = "shared_session"):
        """Initialize Redis permission repository.

        Args:
            redis_client: Async Redis client instance (redis.asyncio.Redis)
            key_prefix: Prefix for permission keys in Redis
        """
        if not redis_client:
            raise ValueError("Redis client is required")
        if not key_prefix:
            raise ValueError("Key prefix must be a non-empty string")
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_permissions_key(self, session_id: SessionId) -> str:
        """Create Redis key for the granted permission set of a session.

        Args:
            session_id: Session identifier

        Returns:
            Redis key string
        """
        return f"{self.key_prefix}:{session_id.value}:permissions"

    def _wrap_error(self, e: RedisError, operation: str, session_id: SessionId) -> PermissionStoreError:
        error_class = (
            PermissionStoreUnavailable
            if isinstance(e, (RedisConnectionError, RedisTimeoutError))
            else PermissionStoreError
        )
        return error_class(
            f"Permission store {operation} failed",
            operation=operation,
            session_id=session_id.mask_for_logging(),
            context={"error": str(e)}
        )

    async def has_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> List[bool]:
        """Test membership of each permission with one pipelined round trip.

        Args:
            session_id: Session identifier
            permissions: Permissions to test

        Returns:
            One boolean per permission, in input order
        """
        if not permissions:
            return []

        key = self._make_permissions_key(session_id)

        try:
            pipe = self.redis.pipeline(transaction=False)
            for permission in permissions:
                pipe.sismember(key, permission.key)
            results = await pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to check permissions for session {session_id.mask_for_logging()}: {e}")
            raise self._wrap_error(e, "has_permissions", session_id) from e

        return [bool(result) for result in results]

    async def add_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> None:
        """Add permissions to the session set with a single SADD.

        Args:
            session_id: Session identifier
            permissions: Permissions to add
        """
        if not permissions:
            return

        key = self._make_permissions_key(session_id)

        try:
            added = await self.redis.sadd(key, *(p.key for p in permissions))
        except RedisError as e:
            logger.error(f"Failed to add permissions to session {session_id.mask_for_logging()}: {e}")
            raise self._wrap_error(e, "add_permissions", session_id) from e

        logger.debug(f"Added {added} new permissions to session {session_id.mask_for_logging()}")

    async def remove_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> None:
        """Remove permissions from the session set with a single SREM.

        Args:
            session_id: Session identifier
            permissions: Permissions to remove
        """
        if not permissions:
            return

        key = self._make_permissions_key(session_id)

        try:
            removed = await self.redis.srem(key, *(p.key for p in permissions))
        except RedisError as e:
            logger.error(f"Failed to remove permissions from session {session_id.mask_for_logging()}: {e}")
            raise self._wrap_error(e, "remove_permissions", session_id) from e

        logger.debug(f"Removed {removed} permissions from session {session_id.mask_for_logging()}")

    async def get_permissions(self, session_id: SessionId) -> Set[Permission]:
        """Get every permission recorded for a session.

        Stored keys that no longer parse are skipped with a warning.

        Args:
            session_id: Session identifier

        Returns:
            Set of granted permissions
        """
        key = self._make_permissions_key(session_id)

        try:
            members = await self.redis.smembers(key)
        except RedisError as e:
            logger.error(f"Failed to list permissions of session {session_id.mask_for_logging()}: {e}")
            raise self._wrap_error(e, "get_permissions", session_id) from e

        permissions = set()
        for member in members:
            try:
                permissions.add(Permission.from_key(member))
            except InvalidPermissionKey as e:
                logger.warning(f"Skipping unreadable permission key in session {session_id.mask_for_logging()}: {e}")

        return permissions
