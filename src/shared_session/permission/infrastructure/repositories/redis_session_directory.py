"""Redis session directory for shared sessions."""

import logging
from typing import List

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ....core.value_objects import SessionId, UserId
from ...core.exceptions import SessionDirectoryError, SessionDirectoryUnavailable

logger = logging.getLogger(__name__)


class RedisSessionDirectory:
    """Read-only view of the user → live sessions index kept in Redis.

    The index is a Redis set per user, written by whatever component creates
    and expires sessions. This directory only reads it.
    """
    
    def __init__(self, redis_client, key_prefix: str = "shared_session"):
        """Initialize Redis session directory.
        
        Args:
            redis_client: Async Redis client instance (redis.asyncio.Redis)
            key_prefix: Prefix for session index keys in Redis
        """
        if not redis_client:
            raise ValueError("Redis client is required")
        if not key_prefix:
            raise ValueError("Key prefix must be a non-empty string")
        self.redis = redis_client
        self.key_prefix = key_prefix
    
    def _make_user_sessions_key(self, user_id: UserId) -> str:
        """Create Redis key for user sessions set."""
        return f"{self.key_prefix}:user:{user_id.value}:sessions"
    
    async def find_session_ids_for_user(self, user_id: UserId) -> List[SessionId]:
        """Get live session identifiers of a user.
        
        Args:
            user_id: User identifier
            
        Returns:
            Session identifiers sorted by key, empty if the user has none
        """
        key = self._make_user_sessions_key(user_id)
        
        try:
            members = await self.redis.smembers(key)
        except RedisError as e:
            logger.error(f"Failed to list sessions of user {user_id.value}: {e}")
            error_class = (
                SessionDirectoryUnavailable
                if isinstance(e, (RedisConnectionError, RedisTimeoutError))
                else SessionDirectoryError
            )
            raise error_class("Session directory lookup failed", user_id=user_id.value) from e
        
        if not members:
            return []
        
        session_ids = sorted(
            m.decode("utf-8") if isinstance(m, bytes) else m
            for m in members
        )
        return [SessionId(s) for s in session_ids]
