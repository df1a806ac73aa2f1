"""Tests for the Redis session directory."""

import pytest

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError

from shared_session.core.value_objects import SessionId, UserId
from shared_session.permission import (
    RedisSessionDirectory,
    SessionDirectoryError,
    SessionDirectoryUnavailable,
)


@pytest.fixture
def directory(mock_redis_client):
    return RedisSessionDirectory(mock_redis_client, key_prefix="test")


class TestRedisSessionDirectory:
    
    def test_key_format(self, directory):
        assert directory._make_user_sessions_key(UserId("user-1")) == "test:user:user-1:sessions"
    
    @pytest.mark.asyncio
    async def test_returns_sorted_sessions(self, directory, mock_redis_client):
        mock_redis_client.smembers.return_value = {b"sess-2", "sess-1"}
        
        sessions = await directory.find_session_ids_for_user(UserId("user-1"))
        
        assert sessions == [SessionId("sess-1"), SessionId("sess-2")]
        mock_redis_client.smembers.assert_awaited_once_with("test:user:user-1:sessions")
    
    @pytest.mark.asyncio
    async def test_unknown_user_has_no_sessions(self, directory, mock_redis_client):
        mock_redis_client.smembers.return_value = set()
        
        assert await directory.find_session_ids_for_user(UserId("user-1")) == []
    
    @pytest.mark.asyncio
    async def test_connection_error_is_unavailable(self, directory, mock_redis_client):
        mock_redis_client.smembers.side_effect = RedisConnectionError("refused")
        
        with pytest.raises(SessionDirectoryUnavailable) as exc_info:
            await directory.find_session_ids_for_user(UserId("user-1"))
        
        assert exc_info.value.user_id == "user-1"
        assert exc_info.value.details == {"user_id": "user-1"}
    
    @pytest.mark.asyncio
    async def test_response_error_is_directory_error(self, directory, mock_redis_client):
        mock_redis_client.smembers.side_effect = ResponseError("WRONGTYPE")
        
        with pytest.raises(SessionDirectoryError) as exc_info:
            await directory.find_session_ids_for_user(UserId("user-1"))
        
        assert not isinstance(exc_info.value, SessionDirectoryUnavailable)
    
    def test_requires_client(self):
        with pytest.raises(ValueError):
            RedisSessionDirectory(None)
