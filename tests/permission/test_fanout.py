"""Tests for grant/revoke fan-out across sessions and users."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

from shared_session.core.exceptions import InvalidIdentifierError
from shared_session.core.value_objects import SessionId, UserId
from shared_session.permission import (
    InMemorySessionDirectory,
    PermissionStoreUnavailable,
    SessionFanOutCoordinator,
    SessionPermissionAuthorizer,
)


@pytest.fixture
def failing_store(mock_permission_store):
    """Store that fails for session sess-2 only."""
    async def add_permissions(session_id, permissions):
        if session_id == SessionId("sess-2"):
            raise PermissionStoreUnavailable("connection lost")
    
    mock_permission_store.add_permissions = AsyncMock(side_effect=add_permissions)
    return mock_permission_store


class TestSessionResolution:
    """Test user to session resolution."""
    
    @pytest.mark.asyncio
    async def test_resolve_user_sessions(self, fan_out):
        assert await fan_out.resolve_user_sessions("user-1") == [SessionId("sess-1"), SessionId("sess-2")]
    
    @pytest.mark.asyncio
    async def test_unknown_user_has_no_sessions(self, fan_out):
        assert await fan_out.resolve_user_sessions("user-unknown") == []
    
    @pytest.mark.asyncio
    async def test_resolve_users_sessions_flattens_in_user_order(self, fan_out):
        sessions = await fan_out.resolve_users_sessions(["user-2", "user-1"])
        
        assert sessions == [SessionId("sess-3"), SessionId("sess-1"), SessionId("sess-2")]
    
    @pytest.mark.asyncio
    async def test_directory_returning_none_is_empty(self, authorizer):
        directory = MagicMock()
        directory.find_session_ids_for_user = AsyncMock(return_value=None)
        fan_out = SessionFanOutCoordinator(authorizer, directory)
        
        assert await fan_out.resolve_user_sessions("user-1") == []
        directory.find_session_ids_for_user.assert_awaited_once_with(UserId("user-1"))


class TestGrantFanOut:
    """Test grant fan-out."""
    
    @pytest.mark.asyncio
    async def test_grant_to_sessions(self, fan_out, authorizer, order_read):
        count = await fan_out.grant_to_sessions(["sess-1", "sess-3"], [order_read])
        
        assert count == 2
        assert await authorizer.is_permission_granted("sess-1", order_read) is True
        assert await authorizer.is_permission_granted("sess-3", order_read) is True
        assert await authorizer.is_permission_granted("sess-2", order_read) is False
    
    @pytest.mark.asyncio
    async def test_grant_to_user_reaches_every_session(self, fan_out, authorizer, order_read):
        count = await fan_out.grant_to_user("user-1", [order_read])
        
        assert count == 2
        assert await authorizer.is_permission_granted("sess-1", order_read) is True
        assert await authorizer.is_permission_granted("sess-2", order_read) is True
        assert await authorizer.is_permission_granted("sess-3", order_read) is False
    
    @pytest.mark.asyncio
    async def test_grant_to_users(self, fan_out, authorizer, order_read):
        count = await fan_out.grant_to_users(["user-1", "user-2"], [order_read])
        
        assert count == 3
        for session_id in ("sess-1", "sess-2", "sess-3"):
            assert await authorizer.is_permission_granted(session_id, order_read) is True
    
    @pytest.mark.asyncio
    async def test_user_without_sessions_is_noop(self, closure_resolver, mock_permission_store, order_read):
        authorizer = SessionPermissionAuthorizer(closure_resolver, mock_permission_store)
        fan_out = SessionFanOutCoordinator(authorizer, InMemorySessionDirectory())
        
        assert await fan_out.grant_to_user("user-1", [order_read]) == 0
        mock_permission_store.add_permissions.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_empty_session_list_is_noop(self, closure_resolver, mock_permission_store, session_directory,
                                              order_read):
        authorizer = SessionPermissionAuthorizer(closure_resolver, mock_permission_store)
        fan_out = SessionFanOutCoordinator(authorizer, session_directory)
        
        assert await fan_out.grant_to_sessions([], [order_read]) == 0
        mock_permission_store.add_permissions.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_sessions_are_processed_in_input_order(self, closure_resolver, mock_permission_store,
                                                         session_directory, order_read):
        authorizer = SessionPermissionAuthorizer(closure_resolver, mock_permission_store)
        fan_out = SessionFanOutCoordinator(authorizer, session_directory)
        
        await fan_out.grant_to_sessions(["sess-3", "sess-1", "sess-2"], [order_read])
        
        called = [call.args[0] for call in mock_permission_store.add_permissions.await_args_list]
        assert called == [SessionId("sess-3"), SessionId("sess-1"), SessionId("sess-2")]
    
    @pytest.mark.asyncio
    async def test_grant_does_not_expand_closure(self, fan_out, permission_store, orders_browse):
        await fan_out.grant_to_user("user-2", [orders_browse])
        
        assert await permission_store.get_permissions(SessionId("sess-3")) == {orders_browse}
    
    @pytest.mark.asyncio
    async def test_failure_stops_remaining_sessions(self, closure_resolver, failing_store, session_directory,
                                                    order_read):
        authorizer = SessionPermissionAuthorizer(closure_resolver, failing_store)
        fan_out = SessionFanOutCoordinator(authorizer, session_directory)
        
        with pytest.raises(PermissionStoreUnavailable):
            await fan_out.grant_to_sessions(["sess-1", "sess-2", "sess-3"], [order_read])
        
        called = [call.args[0] for call in failing_store.add_permissions.await_args_list]
        assert called == [SessionId("sess-1"), SessionId("sess-2")]


class TestRevokeFanOut:
    """Test revoke fan-out."""
    
    @pytest.mark.asyncio
    async def test_revoke_from_user_removes_from_every_session(self, fan_out, authorizer, order_read,
                                                               order_update):
        await fan_out.grant_to_user("user-1", [order_read, order_update])
        
        count = await fan_out.revoke_from_user("user-1", [order_read, order_update])
        
        assert count == 2
        for session_id in ("sess-1", "sess-2"):
            assert await authorizer.is_permission_granted(session_id, order_read) is False
            assert await authorizer.is_permission_granted(session_id, order_update) is False
    
    @pytest.mark.asyncio
    async def test_revoke_from_users(self, fan_out, authorizer, order_read):
        await fan_out.grant_to_users(["user-1", "user-2"], [order_read])
        
        count = await fan_out.revoke_from_users(["user-2"], [order_read])
        
        assert count == 1
        assert await authorizer.is_permission_granted("sess-3", order_read) is False
        assert await authorizer.is_permission_granted("sess-1", order_read) is True
    
    @pytest.mark.asyncio
    async def test_revoke_from_sessions(self, fan_out, permission_store, order_read, order_update):
        await fan_out.grant_to_sessions(["sess-1", "sess-2"], [order_read, order_update])
        
        await fan_out.revoke_from_sessions(["sess-1", "sess-2"], [order_read])
        
        assert await permission_store.get_permissions(SessionId("sess-1")) == {order_update}
        assert await permission_store.get_permissions(SessionId("sess-2")) == {order_update}


class TestConcurrentFanOut:
    """Test bounded concurrent fan-out."""
    
    @pytest.mark.asyncio
    async def test_concurrent_grant_reaches_every_session(self, authorizer, session_directory, order_read):
        fan_out = SessionFanOutCoordinator(authorizer, session_directory, max_concurrency=4)
        
        assert await fan_out.grant_to_users(["user-1", "user-2"], [order_read]) == 3
        for session_id in ("sess-1", "sess-2", "sess-3"):
            assert await authorizer.is_permission_granted(session_id, order_read) is True
    
    @pytest.mark.asyncio
    async def test_concurrent_failure_is_reported_after_all_settle(self, closure_resolver, failing_store,
                                                                   session_directory, order_read):
        authorizer = SessionPermissionAuthorizer(closure_resolver, failing_store)
        fan_out = SessionFanOutCoordinator(authorizer, session_directory, max_concurrency=2)
        
        with pytest.raises(PermissionStoreUnavailable):
            await fan_out.grant_to_sessions(["sess-1", "sess-2", "sess-3"], [order_read])
        
        assert failing_store.add_permissions.await_count == 3
    
    def test_invalid_concurrency_rejected(self, authorizer, session_directory):
        with pytest.raises(ValueError):
            SessionFanOutCoordinator(authorizer, session_directory, max_concurrency=0)
    
    def test_collaborators_are_required(self, authorizer, session_directory):
        with pytest.raises(ValueError):
            SessionFanOutCoordinator(None, session_directory)
        with pytest.raises(ValueError):
            SessionFanOutCoordinator(authorizer, None)


class TestSingleIdentifierRejected:
    """Test that a bare identifier is not mistaken for a collection."""
    
    @pytest.mark.parametrize("session_ids", [
        "sess-1",
        SessionId("sess-1"),
        UUID("12345678-1234-5678-1234-567812345678"),
    ])
    @pytest.mark.asyncio
    async def test_grant_to_sessions_rejects_single_session(self, closure_resolver, mock_permission_store,
                                                            session_directory, order_read, session_ids):
        authorizer = SessionPermissionAuthorizer(closure_resolver, mock_permission_store)
        fan_out = SessionFanOutCoordinator(authorizer, session_directory)
        
        with pytest.raises(InvalidIdentifierError):
            await fan_out.grant_to_sessions(session_ids, [order_read])
        mock_permission_store.add_permissions.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_revoke_from_sessions_rejects_single_session(self, closure_resolver, mock_permission_store,
                                                               session_directory, order_read):
        authorizer = SessionPermissionAuthorizer(closure_resolver, mock_permission_store)
        fan_out = SessionFanOutCoordinator(authorizer, session_directory)
        
        with pytest.raises(InvalidIdentifierError):
            await fan_out.revoke_from_sessions("sess-1", [order_read])
        mock_permission_store.remove_permissions.assert_not_called()
    
    @pytest.mark.parametrize("user_ids", ["user-1", UserId("user-1")])
    @pytest.mark.asyncio
    async def test_grant_to_users_rejects_single_user(self, fan_out, permission_store, order_read, user_ids):
        with pytest.raises(InvalidIdentifierError):
            await fan_out.grant_to_users(user_ids, [order_read])
        assert permission_store.get_stats() == {"sessions": 0, "permissions": 0}
    
    @pytest.mark.asyncio
    async def test_resolve_users_sessions_rejects_single_user(self, fan_out):
        with pytest.raises(InvalidIdentifierError):
            await fan_out.resolve_users_sessions("user-1")
    
    @pytest.mark.asyncio
    async def test_tuple_of_one_session_is_accepted(self, fan_out, authorizer, order_read):
        assert await fan_out.grant_to_sessions(("sess-1",), [order_read]) == 1
        assert await authorizer.is_permission_granted("sess-1", order_read) is True
