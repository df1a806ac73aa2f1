"""Shared session permission runtime.

Public surface of the permission engine: two checks and the grant/revoke
entry points for one session, a list of sessions, all sessions of one user
and all sessions of a set of users, each with a single-permission and a
multi-permission variant.

Usage:
    from shared_session.permission import SharedSessionPermissionRuntime

    runtime = SharedSessionPermissionRuntime(authorizer, fan_out)
    await runtime.grant_permission_to_all_user_sessions(user_id, Permission.entity("Order", "read"))
    await runtime.is_permission_granted_to_session(session_id, Permission.screen("orders-browse"))
"""

import logging
from typing import Iterable, Sequence

from ...core.value_objects import SessionIdLike, UserIdLike
from ..core.value_objects import Permission
from .authorization import SessionPermissionAuthorizer
from .fanout import SessionFanOutCoordinator

logger = logging.getLogger(__name__)


class SharedSessionPermissionRuntime:
    """Facade composing the single-session authorizer and the fan-out coordinator."""

    def __init__(
        self,
        authorizer: SessionPermissionAuthorizer,
        fan_out: SessionFanOutCoordinator
    ):
        if authorizer is None:
            raise ValueError("Authorizer is required")
        if fan_out is None:
            raise ValueError("Fan-out coordinator is required")
        self.authorizer = authorizer
        self.fan_out = fan_out

    # Checks

    async def is_permission_granted_to_session(
        self,
        session_id: SessionIdLike,
        permission: Permission
    ) -> bool:
        return await self.authorizer.is_permission_granted(session_id, permission)

    async def is_permissions_granted_to_session(
        self,
        session_id: SessionIdLike,
        permissions: Sequence[Permission]
    ) -> bool:
        """True if at least one of the permissions (or an ancestor) is granted."""
        return await self.authorizer.is_any_permission_granted(session_id, permissions)

    # Grant

    async def grant_permission_to_session(self, session_id: SessionIdLike, permission: Permission) -> None:
        await self.authorizer.grant_permission(session_id, permission)

    async def grant_permissions_to_session(
        self,
        session_id: SessionIdLike,
        permissions: Sequence[Permission]
    ) -> None:
        await self.authorizer.grant_permissions(session_id, permissions)

    async def grant_permission_to_sessions(
        self,
        session_ids: Iterable[SessionIdLike],
        permission: Permission
    ) -> int:
        return await self.fan_out.grant_to_sessions(session_ids, [permission])

    async def grant_permissions_to_sessions(
        self,
        session_ids: Iterable[SessionIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        return await self.fan_out.grant_to_sessions(session_ids, permissions)

    async def grant_permission_to_all_user_sessions(
        self,
        user_id: UserIdLike,
        permission: Permission
    ) -> int:
        return await self.fan_out.grant_to_user(user_id, [permission])

    async def grant_permissions_to_all_user_sessions(
        self,
        user_id: UserIdLike,
        permissions: Sequence[Permission]
    ) -> int:
        return await self.fan_out.grant_to_user(user_id, permissions)

    async def grant_permission_to_all_users_sessions(
        self,
        user_ids: Iterable[UserIdLike],
        permission: Permission
    ) -> int:
        return await self.fan_out.grant_to_users(user_ids, [permission])

    async def grant_permissions_to_all_users_sessions(
        self,
        user_ids: Iterable[UserIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        return await self.fan_out.grant_to_users(user_ids, permissions)

    # Revoke

    async def revoke_permission_from_session(self, session_id: SessionIdLike, permission: Permission) -> None:
        await self.authorizer.revoke_permission(session_id, permission)

    async def revoke_permissions_from_session(
        self,
        session_id: SessionIdLike,
        permissions: Sequence[Permission]
    ) -> None:
        await self.authorizer.revoke_permissions(session_id, permissions)

    async def revoke_permission_from_sessions(
        self,
        session_ids: Iterable[SessionIdLike],
        permission: Permission
    ) -> int:
        return await self.fan_out.revoke_from_sessions(session_ids, [permission])

    async def revoke_permissions_from_sessions(
        self,
        session_ids: Iterable[SessionIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        return await self.fan_out.revoke_from_sessions(session_ids, permissions)

    async def revoke_permission_from_all_user_sessions(
        self,
        user_id: UserIdLike,
        permission: Permission
    ) -> int:
        return await self.fan_out.revoke_from_user(user_id, [permission])

    async def revoke_permissions_from_all_user_sessions(
        self,
        user_id: UserIdLike,
        permissions: Sequence[Permission]
    ) -> int:
        return await self.fan_out.revoke_from_user(user_id, permissions)

    async def revoke_permission_from_all_users_sessions(
        self,
        user_ids: Iterable[UserIdLike],
        permission: Permission
    ) -> int:
        return await self.fan_out.revoke_from_users(user_ids, [permission])

    async def revoke_permissions_from_all_users_sessions(
        self,
        user_ids: Iterable[UserIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        return await self.fan_out.revoke_from_users(user_ids, permissions)
