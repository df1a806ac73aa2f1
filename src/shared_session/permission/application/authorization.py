"""Authorization engine for a single session.

Single source of truth for "is this permission granted to that session" and
for mutating one session's granted set.

Check policy:
- Deep permissions (entity attribute / screen element) are not tracked by the
  store and are reported as granted (fail-open).
- Shallow permissions are granted when the permission itself or any of its
  ancestors is stored for the session (OR across the closure).

Grant and revoke write exactly what they are given; ancestors are never
granted or revoked implicitly.
"""

import logging
from typing import List, Sequence

from ...core.value_objects import SessionId, SessionIdLike
from ..core.protocols import PermissionStore
from ..core.value_objects import Permission
from .closure import PermissionClosureResolver

logger = logging.getLogger(__name__)


class SessionPermissionAuthorizer:
    """Checks and mutates the granted permissions of one session."""

    def __init__(
        self,
        closure_resolver: PermissionClosureResolver,
        permission_store: PermissionStore
    ):
        """Initialize authorizer.

        Args:
            closure_resolver: Resolver expanding permissions to their ancestors
            permission_store: Store holding the granted set of every session
        """
        if closure_resolver is None:
            raise ValueError("Closure resolver is required")
        if permission_store is None:
            raise ValueError("Permission store is required")
        self.closure_resolver = closure_resolver
        self.permission_store = permission_store

    # Checks

    async def is_permission_granted(
        self,
        session_id: SessionIdLike,
        permission: Permission
    ) -> bool:
        """Check whether a permission, or one of its ancestors, is granted.

        Args:
            session_id: Session to check
            permission: Requested permission

        Returns:
            True for deep permissions without touching the store; otherwise
            True iff any permission of the closure is stored for the session
        """
        session_id = SessionId.of(session_id)

        if not permission.kind.store_backed:
            logger.debug(
                f"Permission {permission.key} is not store-backed; granted by fail-open policy "
                f"(session {session_id.mask_for_logging()})"
            )
            return True

        closure = self.closure_resolver.closure_of(permission)
        granted = await self.permission_store.has_permissions(session_id, closure)

        result = any(granted)
        logger.debug(
            f"Permission {permission.key} {'granted' if result else 'denied'} "
            f"for session {session_id.mask_for_logging()} (closure size {len(closure)})"
        )
        return result

    async def is_any_permission_granted(
        self,
        session_id: SessionIdLike,
        permissions: Sequence[Permission]
    ) -> bool:
        """Check whether at least one of the permissions is granted.

        This is an "any" check, not an "all" check: callers needing every
        permission must check them one by one.

        Deep permissions take no part in ancestor expansion. They stay in the
        queried set as requested, and since the store never records them they
        cannot satisfy the check on their own; a batch made only of deep
        permissions is therefore denied.

        Args:
            session_id: Session to check
            permissions: Requested permissions

        Returns:
            True iff any requested permission or any ancestor of a shallow
            requested permission is stored for the session
        """
        session_id = SessionId.of(session_id)
        requested = list(permissions)
        if not requested:
            return False

        shallow = [p for p in requested if p.kind.store_backed]
        ancestors = self.closure_resolver.ancestors_of_many(shallow)
        queried: List[Permission] = list(dict.fromkeys([*requested, *ancestors]))

        granted = await self.permission_store.has_permissions(session_id, queried)

        result = any(granted)
        logger.debug(
            f"{len(requested)} permissions ({len(shallow)} store-backed) "
            f"{'granted' if result else 'denied'} for session {session_id.mask_for_logging()}"
        )
        return result

    # Mutations

    async def grant_permission(self, session_id: SessionIdLike, permission: Permission) -> None:
        """Grant a single permission to a session."""
        await self.grant_permissions(session_id, [permission])

    async def grant_permissions(
        self,
        session_id: SessionIdLike,
        permissions: Sequence[Permission]
    ) -> None:
        """Grant permissions to a session as one store batch."""
        session_id = SessionId.of(session_id)
        permissions = list(permissions)
        if not permissions:
            return

        await self.permission_store.add_permissions(session_id, permissions)
        logger.debug(f"Granted {len(permissions)} permissions to session {session_id.mask_for_logging()}")

    async def revoke_permission(self, session_id: SessionIdLike, permission: Permission) -> None:
        """Revoke a single permission from a session."""
        await self.revoke_permissions(session_id, [permission])

    async def revoke_permissions(
        self,
        session_id: SessionIdLike,
        permissions: Sequence[Permission]
    ) -> None:
        """Revoke permissions from a session as one store batch."""
        session_id = SessionId.of(session_id)
        permissions = list(permissions)
        if not permissions:
            return

        await self.permission_store.remove_permissions(session_id, permissions)
        logger.debug(f"Revoked {len(permissions)} permissions from session {session_id.mask_for_logging()}")
