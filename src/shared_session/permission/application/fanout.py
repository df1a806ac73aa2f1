"""Session fan-out for grant and revoke operations.

Extends single-session mutations to explicit session lists, to every live
session of a user and to every live session of a group of users. Fan-out
never expands closures: it writes exactly the permissions it is given.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, List, Sequence
from uuid import UUID

from ...core.exceptions import InvalidIdentifierError
from ...core.value_objects import SessionId, SessionIdLike, UserId, UserIdLike
from ..core.protocols import SessionDirectory
from ..core.value_objects import Permission
from .authorization import SessionPermissionAuthorizer

logger = logging.getLogger(__name__)

SessionMutation = Callable[[SessionId], Awaitable[None]]


def _require_collection(identifiers, kind: str) -> None:
    """Reject a single identifier where a collection of identifiers is expected."""
    if isinstance(identifiers, (str, bytes, UUID, SessionId, UserId)):
        raise InvalidIdentifierError(
            f"Expected a collection of {kind} identifiers, got a single identifier: {identifiers!r}",
            details={"kind": kind},
        )


class SessionFanOutCoordinator:
    """Applies one mutation to many sessions.

    With ``max_concurrency == 1`` (default) sessions are processed in input
    order and the first failure aborts the remaining sessions. With a higher
    value sessions are processed concurrently, bounded by a semaphore; once
    every started call has settled the first failure is re-raised.
    """

    def __init__(
        self,
        authorizer: SessionPermissionAuthorizer,
        session_directory: SessionDirectory,
        max_concurrency: int = 1
    ):
        """Initialize fan-out coordinator.

        Args:
            authorizer: Single-session authorizer performing each mutation
            session_directory: Directory resolving users to live sessions
            max_concurrency: Maximum number of sessions mutated at once
        """
        if authorizer is None:
            raise ValueError("Authorizer is required")
        if session_directory is None:
            raise ValueError("Session directory is required")
        if max_concurrency < 1:
            raise ValueError("Max concurrency must be at least 1")

        self.authorizer = authorizer
        self.session_directory = session_directory
        self.max_concurrency = max_concurrency

    # Session resolution

    async def resolve_user_sessions(self, user_id: UserIdLike) -> List[SessionId]:
        """Live sessions of one user; empty for unknown or sessionless users."""
        user_id = UserId.of(user_id)
        session_ids = await self.session_directory.find_session_ids_for_user(user_id)
        return [SessionId.of(s) for s in session_ids or ()]

    async def resolve_users_sessions(self, user_ids: Iterable[UserIdLike]) -> List[SessionId]:
        """Live sessions of several users, flattened in user order.

        Sessions belong to exactly one user, so no deduplication is applied.
        """
        _require_collection(user_ids, "user")
        session_ids: List[SessionId] = []
        for user_id in user_ids:
            session_ids.extend(await self.resolve_user_sessions(user_id))
        return session_ids

    # Explicit sessions

    async def grant_to_sessions(
        self,
        session_ids: Iterable[SessionIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        """Grant permissions to every listed session.

        Returns:
            Number of sessions the grant was applied to

        Raises:
            InvalidIdentifierError: If a single session id is passed instead of a collection
        """
        permissions = list(permissions)
        return await self._apply(
            session_ids,
            lambda session_id: self.authorizer.grant_permissions(session_id, permissions),
            "grant",
        )

    async def revoke_from_sessions(
        self,
        session_ids: Iterable[SessionIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        """Revoke permissions from every listed session.

        Returns:
            Number of sessions the revocation was applied to
        """
        permissions = list(permissions)
        return await self._apply(
            session_ids,
            lambda session_id: self.authorizer.revoke_permissions(session_id, permissions),
            "revoke",
        )

    # One user

    async def grant_to_user(self, user_id: UserIdLike, permissions: Sequence[Permission]) -> int:
        """Grant permissions to all live sessions of a user."""
        session_ids = await self.resolve_user_sessions(user_id)
        return await self.grant_to_sessions(session_ids, permissions)

    async def revoke_from_user(self, user_id: UserIdLike, permissions: Sequence[Permission]) -> int:
        """Revoke permissions from all live sessions of a user."""
        session_ids = await self.resolve_user_sessions(user_id)
        return await self.revoke_from_sessions(session_ids, permissions)

    # Many users

    async def grant_to_users(
        self,
        user_ids: Iterable[UserIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        """Grant permissions to all live sessions of every user."""
        session_ids = await self.resolve_users_sessions(user_ids)
        return await self.grant_to_sessions(session_ids, permissions)

    async def revoke_from_users(
        self,
        user_ids: Iterable[UserIdLike],
        permissions: Sequence[Permission]
    ) -> int:
        """Revoke permissions from all live sessions of every user."""
        session_ids = await self.resolve_users_sessions(user_ids)
        return await self.revoke_from_sessions(session_ids, permissions)

    # Internals

    async def _apply(
        self,
        session_ids: Iterable[SessionIdLike],
        mutation: SessionMutation,
        operation: str
    ) -> int:
        _require_collection(session_ids, "session")
        targets = [SessionId.of(s) for s in session_ids]
        if not targets:
            logger.debug(f"No sessions to {operation}; nothing to do")
            return 0

        if self.max_concurrency == 1 or len(targets) == 1:
            for session_id in targets:
                try:
                    await mutation(session_id)
                except Exception as e:
                    logger.error(
                        f"Failed to {operation} permissions for session {session_id.mask_for_logging()}: {e}"
                    )
                    raise
        else:
            await self._apply_concurrently(targets, mutation, operation)

        logger.debug(f"Applied {operation} to {len(targets)} sessions")
        return len(targets)

    async def _apply_concurrently(
        self,
        targets: List[SessionId],
        mutation: SessionMutation,
        operation: str
    ) -> None:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(session_id: SessionId) -> None:
            async with semaphore:
                await mutation(session_id)

        results = await asyncio.gather(*(run(s) for s in targets), return_exceptions=True)

        failures = [
            (session_id, result)
            for session_id, result in zip(targets, results)
            if isinstance(result, BaseException)
        ]
        if failures:
            for session_id, error in failures:
                logger.error(
                    f"Failed to {operation} permissions for session {session_id.mask_for_logging()}: {error}"
                )
            raise failures[0][1]
