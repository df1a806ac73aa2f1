"""Permission store protocol contract."""

from typing import List, Protocol, Sequence, runtime_checkable

from ....core.value_objects import SessionId
from ..value_objects import Permission


@runtime_checkable
class PermissionStore(Protocol):
    """Protocol for per-session granted-permission storage.
    
    Defines ONLY the contract for batched membership tests and batched
    mutations. Every call is scoped to exactly one session key; no
    cross-session transaction is provided.
    """
    
    async def has_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> List[bool]:
        """Test membership of each permission in the session's granted set.
        
        Args:
            session_id: Session whose granted set is queried
            permissions: Permissions to test, compared by semantic key
            
        Returns:
            One boolean per input permission, in the same order
        """
        ...
    
    async def add_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> None:
        """Add permissions to the session's granted set (idempotent)."""
        ...
    
    async def remove_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> None:
        """Remove permissions from the session's granted set (idempotent)."""
        ...
