"""In-memory permission repository for shared sessions."""

import asyncio
from typing import Dict, List, Sequence, Set

from ....core.value_objects import SessionId
from ...core.value_objects import Permission


class InMemorySessionPermissionRepository:
    """Memory-based permission repository following maximum separation principle.
    
    Handles ONLY in-process storage of granted permission keys. Meant for
    development, single-process deployments and tests; state is lost on exit.
    """
    
    def __init__(self):
        # session key -> set of permission keys
        self._granted: Dict[str, Set[str]] = {}
        self._lock = asyncio.Lock()
    
    async def has_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> List[bool]:
        async with self._lock:
            granted = self._granted.get(session_id.value, set())
            return [p.key in granted for p in permissions]
    
    async def add_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> None:
        if not permissions:
            return
        async with self._lock:
            self._granted.setdefault(session_id.value, set()).update(p.key for p in permissions)
    
    async def remove_permissions(
        self,
        session_id: SessionId,
        permissions: Sequence[Permission]
    ) -> None:
        if not permissions:
            return
        async with self._lock:
            granted = self._granted.get(session_id.value)
            if granted is None:
                return
            granted.difference_update(p.key for p in permissions)
            if not granted:
                del self._granted[session_id.value]
    
    async def get_permissions(self, session_id: SessionId) -> Set[Permission]:
        """Get every permission recorded for a session."""
        async with self._lock:
            return {Permission.from_key(k) for k in self._granted.get(session_id.value, set())}
    
    def get_stats(self) -> Dict[str, int]:
        """Get repository statistics."""
        return {
            "sessions": len(self._granted),
            "permissions": sum(len(keys) for keys in self._granted.values()),
        }
