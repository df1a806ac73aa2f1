"""Session directory protocol contract."""

from typing import List, Protocol, runtime_checkable

from ....core.value_objects import SessionId, UserId


@runtime_checkable
class SessionDirectory(Protocol):
    """Protocol resolving a user to the identifiers of its live sessions."""
    
    async def find_session_ids_for_user(self, user_id: UserId) -> List[SessionId]:
        """List live session identifiers of a user.
        
        Args:
            user_id: User identifier
            
        Returns:
            Session identifiers; empty (never an error) when the user
            has no live sessions or is unknown
        """
        ...
