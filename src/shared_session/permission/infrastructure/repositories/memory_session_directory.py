"""In-memory session directory for shared sessions."""

from typing import Dict, Iterable, List, Optional

from ....core.value_objects import SessionId, SessionIdLike, UserId, UserIdLike


class InMemorySessionDirectory:
    """In-process user → sessions index.
    
    Sessions are registered and unregistered explicitly by the hosting
    application; lookups for unknown users return an empty list.
    """
    
    def __init__(self, sessions: Optional[Dict[UserIdLike, Iterable[SessionIdLike]]] = None):
        self._sessions: Dict[UserId, List[SessionId]] = {}
        for user_id, session_ids in (sessions or {}).items():
            for session_id in session_ids:
                self.register_session(user_id, session_id)
    
    def register_session(self, user_id: UserIdLike, session_id: SessionIdLike) -> None:
        """Record a live session of a user."""
        user_id = UserId.of(user_id)
        session_id = SessionId.of(session_id)
        sessions = self._sessions.setdefault(user_id, [])
        if session_id not in sessions:
            sessions.append(session_id)
    
    def unregister_session(self, user_id: UserIdLike, session_id: SessionIdLike) -> None:
        """Forget a session of a user; unknown sessions are ignored."""
        user_id = UserId.of(user_id)
        session_id = SessionId.of(session_id)
        sessions = self._sessions.get(user_id)
        if sessions and session_id in sessions:
            sessions.remove(session_id)
            if not sessions:
                del self._sessions[user_id]
    
    async def find_session_ids_for_user(self, user_id: UserId) -> List[SessionId]:
        return list(self._sessions.get(UserId.of(user_id), ()))
