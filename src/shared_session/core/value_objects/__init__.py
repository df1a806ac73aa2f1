"""Value objects module for shared-session."""

from .identifiers import (
    SessionId,
    UserId,
    SessionIdLike,
    UserIdLike,
)

__all__ = [
    "SessionId",
    "UserId",
    "SessionIdLike",
    "UserIdLike",
]
