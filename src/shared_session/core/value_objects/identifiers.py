"""Value objects for identifiers in shared-session.

Session and user identifiers are opaque keys owned by external collaborators.
They are validated only for being non-empty; whether a key is known is up to
the store or directory that receives it.
"""

from dataclasses import dataclass
from typing import Union
from uuid import UUID

from ..exceptions import InvalidIdentifierError


def _normalize_identifier(value: object, kind: str) -> str:
    if isinstance(value, UUID):
        return str(value)
    if not isinstance(value, str):
        raise InvalidIdentifierError(
            f"{kind} must be a string or UUID, got: {type(value).__name__}",
            details={"kind": kind},
        )
    if not value.strip():
        raise InvalidIdentifierError(f"{kind} cannot be empty", details={"kind": kind})
    return value


@dataclass(frozen=True)
class SessionId:
    """Opaque session identifier value object."""
    value: str
    
    def __post_init__(self):
        object.__setattr__(self, 'value', _normalize_identifier(self.value, "SessionId"))
    
    @classmethod
    def of(cls, value: Union['SessionId', str, UUID]) -> 'SessionId':
        """Coerce a raw key or an existing SessionId."""
        if isinstance(value, cls):
            return value
        return cls(value)
    
    def mask_for_logging(self) -> str:
        """Return masked session ID safe for logging."""
        if len(self.value) <= 12:
            return self.value[:2] + "***"
        return f"{self.value[:6]}...{self.value[-4:]}"
    
    def __str__(self) -> str:
        return self.value
    
    def __repr__(self) -> str:
        return f"SessionId(value='{self.mask_for_logging()}')"


@dataclass(frozen=True)
class UserId:
    """Opaque user identifier value object."""
    value: str
    
    def __post_init__(self):
        object.__setattr__(self, 'value', _normalize_identifier(self.value, "UserId"))
    
    @classmethod
    def of(cls, value: Union['UserId', str, UUID]) -> 'UserId':
        """Coerce a raw key or an existing UserId."""
        if isinstance(value, cls):
            return value
        return cls(value)
    
    def __str__(self) -> str:
        return self.value
    
    def __repr__(self) -> str:
        return f"UserId(value={self.value!r})"


SessionIdLike = Union[SessionId, str, UUID]
UserIdLike = Union[UserId, str, UUID]
