"""Permission value object and permission kinds.

A permission is identified by its kind plus an identifying key. The key is
what the permission store persists, so two permissions are equal exactly
when their kind, target and action are equal.

Kinds are a closed set. Each kind declares whether the permission store can
answer for it: deep kinds (entity attribute and screen element level) are not
tracked by the store at all.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import InvalidPermissionKey

KEY_SEPARATOR = ":"
PATH_SEPARATOR = "."


def _join_path(owner: str, member: str) -> str:
    """Join the owner and member of a deep target; the owner must be dot-free."""
    for part in (owner, member):
        if not part or not isinstance(part, str):
            raise InvalidPermissionKey(f"Deep permission parts must be non-empty strings, got: {part!r}")
    if PATH_SEPARATOR in owner:
        raise InvalidPermissionKey(f"Deep permission owner cannot contain '{PATH_SEPARATOR}': {owner!r}")
    return f"{owner}{PATH_SEPARATOR}{member}"


class PermissionKind(str, Enum):
    """Closed set of permission kinds."""
    ENTITY = "entity"
    ENTITY_ATTRIBUTE = "entity_attribute"
    SCREEN = "screen"
    SCREEN_ELEMENT = "screen_element"
    SPECIFIC = "specific"

    @property
    def store_backed(self) -> bool:
        """Whether grants of this kind are recorded in the permission store."""
        return self not in (PermissionKind.ENTITY_ATTRIBUTE, PermissionKind.SCREEN_ELEMENT)

    @property
    def is_deep(self) -> bool:
        return not self.store_backed


@dataclass(frozen=True)
class Permission:
    """Immutable access right identified by kind, target and optional action.

    Examples:
        >>> Permission.entity("Order", "read").key
        'entity:Order:read'
        >>> Permission.screen("orders-browse").key
        'screen:orders-browse'
        >>> Permission.from_key("entity:Order:read") == Permission.entity("Order", "read")
        True
    """

    kind: PermissionKind
    target: str
    action: Optional[str] = None

    def __post_init__(self):
        """Validate parts so that the stored key round-trips."""
        if not isinstance(self.kind, PermissionKind):
            try:
                object.__setattr__(self, 'kind', PermissionKind(self.kind))
            except ValueError:
                raise InvalidPermissionKey(f"Unknown permission kind: {self.kind!r}")

        if not self.target or not isinstance(self.target, str):
            raise InvalidPermissionKey(f"Permission target must be a non-empty string, got: {self.target!r}")
        if KEY_SEPARATOR in self.target:
            raise InvalidPermissionKey(f"Permission target cannot contain '{KEY_SEPARATOR}': {self.target!r}")

        if self.action is not None:
            if not self.action or not isinstance(self.action, str):
                raise InvalidPermissionKey(f"Permission action must be a non-empty string, got: {self.action!r}")
            if KEY_SEPARATOR in self.action:
                raise InvalidPermissionKey(f"Permission action cannot contain '{KEY_SEPARATOR}': {self.action!r}")

    # Factories

    @classmethod
    def entity(cls, entity: str, operation: str) -> 'Permission':
        """Entity-level permission, e.g. ("Order", "read")."""
        return cls(PermissionKind.ENTITY, entity, operation)

    @classmethod
    def entity_attribute(cls, entity: str, attribute: str, access: str) -> 'Permission':
        """Attribute-level permission (deep kind); `attribute` may be a dotted path."""
        return cls(PermissionKind.ENTITY_ATTRIBUTE, _join_path(entity, attribute), access)

    @classmethod
    def screen(cls, screen: str) -> 'Permission':
        """Screen-level permission."""
        return cls(PermissionKind.SCREEN, screen)

    @classmethod
    def screen_element(cls, screen: str, element: str) -> 'Permission':
        """Screen-element-level permission (deep kind)."""
        return cls(PermissionKind.SCREEN_ELEMENT, _join_path(screen, element))

    @classmethod
    def specific(cls, name: str) -> 'Permission':
        """Named specific permission, e.g. "cuba.gui.loginToClient"."""
        return cls(PermissionKind.SPECIFIC, name)

    # Key codec

    @property
    def key(self) -> str:
        """Semantic key persisted in the permission store."""
        if self.action is None:
            return f"{self.kind.value}{KEY_SEPARATOR}{self.target}"
        return f"{self.kind.value}{KEY_SEPARATOR}{self.target}{KEY_SEPARATOR}{self.action}"

    @classmethod
    def from_key(cls, key: str) -> 'Permission':
        """Parse a permission back from its stored key.

        Raises:
            InvalidPermissionKey: If the key is malformed or names an unknown kind
        """
        if isinstance(key, bytes):
            key = key.decode("utf-8")
        if not isinstance(key, str) or not key:
            raise InvalidPermissionKey("Permission key must be a non-empty string", key=key)

        parts = key.split(KEY_SEPARATOR)
        if len(parts) not in (2, 3):
            raise InvalidPermissionKey(f"Malformed permission key: {key!r}", key=key)

        try:
            kind = PermissionKind(parts[0])
        except ValueError:
            raise InvalidPermissionKey(f"Unknown permission kind in key: {key!r}", key=key)

        action = parts[2] if len(parts) == 3 else None
        return cls(kind, parts[1], action)

    @property
    def store_backed(self) -> bool:
        return self.kind.store_backed

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"Permission({self.key!r})"
