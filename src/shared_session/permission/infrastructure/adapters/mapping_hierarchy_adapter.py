"""Mapping-backed permission hierarchy adapter.

Adapts a plain "permission → direct parents" mapping to the
PermissionHierarchy protocol. Ancestors are the transitive closure of the
parent links and are computed once, at construction; lookups afterwards are
read-only dictionary hits.
"""

import logging
from typing import AbstractSet, Dict, FrozenSet, Iterable, Mapping, Set

from ....core.exceptions import ConfigurationError
from ...core.value_objects import Permission

logger = logging.getLogger(__name__)


class MappingPermissionHierarchy:
    """Permission hierarchy built from explicit parent links.

    Example:
        >>> order_read = Permission.entity("Order", "read")
        >>> browse = Permission.screen("orders-browse")
        >>> hierarchy = MappingPermissionHierarchy({browse: [order_read]})
        >>> hierarchy.ancestors_of(browse) == {order_read}
        True
    """

    def __init__(self, parents: Mapping[Permission, Iterable[Permission]]):
        """Initialize hierarchy and resolve transitive ancestors.

        Args:
            parents: Direct parent permissions of each permission

        Raises:
            ConfigurationError: If the parent links contain a cycle
        """
        self._parents: Dict[Permission, FrozenSet[Permission]] = {
            permission: frozenset(direct) for permission, direct in (parents or {}).items()
        }
        self._ancestors = self._compute_ancestors()
        logger.debug(f"Permission hierarchy loaded with {len(self._parents)} entries")

    @classmethod
    def from_keys(cls, parents: Mapping[str, Iterable[str]]) -> 'MappingPermissionHierarchy':
        """Build a hierarchy from stored permission keys.

        Raises:
            InvalidPermissionKey: If any key is malformed
        """
        return cls({
            Permission.from_key(child): [Permission.from_key(p) for p in direct]
            for child, direct in parents.items()
        })

    def _compute_ancestors(self) -> Dict[Permission, FrozenSet[Permission]]:
        """Resolve ancestors depth-first, rejecting cycles."""
        resolved: Dict[Permission, FrozenSet[Permission]] = {}
        visiting: Set[Permission] = set()

        def dfs(permission: Permission) -> FrozenSet[Permission]:
            if permission in resolved:
                return resolved[permission]
            if permission in visiting:
                raise ConfigurationError(
                    f"Cycle detected in permission hierarchy at {permission.key!r}",
                    details={"permission": permission.key}
                )
            visiting.add(permission)
            ancestors: Set[Permission] = set()
            for parent in self._parents.get(permission, ()):
                ancestors.add(parent)
                ancestors.update(dfs(parent))
            visiting.remove(permission)
            resolved[permission] = frozenset(ancestors)
            return resolved[permission]

        for permission in self._parents:
            dfs(permission)

        return resolved

    def ancestors_of(self, permission: Permission) -> AbstractSet[Permission]:
        """Transitive ancestors of a permission; empty when it has none."""
        return self._ancestors.get(permission, frozenset())

    def parents_of(self, permission: Permission) -> AbstractSet[Permission]:
        """Direct parents of a permission."""
        return self._parents.get(permission, frozenset())
